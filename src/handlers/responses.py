"""Shared helpers for API Gateway HTTP API responses."""

import json
from typing import Any, Dict

from pydantic import BaseModel


def json_response(status: int, body: Any) -> Dict:
    """Format a JSON proxy response; pydantic models are dumped in JSON mode."""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def query_params(event: Dict) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}


def path_params(event: Dict) -> Dict[str, str]:
    return event.get("pathParameters") or {}
