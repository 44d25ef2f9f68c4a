"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One Lambda serves every route so the HTTP session and settings stay warm
across requests.
"""

import re
from typing import Callable, Tuple

from . import (
    customer_detail,
    customers,
    debug_owners,
    health_check,
    overview,
    segmentation,
)
from .responses import json_response


def _route_table() -> Tuple[Tuple[str, "re.Pattern", Callable], ...]:
    # Resolved per call so tests can monkeypatch handler functions.
    # /customers/hub must come before /customers/{id}.
    return (
        ("GET", re.compile(r"^/health/?$"), health_check.lambda_handler),
        ("GET", re.compile(r"^/customers/?$"), customers.lambda_handler),
        ("GET", re.compile(r"^/customers/hub/?$"), customers.hub_handler),
        (
            "GET",
            re.compile(r"^/customers/(?P<id>[^/]+)/interactions/?$"),
            customer_detail.interactions_handler,
        ),
        ("GET", re.compile(r"^/customers/(?P<id>[^/]+)/?$"), customer_detail.lambda_handler),
        ("GET", re.compile(r"^/segmentation/?$"), segmentation.lambda_handler),
        ("GET", re.compile(r"^/overview/?$"), overview.lambda_handler),
        ("GET", re.compile(r"^/debug/owners/?$"), debug_owners.lambda_handler),
    )


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    Path parameters captured by the route pattern are merged into the event
    when API Gateway has not already supplied them.
    """
    http = event.get("requestContext", {}).get("http", {})
    method = http.get("method", "").upper()
    path = http.get("path", "")

    for route_method, pattern, handler in _route_table():
        match = pattern.match(path)
        if method == route_method and match:
            if match.groupdict():
                event = dict(event)
                event["pathParameters"] = {
                    **match.groupdict(),
                    **(event.get("pathParameters") or {}),
                }
            return handler(event, context)

    return json_response(404, {"message": "Route not found", "route": f"{method} {path}"})
