"""
Response normalizer for the owners API.

Petclinic deployments answer the same request with different envelopes:
a bare array, a HAL ``_embedded`` wrapper (``owners`` or ``ownerList``) or a
Spring Data page with ``content``. The shape is detected first, then the
owner list is pulled out of that shape explicitly.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from models.owner import DetailShape, RawOwnerRecord, ResponseShape
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _embedded(payload: Any) -> dict:
    if not isinstance(payload, dict):
        return {}
    embedded = payload.get("_embedded")
    return embedded if isinstance(embedded, dict) else {}


def detect_shape(payload: Any) -> ResponseShape:
    """Classify an owners list payload. Probes run in a fixed priority order."""
    if isinstance(payload, list):
        return ResponseShape.ARRAY
    if not isinstance(payload, dict):
        return ResponseShape.UNRECOGNIZED

    embedded = _embedded(payload)
    if embedded.get("owners") is not None:
        return ResponseShape.HAL_OWNERS
    if embedded.get("ownerList") is not None:
        return ResponseShape.HAL_OWNER_LIST
    if payload.get("content") is not None:
        return ResponseShape.PAGINATED
    return ResponseShape.UNRECOGNIZED


def _extract_items(payload: Any, shape: ResponseShape) -> List[Any]:
    if shape is ResponseShape.ARRAY:
        items = payload
    elif shape is ResponseShape.HAL_OWNERS:
        items = _embedded(payload)["owners"]
    elif shape is ResponseShape.HAL_OWNER_LIST:
        items = _embedded(payload)["ownerList"]
    elif shape is ResponseShape.PAGINATED:
        items = payload["content"]
    else:
        items = []
    return items if isinstance(items, list) else []


def _parse_owner(item: Any) -> Optional[RawOwnerRecord]:
    try:
        return RawOwnerRecord.model_validate(item)
    except PydanticValidationError as exc:
        logger.warning(
            "Skipping malformed owner record",
            extra={"error_count": exc.error_count()},
        )
        return None


def normalize_owners(payload: Any) -> List[RawOwnerRecord]:
    """
    Turn any known owners payload into a list of raw owner records.

    An unrecognized payload means zero records, never an error. Items that do
    not validate as owners are dropped.
    """
    shape = detect_shape(payload)
    if shape is ResponseShape.UNRECOGNIZED:
        logger.info("No owner list found in payload", extra={"shape": shape.value})
        return []

    owners = []
    for item in _extract_items(payload, shape):
        owner = _parse_owner(item)
        if owner is not None:
            owners.append(owner)
    return owners


def detect_detail_shape(payload: Any) -> DetailShape:
    """Classify a single-owner payload."""
    if isinstance(payload, list):
        return DetailShape.ARRAY
    if not isinstance(payload, dict):
        return DetailShape.UNRECOGNIZED
    # Some deployments return the owner object itself.
    if "firstName" in payload and "lastName" in payload:
        return DetailShape.BARE
    if isinstance(_embedded(payload).get("owner"), dict):
        return DetailShape.HAL_EMBEDDED
    return DetailShape.UNRECOGNIZED


def normalize_owner(payload: Any) -> Optional[RawOwnerRecord]:
    """Extract one owner from a detail payload, or None when there is none."""
    shape = detect_detail_shape(payload)
    if shape is DetailShape.BARE:
        return _parse_owner(payload)
    if shape is DetailShape.HAL_EMBEDDED:
        return _parse_owner(_embedded(payload)["owner"])
    return None
