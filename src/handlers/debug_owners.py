"""Handler for GET /debug/owners: which upstream endpoint answered, and how."""

from handlers.responses import json_response
from services.normalizer import detect_shape, normalize_owners
from services.owner_source import describe_shape


def _get_customer_service():
    """Lazy-load the shared CustomerService."""
    from services.customer_service import get_default_service
    return get_default_service()


def lambda_handler(event, context):
    result = _get_customer_service().fetch_candidates()
    body = {
        "endpoints_tried": result.endpoints_tried,
        "error": result.error,
        "shape": None,
        "layout": None,
        "record_count": 0,
    }
    if result.data is not None:
        body["shape"] = detect_shape(result.data).value
        body["layout"] = describe_shape(result.data)
        body["record_count"] = len(normalize_owners(result.data))
    return json_response(200, body)
