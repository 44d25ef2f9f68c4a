"""Handler for GET /segmentation."""

from handlers.responses import json_response
from services.hub_service import calculate_segmentation_summary, enrich_customers
from services.segmentation_service import classify_segmentation


def _get_customer_service():
    """Lazy-load the shared CustomerService."""
    from services.customer_service import get_default_service
    return get_default_service()


def lambda_handler(event, context):
    """Segment every customer currently returned by the upstream source."""
    result = _get_customer_service().get_customers_from_source()
    entries = classify_segmentation(result.customers)
    summary = calculate_segmentation_summary(enrich_customers(result.customers))
    return json_response(
        200,
        {
            "entries": [e.model_dump(mode="json") for e in entries],
            "summary": summary.model_dump(mode="json"),
            "error": result.error,
        },
    )
