"""Handlers for GET /customers/{id} and GET /customers/{id}/interactions."""

from handlers.responses import json_response, path_params
from services.metrics_service import derive_metrics, get_interactions, to_seed
from utils.error_handling import AppError, NotFoundError, ValidationError, to_response
from utils.logging_config import get_logger
from utils.validators import ensure_present

logger = get_logger(__name__)


def _get_customer_service():
    """Lazy-load the shared CustomerService; no HTTP session at import time."""
    from services.customer_service import get_default_service
    return get_default_service()


def _customer_id(event) -> str:
    customer_id = (path_params(event).get("id") or "").strip()
    ensure_present(customer_id, "customer id")
    return customer_id


def lambda_handler(event, context):
    """Customer detail with success metrics and the interaction timeline."""
    try:
        customer_id = _customer_id(event)
    except ValidationError as exc:
        return to_response(exc)

    result = _get_customer_service().get_customer_detail(customer_id)
    if result.not_found:
        return to_response(NotFoundError(result.error or "Customer not found."))
    if result.error or result.customer is None:
        return to_response(AppError(result.error or "Failed to load customer.", status_code=502))

    detail = result.customer
    logger.info("Customer detail served", extra={"customer_id": detail.id})
    return json_response(
        200,
        {
            "customer": detail.model_dump(mode="json"),
            "metrics": derive_metrics(detail.id).model_dump(mode="json"),
            "interactions": [
                i.model_dump(mode="json") for i in get_interactions(detail.id)
            ],
        },
    )


def interactions_handler(event, context):
    """Interaction timeline only; no upstream call is made."""
    try:
        customer_id = _customer_id(event)
    except ValidationError as exc:
        return to_response(exc)

    interactions = get_interactions(customer_id)
    return json_response(
        200,
        {
            "customer_id": to_seed(customer_id),
            "interactions": [i.model_dump(mode="json") for i in interactions],
        },
    )
