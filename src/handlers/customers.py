"""Handlers for GET /customers and GET /customers/hub."""

from typing import List

from handlers.responses import json_response, query_params
from models.customer import Customer
from models.filters import (
    CustomerFilterState,
    CustomersHubFilterState,
    HealthRange,
    MrrRange,
    PetsBucket,
    SegmentTab,
    SortKey,
)
from models.segmentation import EnrichedCustomer
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger
from utils.validators import parse_choice, parse_csv

logger = get_logger(__name__)


def _get_customer_service():
    """Lazy-load the shared CustomerService; no HTTP session at import time."""
    from services.customer_service import get_default_service
    return get_default_service()


def _sort_keys(params) -> List[SortKey]:
    return [SortKey.parse(token) for token in parse_csv(params.get("sort"))]


def lambda_handler(event, context):
    """Return the filtered customer list.

    An upstream outage is not an HTTP error here: the list comes back empty
    with ``error`` set so the page can show a banner.
    """
    from services.filter_service import filter_customers, sort_customers

    params = query_params(event)
    try:
        filters = CustomerFilterState(
            search_query=params.get("search", ""),
            city=params.get("city") or None,
            pets_bucket=parse_choice(params.get("pets"), PetsBucket, "pets", PetsBucket.ALL),
        )
        result = _get_customer_service().get_customers_from_source()
        customers = sort_customers(
            filter_customers(result.customers, filters), _sort_keys(params), model=Customer
        )
    except AppError as exc:
        return to_response(exc)

    logger.info(
        "Customers served",
        extra={"count": len(customers), "upstream_error": result.error},
    )
    return json_response(
        200,
        {
            "customers": [c.model_dump(mode="json") for c in customers],
            "total": len(result.customers),
            "error": result.error,
        },
    )


def hub_handler(event, context):
    """Return enriched customers plus the segmentation summary."""
    from services.filter_service import filter_hub_customers, sort_customers
    from services.hub_service import calculate_segmentation_summary, enrich_customers

    params = query_params(event)
    try:
        filters = CustomersHubFilterState(
            search_query=params.get("search", ""),
            segment=parse_choice(params.get("segment"), SegmentTab, "segment", SegmentTab.ALL),
            health_range=parse_choice(params.get("health"), HealthRange, "health", HealthRange.ALL),
            mrr_range=parse_choice(params.get("mrr"), MrrRange, "mrr", MrrRange.ALL),
        )
        result = _get_customer_service().get_customers_from_source()
        enriched = enrich_customers(result.customers)
        rows = sort_customers(
            filter_hub_customers(enriched, filters), _sort_keys(params), model=EnrichedCustomer
        )
    except AppError as exc:
        return to_response(exc)

    # Summary covers the whole set so the tab counts do not move with filters.
    summary = calculate_segmentation_summary(enriched)
    return json_response(
        200,
        {
            "customers": [c.model_dump(mode="json") for c in rows],
            "summary": summary.model_dump(mode="json"),
            "error": result.error,
        },
    )
