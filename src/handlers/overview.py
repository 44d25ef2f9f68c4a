"""Handler for GET /overview."""

from handlers.responses import json_response
from services.overview_service import get_overview_kpis


def _get_customer_service():
    """Lazy-load the shared CustomerService."""
    from services.customer_service import get_default_service
    return get_default_service()


def lambda_handler(event, context):
    result = _get_customer_service().get_customers_from_source()
    return json_response(200, get_overview_kpis(result.customers, error=result.error))
