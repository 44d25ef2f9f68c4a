"""
Customer Service.

Facade the handlers call: resolves owners from the upstream source,
normalizes whatever envelope came back and maps the records to customers.
Results always come back as envelopes with an ``error`` field; nothing here
raises on upstream trouble.
"""

from __future__ import annotations

from typing import Optional, Union

import requests

from models.results import CustomerDetailResult, CustomersResult
from services.adapters import map_owner_to_customer_detail, map_owners_to_customers
from services.normalizer import normalize_owners
from services.owner_source import fetch_candidates, fetch_owner_by_id
from utils.config import SourceSettings
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_LIST_ERROR = "Unable to load customers from Petclinic."


class CustomerService:
    """Service for customer list and detail retrieval."""

    def __init__(
        self,
        settings: Optional[SourceSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or SourceSettings.from_environment()
        self.session = session or requests.Session()

    def fetch_candidates(self):
        """Raw resolver result, for diagnostics."""
        return fetch_candidates(session=self.session, settings=self.settings)

    def get_customers_from_source(self) -> CustomersResult:
        result = self.fetch_candidates()
        if result.error or result.data is None:
            return CustomersResult(customers=[], error=result.error or DEFAULT_LIST_ERROR)

        customers = map_owners_to_customers(normalize_owners(result.data))
        logger.info(
            "Customers loaded",
            extra={"count": len(customers), "endpoint": result.endpoints_tried[-1]},
        )
        return CustomersResult(customers=customers)

    def get_customer_detail(self, customer_id: Union[str, int]) -> CustomerDetailResult:
        lookup = fetch_owner_by_id(customer_id, session=self.session, settings=self.settings)

        if lookup.not_found:
            return CustomerDetailResult(not_found=True, error=lookup.error)
        if lookup.error or lookup.owner is None:
            return CustomerDetailResult(error=lookup.error)

        return CustomerDetailResult(customer=map_owner_to_customer_detail(lookup.owner))


_default_service: Optional[CustomerService] = None


def get_default_service() -> CustomerService:
    """Lazy-load the module-level service."""
    global _default_service
    if _default_service is None:
        _default_service = CustomerService()
    return _default_service


def get_customers_from_source() -> CustomersResult:
    return get_default_service().get_customers_from_source()


def get_customer_detail(customer_id: Union[str, int]) -> CustomerDetailResult:
    return get_default_service().get_customer_detail(customer_id)
