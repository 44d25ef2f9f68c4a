"""Overview KPIs computed from the current customer set."""

from typing import List, Optional

from models.customer import Customer
from models.overview import OverviewKpis
from models.segmentation import CustomerSegment
from services.hub_service import enrich_customers


def get_overview_kpis(customers: List[Customer], error: Optional[str] = None) -> OverviewKpis:
    """Pet counts from the source data, segment counts from the classifier."""
    total = len(customers)
    with_pets = sum(1 for c in customers if (c.pets_count or 0) > 0)
    total_pets = sum(c.pets_count or 0 for c in customers)

    enriched = enrich_customers(customers)
    by_segment = {segment: 0 for segment in CustomerSegment}
    for customer in enriched:
        by_segment[customer.segment] += 1

    at_risk = by_segment[CustomerSegment.AT_RISK]

    return OverviewKpis(
        total_customers=total,
        customers_with_pets=with_pets,
        customers_without_pets=total - with_pets,
        avg_pets_per_customer=total_pets / total if total else 0.0,
        active_customers=by_segment[CustomerSegment.ACTIVE],
        at_risk_customers=at_risk,
        vip_customers=by_segment[CustomerSegment.VIP],
        churn_rate=at_risk / total if total else 0.0,
        mrr=sum(c.mrr for c in enriched),
        error=error,
    )
