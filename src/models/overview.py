"""Overview dashboard models."""

from typing import Optional

from pydantic import BaseModel


class OverviewKpis(BaseModel):
    """Headline numbers for the overview page."""

    total_customers: int
    customers_with_pets: int
    customers_without_pets: int
    avg_pets_per_customer: float

    active_customers: int
    at_risk_customers: int
    vip_customers: int

    # 0-1 fraction
    churn_rate: float
    mrr: int
    error: Optional[str] = None
