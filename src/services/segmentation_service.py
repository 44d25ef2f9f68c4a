"""Segment assignment for customers."""

from typing import Iterable, List

from models.customer import Customer
from models.segmentation import CustomerSegment, CustomerSegmentationEntry
from services.metrics_service import derive_metrics, to_seed

VIP_HEALTH_SCORE = 85
VIP_LIFETIME_VALUE = 40000
VIP_PETS_COUNT = 3
AT_RISK_HEALTH_SCORE = 50


def classify(customer: Customer, health_score: int, lifetime_value: int) -> CustomerSegment:
    """
    Assign exactly one segment. Rules are checked in order and the first
    match wins, so a VIP with a low health score is still a VIP.
    """
    pets_count = customer.pets_count or 0

    if (
        health_score >= VIP_HEALTH_SCORE
        or lifetime_value >= VIP_LIFETIME_VALUE
        or pets_count >= VIP_PETS_COUNT
    ):
        return CustomerSegment.VIP

    if health_score < AT_RISK_HEALTH_SCORE:
        return CustomerSegment.AT_RISK

    return CustomerSegment.ACTIVE


def classify_customer(customer: Customer) -> CustomerSegment:
    """Classify a customer using the metrics derived from its id."""
    metrics = derive_metrics(to_seed(customer.id))
    return classify(customer, metrics.health_score, metrics.lifetime_value)


def classify_segmentation(customers: Iterable[Customer]) -> List[CustomerSegmentationEntry]:
    """Segment every customer. Recomputed on each call, never stored."""
    return [
        CustomerSegmentationEntry(
            customer_id=to_seed(customer.id, default=0),
            segment=classify_customer(customer),
        )
        for customer in customers
    ]
