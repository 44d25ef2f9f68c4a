"""Customers hub: enriched rows and per-segment aggregates."""

from typing import Iterable, List

from models.customer import Customer
from models.segmentation import (
    CustomerSegment,
    EnrichedCustomer,
    SegmentationSummary,
    SegmentSummary,
)
from services.metrics_service import derive_metrics, to_seed
from services.segmentation_service import classify

SEGMENT_ORDER = (CustomerSegment.ACTIVE, CustomerSegment.AT_RISK, CustomerSegment.VIP)


def derive_mrr(customer_id: int) -> int:
    """Monthly recurring revenue between 500 and 4999."""
    return 500 + (customer_id * 789) % 4500


def derive_days_since_contact(customer_id: int) -> int:
    """Days since last contact, between 1 and 60."""
    return 1 + (customer_id * 17) % 60


def enrich_customer(customer: Customer) -> EnrichedCustomer:
    numeric_id = to_seed(customer.id)
    metrics = derive_metrics(numeric_id)
    return EnrichedCustomer(
        **customer.model_dump(),
        segment=classify(customer, metrics.health_score, metrics.lifetime_value),
        metrics=metrics,
        mrr=derive_mrr(numeric_id),
        days_since_contact=derive_days_since_contact(numeric_id),
    )


def enrich_customers(customers: Iterable[Customer]) -> List[EnrichedCustomer]:
    return [enrich_customer(customer) for customer in customers]


def _average(values: List[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def calculate_segmentation_summary(customers: List[EnrichedCustomer]) -> SegmentationSummary:
    """Count, share, MRR and average health per segment."""
    total = len(customers)
    segments = []
    for segment in SEGMENT_ORDER:
        members = [c for c in customers if c.segment == segment]
        segments.append(
            SegmentSummary(
                segment=segment,
                count=len(members),
                percentage=(len(members) / total) * 100 if total else 0.0,
                total_mrr=sum(c.mrr for c in members),
                avg_health_score=_average([c.metrics.health_score for c in members]),
            )
        )

    return SegmentationSummary(
        total=total,
        total_mrr=sum(c.mrr for c in customers),
        avg_health_score=_average([c.metrics.health_score for c in customers]),
        segments=segments,
    )
