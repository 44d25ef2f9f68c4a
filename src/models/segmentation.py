"""Segmentation and customers hub models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from models.customer import Customer, CustomerSuccessMetrics


class CustomerSegment(str, Enum):
    """Mutually exclusive customer classification."""

    ACTIVE = "active"
    AT_RISK = "at-risk"
    VIP = "vip"


class CustomerSegmentationEntry(BaseModel):
    customer_id: int
    segment: CustomerSegment


class EnrichedCustomer(Customer):
    """Customer with derived metrics and segment, as listed in the hub."""

    segment: CustomerSegment
    metrics: CustomerSuccessMetrics
    mrr: int = Field(ge=0)
    days_since_contact: int = Field(ge=0)


class SegmentSummary(BaseModel):
    segment: CustomerSegment
    count: int
    percentage: float
    total_mrr: int
    avg_health_score: float


class SegmentationSummary(BaseModel):
    """Aggregates over an enriched customer set, one entry per segment."""

    total: int
    total_mrr: int
    avg_health_score: float
    segments: List[SegmentSummary]
