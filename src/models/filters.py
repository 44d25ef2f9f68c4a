"""Filter and sort state consumed by the filter pipeline."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PetsBucket(str, Enum):
    ALL = "all"
    NONE = "none"
    FEW = "few"
    MANY = "many"


class HealthRange(str, Enum):
    ALL = "all"
    HEALTHY = "healthy"
    MODERATE = "moderate"
    AT_RISK = "at-risk"


class MrrRange(str, Enum):
    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ENTERPRISE = "enterprise"


class SegmentTab(str, Enum):
    """Hub tabs: every segment plus ``all``."""

    ALL = "all"
    ACTIVE = "active"
    AT_RISK = "at-risk"
    VIP = "vip"


class CustomerFilterState(BaseModel):
    """Filters on the customers list page."""

    search_query: str = ""
    city: Optional[str] = None
    pets_bucket: PetsBucket = PetsBucket.ALL


class CustomersHubFilterState(BaseModel):
    """Filters on the customers hub page."""

    search_query: str = ""
    segment: SegmentTab = SegmentTab.ALL
    health_range: HealthRange = HealthRange.ALL
    mrr_range: MrrRange = MrrRange.ALL


class SortKey(BaseModel):
    """One sort criterion; dotted fields reach into nested models."""

    field: str
    descending: bool = False

    @classmethod
    def parse(cls, token: str) -> "SortKey":
        """Parse ``name`` or ``-metrics.health_score``."""
        token = token.strip()
        if token.startswith("-"):
            return cls(field=token[1:], descending=True)
        return cls(field=token.lstrip("+"))
