"""Customer models."""

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """List-view customer derived from an upstream owner."""

    id: str
    name: str
    city: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    pets_count: int = Field(default=0, ge=0)
    email: Optional[str] = None
    created_from: Literal["petclinic", "mock"] = "petclinic"


class Pet(BaseModel):
    """Pet as shown on the customer detail page."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    birth_date: Optional[str] = None
    type: str


class CustomerDetail(BaseModel):
    """Detail-view customer. Built once per fetch and never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int
    full_name: str
    address: Optional[str]
    city: Optional[str]
    telephone: Optional[str]
    pets: List[Pet] = Field(default_factory=list)


class ChurnRiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CustomerStage(str, Enum):
    ONBOARDING = "onboarding"
    ACTIVE = "active"
    EXPANDING = "expanding"
    AT_RISK = "at-risk"


class CustomerSuccessMetrics(BaseModel):
    """Synthetic success metrics, a pure function of the customer id."""

    model_config = ConfigDict(frozen=True)

    health_score: int = Field(ge=0, le=100)
    churn_risk: ChurnRiskLevel
    lifetime_value: int = Field(ge=0)
    stage: CustomerStage


class InteractionChannel(str, Enum):
    EMAIL = "email"
    CALL = "call"
    MEETING = "meeting"
    QBR = "qbr"
    TICKET = "ticket"
    NOTE = "note"


class CustomerInteraction(BaseModel):
    """Single entry on the customer interactions timeline."""

    id: str
    customer_id: int
    occurred_at: datetime
    channel: InteractionChannel
    title: str
    description: Optional[str] = None
    owner: Optional[str] = None
