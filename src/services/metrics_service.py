"""
Deterministic customer success metrics.

There is no analytics backend behind the dashboard, so health, churn risk,
lifetime value and the interaction timeline are derived from the customer id
alone. Every function here is pure: the same id always yields the same
result, with no clock or platform RNG involved.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Union

from models.customer import (
    ChurnRiskLevel,
    CustomerInteraction,
    CustomerStage,
    CustomerSuccessMetrics,
    InteractionChannel,
)

LCG_MODULUS = 2147483647
LCG_MULTIPLIER = 16807

HEALTH_MIN = 10
HEALTH_MAX = 95
LIFETIME_VALUE_FLOOR = 5000
LIFETIME_VALUE_SPREAD = 50000

CHANNELS: List[InteractionChannel] = [
    InteractionChannel.EMAIL,
    InteractionChannel.CALL,
    InteractionChannel.MEETING,
    InteractionChannel.QBR,
    InteractionChannel.TICKET,
    InteractionChannel.NOTE,
]

INTERACTION_COPY = {
    InteractionChannel.EMAIL: (
        "Outbound email to customer",
        "Follow-up on product adoption and next steps.",
    ),
    InteractionChannel.CALL: (
        "Check-in call",
        "Discussed usage, feedback, and upcoming milestones.",
    ),
    InteractionChannel.MEETING: (
        "Working session",
        "Reviewed current workflows and potential improvements.",
    ),
    InteractionChannel.QBR: (
        "Quarterly Business Review",
        "Presented outcomes, roadmap alignment, and renewal plan.",
    ),
    InteractionChannel.TICKET: (
        "Support ticket",
        "Customer reported an issue that required investigation.",
    ),
    InteractionChannel.NOTE: (
        "Internal note",
        "CSM added context about the customer account.",
    ),
}

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
DEFAULT_OWNER = "CSM Team"

# Bounds on the per-id day offset that keep timestamps between years 107 and
# 8869, well inside datetime's range once the per-entry offsets are added.
ID_OFFSET_DAYS_MAX = 2_500_000
ID_OFFSET_DAYS_MIN = -700_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_seed(customer_id: Union[str, int, None], default: int = 1) -> int:
    """
    Numeric seed for a customer id.

    String ids are parsed by their leading integer; ids that are not numeric
    or are zero fall back to ``default``.
    """
    if isinstance(customer_id, bool):
        return default
    if isinstance(customer_id, int):
        return customer_id or default
    match = _LEADING_INT.match(str(customer_id or ""))
    if not match:
        return default
    return int(match.group(1)) or default


def churn_risk_for(score: int) -> ChurnRiskLevel:
    if score >= 80:
        return ChurnRiskLevel.LOW
    if score >= 50:
        return ChurnRiskLevel.MEDIUM
    return ChurnRiskLevel.HIGH


def stage_for(score: int) -> CustomerStage:
    # Cut points differ from churn_risk_for on purpose; keep both as-is.
    if score < 30:
        return CustomerStage.ONBOARDING
    if score < 60:
        return CustomerStage.ACTIVE
    if score < 85:
        return CustomerStage.EXPANDING
    return CustomerStage.AT_RISK


def derive_metrics(customer_id: int) -> CustomerSuccessMetrics:
    """Derive health score, churn risk, lifetime value and stage from an id."""
    base = (customer_id * 37) % 101
    health_score = max(HEALTH_MIN, min(HEALTH_MAX, base))

    lifetime_value = LIFETIME_VALUE_FLOOR + (customer_id * 12345) % LIFETIME_VALUE_SPREAD

    return CustomerSuccessMetrics(
        health_score=health_score,
        churn_risk=churn_risk_for(health_score),
        lifetime_value=lifetime_value,
        stage=stage_for(health_score),
    )


class SeededRandom:
    """Park-Miller linear congruential generator yielding floats in [0, 1)."""

    def __init__(self, seed: int):
        value = seed % LCG_MODULUS
        if value <= 0:
            value += LCG_MODULUS - 1
        self._value = value

    def __call__(self) -> float:
        self._value = (self._value * LCG_MULTIPLIER) % LCG_MODULUS
        return (self._value - 1) / (LCG_MODULUS - 1)


def _pick(rand: Callable[[], float], size: int) -> int:
    return math.floor(rand() * size)


def id_day_offset(numeric_id: int) -> int:
    """Days between BASE_TIME and a customer's timeline, ``id * 13``.

    Offsets outside the supported window wrap around inside it, keeping the
    sign, so very large ids still get a deterministic, representable date.
    """
    days = numeric_id * 13
    if days > ID_OFFSET_DAYS_MAX:
        return days % ID_OFFSET_DAYS_MAX
    if days < ID_OFFSET_DAYS_MIN:
        return -(-days % -ID_OFFSET_DAYS_MIN)
    return days


def get_interactions(customer_id: Union[str, int]) -> List[CustomerInteraction]:
    """Generate the interaction timeline for a customer, newest first."""
    numeric_id = to_seed(customer_id)
    rand = SeededRandom(numeric_id)

    count = 4 + _pick(rand, 4)
    offset = id_day_offset(numeric_id)
    interactions = []

    for i in range(count):
        channel = CHANNELS[_pick(rand, len(CHANNELS))]
        days_ago = 5 + _pick(rand, 90)
        occurred_at = BASE_TIME + timedelta(days=offset + i * 7 - days_ago)
        title, description = INTERACTION_COPY[channel]
        owner = DEFAULT_OWNER if rand() > 0.3 else None

        interactions.append(
            CustomerInteraction(
                id=f"{numeric_id}-{i + 1}",
                customer_id=numeric_id,
                occurred_at=occurred_at,
                channel=channel,
                title=title,
                description=description,
                owner=owner,
            )
        )

    return sorted(interactions, key=lambda item: item.occurred_at, reverse=True)
