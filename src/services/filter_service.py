"""
Filtering and sorting of customer lists for presentation.

Every function returns a new list and leaves its input untouched, so the
same filter state applied twice gives the same rows.
"""

from __future__ import annotations

from datetime import date
from typing import (
    Any,
    Iterable,
    List,
    Literal,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from pydantic import BaseModel

from models.customer import Customer
from models.filters import (
    CustomerFilterState,
    CustomersHubFilterState,
    HealthRange,
    MrrRange,
    PetsBucket,
    SegmentTab,
    SortKey,
)
from models.segmentation import EnrichedCustomer
from utils.error_handling import ValidationError

C = TypeVar("C", bound=Customer)

_MISSING = object()


def _contains(value: Optional[str], query: str) -> bool:
    return bool(value) and query in value.lower()


def matches_search(customer: Customer, query: str) -> bool:
    """Case-insensitive substring match on name, city, address and phone."""
    if not query or not query.strip():
        return True
    q = query.lower()
    return any(
        _contains(value, q)
        for value in (customer.name, customer.city, customer.address, customer.phone)
    )


def matches_city(customer: Customer, city: Optional[str]) -> bool:
    if not city:
        return True
    if not customer.city:
        return False
    return customer.city.lower() == city.lower()


def matches_pets_bucket(customer: Customer, bucket: PetsBucket) -> bool:
    pets_count = customer.pets_count or 0
    if bucket is PetsBucket.NONE:
        return pets_count == 0
    if bucket is PetsBucket.FEW:
        return 1 <= pets_count <= 2
    if bucket is PetsBucket.MANY:
        return pets_count >= 3
    return True


def filter_by_search(customers: Iterable[C], query: str) -> List[C]:
    return [c for c in customers if matches_search(c, query)]


def filter_by_city(customers: Iterable[C], city: Optional[str]) -> List[C]:
    return [c for c in customers if matches_city(c, city)]


def filter_by_pets_bucket(customers: Iterable[C], bucket: PetsBucket) -> List[C]:
    return [c for c in customers if matches_pets_bucket(c, bucket)]


def filter_customers(customers: Iterable[C], filters: CustomerFilterState) -> List[C]:
    """Apply search, city and pets-bucket filters together."""
    return [
        c
        for c in customers
        if matches_search(c, filters.search_query)
        and matches_city(c, filters.city)
        and matches_pets_bucket(c, filters.pets_bucket)
    ]


# Customers hub variant, over enriched customers.


def filter_by_segment(
    customers: Iterable[EnrichedCustomer], segment: SegmentTab
) -> List[EnrichedCustomer]:
    if segment is SegmentTab.ALL:
        return list(customers)
    return [c for c in customers if c.segment.value == segment.value]


def filter_hub_search(customers: Iterable[EnrichedCustomer], query: str) -> List[EnrichedCustomer]:
    """Hub search also looks at the email address."""
    if not query or not query.strip():
        return list(customers)
    q = query.lower()
    return [c for c in customers if matches_search(c, query) or _contains(c.email, q)]


def matches_health_range(score: int, health_range: HealthRange) -> bool:
    if health_range is HealthRange.HEALTHY:
        return score >= 70
    if health_range is HealthRange.MODERATE:
        return 40 <= score < 70
    if health_range is HealthRange.AT_RISK:
        return score < 40
    return True


def matches_mrr_range(mrr: int, mrr_range: MrrRange) -> bool:
    if mrr_range is MrrRange.LOW:
        return mrr < 1000
    if mrr_range is MrrRange.MEDIUM:
        return 1000 <= mrr < 2500
    if mrr_range is MrrRange.HIGH:
        return 2500 <= mrr < 4000
    if mrr_range is MrrRange.ENTERPRISE:
        return mrr >= 4000
    return True


def filter_by_health_range(
    customers: Iterable[EnrichedCustomer], health_range: HealthRange
) -> List[EnrichedCustomer]:
    return [c for c in customers if matches_health_range(c.metrics.health_score, health_range)]


def filter_by_mrr_range(
    customers: Iterable[EnrichedCustomer], mrr_range: MrrRange
) -> List[EnrichedCustomer]:
    return [c for c in customers if matches_mrr_range(c.mrr, mrr_range)]


def filter_hub_customers(
    customers: Iterable[EnrichedCustomer], filters: CustomersHubFilterState
) -> List[EnrichedCustomer]:
    result = filter_by_segment(customers, filters.segment)
    result = filter_hub_search(result, filters.search_query)
    result = filter_by_health_range(result, filters.health_range)
    return filter_by_mrr_range(result, filters.mrr_range)


# Sorting

_SORTABLE = (str, int, float, date)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_sortable_type(annotation: Any) -> bool:
    if get_origin(annotation) is Literal:
        return True
    return isinstance(annotation, type) and issubclass(annotation, _SORTABLE)


def check_sort_keys(model: Type[BaseModel], keys: Sequence[SortKey]) -> None:
    """Reject keys that do not name a scalar field of ``model``.

    Runs before any row is looked at, so the answer does not depend on
    whether the list happens to be empty.
    """
    for key in keys:
        current: Any = model
        for part in key.field.split("."):
            is_model = isinstance(current, type) and issubclass(current, BaseModel)
            fields = current.model_fields if is_model else {}
            if part not in fields:
                raise ValidationError(f"Unknown sort field: {key.field}")
            current = _unwrap_optional(fields[part].annotation)
        if not _is_sortable_type(current):
            raise ValidationError(f"Unknown sort field: {key.field}")


def _resolve(item: Any, path: str) -> Any:
    value = item
    for part in path.split("."):
        if isinstance(value, dict):
            value = value.get(part, _MISSING)
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING:
            raise ValidationError(f"Unknown sort field: {path}")
        if value is None:
            return None
    # Enum members compare by their value.
    value = getattr(value, "value", value)
    if not isinstance(value, _SORTABLE):
        raise ValidationError(f"Unknown sort field: {path}")
    return value


def _sort_one(items: List[Any], key: SortKey) -> List[Any]:
    present = []
    missing = []
    for item in items:
        value = _resolve(item, key.field)
        if value is None:
            missing.append(item)
        else:
            present.append((value, item))
    if present and all(isinstance(value, str) for value, _ in present):
        present = [(value.lower(), item) for value, item in present]
    present.sort(key=lambda pair: pair[0], reverse=key.descending)
    return [item for _, item in present] + missing


def sort_customers(
    items: Iterable[C],
    keys: Sequence[SortKey],
    model: Optional[Type[BaseModel]] = None,
) -> List[C]:
    """
    Stable multi-field sort.

    ``keys`` are in precedence order. Each pass is a stable sort, so applying
    them from the least significant key up leaves equal rows in input order.
    Rows without a value for a key go last regardless of direction. When
    ``model`` is given the keys are checked against its fields first.
    """
    if model is not None:
        check_sort_keys(model, keys)
    result = list(items)
    for key in reversed(list(keys)):
        result = _sort_one(result, key)
    return result
