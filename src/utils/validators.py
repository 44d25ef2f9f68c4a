"""Lightweight validation helpers for query string parameters."""

from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

from utils.error_handling import ValidationError

E = TypeVar("E", bound=Enum)


def ensure_present(value: Any, field: str) -> None:
    """Raise ValidationError if value is falsy."""
    if value in (None, "", []):
        raise ValidationError(f"{field} is required")


def parse_choice(value: Optional[str], enum_cls: Type[E], field: str, default: E) -> E:
    """Parse an enum query parameter, falling back to ``default`` when unset."""
    if value is None or not value.strip():
        return default
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"{field} must be one of: {allowed}") from None


def parse_csv(value: Optional[str]) -> List[str]:
    """Split a comma separated parameter, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
