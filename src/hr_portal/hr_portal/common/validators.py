from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.exceptions import InvalidDateError, ValidationError
from .datetime_utils import to_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    """Trimmed text or None for blank input."""
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    return require_max_length(value, field_name, max_len)


def required_date(value: Any, field_name: str) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    return to_date(value, field_name)


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return to_date(value, field_name)
    except InvalidDateError:
        raise ValidationError(f"Provide a valid {field_name}") from None


def optional_positive_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return parsed


def require_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
