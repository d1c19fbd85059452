from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_list(value, field_name: str) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} must be a list")
    return value
