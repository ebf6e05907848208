from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def require_non_empty(value: str, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    return value.strip()
