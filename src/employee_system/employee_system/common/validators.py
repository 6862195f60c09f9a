from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    local, _, domain = value.partition("@")
    if not local or "." not in domain:
        raise ValidationError(f"{field_name} is not a valid address")
    return value


def require_choice(value: Optional[str], enum_type: Type[E], field_name: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not valid")
