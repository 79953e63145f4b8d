from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: str, field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    local, sep, domain = value.partition("@")
    if not sep or not local or "." not in domain:
        raise ValidationError(f"{field_name} is not a valid email address")
    return value
