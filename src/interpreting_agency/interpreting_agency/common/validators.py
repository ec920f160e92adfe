from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

PHONE_RE = re.compile(r"^(\+?1[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}$")
ZIP_RE = re.compile(r"^\d{5}(-\d{4})?$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid") from None
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def optional_phone(value: Optional[str], field_name: str = "Phone") -> Optional[str]:
    if not value:
        return None
    if not PHONE_RE.match(value.strip()):
        raise ValidationError(f"{field_name}: please enter a valid phone number")
    return value.strip()


def optional_email(value: Optional[str], field_name: str = "Email") -> Optional[str]:
    if not value:
        return None
    if not EMAIL_RE.match(value.strip()):
        raise ValidationError(f"{field_name}: please enter a valid email address")
    return value.strip()


def optional_zip(value: Optional[str], field_name: str = "ZIP code") -> Optional[str]:
    if not value:
        return None
    if not ZIP_RE.match(value.strip()):
        raise ValidationError(f"{field_name}: please enter a valid ZIP code (e.g., 12345 or 12345-6789)")
    return value.strip()
