"""Contact input sanitization.

Each function either returns a cleaned value or raises ValidationError with a
message safe to show the caller.
"""

import re
from collections.abc import Mapping
from typing import Any

from storefront.domain.errors import ValidationError
from storefront.domain.models import ContactDetails

ANGLE_BRACKETS = re.compile(r"[<>]")
JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_DISALLOWED = re.compile(r"[^\d\s\-+()]")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 10


def sanitize_string(value: str) -> str:
    value = ANGLE_BRACKETS.sub("", value)
    value = JAVASCRIPT_SCHEME.sub("", value)
    value = EVENT_HANDLER.sub("", value)
    return value.strip()


def sanitize_name(value: str) -> str:
    cleaned = sanitize_string(value)
    if len(cleaned) < NAME_MIN_LENGTH:
        raise ValidationError(f"Name must be at least {NAME_MIN_LENGTH} characters")
    if len(cleaned) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name must be less than {NAME_MAX_LENGTH} characters")
    return cleaned


def sanitize_email(value: str) -> str:
    cleaned = sanitize_string(value)
    if not EMAIL_PATTERN.match(cleaned):
        raise ValidationError("Invalid email format")
    return cleaned.lower()


def sanitize_phone(value: str) -> str:
    cleaned = PHONE_DISALLOWED.sub("", value).strip()
    if len(cleaned) < PHONE_MIN_LENGTH:
        raise ValidationError("Phone number too short")
    return cleaned


def sanitize_contact(contact: Mapping[str, Any]) -> ContactDetails:
    """Build ContactDetails from raw caller input, failing on the first bad field."""
    if not isinstance(contact, Mapping):
        raise ValidationError("Contact is required")

    fields = {}
    for key in ("name", "email", "phone"):
        value = contact.get(key)
        if not isinstance(value, str):
            raise ValidationError(f"Contact {key} is required")
        fields[key] = value

    return ContactDetails(
        name=sanitize_name(fields["name"]),
        email=sanitize_email(fields["email"]),
        phone=sanitize_phone(fields["phone"]),
    )
