"""Syntactic checks shared by the public forms.

Each helper records a message under the field name in ``errors`` instead of
raising, so a form can report every bad field at once.
"""

from events.domain import EmailAddress


def clean_required(field: str, value: str | None, errors: dict[str, str]) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        errors[field] = "This field is required."
    return cleaned


def clean_email(field: str, value: str | None, errors: dict[str, str]) -> EmailAddress | None:
    cleaned = (value or "").strip()
    if not cleaned:
        errors[field] = "This field is required."
        return None
    try:
        return EmailAddress.from_string(cleaned)
    except ValueError:
        errors[field] = "Enter a valid email address."
        return None


def clean_optional(value: str | None) -> str | None:
    return (value or "").strip() or None
