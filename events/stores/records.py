"""Mapping between store records and domain models."""

from datetime import datetime, time, timezone
from typing import Any

from django.utils import timezone as dj_timezone
from django.utils.dateparse import parse_date, parse_datetime

from events.domain import ContactMessage, Event, EventId, EventStatus, RegistrationRequest
from events.domain.errors import DecodeError

REQUIRED_EVENT_FIELDS = ("id", "title", "date")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp or date. Naive values are taken as UTC."""
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {type(value).__name__}")
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"unparseable timestamp {value!r}")
        parsed = datetime.combine(day, time.min)
    if dj_timezone.is_naive(parsed):
        parsed = dj_timezone.make_aware(parsed, timezone.utc)
    return parsed


def decode_event(record: Any) -> Event:
    """Map one ``ctf_events`` record to an Event.

    Raises:
        DecodeError: If a required field is missing or malformed.
    """
    if not isinstance(record, dict):
        raise DecodeError(f"event record is {type(record).__name__}, not an object")
    missing = [name for name in REQUIRED_EVENT_FIELDS if record.get(name) in (None, "")]
    if missing:
        raise DecodeError(f"event record {record.get('id')!r} is missing {', '.join(missing)}")

    try:
        override = record.get("status") or None
        end_date = record.get("end_date")
        return Event(
            id=EventId.from_string(str(record["id"])),
            title=str(record["title"]),
            description=str(record.get("description") or ""),
            starts_at=parse_timestamp(record["date"]),
            status_override=EventStatus(override) if override is not None else None,
            ends_at=parse_timestamp(end_date) if end_date else None,
            registration_link=record.get("registration_link") or None,
        )
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"event record {record.get('id')!r}: {exc}") from exc


def encode_registration(request: RegistrationRequest) -> dict[str, Any]:
    return {
        "event_id": request.event_id.value,
        "name": request.name,
        "email": request.email.value,
        "team_name": request.team_name,
    }


def encode_contact_message(message: ContactMessage) -> dict[str, Any]:
    return {
        "name": message.name,
        "email": message.email.value,
        "message": message.message,
    }
