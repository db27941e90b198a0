"""Domain models for the event directory.

These are pure domain objects. Records from the external store are mapped
into them by the store implementations (events/stores/).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from events.domain.value_objects import EmailAddress, EventId, EventStatus


@dataclass(frozen=True)
class Event:
    """Domain representation of a CTF event."""

    id: EventId
    title: str
    description: str
    starts_at: datetime
    status_override: EventStatus | None = None
    ends_at: datetime | None = None
    registration_link: str | None = None

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Event title cannot be empty")
        if self.starts_at.tzinfo is None:
            raise ValueError("Event start time must be timezone-aware")


@dataclass(frozen=True)
class RegistrationRequest:
    """One registration for one event. Built fresh for every submission."""

    event_id: EventId
    name: str
    email: EmailAddress
    team_name: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Participant name cannot be empty")


class FailureReason(Enum):
    NETWORK = "network"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RegistrationSucceeded:
    event_title: str

    @property
    def message(self) -> str:
        return (
            f"You're registered for {self.event_title}. "
            "Check your email for confirmation."
        )


@dataclass(frozen=True)
class RegistrationFailed:
    reason: FailureReason
    message: str
    field_errors: tuple[tuple[str, str], ...] = ()


RegistrationOutcome = RegistrationSucceeded | RegistrationFailed


@dataclass(frozen=True)
class ContactMessage:
    """Message sent through the contact form."""

    name: str
    email: EmailAddress
    message: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Name cannot be empty")
        if not self.message.strip():
            raise ValueError("Message cannot be empty")


@dataclass(frozen=True)
class Winner:
    player_name: str
    rank: int
    score: int
    team_name: str | None = None
    avatar_url: str | None = None

    def __post_init__(self) -> None:
        if self.rank < 1:
            raise ValueError("Rank starts at 1")


@dataclass(frozen=True)
class EventWinners:
    """Final standings of a past event, as shown in the hall of fame."""

    event_title: str
    held_on: date
    winners: tuple[Winner, ...] = ()
