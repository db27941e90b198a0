"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from django.core.exceptions import ValidationError
from django.core.validators import validate_email


class EventStatus(Enum):
    """Display status of an event."""

    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAST = "past"


class StatusSelector(Enum):
    """Status filter applied to the event list."""

    ALL = "all"
    UPCOMING = "upcoming"
    ACTIVE = "active"
    PAST = "past"

    def matches(self, status: EventStatus) -> bool:
        return self is StatusSelector.ALL or self.value == status.value


class EventOrder(Enum):
    """Comparison policy for ordering the event list."""

    FETCH = "fetch"
    NEWEST = "newest"
    OLDEST = "oldest"


@dataclass(frozen=True)
class EventId:
    """Opaque identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("EventId cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress:
    """Syntactically valid email address."""

    value: str

    def __post_init__(self) -> None:
        try:
            validate_email(self.value)
        except ValidationError as exc:
            raise ValueError("Invalid email address") from exc

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value
