from events.domain.classifier import DEFAULT_ACTIVE_WINDOW, classify
from events.domain.filtering import filter_events, order_events
from events.domain.models import (
    ContactMessage,
    Event,
    EventWinners,
    FailureReason,
    RegistrationFailed,
    RegistrationOutcome,
    RegistrationRequest,
    RegistrationSucceeded,
    Winner,
)
from events.domain.value_objects import (
    EmailAddress,
    EventId,
    EventOrder,
    EventStatus,
    StatusSelector,
)

__all__ = [
    "Event",
    "RegistrationRequest",
    "RegistrationOutcome",
    "RegistrationSucceeded",
    "RegistrationFailed",
    "FailureReason",
    "ContactMessage",
    "Winner",
    "EventWinners",
    "EventId",
    "EmailAddress",
    "EventStatus",
    "StatusSelector",
    "EventOrder",
    "DEFAULT_ACTIVE_WINDOW",
    "classify",
    "filter_events",
    "order_events",
]
