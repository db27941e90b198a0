"""Time-derived status of an event.

``now`` is always passed in by the caller so the result never depends on a
clock read inside this module.
"""

from datetime import datetime, timedelta

from events.domain.models import Event
from events.domain.value_objects import EventStatus

# Applied when an event has no explicit end time.
DEFAULT_ACTIVE_WINDOW = timedelta(hours=24)


def active_until(event: Event, active_window: timedelta = DEFAULT_ACTIVE_WINDOW) -> datetime:
    """Return the instant at which the event stops being active."""
    if event.ends_at is not None:
        return event.ends_at
    return event.starts_at + active_window


def classify(
    event: Event,
    now: datetime,
    active_window: timedelta = DEFAULT_ACTIVE_WINDOW,
) -> EventStatus:
    """Return the display status of ``event`` at ``now``.

    An administrative override always wins. Otherwise the event is upcoming
    before its start, active until its end (or until ``active_window`` has
    elapsed when it has none), and past afterwards.
    """
    if event.status_override is not None:
        return event.status_override
    if now < event.starts_at:
        return EventStatus.UPCOMING
    if now < active_until(event, active_window):
        return EventStatus.ACTIVE
    return EventStatus.PAST
