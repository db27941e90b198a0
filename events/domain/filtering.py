"""Filtering and ordering of an event collection for display.

Both functions return a new tuple and leave their input untouched.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from events.domain.classifier import DEFAULT_ACTIVE_WINDOW, classify
from events.domain.models import Event
from events.domain.value_objects import EventOrder, StatusSelector


def filter_events(
    events: Sequence[Event],
    selector: StatusSelector,
    now: datetime,
    active_window: timedelta = DEFAULT_ACTIVE_WINDOW,
) -> tuple[Event, ...]:
    """Return the events whose status at ``now`` matches ``selector``.

    Relative order is preserved. ``StatusSelector.ALL`` returns every event
    in input order.
    """
    if selector is StatusSelector.ALL:
        return tuple(events)
    return tuple(
        event
        for event in events
        if selector.matches(classify(event, now, active_window))
    )


def order_events(events: Sequence[Event], order: EventOrder) -> tuple[Event, ...]:
    """Return the events sorted by start time according to ``order``.

    Sorting is stable, so events starting at the same instant keep their
    fetch order.
    """
    if order is EventOrder.FETCH:
        return tuple(events)
    return tuple(
        sorted(
            events,
            key=lambda event: event.starts_at,
            reverse=order is EventOrder.NEWEST,
        )
    )
