"""Event directory - the event list as seen by one page view.

The collection is fetched once per directory and treated as immutable
afterwards. Classification and filtering run synchronously on every query
with the ``now`` the caller passes in.
"""

import logging
from datetime import datetime, timedelta

from events.domain import (
    DEFAULT_ACTIVE_WINDOW,
    Event,
    EventId,
    EventOrder,
    EventStatus,
    StatusSelector,
    classify,
    filter_events,
    order_events,
)
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventDirectory:
    """Holds the fetched events for the lifetime of one page view."""

    def __init__(
        self,
        store: EventStore,
        active_window: timedelta = DEFAULT_ACTIVE_WINDOW,
    ) -> None:
        self._store = store
        self._active_window = active_window
        self._events: tuple[Event, ...] | None = None
        self._closed = False

    @property
    def store(self) -> EventStore:
        return self._store

    @property
    def closed(self) -> bool:
        return self._closed

    def load(self) -> tuple[Event, ...] | None:
        """Fetch the events on first call and return them.

        Returns None when the directory was closed, including when it was
        closed while the fetch was in flight; the late result is dropped.

        Raises:
            RepositoryError: If the store fails.
        """
        if self._closed:
            return None
        if self._events is not None:
            return self._events

        events = self._store.list_events()
        if self._closed:
            logger.debug("Discarding %d events fetched after close", len(events))
            return None
        self._events = events
        return events

    def close(self) -> None:
        self._closed = True
        self._events = None

    def status_of(self, event: Event, now: datetime) -> EventStatus:
        return classify(event, now, self._active_window)

    def events(
        self,
        now: datetime,
        selector: StatusSelector = StatusSelector.ALL,
        order: EventOrder = EventOrder.FETCH,
    ) -> tuple[Event, ...]:
        """Return the loaded events filtered by status and ordered for display."""
        events = self.load() or ()
        return order_events(
            filter_events(events, selector, now, self._active_window),
            order,
        )

    def get_event(self, event_id: str) -> Event:
        """Return a loaded event by ID.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If no loaded event has this ID.
        """
        try:
            wanted = EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc

        for event in self.load() or ():
            if event.id == wanted:
                return event
        raise EventNotFoundError(event_id)
