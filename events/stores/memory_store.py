"""In-process EventStore for local development and tests."""

from collections.abc import Iterable

from events.domain import ContactMessage, Event, RegistrationRequest
from events.domain.errors import RejectedError, RepositoryError
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Keeps events, registrations and contact messages in lists.

    A failure queued with ``fail_next`` is raised by the next call instead of
    performing it. Registering the same email twice for one event is rejected
    as a conflict, like the unique constraint of the hosted store.
    """

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self.events: list[Event] = list(events)
        self.registrations: list[RegistrationRequest] = []
        self.contact_messages: list[ContactMessage] = []
        self.calls: list[str] = []
        self._failures: list[RepositoryError] = []

    def fail_next(self, error: RepositoryError) -> None:
        self._failures.append(error)

    def list_events(self) -> tuple[Event, ...]:
        self._record("list_events")
        return tuple(sorted(self.events, key=lambda event: event.starts_at, reverse=True))

    def submit_registration(self, request: RegistrationRequest) -> None:
        self._record("submit_registration")
        for existing in self.registrations:
            if existing.event_id == request.event_id and existing.email == request.email:
                raise RejectedError("duplicate registration", conflict=True)
        self.registrations.append(request)

    def submit_contact_message(self, message: ContactMessage) -> None:
        self._record("submit_contact_message")
        self.contact_messages.append(message)

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if self._failures:
            raise self._failures.pop(0)
