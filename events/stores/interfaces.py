"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They are the only
components allowed to talk to the external persistence service.
"""

from abc import ABC, abstractmethod

from events.domain import ContactMessage, Event, RegistrationRequest


class EventStore(ABC):
    """Interface for the external event store."""

    @abstractmethod
    def list_events(self) -> tuple[Event, ...]:
        """Return all events ordered by start time descending.

        Raises:
            NetworkError: If the store cannot be reached.
            DecodeError: If the payload cannot be mapped to events.
        """
        ...

    @abstractmethod
    def submit_registration(self, request: RegistrationRequest) -> None:
        """Create one registration for ``request.event_id``. Never retries.

        Raises:
            NetworkError: If the store cannot be reached.
            RejectedError: If the store refuses the registration.
            UnknownRepositoryError: For any other failure.
        """
        ...

    @abstractmethod
    def submit_contact_message(self, message: ContactMessage) -> None:
        """Persist one contact form message. Same failures as submit_registration."""
        ...
