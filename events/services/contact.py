"""Contact form service."""

from events.domain import ContactMessage
from events.domain.errors import FormValidationError
from events.services.validation import clean_email, clean_required
from events.stores.interfaces import EventStore


class ContactService:
    """Validates contact form input and hands it to the store."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def send(self, name: str | None, email: str | None, message: str | None) -> ContactMessage:
        """Store one contact message and return it.

        Raises:
            FormValidationError: If a field is blank or the email is invalid.
            RepositoryError: If the store fails.
        """
        errors: dict[str, str] = {}
        cleaned_name = clean_required("name", name, errors)
        cleaned_email = clean_email("email", email, errors)
        cleaned_message = clean_required("message", message, errors)
        if errors:
            raise FormValidationError(errors)

        contact_message = ContactMessage(
            name=cleaned_name,
            email=cleaned_email,
            message=cleaned_message,
        )
        self._store.submit_contact_message(contact_message)
        return contact_message
