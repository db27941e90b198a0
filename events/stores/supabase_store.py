"""EventStore backed by a Supabase (PostgREST) project over HTTPS."""

import logging
from typing import Any

import requests

from events.domain import ContactMessage, Event, RegistrationRequest
from events.domain.errors import (
    DecodeError,
    NetworkError,
    RejectedError,
    UnknownRepositoryError,
)
from events.stores.interfaces import EventStore
from events.stores.records import decode_event, encode_contact_message, encode_registration

logger = logging.getLogger(__name__)

EVENTS_TABLE = "ctf_events"
REGISTRATIONS_TABLE = "registrations"
CONTACT_MESSAGES_TABLE = "contact_messages"

# PostgreSQL unique_violation, reported by PostgREST in the error body.
UNIQUE_VIOLATION = "23505"


class SupabaseEventStore(EventStore):
    """Event store talking to the PostgREST API of a Supabase project."""

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
        skip_malformed: bool = True,
    ) -> None:
        self._base_url = url.rstrip("/") + "/rest/v1"
        self._timeout = timeout
        self._skip_malformed = skip_malformed
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            }
        )

    def list_events(self) -> tuple[Event, ...]:
        response = self._request(
            "GET",
            EVENTS_TABLE,
            params={"select": "*", "order": "date.desc"},
        )
        if response.status_code != 200:
            raise UnknownRepositoryError(
                f"listing events returned HTTP {response.status_code}"
            )
        try:
            records = response.json()
        except ValueError as exc:
            raise DecodeError(f"event list is not JSON: {exc}") from exc
        if not isinstance(records, list):
            raise DecodeError(f"event list is {type(records).__name__}, not an array")

        events = []
        for record in records:
            try:
                events.append(decode_event(record))
            except DecodeError as exc:
                if not self._skip_malformed:
                    raise
                logger.warning("Skipping malformed event record: %s", exc.detail)
        return tuple(events)

    def submit_registration(self, request: RegistrationRequest) -> None:
        self._insert(REGISTRATIONS_TABLE, encode_registration(request))
        logger.info("Registration created for event %s", request.event_id)

    def submit_contact_message(self, message: ContactMessage) -> None:
        self._insert(CONTACT_MESSAGES_TABLE, encode_contact_message(message))
        logger.info("Contact message stored")

    def _insert(self, table: str, row: dict[str, Any]) -> None:
        response = self._request(
            "POST",
            table,
            json=[row],
            headers={"Prefer": "return=minimal"},
        )
        if response.status_code in (200, 201, 204):
            return

        error_code, detail = _error_details(response)
        if response.status_code == 409 or error_code == UNIQUE_VIOLATION:
            raise RejectedError(detail, conflict=True)
        if 400 <= response.status_code < 500:
            raise RejectedError(detail)
        raise UnknownRepositoryError(detail)

    def _request(self, method: str, table: str, **kwargs: Any) -> requests.Response:
        url = f"{self._base_url}/{table}"
        try:
            return self._session.request(method, url, timeout=self._timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise NetworkError(str(exc)) from exc
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise UnknownRepositoryError(str(exc)) from exc


def _error_details(response: requests.Response) -> tuple[str | None, str]:
    """Return the PostgREST error code and a log-friendly description."""
    try:
        body = response.json()
    except ValueError:
        return None, f"HTTP {response.status_code}: {response.text[:200]}"
    if not isinstance(body, dict):
        return None, f"HTTP {response.status_code}"
    return body.get("code"), f"HTTP {response.status_code}: {body.get('message', '')}"
