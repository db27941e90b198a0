"""Registration coordinator - the lifecycle of one registration dialog.

One coordinator serves one open dialog for one event. Each submit walks the
state machine::

    idle -> validating -> submitting -> succeeded
                 |               \\-> failed -> (submit again)
                 \\-> idle (validation error, no network call)

At most one submission is in flight per coordinator. A submit while another
one is validating or submitting is a no-op.
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from events.domain import (
    Event,
    EventStatus,
    FailureReason,
    RegistrationFailed,
    RegistrationOutcome,
    RegistrationRequest,
    RegistrationSucceeded,
)
from events.domain.errors import (
    GENERIC_FAILURE_MESSAGE,
    NetworkError,
    RegistrationClosedError,
    RejectedError,
    RepositoryError,
)
from events.services.event_directory import EventDirectory
from events.services.validation import clean_email, clean_optional, clean_required
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please correct the highlighted fields."


class AttemptState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


BUSY_STATES = (AttemptState.VALIDATING, AttemptState.SUBMITTING)


@dataclass
class RegistrationForm:
    """Raw values typed into the registration dialog."""

    name: str = ""
    email: str = ""
    team_name: str = ""


def failure_reason(error: RepositoryError) -> FailureReason:
    if isinstance(error, NetworkError):
        return FailureReason.NETWORK
    if isinstance(error, RejectedError):
        return FailureReason.CONFLICT if error.conflict else FailureReason.VALIDATION
    return FailureReason.UNKNOWN


class RegistrationCoordinator:
    """Validates and submits registrations for a single event."""

    def __init__(self, event: Event, store: EventStore) -> None:
        self._event = event
        self._store = store
        self._lock = threading.Lock()
        self._state = AttemptState.IDLE
        self._form = RegistrationForm()
        self._outcome: RegistrationOutcome | None = None
        self._closed = False

    @property
    def event(self) -> Event:
        return self._event

    @property
    def state(self) -> AttemptState:
        return self._state

    @property
    def form(self) -> RegistrationForm:
        return replace(self._form)

    @property
    def outcome(self) -> RegistrationOutcome | None:
        return self._outcome

    def fill(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        team_name: str | None = None,
    ) -> None:
        """Update form values. Fields passed as None are left unchanged."""
        with self._lock:
            self._ensure_editable()
            self._form = RegistrationForm(
                name=self._form.name if name is None else name,
                email=self._form.email if email is None else email,
                team_name=self._form.team_name if team_name is None else team_name,
            )

    def submit(self) -> RegistrationOutcome | None:
        """Run one registration attempt with the current form values.

        Returns the outcome, the existing outcome when the attempt already
        succeeded, or None when the call was ignored (another submission in
        flight, or the dialog was closed).
        """
        with self._lock:
            if self._closed:
                return None
            if self._state in BUSY_STATES:
                logger.debug(
                    "Ignoring submit for event %s: a submission is in flight",
                    self._event.id,
                )
                return None
            if self._state is AttemptState.SUCCEEDED:
                return self._outcome
            self._state = AttemptState.VALIDATING
            self._outcome = None
            form = replace(self._form)
        logger.debug("Registration for event %s: validating", self._event.id)

        request, errors = self._build_request(form)
        if errors:
            outcome = RegistrationFailed(
                reason=FailureReason.VALIDATION,
                message=VALIDATION_MESSAGE,
                field_errors=tuple(sorted(errors.items())),
            )
            if not self._finish(AttemptState.IDLE, outcome):
                return None
            return outcome

        with self._lock:
            self._state = AttemptState.SUBMITTING
        logger.debug("Registration for event %s: submitting", self._event.id)

        try:
            self._store.submit_registration(request)
        except RepositoryError as exc:
            logger.warning(
                "Registration for event %s failed: %s (%s)",
                self._event.id,
                exc.code.value,
                exc.detail,
            )
            next_state = AttemptState.FAILED
            outcome = RegistrationFailed(
                reason=failure_reason(exc),
                message=GENERIC_FAILURE_MESSAGE,
            )
        except Exception:
            self._finish(
                AttemptState.FAILED,
                RegistrationFailed(FailureReason.UNKNOWN, GENERIC_FAILURE_MESSAGE),
            )
            raise
        else:
            next_state = AttemptState.SUCCEEDED
            outcome = RegistrationSucceeded(event_title=self._event.title)

        if not self._finish(next_state, outcome):
            return None
        return outcome

    def reset(self) -> None:
        """Start a fresh attempt with empty fields."""
        with self._lock:
            if self._state in BUSY_STATES:
                raise RuntimeError("Cannot reset while a submission is in flight")
            self._state = AttemptState.IDLE
            self._form = RegistrationForm()
            self._outcome = None

    def close(self) -> None:
        """Tear the dialog down. A result still in flight will be discarded."""
        with self._lock:
            self._closed = True

    def _ensure_editable(self) -> None:
        if self._state in BUSY_STATES:
            raise RuntimeError("Cannot edit the form while a submission is in flight")
        if self._state is AttemptState.SUCCEEDED:
            raise RuntimeError("Registration already succeeded; reset to start over")

    def _build_request(
        self, form: RegistrationForm
    ) -> tuple[RegistrationRequest | None, dict[str, str]]:
        errors: dict[str, str] = {}
        name = clean_required("name", form.name, errors)
        email = clean_email("email", form.email, errors)
        if errors:
            return None, errors
        return (
            RegistrationRequest(
                event_id=self._event.id,
                name=name,
                email=email,
                team_name=clean_optional(form.team_name),
            ),
            errors,
        )

    def _finish(self, state: AttemptState, outcome: RegistrationOutcome) -> bool:
        with self._lock:
            if self._closed:
                logger.debug("Discarding registration result for closed dialog")
                return False
            self._state = state
            self._outcome = outcome
        logger.debug("Registration for event %s: %s", self._event.id, state.value)
        return True


def open_registration(
    directory: EventDirectory, event_id: str, now: datetime
) -> RegistrationCoordinator:
    """Open a registration dialog for an event that still accepts sign-ups.

    Raises:
        InvalidEventIdError: If the event_id is blank.
        EventNotFoundError: If the event does not exist.
        RegistrationClosedError: If the event is no longer upcoming.
    """
    event = directory.get_event(event_id)
    if directory.status_of(event, now) is not EventStatus.UPCOMING:
        raise RegistrationClosedError(event_id)
    return RegistrationCoordinator(event, directory.store)
