"""Domain error codes for the events module."""

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    VALIDATION = "VALIDATION"
    NETWORK = "NETWORK"
    DECODE = "DECODE"
    REJECTED = "REJECTED"
    UNKNOWN = "UNKNOWN"


GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class RegistrationClosedError(DomainError):
    """Raised when registering for an event that is not upcoming."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message="Registration is closed for this event",
        )
        self.event_id = event_id


class FormValidationError(DomainError):
    """Raised when submitted form values fail local validation."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message="Please correct the highlighted fields",
        )
        self.field_errors = field_errors


@dataclass(eq=False)
class RepositoryError(DomainError):
    """Failure reported by the external event store.

    ``detail`` carries the transport-level description for logs only and is
    never shown to users.
    """

    detail: str = field(default="")


class NetworkError(RepositoryError):
    """The store could not be reached or timed out."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.NETWORK,
            message="The event service is unreachable",
            detail=detail,
        )


class DecodeError(RepositoryError):
    """A record from the store could not be mapped to a domain model."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.DECODE,
            message="The event service returned malformed data",
            detail=detail,
        )


class RejectedError(RepositoryError):
    """The store refused the write (duplicate, constraint, policy)."""

    def __init__(self, detail: str = "", conflict: bool = False) -> None:
        super().__init__(
            code=ErrorCode.REJECTED,
            message=GENERIC_FAILURE_MESSAGE,
            detail=detail,
        )
        self.conflict = conflict


class UnknownRepositoryError(RepositoryError):
    """Any store failure that does not fit the other categories."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN,
            message=GENERIC_FAILURE_MESSAGE,
            detail=detail,
        )
