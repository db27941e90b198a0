"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors and registration outcomes to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import (
    EventOrder,
    FailureReason,
    RegistrationSucceeded,
    StatusSelector,
)
from events.domain.errors import (
    DomainError,
    ErrorCode,
    FormValidationError,
    RejectedError,
    RepositoryError,
)
from events.handlers.serializers import (
    ContactMessageInputSerializer,
    EventListQuerySerializer,
    EventSerializer,
    HallOfFameSectionSerializer,
    RegistrationInputSerializer,
)
from events.services.contact import ContactService
from events.services.event_directory import EventDirectory
from events.services.hall_of_fame import hall_of_fame
from events.services.registration import (
    VALIDATION_MESSAGE,
    failure_reason,
    open_registration,
)
from events.stores.factory import get_event_store

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NETWORK: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.DECODE: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.REJECTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN: status.HTTP_502_BAD_GATEWAY,
}

OUTCOME_STATUS = {
    FailureReason.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureReason.CONFLICT: status.HTTP_409_CONFLICT,
    FailureReason.NETWORK: status.HTTP_503_SERVICE_UNAVAILABLE,
    FailureReason.UNKNOWN: status.HTTP_502_BAD_GATEWAY,
}


def error_body(code: str, message: str, fields: dict[str, str] | None = None) -> dict:
    error = {"code": code, "message": message}
    if fields:
        error["fields"] = fields
    return {"error": error}


def error_response(exc: DomainError) -> Response:
    if isinstance(exc, RepositoryError):
        logger.warning("Event store failure: %s (%s)", exc.code.value, exc.detail)
    code, http_status = exc.code.value, ERROR_STATUS[exc.code]
    if isinstance(exc, RejectedError):
        # Same vocabulary as registration outcomes.
        reason = failure_reason(exc)
        code, http_status = reason.name, OUTCOME_STATUS[reason]
    fields = exc.field_errors if isinstance(exc, FormValidationError) else None
    return Response(error_body(code, exc.message, fields), status=http_status)


def format_error_response(errors: dict) -> Response:
    fields = {name: str(messages[0]) for name, messages in errors.items()}
    return Response(
        error_body(ErrorCode.VALIDATION.value, VALIDATION_MESSAGE, fields),
        status=status.HTTP_400_BAD_REQUEST,
    )


def build_directory() -> EventDirectory:
    return EventDirectory(get_event_store(), active_window=settings.EVENTS_ACTIVE_WINDOW)


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return format_error_response(query.errors)

        directory = build_directory()
        now = timezone.now()
        try:
            events = directory.events(
                now,
                selector=StatusSelector(query.validated_data["status"]),
                order=EventOrder(query.validated_data["order"]),
            )
        except DomainError as exc:
            return error_response(exc)
        finally:
            directory.close()

        serializer = EventSerializer(
            events,
            many=True,
            context={"now": now, "active_window": settings.EVENTS_ACTIVE_WINDOW},
        )
        return Response({"count": len(events), "results": serializer.data})


class RegistrationView(APIView):
    """Handler for POST /api/events/{event_id}/registrations"""

    def post(self, request: Request, event_id: str) -> Response:
        payload = RegistrationInputSerializer(data=request.data)
        if not payload.is_valid():
            return format_error_response(payload.errors)

        directory = build_directory()
        try:
            coordinator = open_registration(directory, event_id, timezone.now())
        except DomainError as exc:
            return error_response(exc)
        finally:
            directory.close()

        coordinator.fill(**payload.validated_data)
        outcome = coordinator.submit()

        if isinstance(outcome, RegistrationSucceeded):
            return Response(
                {
                    "status": coordinator.state.value,
                    "event_title": outcome.event_title,
                    "message": outcome.message,
                },
                status=status.HTTP_201_CREATED,
            )
        return Response(
            error_body(
                outcome.reason.name,
                outcome.message,
                dict(outcome.field_errors),
            ),
            status=OUTCOME_STATUS[outcome.reason],
        )


class ContactMessageView(APIView):
    """Handler for POST /api/contact"""

    def post(self, request: Request) -> Response:
        payload = ContactMessageInputSerializer(data=request.data)
        if not payload.is_valid():
            return format_error_response(payload.errors)

        service = ContactService(get_event_store())
        try:
            service.send(**payload.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {"status": "sent", "message": "We'll be in touch soon."},
            status=status.HTTP_201_CREATED,
        )


class HallOfFameView(APIView):
    """Handler for GET /api/hall-of-fame"""

    def get(self, request: Request) -> Response:
        serializer = HallOfFameSectionSerializer(hall_of_fame(), many=True)
        return Response({"results": serializer.data})
