"""DRF exception handler producing the API's error body."""

from rest_framework import exceptions
from rest_framework.views import exception_handler

from events.domain.errors import ErrorCode


def api_exception_handler(exc, context):
    """Wrap framework errors (bad JSON, wrong method) in ``{"error": {...}}``."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, (exceptions.ParseError, exceptions.ValidationError)):
        code = ErrorCode.VALIDATION.value
    else:
        code = str(getattr(exc, "default_code", "error")).upper()

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"error": {"code": code, "message": str(detail or exc)}}
    return response
