"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime

import pytest

from events.domain import (
    ContactMessage,
    EmailAddress,
    Event,
    EventId,
    EventStatus,
    RegistrationRequest,
    RegistrationSucceeded,
    StatusSelector,
    Winner,
)
from events.domain.errors import ErrorCode, EventNotFoundError, RejectedError

from tests.factories import NOW


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_strips_whitespace(self):
        """EventId.from_string keeps the opaque value without padding."""
        assert EventId.from_string("  ctf-42 ").value == "ctf-42"

    def test_rejects_blank_value(self):
        """EventId raises ValueError for a blank identifier."""
        with pytest.raises(ValueError):
            EventId.from_string("   ")

    def test_equality_by_value(self):
        assert EventId("a") == EventId("a")


class TestEmailAddress:
    """Tests for EmailAddress value object."""

    def test_accepts_valid_address(self):
        assert str(EmailAddress.from_string("a@b.com")) == "a@b.com"

    @pytest.mark.parametrize("value", ["", "not-an-email", "a@", "@b.com"])
    def test_rejects_invalid_address(self, value):
        """EmailAddress raises ValueError for syntactically invalid input."""
        with pytest.raises(ValueError):
            EmailAddress.from_string(value)


class TestEvent:
    """Tests for Event domain model."""

    def test_rejects_empty_title(self):
        with pytest.raises(ValueError):
            Event(id=EventId("e1"), title=" ", description="", starts_at=NOW)

    def test_rejects_naive_start_time(self):
        """Start times must carry a timezone so comparisons with now are valid."""
        with pytest.raises(ValueError):
            Event(
                id=EventId("e1"),
                title="Quantum Break",
                description="",
                starts_at=datetime(2025, 3, 1, 12, 0),
            )


class TestRegistrationRequest:
    """Tests for RegistrationRequest value object."""

    def test_rejects_blank_name(self):
        with pytest.raises(ValueError):
            RegistrationRequest(
                event_id=EventId("e1"),
                name="  ",
                email=EmailAddress("a@b.com"),
            )

    def test_is_immutable(self):
        request = RegistrationRequest(
            event_id=EventId("e1"), name="Ada", email=EmailAddress("a@b.com")
        )
        with pytest.raises(AttributeError):
            request.name = "Grace"


class TestOtherModels:
    def test_contact_message_requires_message(self):
        with pytest.raises(ValueError):
            ContactMessage(name="Ada", email=EmailAddress("a@b.com"), message="")

    def test_winner_rank_starts_at_one(self):
        with pytest.raises(ValueError):
            Winner("Cipher", rank=0, score=100)

    def test_success_message_echoes_title(self):
        assert "Quantum Break" in RegistrationSucceeded("Quantum Break").message

    def test_selector_all_matches_every_status(self):
        assert all(StatusSelector.ALL.matches(status) for status in EventStatus)


class TestDomainErrors:
    def test_str_includes_code(self):
        assert str(EventNotFoundError("e1")) == "EVENT_NOT_FOUND: Event not found"

    def test_rejected_error_keeps_detail_out_of_message(self):
        """The user-facing message never contains transport details."""
        error = RejectedError("HTTP 409: duplicate key value", conflict=True)
        assert error.code is ErrorCode.REJECTED
        assert "duplicate" not in error.message
        assert error.detail == "HTTP 409: duplicate key value"
        assert error.conflict
