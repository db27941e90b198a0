"""Unit tests for the event directory, contact and hall of fame services.

Run with: pytest tests/test_services.py -v
"""

from datetime import date, timedelta

import pytest

from events.domain import EventOrder, EventStatus, EventWinners, StatusSelector, Winner
from events.domain.errors import (
    EventNotFoundError,
    FormValidationError,
    InvalidEventIdError,
    NetworkError,
)
from events.services.contact import ContactService
from events.services.event_directory import EventDirectory
from events.services.hall_of_fame import hall_of_fame
from events.stores.factory import get_event_store
from events.stores.memory_store import InMemoryEventStore
from events.stores.supabase_store import SupabaseEventStore

from tests.factories import NOW, make_event


class ClosingOnFetchStore(InMemoryEventStore):
    """Tears the page view down while the fetch is in flight."""

    directory = None

    def list_events(self):
        events = super().list_events()
        self.directory.close()
        return events


class TestEventDirectory:
    """Tests for EventDirectory."""

    def test_fetches_once_per_directory(self, memory_store):
        memory_store.events.append(make_event())
        directory = EventDirectory(memory_store)

        first = directory.load()
        directory.events(NOW, StatusSelector.UPCOMING)
        directory.get_event("e1")

        assert directory.load() is first
        assert memory_store.calls == ["list_events"]

    def test_events_filters_and_orders(self, memory_store):
        memory_store.events.extend(
            [
                make_event("u1", starts_at=NOW + timedelta(days=5)),
                make_event("u2", starts_at=NOW + timedelta(days=1)),
                make_event("p1", starts_at=NOW - timedelta(days=5)),
            ]
        )
        directory = EventDirectory(memory_store)

        upcoming = directory.events(NOW, StatusSelector.UPCOMING, EventOrder.OLDEST)

        assert [event.id.value for event in upcoming] == ["u2", "u1"]

    def test_status_of_uses_configured_window(self, memory_store):
        event = make_event(starts_at=NOW - timedelta(hours=2))
        directory = EventDirectory(memory_store, active_window=timedelta(hours=1))
        assert directory.status_of(event, NOW) is EventStatus.PAST

    def test_get_event_not_found(self, memory_store):
        with pytest.raises(EventNotFoundError):
            EventDirectory(memory_store).get_event("missing")

    def test_get_event_blank_id(self, memory_store):
        with pytest.raises(InvalidEventIdError):
            EventDirectory(memory_store).get_event("  ")

    def test_store_failure_propagates(self, memory_store):
        memory_store.fail_next(NetworkError("unreachable"))
        with pytest.raises(NetworkError):
            EventDirectory(memory_store).load()

    def test_fetch_finishing_after_close_is_discarded(self):
        store = ClosingOnFetchStore([make_event()])
        directory = EventDirectory(store)
        store.directory = directory

        assert directory.load() is None
        assert directory.closed
        assert directory.events(NOW) == ()

    def test_closed_directory_does_not_fetch(self, memory_store):
        directory = EventDirectory(memory_store)
        directory.close()
        assert directory.load() is None
        assert memory_store.calls == []


class TestContactService:
    """Tests for ContactService."""

    def test_send_stores_message(self, memory_store):
        message = ContactService(memory_store).send("Ada", "ada@example.com", "Hello!")
        assert memory_store.contact_messages == [message]

    def test_invalid_fields_raise(self, memory_store):
        with pytest.raises(FormValidationError) as exc_info:
            ContactService(memory_store).send("", "nope", "  ")
        assert set(exc_info.value.field_errors) == {"name", "email", "message"}
        assert memory_store.calls == []

    def test_store_failure_propagates(self, memory_store):
        memory_store.fail_next(NetworkError("down"))
        with pytest.raises(NetworkError):
            ContactService(memory_store).send("Ada", "ada@example.com", "Hello!")


class TestHallOfFame:
    """Tests for hall_of_fame()."""

    def test_splits_podium_and_sorts_by_rank(self):
        entry = EventWinners(
            event_title="Spring CTF",
            held_on=date(2024, 4, 1),
            winners=(
                Winner("D", rank=4, score=10),
                Winner("B", rank=2, score=30),
                Winner("A", rank=1, score=40),
                Winner("C", rank=3, score=20),
            ),
        )

        [section] = hall_of_fame([entry])

        assert [w.player_name for w in section.podium] == ["A", "B", "C"]
        assert [w.player_name for w in section.others] == ["D"]
        assert section.held_on == "2024-04-01"

    def test_most_recent_competition_first(self):
        older = EventWinners("Old", date(2023, 1, 1))
        newer = EventWinners("New", date(2024, 1, 1))
        assert [s.event_title for s in hall_of_fame([older, newer])] == ["New", "Old"]

    def test_default_content(self):
        sections = hall_of_fame()
        assert sections[0].event_title == "Quantum Break CTF 2024"
        assert sections[0].podium[0].player_name == "Cipher"


class TestGetEventStore:
    """Tests for the settings-driven store factory."""

    def test_builds_supabase_store_from_settings(self, settings):
        settings.EVENTS_STORE_BACKEND = "events.stores.supabase_store.SupabaseEventStore"
        settings.SUPABASE_URL = "https://club.supabase.co"
        settings.SUPABASE_ANON_KEY = "anon-key"

        store = get_event_store()

        assert isinstance(store, SupabaseEventStore)

    def test_builds_other_backends_without_arguments(self, settings):
        settings.EVENTS_STORE_BACKEND = "events.stores.memory_store.InMemoryEventStore"
        assert isinstance(get_event_store(), InMemoryEventStore)
