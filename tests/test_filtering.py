"""Unit tests for filtering and ordering the event list."""

from datetime import timedelta

import pytest

from events.domain import EventOrder, EventStatus, StatusSelector, classify, filter_events, order_events

from tests.factories import NOW, make_event


@pytest.fixture
def collection():
    return (
        make_event("p1", "Old Finals", starts_at=NOW - timedelta(days=40)),
        make_event("u1", "Quantum Break", starts_at=NOW + timedelta(days=5)),
        make_event("a1", "Live Qualifier", starts_at=NOW - timedelta(hours=3)),
        make_event("u2", "Spring Warmup", starts_at=NOW + timedelta(days=1)),
        make_event(
            "o1",
            "Rescheduled",
            starts_at=NOW + timedelta(days=9),
            status_override=EventStatus.PAST,
        ),
        make_event("p2", "Winter CTF", starts_at=NOW - timedelta(days=3)),
    )


SPECIFIC_SELECTORS = [
    StatusSelector.UPCOMING,
    StatusSelector.ACTIVE,
    StatusSelector.PAST,
]


class TestFilterEvents:
    """Tests for filter_events()."""

    def test_all_returns_input_unchanged(self, collection):
        assert filter_events(collection, StatusSelector.ALL, NOW) == collection

    @pytest.mark.parametrize("selector", SPECIFIC_SELECTORS)
    def test_only_matching_events_in_order(self, collection, selector):
        """Output is exactly the matching events, in input order."""
        result = filter_events(collection, selector, NOW)
        expected = tuple(
            event for event in collection if classify(event, NOW).value == selector.value
        )
        assert result == expected

    def test_selectors_partition_the_collection(self, collection):
        """Each event appears under exactly one specific selector."""
        seen = []
        for selector in SPECIFIC_SELECTORS:
            seen.extend(event.id for event in filter_events(collection, selector, NOW))
        assert sorted(seen, key=str) == sorted((event.id for event in collection), key=str)
        assert len(seen) == len(set(seen))

    def test_upcoming_scenario(self):
        """Quantum Break in the future is excluded by past, included by upcoming."""
        events = [make_event("e1", "Quantum Break", starts_at=NOW + timedelta(days=2))]
        assert filter_events(events, StatusSelector.PAST, NOW) == ()
        assert [e.id.value for e in filter_events(events, StatusSelector.UPCOMING, NOW)] == ["e1"]

    def test_override_is_respected(self, collection):
        past_ids = [e.id.value for e in filter_events(collection, StatusSelector.PAST, NOW)]
        assert past_ids == ["p1", "o1", "p2"]

    def test_does_not_mutate_input(self, collection):
        events = list(collection)
        filter_events(events, StatusSelector.UPCOMING, NOW)
        assert events == list(collection)

    def test_empty_collection(self):
        assert filter_events((), StatusSelector.ACTIVE, NOW) == ()


class TestOrderEvents:
    """Tests for order_events()."""

    def test_fetch_order_is_kept(self, collection):
        assert order_events(collection, EventOrder.FETCH) == collection

    def test_newest_first(self, collection):
        result = order_events(collection, EventOrder.NEWEST)
        starts = [event.starts_at for event in result]
        assert starts == sorted(starts, reverse=True)

    def test_oldest_first(self, collection):
        result = order_events(collection, EventOrder.OLDEST)
        assert [event.id.value for event in result] == ["p1", "p2", "a1", "u2", "u1", "o1"]

    def test_ties_keep_fetch_order(self):
        """Sorting is stable for events starting at the same instant."""
        events = [
            make_event("first", starts_at=NOW),
            make_event("second", starts_at=NOW),
        ]
        for order in (EventOrder.NEWEST, EventOrder.OLDEST):
            assert [e.id.value for e in order_events(events, order)] == ["first", "second"]

    def test_does_not_mutate_input(self, collection):
        events = list(collection)
        order_events(events, EventOrder.OLDEST)
        assert events == list(collection)
