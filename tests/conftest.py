"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from rest_framework.test import APIClient

from events.stores.memory_store import InMemoryEventStore
from tests.factories import NOW


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def use_store(monkeypatch, memory_store: InMemoryEventStore) -> InMemoryEventStore:
    """Route the HTTP handlers to the in-memory store."""
    monkeypatch.setattr("events.handlers.views.get_event_store", lambda: memory_store)
    return memory_store
