"""Builds the configured EventStore from Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from events.stores.interfaces import EventStore
from events.stores.supabase_store import SupabaseEventStore


def get_event_store() -> EventStore:
    backend = import_string(settings.EVENTS_STORE_BACKEND)
    if backend is SupabaseEventStore:
        return SupabaseEventStore(
            url=settings.SUPABASE_URL,
            api_key=settings.SUPABASE_ANON_KEY,
            timeout=settings.SUPABASE_TIMEOUT,
        )
    return backend()
