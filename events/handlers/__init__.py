from events.handlers.views import (
    ContactMessageView,
    EventListView,
    HallOfFameView,
    RegistrationView,
)

__all__ = [
    "EventListView",
    "RegistrationView",
    "ContactMessageView",
    "HallOfFameView",
]
