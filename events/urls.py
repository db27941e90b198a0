from django.urls import path

from events.handlers import (
    ContactMessageView,
    EventListView,
    HallOfFameView,
    RegistrationView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path(
        "events/<str:event_id>/registrations",
        RegistrationView.as_view(),
        name="event-registrations",
    ),
    path("contact", ContactMessageView.as_view(), name="contact"),
    path("hall-of-fame", HallOfFameView.as_view(), name="hall-of-fame"),
]
