"""Serializers for transforming domain models to API responses.

Input serializers only check the request format. Field rules (required
values, email syntax) belong to the services.
"""

from rest_framework import serializers

from events.domain import EventOrder, StatusSelector, classify


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model.

    Expects ``now`` and ``active_window`` in the serializer context.
    """

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField(allow_null=True)
    registration_link = serializers.CharField(allow_null=True)
    status = serializers.SerializerMethodField()

    def get_status(self, obj) -> str:
        return classify(obj, self.context["now"], self.context["active_window"]).value


class EventListQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[selector.value for selector in StatusSelector],
        default=StatusSelector.ALL.value,
    )
    order = serializers.ChoiceField(
        choices=[order.value for order in EventOrder],
        default=EventOrder.FETCH.value,
    )


class RegistrationInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, allow_blank=True, default="")
    email = serializers.CharField(max_length=254, allow_blank=True, default="")
    team_name = serializers.CharField(
        max_length=200, allow_blank=True, allow_null=True, default=""
    )


class ContactMessageInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, allow_blank=True, default="")
    email = serializers.CharField(max_length=254, allow_blank=True, default="")
    message = serializers.CharField(max_length=5000, allow_blank=True, default="")


class WinnerSerializer(serializers.Serializer):
    player_name = serializers.CharField()
    team_name = serializers.CharField(allow_null=True)
    rank = serializers.IntegerField()
    score = serializers.IntegerField()
    avatar_url = serializers.CharField(allow_null=True)


class HallOfFameSectionSerializer(serializers.Serializer):
    event_title = serializers.CharField()
    held_on = serializers.CharField()
    podium = WinnerSerializer(many=True)
    others = WinnerSerializer(many=True)
