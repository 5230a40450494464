"""Serializers for transforming domain models to API responses and parsing input."""

from django.conf import settings
from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateField(allow_null=True)
    location = serializers.CharField()
    headCount = serializers.IntegerField(source="head_count")
    participants = serializers.ListField(child=serializers.CharField())


class EventSummarySerializer(serializers.Serializer):
    """The few fields the admin RSVP view shows about its event."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField()
    date = serializers.DateField(allow_null=True)


class EventInputSerializer(serializers.Serializer):
    """Body of create and update requests.

    Unknown keys such as ``headCount`` or ``participants`` are dropped.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    date = serializers.DateField()
    location = serializers.CharField(max_length=255)


class RsvpRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=254)

    def validate_email(self, value: str) -> str:
        domain = settings.RSVP_EMAIL_DOMAIN
        if domain and not value.lower().endswith("@" + domain.lower().lstrip("@")):
            raise serializers.ValidationError(
                f"Please use your @{domain.lstrip('@')} email address."
            )
        return value


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class UnrsvpRequestSerializer(serializers.Serializer):
    """Un-RSVP takes any registered address, whatever RSVP_EMAIL_DOMAIN says."""

    email = serializers.CharField(max_length=254)
