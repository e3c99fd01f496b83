from rest_framework import serializers

from .models import NotificationLog, NotificationPreference, Subscription


class SubscriptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscription
        fields = [
            "id",
            "status",
            "current_period_start",
            "current_period_end",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class NotificationPreferenceSerializer(serializers.ModelSerializer):
    class Meta:
        model = NotificationPreference
        fields = ["day_before_enabled", "ninety_min_before_enabled", "updated_at"]
        read_only_fields = ["updated_at"]


class NotificationLogSerializer(serializers.ModelSerializer):
    match_id = serializers.UUIDField(source="match.id", read_only=True)
    match_location = serializers.CharField(source="match.location", read_only=True)

    class Meta:
        model = NotificationLog
        fields = [
            "id",
            "match_id",
            "match_location",
            "notification_type",
            "status",
            "error_message",
            "sent_at",
        ]
        read_only_fields = fields
