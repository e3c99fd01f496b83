from django.utils import timezone
from rest_framework import serializers

from clubs.models import Club
from clubs.serializers import ClubSummarySerializer
from users.serializers import PublicUserSerializer
from .models import Match, Participant
from .datetime_utils import (
    earliest_start,
    format_duration,
    build_join_url,
    build_match_url,
)
from .sanitizers import (
    sanitize_location,
    sanitize_description,
    sanitize_text,
    validate_max_players,
    ValidationError as SanitizationError,
)


# -----------------------------------------
# READ SERIALIZERS
# -----------------------------------------
class MatchSerializer(serializers.ModelSerializer):
    creator = PublicUserSerializer(read_only=True)
    club = ClubSummarySerializer(read_only=True)
    spots_left = serializers.IntegerField(read_only=True)
    is_full = serializers.BooleanField(read_only=True)
    duration_display = serializers.SerializerMethodField()
    share_url = serializers.SerializerMethodField()
    match_url = serializers.SerializerMethodField()

    class Meta:
        model = Match
        fields = [
            "id",
            "creator",
            "club",
            "title",
            "description",
            "date_time",
            "duration_minutes",
            "duration_display",
            "location",
            "max_players",
            "current_players",
            "spots_left",
            "is_full",
            "status",
            "is_public",
            "recurrence_type",
            "recurrence_end_date",
            "series_id",
            "share_url",
            "match_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_duration_display(self, obj):
        return format_duration(obj.duration_minutes)

    def get_share_url(self, obj):
        return build_join_url(obj.id)

    def get_match_url(self, obj):
        return build_match_url(obj.id)


class ParticipantSerializer(serializers.ModelSerializer):
    user = PublicUserSerializer(read_only=True)

    class Meta:
        model = Participant
        fields = ["id", "user", "status", "joined_at"]
        read_only_fields = fields


# -----------------------------------------
# WRITE SERIALIZERS
# -----------------------------------------
class MatchWriteSerializer(serializers.Serializer):
    """
    Validates create and update payloads. Used with partial=True for PATCH.
    Produces keyword arguments for matches.services.
    """
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date_time = serializers.DateTimeField()
    duration_minutes = serializers.IntegerField(required=False, default=Match.DEFAULT_DURATION)
    location = serializers.CharField()
    max_players = serializers.IntegerField(required=False, default=Match.DEFAULT_MAX_PLAYERS)
    is_public = serializers.BooleanField(required=False, default=False)
    club_id = serializers.UUIDField(required=False, allow_null=True)
    recurrence_type = serializers.ChoiceField(
        choices=Match.RECURRENCE_CHOICES,
        required=False,
        default=Match.RECURRENCE_NONE,
    )
    recurrence_end_date = serializers.DateTimeField(required=False, allow_null=True)

    def validate_title(self, value):
        return sanitize_text(value, max_length=255)

    def validate_description(self, value):
        try:
            return sanitize_description(value)
        except SanitizationError as e:
            raise serializers.ValidationError(str(e))

    def validate_location(self, value):
        try:
            return sanitize_location(value)
        except SanitizationError as e:
            raise serializers.ValidationError(str(e))

    def validate_date_time(self, value):
        if value < earliest_start():
            raise serializers.ValidationError(
                "Match must be scheduled at least 30 minutes in the future"
            )
        return value

    def validate_duration_minutes(self, value):
        if value not in Match.DURATION_CHOICES:
            raise serializers.ValidationError("Duration must be 30, 60, 90, or 120 minutes")
        return value

    def validate_max_players(self, value):
        try:
            return validate_max_players(value, Match.MIN_PLAYERS, Match.MAX_PLAYERS)
        except SanitizationError as e:
            raise serializers.ValidationError(str(e))

    def validate_club_id(self, value):
        if value is None:
            return None
        club = Club.objects.filter(pk=value, active=True).first()
        if club is None:
            raise serializers.ValidationError("Club not found")
        return club

    def validate_recurrence_end_date(self, value):
        if value is not None and value < timezone.now():
            raise serializers.ValidationError("Recurrence end date must be in the future")
        return value

    def validate(self, attrs):
        end_date = attrs.get("recurrence_end_date")
        start = attrs.get("date_time") or getattr(self.instance, "date_time", None)
        if end_date and start and end_date < start:
            raise serializers.ValidationError({
                "recurrence_end_date": ["Recurrence end date must be after the first match"]
            })

        if "club_id" in attrs:
            attrs["club"] = attrs.pop("club_id")
        return attrs


class MatchUpdateSerializer(MatchWriteSerializer):
    """PATCH payload. Recurrence is managed through stop-recurring."""
    recurrence_type = None
    recurrence_end_date = None
    date_time = serializers.DateTimeField(required=False)
    location = serializers.CharField(required=False)
    duration_minutes = serializers.IntegerField(required=False)
    max_players = serializers.IntegerField(required=False)
    is_public = serializers.BooleanField(required=False)


class MatchStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Match.STATUS_CHOICES)
