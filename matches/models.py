# matches/models.py
import uuid

from django.conf import settings
from django.db import models


class Match(models.Model):
    STATUS_UPCOMING = "upcoming"
    STATUS_IN_PROGRESS = "in_progress"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_UPCOMING, "Upcoming"),
        (STATUS_IN_PROGRESS, "In progress"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    RECURRENCE_NONE = "none"
    RECURRENCE_WEEKLY = "weekly"
    RECURRENCE_BIWEEKLY = "biweekly"

    RECURRENCE_CHOICES = [
        (RECURRENCE_NONE, "None"),
        (RECURRENCE_WEEKLY, "Weekly"),
        (RECURRENCE_BIWEEKLY, "Every two weeks"),
    ]

    DURATION_CHOICES = [30, 60, 90, 120]
    DEFAULT_DURATION = 90
    DEFAULT_MAX_PLAYERS = 4
    MIN_PLAYERS = 2
    MAX_PLAYERS = 20

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_matches",
    )
    club = models.ForeignKey(
        "clubs.Club",
        on_delete=models.SET_NULL,
        related_name="matches",
        null=True,
        blank=True,
    )

    # Kept for older clients; new matches are described by location + description
    title = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, null=True)
    date_time = models.DateTimeField()
    duration_minutes = models.PositiveIntegerField(default=DEFAULT_DURATION)
    location = models.CharField(max_length=200)

    max_players = models.PositiveIntegerField(default=DEFAULT_MAX_PLAYERS)
    # Cached count of joined participants. Written only by ParticipantCountSynchronizer.
    current_players = models.PositiveIntegerField(default=0)

    status = models.CharField(max_length=32, choices=STATUS_CHOICES, default=STATUS_UPCOMING)
    is_public = models.BooleanField(default=False)

    recurrence_type = models.CharField(
        max_length=16,
        choices=RECURRENCE_CHOICES,
        default=RECURRENCE_NONE,
    )
    recurrence_end_date = models.DateTimeField(blank=True, null=True)
    series_id = models.UUIDField(blank=True, null=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date_time"]
        indexes = [
            models.Index(fields=["date_time"], name="match_date_time_idx"),
            models.Index(fields=["status"], name="match_status_idx"),
            models.Index(fields=["creator", "date_time"], name="match_creator_date_idx"),
        ]

    def __str__(self):
        return f"{self.location} @ {self.date_time:%Y-%m-%d %H:%M}"

    @property
    def spots_left(self):
        return max(0, self.max_players - self.current_players)

    @property
    def is_full(self):
        return self.current_players >= self.max_players

    @property
    def is_recurring(self):
        return self.recurrence_type != self.RECURRENCE_NONE


class Participant(models.Model):
    STATUS_JOINED = "joined"
    STATUS_LEFT = "left"
    STATUS_MAYBE = "maybe"

    STATUS_CHOICES = [
        (STATUS_JOINED, "Joined"),
        (STATUS_LEFT, "Left"),
        (STATUS_MAYBE, "Maybe"),
    ]

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name="participants")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="match_participations",
    )
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_JOINED)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("match", "user")
        indexes = [
            models.Index(fields=["match", "status"], name="participant_match_status_idx"),
            models.Index(fields=["user", "status"], name="participant_user_status_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.match_id} ({self.status})"
