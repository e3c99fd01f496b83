import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("clubs", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(blank=True, default="", max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("date_time", models.DateTimeField()),
                ("duration_minutes", models.PositiveIntegerField(default=90)),
                ("location", models.CharField(max_length=200)),
                ("max_players", models.PositiveIntegerField(default=4)),
                ("current_players", models.PositiveIntegerField(default=0)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("upcoming", "Upcoming"),
                            ("in_progress", "In progress"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="upcoming",
                        max_length=32,
                    ),
                ),
                ("is_public", models.BooleanField(default=False)),
                (
                    "recurrence_type",
                    models.CharField(
                        choices=[("none", "None"), ("weekly", "Weekly"), ("biweekly", "Every two weeks")],
                        default="none",
                        max_length=16,
                    ),
                ),
                ("recurrence_end_date", models.DateTimeField(blank=True, null=True)),
                ("series_id", models.UUIDField(blank=True, db_index=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "club",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="matches",
                        to="clubs.club",
                    ),
                ),
                (
                    "creator",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="created_matches",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["date_time"],
                "indexes": [
                    models.Index(fields=["date_time"], name="match_date_time_idx"),
                    models.Index(fields=["status"], name="match_status_idx"),
                    models.Index(fields=["creator", "date_time"], name="match_creator_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Participant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "status",
                    models.CharField(
                        choices=[("joined", "Joined"), ("left", "Left"), ("maybe", "Maybe")],
                        default="joined",
                        max_length=16,
                    ),
                ),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                (
                    "match",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participants",
                        to="matches.match",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="match_participations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "unique_together": {("match", "user")},
                "indexes": [
                    models.Index(fields=["match", "status"], name="participant_match_status_idx"),
                    models.Index(fields=["user", "status"], name="participant_user_status_idx"),
                ],
            },
        ),
    ]
