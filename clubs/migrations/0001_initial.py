import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="District",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["display_order", "name"],
            },
        ),
        migrations.CreateModel(
            name="Club",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("website", models.URLField(blank=True, max_length=1024, null=True)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("address", models.CharField(blank=True, max_length=255, null=True)),
                ("city", models.CharField(blank=True, max_length=100, null=True)),
                ("postal_code", models.CharField(blank=True, max_length=16, null=True)),
                ("country", models.CharField(default="Portugal", max_length=64)),
                ("latitude", models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True)),
                ("google_place_id", models.CharField(blank=True, max_length=255, null=True, unique=True)),
                ("num_courts", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "court_type",
                    models.CharField(
                        blank=True,
                        choices=[("indoor", "Indoor"), ("outdoor", "Outdoor"), ("mixed", "Mixed")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("has_lighting", models.BooleanField(default=True)),
                ("amenities", models.JSONField(blank=True, default=list)),
                ("description", models.TextField(blank=True, null=True)),
                ("image_url", models.URLField(blank=True, max_length=1024, null=True)),
                ("source", models.CharField(blank=True, max_length=64, null=True)),
                ("verified", models.BooleanField(default=False)),
                ("active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "district",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="clubs",
                        to="clubs.district",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["district"], name="club_district_idx"),
                    models.Index(fields=["city"], name="club_city_idx"),
                    models.Index(fields=["name"], name="club_name_idx"),
                ],
            },
        ),
    ]
