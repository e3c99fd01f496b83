import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Racket",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("brand", models.CharField(max_length=100)),
                ("model", models.CharField(max_length=200)),
                ("image_url", models.URLField(blank=True, max_length=1024, null=True)),
                (
                    "power_bias",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(3),
                        ]
                    ),
                ),
                (
                    "maneuverability",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(3),
                        ]
                    ),
                ),
                (
                    "feel",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(3),
                        ]
                    ),
                ),
                (
                    "weight_grams",
                    models.PositiveIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(300),
                            django.core.validators.MaxValueValidator(450),
                        ],
                    ),
                ),
                (
                    "shape",
                    models.CharField(
                        blank=True,
                        choices=[("round", "Round"), ("teardrop", "Teardrop"), ("diamond", "Diamond")],
                        max_length=16,
                        null=True,
                    ),
                ),
                (
                    "balance_mm",
                    models.PositiveIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(200),
                            django.core.validators.MaxValueValidator(300),
                        ],
                    ),
                ),
                ("headline", models.CharField(blank=True, max_length=255, null=True)),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "skill_level",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("beginner", "Beginner"),
                            ("intermediate", "Intermediate"),
                            ("advanced", "Advanced"),
                        ],
                        max_length=16,
                        null=True,
                    ),
                ),
                (
                    "price_tier",
                    models.CharField(
                        blank=True,
                        choices=[("budget", "Budget"), ("mid", "Mid"), ("premium", "Premium")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("buy_url", models.URLField(blank=True, max_length=1024, null=True)),
                ("active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["brand", "model"],
                "unique_together": {("brand", "model")},
                "indexes": [
                    models.Index(fields=["power_bias", "maneuverability", "feel"], name="racket_axes_idx"),
                    models.Index(fields=["brand"], name="racket_brand_idx"),
                ],
            },
        ),
    ]
