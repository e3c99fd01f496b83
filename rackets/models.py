import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .cube import cell_code

AXIS_VALIDATORS = [MinValueValidator(1), MaxValueValidator(3)]


class Racket(models.Model):
    """
    A padel racket placed in the 3x3x3 racket cube:
    power_bias 1=Control..3=Power, maneuverability 1=Light..3=Heavy,
    feel 1=Soft..3=Firm.
    """
    SHAPE_CHOICES = [
        ("round", "Round"),
        ("teardrop", "Teardrop"),
        ("diamond", "Diamond"),
    ]
    SKILL_CHOICES = [
        ("beginner", "Beginner"),
        ("intermediate", "Intermediate"),
        ("advanced", "Advanced"),
    ]
    PRICE_CHOICES = [
        ("budget", "Budget"),
        ("mid", "Mid"),
        ("premium", "Premium"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=200)
    image_url = models.URLField(max_length=1024, blank=True, null=True)

    power_bias = models.PositiveSmallIntegerField(validators=AXIS_VALIDATORS)
    maneuverability = models.PositiveSmallIntegerField(validators=AXIS_VALIDATORS)
    feel = models.PositiveSmallIntegerField(validators=AXIS_VALIDATORS)

    weight_grams = models.PositiveIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(300), MaxValueValidator(450)],
    )
    shape = models.CharField(max_length=16, choices=SHAPE_CHOICES, blank=True, null=True)
    balance_mm = models.PositiveIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(200), MaxValueValidator(300)],
    )

    headline = models.CharField(max_length=255, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    skill_level = models.CharField(max_length=16, choices=SKILL_CHOICES, blank=True, null=True)
    price_tier = models.CharField(max_length=16, choices=PRICE_CHOICES, blank=True, null=True)
    buy_url = models.URLField(max_length=1024, blank=True, null=True)

    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["brand", "model"]
        unique_together = ("brand", "model")
        indexes = [
            models.Index(fields=["power_bias", "maneuverability", "feel"], name="racket_axes_idx"),
            models.Index(fields=["brand"], name="racket_brand_idx"),
        ]

    @property
    def cell_code(self):
        return cell_code(self.power_bias, self.maneuverability, self.feel)

    def __str__(self):
        return f"{self.brand} {self.model}"
