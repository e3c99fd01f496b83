# clubs/models.py
import uuid

from django.db import models


class District(models.Model):
    # Slug-style key, e.g. "viana_do_castelo"
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=100)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["display_order", "name"]

    def __str__(self):
        return self.name


class Club(models.Model):
    COURT_INDOOR = "indoor"
    COURT_OUTDOOR = "outdoor"
    COURT_MIXED = "mixed"

    COURT_TYPE_CHOICES = [
        (COURT_INDOOR, "Indoor"),
        (COURT_OUTDOOR, "Outdoor"),
        (COURT_MIXED, "Mixed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)

    # Contact & web
    website = models.URLField(max_length=1024, blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)

    # Address
    address = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    district = models.ForeignKey(
        District,
        on_delete=models.SET_NULL,
        related_name="clubs",
        null=True,
        blank=True,
    )
    postal_code = models.CharField(max_length=16, blank=True, null=True)
    country = models.CharField(max_length=64, default="Portugal")

    # Geolocation
    latitude = models.DecimalField(max_digits=10, decimal_places=8, blank=True, null=True)
    longitude = models.DecimalField(max_digits=11, decimal_places=8, blank=True, null=True)
    google_place_id = models.CharField(max_length=255, unique=True, blank=True, null=True)

    # Facilities
    num_courts = models.PositiveIntegerField(blank=True, null=True)
    court_type = models.CharField(max_length=16, choices=COURT_TYPE_CHOICES, blank=True, null=True)
    has_lighting = models.BooleanField(default=True)
    amenities = models.JSONField(default=list, blank=True)

    description = models.TextField(blank=True, null=True)
    image_url = models.URLField(max_length=1024, blank=True, null=True)
    source = models.CharField(max_length=64, blank=True, null=True)
    verified = models.BooleanField(default=False)
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["district"], name="club_district_idx"),
            models.Index(fields=["city"], name="club_city_idx"),
            models.Index(fields=["name"], name="club_name_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None
