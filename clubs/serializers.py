from rest_framework import serializers

from .models import Club, District


class DistrictSerializer(serializers.ModelSerializer):
    class Meta:
        model = District
        fields = ["id", "name", "display_order"]


class ClubSerializer(serializers.ModelSerializer):
    district_name = serializers.CharField(source="district.name", read_only=True, default=None)

    class Meta:
        model = Club
        fields = [
            "id",
            "name",
            "slug",
            "website",
            "phone",
            "email",
            "address",
            "city",
            "district",
            "district_name",
            "postal_code",
            "country",
            "latitude",
            "longitude",
            "num_courts",
            "court_type",
            "has_lighting",
            "amenities",
            "description",
            "image_url",
            "verified",
        ]
        read_only_fields = fields


class ClubSummarySerializer(serializers.ModelSerializer):
    """Compact shape embedded in match payloads."""

    class Meta:
        model = Club
        fields = ["id", "name", "slug", "city", "latitude", "longitude"]
        read_only_fields = fields
