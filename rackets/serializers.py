from rest_framework import serializers

from .models import Racket


class RacketSerializer(serializers.ModelSerializer):
    cell_code = serializers.CharField(read_only=True)

    class Meta:
        model = Racket
        fields = [
            "id",
            "brand",
            "model",
            "image_url",
            "power_bias",
            "maneuverability",
            "feel",
            "cell_code",
            "weight_grams",
            "shape",
            "balance_mm",
            "headline",
            "description",
            "skill_level",
            "price_tier",
            "buy_url",
        ]
        read_only_fields = fields


class QuizAnswersSerializer(serializers.Serializer):
    """Racket finder quiz: each answer picks a value on one cube axis."""
    power = serializers.IntegerField(min_value=1, max_value=3)
    weight = serializers.IntegerField(min_value=1, max_value=3)
    feel = serializers.IntegerField(min_value=1, max_value=3)
