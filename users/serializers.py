from rest_framework import serializers

from .models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            'id',
            'phone',
            'name',
            'avatar_url',
            'date_joined',
            'updated_at',
        ]
        read_only_fields = ['id', 'phone', 'date_joined', 'updated_at']


class PublicUserSerializer(serializers.ModelSerializer):
    """What other players see: no phone number."""

    class Meta:
        model = User
        fields = ['id', 'name', 'avatar_url']
        read_only_fields = fields


class UpdateProfileSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=1, max_length=50, required=False)
    avatar_url = serializers.URLField(max_length=1024, required=False, allow_null=True)

    class Meta:
        model = User
        fields = ['name', 'avatar_url']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required")
        return value


class AvatarUploadSerializer(serializers.Serializer):
    MAX_SIZE = 5 * 1024 * 1024
    CONTENT_TYPES = {
        'image/jpeg': 'jpg',
        'image/png': 'png',
        'image/webp': 'webp',
    }

    avatar = serializers.FileField()

    def validate_avatar(self, value):
        if value.content_type not in self.CONTENT_TYPES:
            raise serializers.ValidationError("Avatar must be a JPEG, PNG or WebP image")
        if value.size > self.MAX_SIZE:
            raise serializers.ValidationError("Avatar must be 5 MB or smaller")
        return value
