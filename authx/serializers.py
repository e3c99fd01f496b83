from rest_framework import serializers

from users.services import is_valid_phone, normalize_phone


class OtpSendSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=32)

    def validate_phone(self, value):
        phone = normalize_phone(value)
        if not is_valid_phone(phone):
            raise serializers.ValidationError(
                "Please enter a valid phone number with country code (e.g. +351 912 345 678)"
            )
        return phone


class OtpVerifySerializer(OtpSendSerializer):
    token = serializers.RegexField(
        r"^\d{6}$",
        error_messages={"invalid": "Verification code must be 6 digits"},
    )
