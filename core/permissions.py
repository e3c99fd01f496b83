# core/permissions.py
import hmac

from django.conf import settings
from rest_framework.permissions import BasePermission


class HasCronSecret(BasePermission):
    """
    Scheduler requests must send `Authorization: Bearer <CRON_SECRET>`.
    Always denies when no secret is configured.
    """
    message = "Unauthorized"

    def has_permission(self, request, view):
        secret = settings.CRON_SECRET
        if not secret:
            return False

        auth_header = request.headers.get("Authorization", "")
        return hmac.compare_digest(auth_header.encode(), f"Bearer {secret}".encode())
