from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.views import CronJobView

from .models import NotificationLog, NotificationPreference
from .premium import (
    TrialNotAvailable,
    get_subscription,
    is_on_active_trial,
    start_trial,
    subscription_is_premium,
    trial_days_remaining,
    trial_expiration_message,
)
from .reminders import send_match_reminders
from .serializers import (
    NotificationLogSerializer,
    NotificationPreferenceSerializer,
    SubscriptionSerializer,
)

LOG_LIMIT = 50


def subscription_payload(subscription):
    return {
        "is_premium": subscription_is_premium(subscription),
        "subscription": SubscriptionSerializer(subscription).data if subscription else None,
        "on_trial": is_on_active_trial(subscription),
        "trial_days_remaining": trial_days_remaining(subscription),
        "trial_message": trial_expiration_message(subscription),
    }


class SubscriptionView(APIView):
    """GET /api/notifications/subscription/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(subscription_payload(get_subscription(request.user)))


class StartTrialView(APIView):
    """
    POST /api/notifications/subscription/trial/

    Starts the 14-day premium trial. 409 when the user already has a
    subscription (active, expired or past trial).
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            subscription = start_trial(request.user)
        except TrialNotAvailable as e:
            return Response({"error": str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(subscription_payload(subscription), status=status.HTTP_201_CREATED)


class NotificationPreferenceView(APIView):
    """
    GET   /api/notifications/preferences/
    PATCH /api/notifications/preferences/
    """
    permission_classes = [IsAuthenticated]

    def get_object(self, request):
        preferences, _ = NotificationPreference.objects.get_or_create(user=request.user)
        return preferences

    def get(self, request):
        return Response(NotificationPreferenceSerializer(self.get_object(request)).data)

    def patch(self, request):
        serializer = NotificationPreferenceSerializer(
            self.get_object(request), data=request.data, partial=True
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class NotificationLogListView(APIView):
    """GET /api/notifications/logs/  (most recent first)"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = (
            NotificationLog.objects
            .filter(user=request.user)
            .select_related("match")
            .order_by("-sent_at")[:LOG_LIMIT]
        )
        return Response(NotificationLogSerializer(qs, many=True).data)


class NotificationsCronView(CronJobView):
    """GET /api/cron/notifications/"""

    def run(self):
        return send_match_reminders()
