from django.urls import path

from .views import (
    NotificationLogListView,
    NotificationPreferenceView,
    StartTrialView,
    SubscriptionView,
)

urlpatterns = [
    path("subscription/", SubscriptionView.as_view(), name="notification-subscription"),
    path("subscription/trial/", StartTrialView.as_view(), name="notification-trial"),
    path("preferences/", NotificationPreferenceView.as_view(), name="notification-preferences"),
    path("logs/", NotificationLogListView.as_view(), name="notification-logs"),
]
