from django.urls import path

from matches.views import RecurringMatchesCronView, RepairCountsCronView
from notifications.views import NotificationsCronView


urlpatterns = [
    path("notifications/", NotificationsCronView.as_view(), name="cron-notifications"),
    path("recurring/", RecurringMatchesCronView.as_view(), name="cron-recurring"),
    path("repair-counts/", RepairCountsCronView.as_view(), name="cron-repair-counts"),
]
