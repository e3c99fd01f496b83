from django.conf import settings
from django.db import models


class Subscription(models.Model):
    STATUS_ACTIVE = "active"
    STATUS_CANCELLED = "cancelled"
    STATUS_PAST_DUE = "past_due"
    STATUS_TRIALING = "trialing"

    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_CANCELLED, "Cancelled"),
        (STATUS_PAST_DUE, "Payment Due"),
        (STATUS_TRIALING, "Trial"),
    ]

    PREMIUM_STATUSES = (STATUS_ACTIVE, STATUS_TRIALING)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="subscription",
    )
    stripe_customer_id = models.CharField(max_length=255, blank=True, null=True)
    stripe_subscription_id = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    current_period_start = models.DateTimeField(null=True, blank=True)
    current_period_end = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["status"], name="subscription_status_idx"),
            models.Index(fields=["stripe_customer_id"], name="subscription_customer_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.status}"


class NotificationPreference(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notification_preferences",
    )
    day_before_enabled = models.BooleanField(default=True)
    ninety_min_before_enabled = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Preferences for {self.user}"


class NotificationLog(models.Model):
    TYPE_DAY_BEFORE = "day_before"
    TYPE_NINETY_MIN_BEFORE = "ninety_min_before"

    TYPE_CHOICES = [
        (TYPE_DAY_BEFORE, "Day before"),
        (TYPE_NINETY_MIN_BEFORE, "90 minutes before"),
    ]

    STATUS_SENT = "sent"
    STATUS_FAILED = "failed"
    STATUS_SKIPPED = "skipped"

    STATUS_CHOICES = [
        (STATUS_SENT, "Sent"),
        (STATUS_FAILED, "Failed"),
        (STATUS_SKIPPED, "Skipped"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notification_logs",
    )
    match = models.ForeignKey(
        "matches.Match",
        on_delete=models.CASCADE,
        related_name="notification_logs",
    )
    notification_type = models.CharField(max_length=32, choices=TYPE_CHOICES)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES)
    error_message = models.TextField(blank=True, null=True)
    sent_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-sent_at"]
        indexes = [
            models.Index(fields=["user", "match", "notification_type"], name="notif_log_lookup_idx"),
            models.Index(fields=["sent_at"], name="notif_log_sent_at_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.notification_type} - {self.status}"
