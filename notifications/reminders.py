# notifications/reminders.py
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

from django.conf import settings
from django.utils import timezone

from matches.datetime_utils import format_match_time
from matches.models import Match, Participant

from .models import NotificationLog, NotificationPreference
from .premium import premium_user_ids
from .sms import format_day_before_message, format_ninety_min_message, send_sms

logger = logging.getLogger("padel.notifications")


@dataclass(frozen=True)
class ReminderWindow:
    notification_type: str
    starts_in: timedelta
    ends_in: timedelta
    preference_field: str
    format_message: Callable


REMINDER_WINDOWS = (
    ReminderWindow(
        NotificationLog.TYPE_DAY_BEFORE,
        timedelta(hours=23),
        timedelta(hours=25),
        "day_before_enabled",
        format_day_before_message,
    ),
    ReminderWindow(
        NotificationLog.TYPE_NINETY_MIN_BEFORE,
        timedelta(minutes=75),
        timedelta(minutes=105),
        "ninety_min_before_enabled",
        format_ninety_min_message,
    ),
)


def _empty_stats():
    return {"sent": 0, "failed": 0, "skipped": 0}


def _disabled_user_ids(user_ids, field):
    # no preference row means enabled
    return set(
        NotificationPreference.objects
        .filter(user_id__in=user_ids, **{field: False})
        .values_list("user_id", flat=True)
    )


def _already_notified(match, notification_type):
    return set(
        NotificationLog.objects
        .filter(match=match, notification_type=notification_type)
        .values_list("user_id", flat=True)
    )


def _notify(match, user, window: ReminderWindow) -> bool:
    body = window.format_message(match, format_match_time(match.date_time))
    result = send_sms(user.phone, body)

    NotificationLog.objects.create(
        user=user,
        match=match,
        notification_type=window.notification_type,
        status=NotificationLog.STATUS_SENT if result.success else NotificationLog.STATUS_FAILED,
        error_message=result.error,
    )
    return result.success


def process_window(window: ReminderWindow, at=None) -> dict:
    """
    Send one reminder type to every joined player of the upcoming matches
    starting inside the window. Returns {sent, failed, skipped}.
    """
    at = at or timezone.now()
    stats = _empty_stats()

    matches = Match.objects.filter(
        status=Match.STATUS_UPCOMING,
        date_time__gte=at + window.starts_in,
        date_time__lt=at + window.ends_in,
    ).order_by("date_time")

    for match in matches:
        participants = [
            p for p in (
                Participant.objects
                .filter(match=match, status=Participant.STATUS_JOINED)
                .select_related("user")
            )
            if p.user.phone
        ]
        if not participants:
            continue

        user_ids = [p.user_id for p in participants]
        premium = premium_user_ids(user_ids, at=at)
        disabled = _disabled_user_ids(user_ids, window.preference_field)
        notified = _already_notified(match, window.notification_type)

        for participant in participants:
            user_id = participant.user_id
            if user_id not in premium or user_id in disabled or user_id in notified:
                stats["skipped"] += 1
                continue

            try:
                sent = _notify(match, participant.user, window)
            except Exception:
                logger.exception(
                    f"Error sending {window.notification_type} reminder "
                    f"for match {match.id} to user {user_id}"
                )
                stats["failed"] += 1
                continue

            stats["sent" if sent else "failed"] += 1

    return stats


def send_match_reminders(at=None) -> dict:
    """
    Run every reminder window. Returns
    {"day_before": {...}, "ninety_min_before": {...}}.
    """
    results = {window.notification_type: _empty_stats() for window in REMINDER_WINDOWS}

    if not settings.ENABLE_SMS_REMINDERS:
        logger.info("SMS reminders disabled (ENABLE_SMS_REMINDERS=0), nothing sent")
        return results

    at = at or timezone.now()
    for window in REMINDER_WINDOWS:
        results[window.notification_type] = process_window(window, at=at)

    logger.info(f"Match reminders run: {results}")
    return results
