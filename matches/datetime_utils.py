# matches/datetime_utils.py
"""
Datetime and display helpers for matches.

All "now" comparisons go through `now()` so tests can patch a single place.
"""
from datetime import datetime, timedelta
from typing import Optional

from django.conf import settings
from django.utils import timezone

DEFAULT_DURATION_MINUTES = 90
MIN_LEAD_TIME = timedelta(minutes=30)


def now() -> datetime:
    return timezone.now()


def earliest_start() -> datetime:
    """New or rescheduled matches must start at least 30 minutes from now."""
    return now() + MIN_LEAD_TIME


def match_end_time(match) -> datetime:
    return match.date_time + timedelta(minutes=match.duration_minutes or DEFAULT_DURATION_MINUTES)


def is_match_started(match) -> bool:
    return match.date_time <= now()


def is_match_upcoming(match) -> bool:
    return match.date_time > now()


def hours_until(dt: datetime) -> float:
    return (dt - now()).total_seconds() / 3600


def format_duration(minutes) -> str:
    """
    Human-readable match length.

    45 -> "45mins", 60 -> "1h", 90 -> "1h 30m".
    Missing, non-numeric or non-positive values fall back to 90 minutes.
    """
    try:
        minutes = int(minutes)
    except (TypeError, ValueError):
        minutes = DEFAULT_DURATION_MINUTES
    if minutes <= 0:
        minutes = DEFAULT_DURATION_MINUTES

    if minutes < 60:
        return f"{minutes}mins"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


def format_match_time(dt: Optional[datetime]) -> Optional[str]:
    """Local wall-clock time, e.g. "6:30 PM"."""
    if dt is None:
        return None
    local = timezone.localtime(dt)
    return local.strftime("%I:%M %p").lstrip("0")


def format_match_date(dt: Optional[datetime]) -> Optional[str]:
    """e.g. "Friday, March 6"."""
    if dt is None:
        return None
    local = timezone.localtime(dt)
    return f"{local:%A}, {local:%B} {local.day}"


def format_match_datetime(dt: datetime, duration_minutes) -> str:
    """e.g. "6:30 PM (1h 30m)"."""
    return f"{format_match_time(dt)} ({format_duration(duration_minutes)})"


def build_join_url(match_id) -> str:
    return f"{settings.APP_BASE_URL.rstrip('/')}/join/{match_id}"


def build_match_url(match_id) -> str:
    return f"{settings.APP_BASE_URL.rstrip('/')}/match/{match_id}"
