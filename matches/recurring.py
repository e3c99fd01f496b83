# matches/recurring.py
"""
Recurring match generation.

A series is a set of matches sharing `series_id`. Once the latest match of
a series has started and nothing later is scheduled, the next occurrence
is created through the normal creation path, so the creator is joined and
the counter is set exactly like a hand-made match.
"""
import logging
from datetime import timedelta

from .datetime_utils import now
from .exceptions import MatchCreationFailed
from .models import Match
from .services import create_match

logger = logging.getLogger("padel.matches")

RECURRENCE_INTERVALS = {
    Match.RECURRENCE_WEEKLY: timedelta(days=7),
    Match.RECURRENCE_BIWEEKLY: timedelta(days=14),
}


def next_occurrence(date_time, recurrence_type, after=None):
    """
    Next slot of the series strictly after `after` (defaults to the given
    date_time). Missed slots are skipped rather than back-filled.
    """
    interval = RECURRENCE_INTERVALS.get(recurrence_type)
    if interval is None:
        return None

    after = after or date_time
    candidate = date_time + interval
    while candidate <= after:
        candidate += interval
    return candidate


def latest_started_per_series(current):
    """Latest already-started match of every active series, keyed by series id."""
    rows = (
        Match.objects
        .exclude(recurrence_type=Match.RECURRENCE_NONE)
        .exclude(series_id__isnull=True)
        .filter(date_time__lt=current)
        .select_related("creator", "club")
        .order_by("-date_time")
    )

    latest = {}
    for match in rows:
        latest.setdefault(match.series_id, match)
    return latest


def create_recurring_matches() -> dict:
    """Returns {processed, created, skipped, errors}."""
    current = now()
    results = {"processed": 0, "created": 0, "skipped": 0, "errors": 0}

    series = latest_started_per_series(current)
    results["processed"] = len(series)

    for series_id, latest in series.items():
        if latest.recurrence_end_date and latest.recurrence_end_date < current:
            results["skipped"] += 1
            continue

        if Match.objects.filter(series_id=series_id, date_time__gt=current).exists():
            results["skipped"] += 1
            continue

        next_dt = next_occurrence(latest.date_time, latest.recurrence_type, after=current)
        if next_dt is None or (latest.recurrence_end_date and next_dt > latest.recurrence_end_date):
            results["skipped"] += 1
            continue

        try:
            match = create_match(
                latest.creator,
                title=latest.title,
                description=latest.description,
                date_time=next_dt,
                duration_minutes=latest.duration_minutes,
                location=latest.location,
                max_players=latest.max_players,
                is_public=latest.is_public,
                club=latest.club,
                recurrence_type=latest.recurrence_type,
                recurrence_end_date=latest.recurrence_end_date,
                series_id=series_id,
            )
        except MatchCreationFailed:
            logger.error(f"Could not create next match for series={series_id}")
            results["errors"] += 1
            continue

        results["created"] += 1
        logger.info(f"Created recurring match {match.id} for series {series_id} at {next_dt.isoformat()}")

    return results
