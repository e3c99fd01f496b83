# matches/tasks.py
import logging

from celery import shared_task
from django.conf import settings
from django.db import DatabaseError

from .recurring import create_recurring_matches
from .sync import synchronizer

logger = logging.getLogger("padel.matches")


@shared_task
def create_recurring_matches_task():
    """
    Periodic: create the next occurrence of every recurring series whose
    latest match has started.
    """
    results = create_recurring_matches()
    logger.info(f"Recurring matches run: {results}")
    return results


@shared_task
def repair_participant_counts_task(sample_size: int = None):
    """
    Periodic: fix any match whose current_players drifted from its joined
    participant rows.
    """
    if sample_size is None:
        sample_size = settings.PARTICIPANT_REPAIR_SAMPLE_SIZE
    report = synchronizer.repair_all(sample_size=sample_size)
    return report.as_dict()


@shared_task(bind=True, max_retries=3, default_retry_delay=30)
def recount_match_task(self, match_id: str):
    """
    Out-of-band recount for one match, queued when the post-commit recount
    could not write. Retried on database errors.
    """
    try:
        return synchronizer.recount(match_id)
    except DatabaseError as e:
        raise self.retry(exc=e)
