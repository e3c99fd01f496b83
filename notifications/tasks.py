# notifications/tasks.py
from celery import shared_task

from .reminders import send_match_reminders


@shared_task
def send_match_reminders_task():
    """Periodic: SMS reminders for matches starting in ~24h and ~90min."""
    return send_match_reminders()
