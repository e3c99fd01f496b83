# notifications/premium.py
# Premium status and the 14-day trial

import logging
import math
from datetime import timedelta
from typing import Optional

from django.db import transaction
from django.utils import timezone

from .models import Subscription

logger = logging.getLogger("padel.notifications")

TRIAL_DAYS = 14


class TrialNotAvailable(Exception):
    """The user already has (or had) a subscription."""


def get_subscription(user) -> Optional[Subscription]:
    return Subscription.objects.filter(user=user).first()


def subscription_is_premium(subscription: Optional[Subscription], at=None) -> bool:
    if subscription is None:
        return False
    at = at or timezone.now()
    if subscription.status not in Subscription.PREMIUM_STATUSES:
        return False
    return subscription.current_period_end is None or subscription.current_period_end > at


def is_premium(user) -> bool:
    """Active or trialing subscription whose period has not ended."""
    return subscription_is_premium(get_subscription(user))


def premium_user_ids(user_ids, at=None) -> set:
    """Bulk variant of is_premium for the reminder job."""
    at = at or timezone.now()
    rows = Subscription.objects.filter(
        user_id__in=user_ids,
        status__in=Subscription.PREMIUM_STATUSES,
    ).values_list("user_id", "current_period_end")
    return {user_id for user_id, end in rows if end is None or end > at}


def start_trial(user) -> Subscription:
    """
    Start a 14-day trial. Only one subscription per user, so a user who
    ever subscribed (or trialled) cannot start another one.
    """
    current = timezone.now()
    with transaction.atomic():
        if Subscription.objects.select_for_update().filter(user=user).exists():
            raise TrialNotAvailable("A subscription already exists for this account")
        subscription = Subscription.objects.create(
            user=user,
            status=Subscription.STATUS_TRIALING,
            current_period_start=current,
            current_period_end=current + timedelta(days=TRIAL_DAYS),
        )
    logger.info(f"Started premium trial for user {user.id}")
    return subscription


def is_trial_expired(subscription: Optional[Subscription]) -> bool:
    if not subscription or subscription.status != Subscription.STATUS_TRIALING:
        return False
    if not subscription.current_period_end:
        return False
    return subscription.current_period_end < timezone.now()


def is_on_active_trial(subscription: Optional[Subscription]) -> bool:
    if not subscription or subscription.status != Subscription.STATUS_TRIALING:
        return False
    if not subscription.current_period_end:
        return True
    return subscription.current_period_end > timezone.now()


def trial_days_remaining(subscription: Optional[Subscription]) -> Optional[int]:
    """Whole days left in the trial (rounded up), None when not on a live trial."""
    if not subscription or subscription.status != Subscription.STATUS_TRIALING:
        return None
    if not subscription.current_period_end:
        return None

    remaining = subscription.current_period_end - timezone.now()
    if remaining.total_seconds() < 0:
        return None
    return math.ceil(remaining.total_seconds() / 86400)


def trial_expiration_message(subscription: Optional[Subscription]) -> Optional[str]:
    if not subscription:
        return None

    if is_trial_expired(subscription):
        return (
            f"Your {TRIAL_DAYS}-day premium trial has expired. Upgrade to continue "
            "enjoying SMS notifications and other premium features."
        )

    days = trial_days_remaining(subscription)
    if days is None:
        return None
    if days == 0:
        return "Your trial expires today!"
    if days == 1:
        return "Your trial expires tomorrow!"
    if days <= 3:
        return f"Your trial expires in {days} days!"
    return f"{days} days remaining in your trial"
