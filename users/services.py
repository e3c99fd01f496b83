# users/services.py
import logging
import re

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

logger = logging.getLogger("padel.users")

PHONE_REGEX = re.compile(r"^\+[1-9]\d{1,14}$")


def normalize_phone(phone: str) -> str:
    """
    Strip everything except digits and '+', and make sure the number
    starts with '+'. "+351 912-345-678" -> "+351912345678".
    """
    cleaned = re.sub(r"[^\d+]", "", phone or "")
    if not cleaned.startswith("+"):
        return f"+{cleaned}"
    return cleaned


def is_valid_phone(phone: str) -> bool:
    """E.164 check."""
    return bool(PHONE_REGEX.match(phone or ""))


def _username_for_phone(phone: str) -> str:
    User = get_user_model()
    base_username = f"p{phone.lstrip('+')}"
    username = base_username
    counter = 1
    while User.objects.filter(username=username).exists():
        username = f"{base_username}_{counter}"
        counter += 1
    return username


def get_or_create_user_for_phone(phone: str, supabase_id=None):
    """
    Resolve the local user for a verified phone number, creating it on first
    login. Mirrors the auth.users -> users upsert of the hosted backend: the
    phone is the conflict key, the Supabase id is refreshed when it changes.
    """
    User = get_user_model()
    phone = normalize_phone(phone)

    user = User.objects.filter(phone=phone).first()
    if user is None and supabase_id:
        user = User.objects.filter(supabase_id=supabase_id).first()

    if user is None:
        try:
            with transaction.atomic():
                user = User.objects.create(
                    username=_username_for_phone(phone),
                    phone=phone,
                    supabase_id=supabase_id,
                )
                user.set_unusable_password()
                user.save(update_fields=["password"])
            logger.info(f"Created new user for phone login: user={user.id}")
            return user
        except IntegrityError:
            # Concurrent first login for the same phone
            user = User.objects.get(phone=phone)

    changed = []
    if supabase_id and str(user.supabase_id or "") != str(supabase_id):
        user.supabase_id = supabase_id
        changed.append("supabase_id")
    if user.phone != phone:
        user.phone = phone
        changed.append("phone")
    if changed:
        user.save(update_fields=changed + ["updated_at"])

    return user
