# core/supabase_client.py
# Supabase client for phone OTP and avatar storage

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from supabase import create_client

logger = logging.getLogger("padel")

_supabase_client = None


@dataclass
class OtpResult:
    ok: bool
    error: Optional[str] = None
    supabase_id: Optional[str] = None
    phone: Optional[str] = None


def get_supabase_client():
    """
    Get the Supabase client instance (singleton pattern).
    Uses the service_role key when available, else the anon key.
    """
    global _supabase_client

    if _supabase_client is None:
        url = settings.SUPABASE_URL
        key = settings.SUPABASE_SERVICE_ROLE_KEY or settings.SUPABASE_ANON_KEY

        if not url or not key:
            logger.warning("Supabase credentials not configured")
            return None

        try:
            _supabase_client = create_client(url, key)
            logger.info("Supabase client initialized")
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            return None

    return _supabase_client


def send_otp(phone: str) -> OtpResult:
    """
    Ask Supabase Auth to text a one-time code to the phone.
    Creates the auth user on first use.
    """
    client = get_supabase_client()
    if not client:
        return OtpResult(ok=False, error="Authentication service not configured")

    try:
        client.auth.sign_in_with_otp({
            "phone": phone,
            "options": {"should_create_user": True},
        })
    except Exception as e:
        logger.warning(f"OTP send failed for {phone[-4:]}: {e}")
        return OtpResult(ok=False, error=str(e) or "Failed to send verification code")

    return OtpResult(ok=True, phone=phone)


def verify_otp(phone: str, token: str) -> OtpResult:
    """
    Verify an SMS code. On success returns the Supabase user id and the
    phone as confirmed by Supabase.
    """
    client = get_supabase_client()
    if not client:
        return OtpResult(ok=False, error="Authentication service not configured")

    try:
        response = client.auth.verify_otp({
            "phone": phone,
            "token": token,
            "type": "sms",
        })
    except Exception as e:
        logger.warning(f"OTP verification failed for {phone[-4:]}: {e}")
        return OtpResult(ok=False, error=str(e) or "Failed to verify code")

    user = getattr(response, "user", None)
    if user is None:
        return OtpResult(ok=False, error="Authentication failed")

    confirmed_phone = getattr(user, "phone", None) or phone
    return OtpResult(ok=True, supabase_id=str(user.id), phone=confirmed_phone)


def upload_avatar(user_id: int, content: bytes, content_type: str, extension: str) -> str | None:
    """
    Upload an avatar image to Supabase Storage and return its public URL.

    Returns None if storage is unavailable or the upload fails.
    """
    client = get_supabase_client()
    if not client:
        return None

    bucket = settings.SUPABASE_AVATAR_BUCKET
    path = f"{user_id}/avatar.{extension}"

    try:
        client.storage.from_(bucket).upload(
            path,
            content,
            file_options={"content-type": content_type, "upsert": "true"}
        )
        public_url = client.storage.from_(bucket).get_public_url(path)
        logger.info(f"Uploaded avatar to storage: {path}")
        return public_url
    except Exception as e:
        logger.error(f"Failed to upload avatar: {e}")
        return None
