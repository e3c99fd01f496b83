# notifications/sms.py
# Twilio SMS delivery and reminder message formats

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

logger = logging.getLogger("padel.notifications")

_twilio_client = None


@dataclass
class SmsResult:
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None


def get_twilio_client():
    """Twilio client singleton, None when credentials are not configured."""
    global _twilio_client

    if _twilio_client is None:
        sid = settings.TWILIO_ACCOUNT_SID
        token = settings.TWILIO_AUTH_TOKEN
        if not sid or not token:
            return None
        _twilio_client = Client(sid, token)

    return _twilio_client


def send_sms(to: str, body: str) -> SmsResult:
    client = get_twilio_client()
    from_number = settings.TWILIO_PHONE_NUMBER

    if client is None or not from_number:
        logger.error("Twilio is not configured")
        return SmsResult(success=False, error="SMS service not configured")

    try:
        message = client.messages.create(body=body, from_=from_number, to=to)
    except TwilioException as e:
        logger.warning(f"Failed to send SMS to ...{to[-4:]}: {e}")
        return SmsResult(success=False, error=str(e) or "Failed to send SMS")

    logger.info(f"SMS sent to ...{to[-4:]}: {message.sid}")
    return SmsResult(success=True, message_id=message.sid)


def _title(match) -> str:
    return match.title or match.description or "Padel Match"


def format_day_before_message(match, match_time: str) -> str:
    return (
        "Reminder: You have a padel match tomorrow!\n\n"
        f"{_title(match)}\nTime: {match_time}\nLocation: {match.location}\n\n"
        "See you there!"
    )


def format_ninety_min_message(match, match_time: str) -> str:
    return (
        "Your padel match starts in 90 minutes!\n\n"
        f"{_title(match)}\nTime: {match_time}\nLocation: {match.location}\n\n"
        "Time to warm up!"
    )
