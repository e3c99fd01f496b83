# matches/sanitizers.py
"""
Input sanitization for match fields.

Free text coming from players (location, description) passes through
these helpers before it is stored.
"""
import re
from typing import Optional

import bleach


class ValidationError(Exception):
    """Raised when input fails validation."""
    pass


def sanitize_text(text: Optional[str], max_length: Optional[int] = None, strip: bool = True) -> str:
    """
    Sanitize plain text input.

    - Strips leading/trailing whitespace
    - Removes control characters
    - Enforces maximum length
    - Returns empty string for None input
    """
    if text is None:
        return ""

    if strip:
        text = text.strip()

    # Remove control characters except newlines and tabs
    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', text)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def strip_tags(text: Optional[str]) -> str:
    """Remove all HTML markup; descriptions are rendered as plain text."""
    if text is None:
        return ""
    return bleach.clean(text, tags=[], attributes={}, strip=True)


def sanitize_location(location: Optional[str]) -> str:
    location = sanitize_text(strip_tags(location))
    if not location:
        raise ValidationError("Location is required")
    if len(location) > 200:
        raise ValidationError("Location too long")
    return location


def sanitize_description(description: Optional[str]) -> Optional[str]:
    """Empty descriptions are stored as NULL."""
    description = sanitize_text(strip_tags(description))
    if len(description) > 500:
        raise ValidationError("Description too long")
    return description or None


def validate_max_players(value, minimum: int = 2, maximum: int = 20) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValidationError("max_players must be a whole number")

    if value < minimum or value > maximum:
        raise ValidationError(f"max_players must be between {minimum} and {maximum}")
    return value
