# clubs/utils.py
import re
import unicodedata


def slugify_club_name(name: str) -> str:
    """
    Build a URL slug from a club name, folding Portuguese accents.

    "Clube Ténis Porto" -> "clube-tenis-porto"
    """
    folded = unicodedata.normalize("NFKD", name or "")
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    folded = re.sub(r"[^a-zA-Z0-9\s-]", "", folded)
    folded = re.sub(r"\s+", "-", folded.strip())
    return folded.lower()


def make_slug_unique(slug: str, existing_slugs: set) -> str:
    """Append -2, -3, ... until the slug is not taken."""
    if slug not in existing_slugs:
        return slug

    counter = 2
    candidate = f"{slug}-{counter}"
    while candidate in existing_slugs:
        counter += 1
        candidate = f"{slug}-{counter}"
    return candidate


def validate_club_payload(club: dict) -> list:
    """Return a list of problems with an import record (empty when valid)."""
    from .models import Club

    errors = []

    if not (club.get("name") or "").strip():
        errors.append("Missing name")

    latitude = club.get("latitude")
    if latitude is not None and not -90 <= float(latitude) <= 90:
        errors.append("Invalid latitude")

    longitude = club.get("longitude")
    if longitude is not None and not -180 <= float(longitude) <= 180:
        errors.append("Invalid longitude")

    court_type = club.get("court_type")
    if court_type and court_type not in dict(Club.COURT_TYPE_CHOICES):
        errors.append(f"Invalid court_type: {court_type}")

    return errors
