# matches/analytics.py
from django.contrib.auth import get_user_model
from django.db.models import Count

from .datetime_utils import now
from .models import Match, Participant

TOP_LOCATIONS = 3
TOP_PARTNERS = 5


def played_matches(user):
    """Matches the user is currently joined to, cancelled ones excluded."""
    return Match.objects.filter(
        participants__user=user,
        participants__status=Participant.STATUS_JOINED,
    ).exclude(status=Match.STATUS_CANCELLED)


def get_user_stats(user) -> dict:
    """
    Profile stats: total matches, matches this month, most played
    locations and most frequent partners.
    """
    matches = played_matches(user)

    current = now()
    month_start = current.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    top_locations = (
        matches.values("location")
        .annotate(count=Count("id"))
        .order_by("-count", "location")[:TOP_LOCATIONS]
    )

    User = get_user_model()
    partners = (
        User.objects.filter(
            match_participations__match__in=matches,
            match_participations__status=Participant.STATUS_JOINED,
        )
        .exclude(pk=user.pk)
        .annotate(match_count=Count("match_participations__match", distinct=True))
        .order_by("-match_count", "id")[:TOP_PARTNERS]
    )

    return {
        "total_matches": matches.count(),
        "matches_this_month": matches.filter(date_time__gte=month_start).count(),
        "top_locations": [
            {"location": row["location"], "count": row["count"]}
            for row in top_locations
        ],
        "frequent_partners": [
            {
                "id": partner.id,
                "name": partner.name,
                "avatar_url": partner.avatar_url,
                "match_count": partner.match_count,
            }
            for partner in partners
        ],
    }
