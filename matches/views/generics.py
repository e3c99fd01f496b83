from django.db.models import Q
from rest_framework import status
from rest_framework.response import Response

from matches.models import Match, Participant


def api_error(message: str, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Small helper to standardize error responses across the matches app.
    Always returns: {"error": "<message>"} with the given status code.
    """
    return Response({"error": message}, status=status_code)


def visible_matches_for(user):
    """
    Matches a user may see in listings: public ones, ones they created and
    ones they are joined to.
    """
    return Match.objects.filter(
        Q(is_public=True)
        | Q(creator=user)
        | Q(participants__user=user, participants__status=Participant.STATUS_JOINED)
    ).distinct()


def get_match_or_none(match_id):
    return (
        Match.objects
        .select_related("creator", "club")
        .filter(pk=match_id)
        .first()
    )


def participation_for(match, user):
    return Participant.objects.filter(match=match, user=user).first()
