from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from matches import services
from matches.models import Match, Participant
from matches.serializers import ParticipantSerializer
from matches.throttles import MatchJoinThrottle
from .generics import api_error, participation_for


class MatchParticipantsView(APIView):
    """
    GET /api/matches/<id>/participants/
    Joined and maybe players, earliest first. Left rows are hidden.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, match_id):
        match = get_object_or_404(Match, pk=match_id)
        participants = (
            Participant.objects
            .filter(match=match)
            .exclude(status=Participant.STATUS_LEFT)
            .select_related("user")
            .order_by("joined_at")
        )
        return Response(ParticipantSerializer(participants, many=True).data)


class ParticipationStatusView(APIView):
    """GET /api/matches/<id>/participation/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, match_id):
        match = get_object_or_404(Match, pk=match_id)
        participant = participation_for(match, request.user)

        return Response({
            "match_id": str(match.id),
            "status": participant.status if participant else None,
            "joined": bool(participant and participant.status == Participant.STATUS_JOINED),
            "is_creator": match.creator_id == request.user.id,
        })


class _ParticipationActionView(APIView):
    permission_classes = [IsAuthenticated]
    throttle_classes = [MatchJoinThrottle]
    throttle_scope = "match-join"
    success_status = status.HTTP_200_OK
    message = ""

    def perform(self, match_id, user):
        raise NotImplementedError

    def post(self, request, match_id):
        participant = self.perform(match_id, request.user)
        match = Match.objects.only("id", "current_players", "max_players").get(pk=match_id)

        return Response(
            {
                "message": self.message,
                "participant": ParticipantSerializer(participant).data,
                "current_players": match.current_players,
                "max_players": match.max_players,
                "spots_left": match.spots_left,
            },
            status=self.success_status,
        )


class JoinMatchView(_ParticipationActionView):
    """POST /api/matches/<id>/join/"""
    message = "Joined match"

    def perform(self, match_id, user):
        return services.join_match(match_id, user)


class LeaveMatchView(_ParticipationActionView):
    """POST /api/matches/<id>/leave/"""
    message = "Left match"

    def perform(self, match_id, user):
        return services.leave_match(match_id, user)


class MaybeMatchView(_ParticipationActionView):
    """POST /api/matches/<id>/maybe/"""
    message = "Marked as maybe"

    def perform(self, match_id, user):
        return services.set_maybe(match_id, user)


class RemoveParticipantView(APIView):
    """
    DELETE /api/matches/<id>/participants/<user_id>/
    Creator only.
    """
    permission_classes = [IsAuthenticated]

    def delete(self, request, match_id, user_id):
        if not Match.objects.filter(pk=match_id).exists():
            return api_error("Match not found", status.HTTP_404_NOT_FOUND)

        services.remove_participant(match_id, request.user, user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
