import logging

from django.db.models import Q
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from matches import services
from matches.models import Match, Participant
from matches.serializers import (
    MatchSerializer,
    MatchWriteSerializer,
    MatchUpdateSerializer,
    MatchStatusSerializer,
)
from matches.weather import get_match_weather, WeatherUnavailable
from .generics import api_error, visible_matches_for, get_match_or_none

logger = logging.getLogger("padel.matches")


class MatchListCreateView(APIView):
    """
    GET  /api/matches/?scope=mine|public
    POST /api/matches/
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        scope = request.query_params.get("scope")
        user = request.user

        if scope == "mine":
            qs = Match.objects.filter(
                Q(creator=user)
                | Q(participants__user=user, participants__status=Participant.STATUS_JOINED)
            ).distinct()
        elif scope == "public":
            qs = Match.objects.filter(is_public=True)
        elif scope:
            return api_error("Invalid scope. Use 'mine' or 'public'.")
        else:
            qs = visible_matches_for(user)

        qs = (
            qs.filter(status=Match.STATUS_UPCOMING)
            .select_related("creator", "club")
            .order_by("date_time")
        )
        return Response(MatchSerializer(qs, many=True).data)

    def post(self, request):
        serializer = MatchWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        match = services.create_match(request.user, **serializer.validated_data)
        return Response(MatchSerializer(match).data, status=status.HTTP_201_CREATED)


class MatchDetailView(APIView):
    """
    GET    /api/matches/<id>/
    PATCH  /api/matches/<id>/   (creator only)
    DELETE /api/matches/<id>/   (creator only)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, match_id):
        match = get_match_or_none(match_id)
        if match is None:
            return api_error("Match not found", status.HTTP_404_NOT_FOUND)
        return Response(MatchSerializer(match).data)

    def patch(self, request, match_id):
        match = get_match_or_none(match_id)
        if match is None:
            return api_error("Match not found", status.HTTP_404_NOT_FOUND)

        serializer = MatchUpdateSerializer(match, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        match = services.update_match(match_id, request.user, serializer.validated_data)
        match = get_match_or_none(match.id)
        return Response(MatchSerializer(match).data)

    def delete(self, request, match_id):
        if get_match_or_none(match_id) is None:
            return api_error("Match not found", status.HTTP_404_NOT_FOUND)

        services.delete_match(match_id, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MatchStatusView(APIView):
    """
    POST /api/matches/<id>/status/
    Body: { "status": "in_progress" | "completed" | "cancelled" }
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, match_id):
        serializer = MatchStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        match = services.change_match_status(match_id, request.user, serializer.validated_data["status"])
        return Response(MatchSerializer(match).data)


class StopRecurringView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, match_id):
        updated = services.stop_recurring(match_id, request.user)
        return Response({"message": "Recurrence stopped", "updated": updated})


class MatchWeatherView(APIView):
    """
    GET /api/matches/<id>/weather/
    Weather and glass condensation risk at the match's club.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, match_id):
        match = get_match_or_none(match_id)
        if match is None:
            return api_error("Match not found", status.HTTP_404_NOT_FOUND)

        try:
            report = get_match_weather(match)
        except WeatherUnavailable as e:
            return api_error(e.message, e.status_code)

        return Response(report.as_dict())
