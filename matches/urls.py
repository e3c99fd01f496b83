# matches/urls.py
from django.urls import path

from .views import (
    MatchListCreateView,
    MatchDetailView,
    MatchStatusView,
    StopRecurringView,
    MatchWeatherView,
    MatchParticipantsView,
    ParticipationStatusView,
    JoinMatchView,
    LeaveMatchView,
    MaybeMatchView,
    RemoveParticipantView,
)

urlpatterns = [
    path("", MatchListCreateView.as_view(), name="match-list"),
    path("<uuid:match_id>/", MatchDetailView.as_view(), name="match-detail"),
    path("<uuid:match_id>/status/", MatchStatusView.as_view(), name="match-status"),
    path("<uuid:match_id>/stop-recurring/", StopRecurringView.as_view(), name="match-stop-recurring"),
    path("<uuid:match_id>/weather/", MatchWeatherView.as_view(), name="match-weather"),

    # Participation
    path("<uuid:match_id>/participants/", MatchParticipantsView.as_view(), name="match-participants"),
    path(
        "<uuid:match_id>/participants/<int:user_id>/",
        RemoveParticipantView.as_view(),
        name="match-remove-participant",
    ),
    path("<uuid:match_id>/participation/", ParticipationStatusView.as_view(), name="match-participation"),
    path("<uuid:match_id>/join/", JoinMatchView.as_view(), name="match-join"),
    path("<uuid:match_id>/leave/", LeaveMatchView.as_view(), name="match-leave"),
    path("<uuid:match_id>/maybe/", MaybeMatchView.as_view(), name="match-maybe"),
]
