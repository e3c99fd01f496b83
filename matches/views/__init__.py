from .matches import (
    MatchListCreateView,
    MatchDetailView,
    MatchStatusView,
    StopRecurringView,
    MatchWeatherView,
)
from .participants import (
    MatchParticipantsView,
    ParticipationStatusView,
    JoinMatchView,
    LeaveMatchView,
    MaybeMatchView,
    RemoveParticipantView,
)
from .cron import RecurringMatchesCronView, RepairCountsCronView
