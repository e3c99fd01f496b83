# matches/state_machine.py
"""
State machines for matches and participants.

Match lifecycle:
upcoming → in_progress → completed
   └→ cancelled   └→ cancelled

Participant status (None = no row yet):
None → joined ⇄ left
        joined ⇄ maybe → left

Only transitions into or out of `joined` move the participant counter.
"""
from typing import Optional, Tuple
import logging

from .models import Match, Participant

logger = logging.getLogger("padel.matches")


MATCH_TRANSITIONS = {
    Match.STATUS_UPCOMING: [Match.STATUS_IN_PROGRESS, Match.STATUS_CANCELLED],
    Match.STATUS_IN_PROGRESS: [Match.STATUS_COMPLETED, Match.STATUS_CANCELLED],
    Match.STATUS_COMPLETED: [],
    Match.STATUS_CANCELLED: [],
}

PARTICIPANT_TRANSITIONS = {
    None: [Participant.STATUS_JOINED],
    Participant.STATUS_JOINED: [Participant.STATUS_LEFT, Participant.STATUS_MAYBE],
    Participant.STATUS_LEFT: [Participant.STATUS_JOINED],
    Participant.STATUS_MAYBE: [Participant.STATUS_JOINED, Participant.STATUS_LEFT],
}


def can_transition_match(match: Match, new_status: str) -> Tuple[bool, str]:
    """
    Check if a match can move to a new status.

    Returns (can_transition: bool, reason: str)
    """
    if new_status not in dict(Match.STATUS_CHOICES):
        return False, f"Invalid status: {new_status}"

    if new_status == match.status:
        return False, f"Match is already '{new_status}'"

    if new_status not in MATCH_TRANSITIONS.get(match.status, []):
        return False, f"Cannot transition from '{match.status}' to '{new_status}'"

    return True, ""


def transition_match(match: Match, new_status: str, actor=None, save: bool = True) -> Tuple[bool, str]:
    can, reason = can_transition_match(match, new_status)

    if not can:
        logger.warning(
            f"Invalid match transition attempted: match={match.id}, "
            f"from={match.status}, to={new_status}, actor={getattr(actor, 'id', 'unknown')}. "
            f"Reason: {reason}"
        )
        return False, reason

    old_status = match.status
    match.status = new_status

    if save:
        match.save(update_fields=["status", "updated_at"])

    logger.info(
        f"Match state transition: match={match.id}, "
        f"from={old_status}, to={new_status}, actor={getattr(actor, 'id', 'unknown')}"
    )
    return True, f"Transitioned from '{old_status}' to '{new_status}'"


def can_transition_participant(current_status: Optional[str], new_status: str) -> Tuple[bool, str]:
    """
    Check a participant status change. `current_status` is None when the
    user has no participant row for the match yet.
    """
    if new_status not in dict(Participant.STATUS_CHOICES):
        return False, f"Invalid participant status: {new_status}"

    allowed = PARTICIPANT_TRANSITIONS.get(current_status, [])
    if new_status not in allowed:
        if current_status is None:
            return False, "You are not a participant of this match"
        return False, f"Cannot change participation from '{current_status}' to '{new_status}'"

    return True, ""


def is_terminal_status(status: str) -> bool:
    return not MATCH_TRANSITIONS.get(status)


def validate_action_for_status(match: Match, action: str) -> Tuple[bool, str]:
    """
    Validate a participant action against the match status.

    - 'join' / 'maybe': match must be upcoming
    - 'leave': match must not be finished
    - 'edit': match must be upcoming
    """
    if action in ("join", "maybe", "edit"):
        if match.status != Match.STATUS_UPCOMING:
            return False, f"Match is {match.get_status_display().lower()}"
        return True, ""

    if action == "leave":
        if is_terminal_status(match.status):
            return False, f"Match is {match.get_status_display().lower()}"
        return True, ""

    return True, ""
