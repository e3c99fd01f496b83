# matches/services.py
"""
Match and participant mutations.

Views and jobs go through these functions; they raise the exceptions in
matches/exceptions.py before touching anything, and never write
Match.current_players (the synchronizer does, after commit).
"""
import logging
import uuid

from django.db import DatabaseError, transaction
from django.db.models import Q
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from .exceptions import (
    AlreadyJoined,
    InvalidTransition,
    MatchCreationFailed,
    MatchFull,
    MatchNotJoinable,
    NotMatchCreator,
    NotParticipant,
)
from .models import Match, Participant
from .state_machine import (
    can_transition_participant,
    transition_match,
    validate_action_for_status,
)
from .sync import joined_count

logger = logging.getLogger("padel.matches")

EDITABLE_FIELDS = [
    "title",
    "description",
    "date_time",
    "duration_minutes",
    "location",
    "max_players",
    "is_public",
    "club",
]


def ensure_creator(match: Match, user) -> None:
    if match.creator_id != user.id:
        raise NotMatchCreator()


def _locked_match(match_id) -> Match:
    try:
        return Match.objects.select_for_update().get(pk=match_id)
    except Match.DoesNotExist:
        raise NotFound("Match not found.")


def create_match(creator, *, date_time, location, duration_minutes=Match.DEFAULT_DURATION,
                 max_players=Match.DEFAULT_MAX_PLAYERS, description=None, is_public=False,
                 club=None, title="", recurrence_type=Match.RECURRENCE_NONE,
                 recurrence_end_date=None, series_id=None) -> Match:
    """
    Create a match and its creator's `joined` participant row in one
    transaction. If the participant insert fails the match is rolled back.
    """
    if recurrence_type != Match.RECURRENCE_NONE and series_id is None:
        series_id = uuid.uuid4()

    try:
        with transaction.atomic():
            match = Match.objects.create(
                creator=creator,
                title=title or "",
                description=description,
                date_time=date_time,
                duration_minutes=duration_minutes,
                location=location,
                max_players=max_players,
                current_players=0,
                is_public=is_public,
                club=club,
                recurrence_type=recurrence_type,
                recurrence_end_date=recurrence_end_date,
                series_id=series_id,
            )
            Participant.objects.create(
                match=match,
                user=creator,
                status=Participant.STATUS_JOINED,
            )
    except DatabaseError as e:
        logger.error(f"Match creation rolled back for creator={creator.id}: {e}")
        raise MatchCreationFailed()

    # The post-commit recount has run by now (outside any outer transaction)
    match.refresh_from_db(fields=["current_players"])
    logger.info(f"Match created: match={match.id}, creator={creator.id}, series={series_id}")
    return match


def join_match(match_id, user) -> Participant:
    """
    Join (or rejoin) a match.

    The match row is locked while the live joined count is checked against
    max_players and the participant row is written, so two concurrent joins
    for the last spot cannot both succeed.
    """
    with transaction.atomic():
        match = _locked_match(match_id)

        ok, reason = validate_action_for_status(match, "join")
        if not ok:
            raise MatchNotJoinable(reason)

        participant = Participant.objects.filter(match=match, user=user).first()
        current_status = participant.status if participant else None

        if current_status == Participant.STATUS_JOINED:
            raise AlreadyJoined()

        can, reason = can_transition_participant(current_status, Participant.STATUS_JOINED)
        if not can:
            raise InvalidTransition(reason)

        live = joined_count(match.id)
        if live >= match.max_players:
            logger.warning(
                f"Join rejected: match={match.id} full ({live}/{match.max_players}), user={user.id}"
            )
            raise MatchFull(f"Match is full ({live}/{match.max_players} players).")

        if participant:
            # Rejoin: reuse the row, restart the join clock
            participant.status = Participant.STATUS_JOINED
            participant.joined_at = timezone.now()
            participant.save(update_fields=["status", "joined_at"])
        else:
            participant = Participant.objects.create(
                match=match,
                user=user,
                status=Participant.STATUS_JOINED,
            )

    logger.info(f"Participant joined: match={match_id}, user={user.id}, rejoin={current_status is not None}")
    return participant


def _change_status(match_id, user, new_status, action) -> Participant:
    with transaction.atomic():
        match = _locked_match(match_id)

        ok, reason = validate_action_for_status(match, action)
        if not ok:
            raise MatchNotJoinable(reason)

        participant = Participant.objects.filter(match=match, user=user).first()
        current_status = participant.status if participant else None

        if current_status is None:
            raise NotParticipant()

        can, reason = can_transition_participant(current_status, new_status)
        if not can:
            if current_status == Participant.STATUS_LEFT:
                raise NotParticipant("You have already left this match.")
            raise InvalidTransition(reason)

        participant.status = new_status
        participant.save(update_fields=["status"])

    logger.info(f"Participation changed: match={match_id}, user={user.id}, {current_status} -> {new_status}")
    return participant


def leave_match(match_id, user) -> Participant:
    """Mark the user's participation as `left`. The row is kept for rejoin."""
    return _change_status(match_id, user, Participant.STATUS_LEFT, "leave")


def set_maybe(match_id, user) -> Participant:
    """Switch a joined player to `maybe`; frees their spot."""
    return _change_status(match_id, user, Participant.STATUS_MAYBE, "maybe")


def remove_participant(match_id, actor, user_id) -> None:
    """Creator removes another player. The participant row is deleted."""
    with transaction.atomic():
        match = _locked_match(match_id)
        ensure_creator(match, actor)

        if match.creator_id == int(user_id):
            raise ValidationError({"detail": "The creator cannot be removed. Delete the match instead."})

        participant = Participant.objects.filter(match=match, user_id=user_id).first()
        if participant is None:
            raise NotParticipant("That user is not a participant of this match.")

        participant.delete()

    logger.info(f"Participant removed: match={match_id}, user={user_id}, by={actor.id}")


def update_match(match_id, actor, changes: dict) -> Match:
    """
    Apply validated field changes. Only columns whose value actually
    changed are written; current_players is never part of the update.
    """
    with transaction.atomic():
        match = _locked_match(match_id)
        ensure_creator(match, actor)

        ok, reason = validate_action_for_status(match, "edit")
        if not ok:
            raise InvalidTransition(reason)

        new_max = changes.get("max_players")
        if new_max is not None:
            live = joined_count(match.id)
            if new_max < live:
                raise ValidationError({
                    "max_players": [f"Cannot be lower than the current number of players ({live})."]
                })

        changed = []
        for field in EDITABLE_FIELDS:
            if field not in changes:
                continue
            if getattr(match, field) != changes[field]:
                setattr(match, field, changes[field])
                changed.append(field)

        if changed:
            match.save(update_fields=changed + ["updated_at"])
            logger.info(f"Match updated: match={match.id}, fields={changed}, by={actor.id}")

    return match


def delete_match(match_id, actor) -> None:
    with transaction.atomic():
        match = _locked_match(match_id)
        ensure_creator(match, actor)
        match.delete()

    logger.info(f"Match deleted: match={match_id}, by={actor.id}")


def change_match_status(match_id, actor, new_status) -> Match:
    with transaction.atomic():
        match = _locked_match(match_id)
        ensure_creator(match, actor)

        ok, reason = transition_match(match, new_status, actor=actor)
        if not ok:
            raise InvalidTransition(reason)

    return match


def stop_recurring(match_id, actor) -> int:
    """
    End a recurring series: every match sharing its series_id stops
    repeating, past and completed ones included. Returns the number of
    matches updated.
    """
    with transaction.atomic():
        match = _locked_match(match_id)
        ensure_creator(match, actor)

        if match.series_id is None and not match.is_recurring:
            raise ValidationError({"detail": "This match is not recurring."})

        scope = Q(pk=match.pk)
        if match.series_id:
            scope |= Q(series_id=match.series_id)
        qs = Match.objects.filter(scope)

        updated = qs.update(recurrence_type=Match.RECURRENCE_NONE, updated_at=timezone.now())

    logger.info(f"Recurrence stopped: match={match_id}, series={match.series_id}, updated={updated}")
    return updated
