# matches/sync.py
"""
Participant count synchronization.

Match.current_players is a cached copy of the number of `joined`
participants. It is written only from here:

- `recount` recomputes one match from the live participant rows.
- `on_participant_change` is the post-commit hook fired for every
  participant insert/update/delete (wired in matches/signals.py).
- `repair_all` sweeps every match whose counter drifted, for writes that
  bypassed the hook (queryset.update(), raw SQL, failed recounts).
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.db import DatabaseError
from django.db.models import Count, F, Q
from kombu.exceptions import OperationalError as BrokerUnavailable

from .models import Match, Participant

logger = logging.getLogger("padel.matches")


@dataclass(frozen=True)
class ParticipantSnapshot:
    match_id: object
    user_id: Optional[int] = None
    status: Optional[str] = None

    @classmethod
    def of(cls, participant):
        return cls(
            match_id=participant.match_id,
            user_id=participant.user_id,
            status=participant.status,
        )


@dataclass(frozen=True)
class ParticipantChange:
    """A committed participant mutation. `old` is set on delete, `new` otherwise."""
    KIND_INSERT = "insert"
    KIND_UPDATE = "update"
    KIND_DELETE = "delete"

    kind: str
    new: Optional[ParticipantSnapshot] = None
    old: Optional[ParticipantSnapshot] = None

    @property
    def match_id(self):
        if self.kind == self.KIND_DELETE:
            return self.old.match_id
        return self.new.match_id


@dataclass(frozen=True)
class RecountResult:
    match_id: object
    count: int
    changed: bool


@dataclass(frozen=True)
class DriftRecord:
    match_id: object
    previous_count: int
    corrected_count: int

    def as_dict(self):
        return {
            "match_id": str(self.match_id),
            "previous_count": self.previous_count,
            "corrected_count": self.corrected_count,
        }


@dataclass
class RepairReport:
    checked: int = 0
    corrected: int = 0
    sample: List[DriftRecord] = field(default_factory=list)

    def as_dict(self):
        return {
            "checked": self.checked,
            "corrected": self.corrected,
            "sample": [record.as_dict() for record in self.sample],
        }


def joined_count(match_id) -> int:
    return Participant.objects.filter(
        match_id=match_id,
        status=Participant.STATUS_JOINED,
    ).count()


class ParticipantCountSynchronizer:

    def sync(self, match_id) -> RecountResult:
        """
        Count joined participants and store the count on the match.

        Only current_players is written (updated_at is left alone) and the
        UPDATE is skipped at the database when the stored value already
        matches, so a repeated call with unchanged data writes nothing.
        """
        count = joined_count(match_id)
        rows = (
            Match.objects
            .filter(pk=match_id)
            .exclude(current_players=count)
            .update(current_players=count)
        )
        return RecountResult(match_id=match_id, count=count, changed=bool(rows))

    def recount(self, match_id) -> int:
        return self.sync(match_id).count

    def on_participant_change(self, change: ParticipantChange) -> None:
        """
        Post-commit hook for participant mutations.

        The participant row is already durable when this runs. A failed
        counter write is never propagated to the caller: it is logged and
        handed to recount_match_task, which retries out of band.
        repair_all remains the backstop if the retries also fail.
        """
        match_id = change.match_id
        try:
            result = self.sync(match_id)
        except DatabaseError as e:
            logger.warning(
                f"Participant count write failed: match={match_id}, change={change.kind}. "
                f"Queued out-of-band recount. Error: {e}"
            )
            self.schedule_recount(match_id)
            return

        if result.changed:
            logger.info(
                f"Participant count synced: match={match_id}, change={change.kind}, "
                f"current_players={result.count}"
            )

    def schedule_recount(self, match_id) -> None:
        from .tasks import recount_match_task

        try:
            recount_match_task.delay(str(match_id))
        except BrokerUnavailable as e:
            logger.warning(
                f"Could not queue recount for match={match_id}, left for repair_all: {e}"
            )

    def find_drift(self):
        """
        Matches whose cached counter differs from the live joined count.
        Each row carries `current_players` and `live_count`.
        """
        return (
            Match.objects
            .annotate(
                live_count=Count(
                    "participants",
                    filter=Q(participants__status=Participant.STATUS_JOINED),
                )
            )
            .exclude(current_players=F("live_count"))
            .order_by("date_time")
        )

    def repair_all(self, sample_size: int = 50) -> RepairReport:
        """
        Recompute every drifted counter from the live participant rows.

        Each match is fixed with the same single-column recount the hook
        uses, so it is safe to run next to live traffic: a concurrent
        recount converges on the same value.
        """
        report = RepairReport(checked=Match.objects.count())

        drifted = list(self.find_drift().values_list("id", "current_players"))
        for match_id, previous in drifted:
            try:
                result = self.sync(match_id)
            except DatabaseError as e:
                logger.warning(f"Counter repair failed for match={match_id}: {e}")
                continue

            if not result.changed:
                # Fixed by a concurrent recount in the meantime
                continue

            report.corrected += 1
            if len(report.sample) < sample_size:
                report.sample.append(DriftRecord(match_id, previous, result.count))

        if report.corrected:
            logger.warning(
                f"Participant count drift repaired: checked={report.checked}, "
                f"corrected={report.corrected}"
            )
        else:
            logger.info(f"Participant counts consistent: checked={report.checked}")

        return report


synchronizer = ParticipantCountSynchronizer()
