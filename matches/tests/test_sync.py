from unittest import mock

from django.db import DatabaseError, IntegrityError
from django.test import TransactionTestCase
from kombu.exceptions import OperationalError as BrokerUnavailable

from matches import services
from matches.exceptions import MatchFull, MatchCreationFailed
from matches.models import Match, Participant
from matches.tasks import recount_match_task
from matches.sync import (
    ParticipantChange,
    ParticipantCountSynchronizer,
    ParticipantSnapshot,
    synchronizer,
)
from .helpers import make_user, make_match


class ParticipantCountTestCase(TransactionTestCase):
    """Counter behaviour through the real signal + on_commit path."""

    def setUp(self):
        self.creator = make_user("creator")
        self.players = [make_user(f"player{i}") for i in range(4)]

    def joined_rows(self, match):
        return Participant.objects.filter(match=match, status=Participant.STATUS_JOINED).count()

    def stored_count(self, match):
        return Match.objects.values_list("current_players", flat=True).get(pk=match.pk)

    def test_new_match_counts_creator(self):
        match = make_match(self.creator)
        self.assertEqual(match.current_players, 1)
        self.assertEqual(self.stored_count(match), 1)

    def test_count_tracks_join_leave_maybe_and_remove(self):
        match = make_match(self.creator, max_players=6)
        a, b, c, d = self.players

        services.join_match(match.id, a)
        services.join_match(match.id, b)
        services.join_match(match.id, c)
        self.assertEqual(self.stored_count(match), 4)

        services.leave_match(match.id, a)
        self.assertEqual(self.stored_count(match), 3)

        services.set_maybe(match.id, b)
        self.assertEqual(self.stored_count(match), 2, "maybe must not count toward capacity")

        services.remove_participant(match.id, self.creator, c.id)
        self.assertEqual(self.stored_count(match), 1)

        services.join_match(match.id, d)
        services.join_match(match.id, b)
        self.assertEqual(self.stored_count(match), self.joined_rows(match))

    def test_order_independence(self):
        first = make_match(self.creator, max_players=6)
        second = make_match(self.creator, max_players=6)
        a, b, c, _ = self.players

        services.join_match(first.id, a)
        services.join_match(first.id, b)
        services.leave_match(first.id, a)
        services.join_match(first.id, c)

        services.join_match(second.id, c)
        services.join_match(second.id, a)
        services.leave_match(second.id, a)
        services.join_match(second.id, b)

        self.assertEqual(self.stored_count(first), self.stored_count(second))
        self.assertEqual(self.stored_count(first), 3)

    def test_rejoin_reuses_row(self):
        match = make_match(self.creator)
        player = self.players[0]

        original = services.join_match(match.id, player)
        services.leave_match(match.id, player)
        rejoined = services.join_match(match.id, player)

        self.assertEqual(original.pk, rejoined.pk)
        self.assertEqual(Participant.objects.filter(match=match, user=player).count(), 1)
        self.assertGreaterEqual(rejoined.joined_at, original.joined_at)
        self.assertEqual(self.stored_count(match), 2)

    def test_capacity_boundary_rejected_before_any_write(self):
        match = make_match(self.creator, max_players=2)
        a, b, _, _ = self.players

        services.join_match(match.id, a)
        self.assertEqual(self.stored_count(match), 2)

        with mock.patch.object(ParticipantCountSynchronizer, "sync", wraps=synchronizer.sync) as sync:
            with self.assertRaises(MatchFull):
                services.join_match(match.id, b)
            sync.assert_not_called()

        self.assertFalse(Participant.objects.filter(match=match, user=b).exists())
        self.assertEqual(self.stored_count(match), 2)

    def test_maybe_player_cannot_take_a_full_spot_back(self):
        match = make_match(self.creator, max_players=2)
        a, b, _, _ = self.players

        services.join_match(match.id, a)
        services.set_maybe(match.id, a)
        services.join_match(match.id, b)

        with self.assertRaises(MatchFull):
            services.join_match(match.id, a)
        self.assertEqual(
            Participant.objects.get(match=match, user=a).status,
            Participant.STATUS_MAYBE,
        )

    def test_creation_is_atomic(self):
        with mock.patch(
            "matches.services.Participant.objects.create",
            side_effect=IntegrityError("creator insert failed"),
        ):
            with self.assertRaises(MatchCreationFailed):
                make_match(self.creator)

        self.assertEqual(Match.objects.count(), 0, "Match must roll back with its creator row")

    @mock.patch("matches.tasks.recount_match_task.delay")
    def test_counter_write_failure_does_not_fail_join(self, delay):
        match = make_match(self.creator)
        player = self.players[0]

        with mock.patch.object(
            ParticipantCountSynchronizer, "sync", side_effect=DatabaseError("write failed")
        ):
            participant = services.join_match(match.id, player)
        delay.assert_called_once_with(str(match.id))

        self.assertEqual(participant.status, Participant.STATUS_JOINED)
        self.assertEqual(self.stored_count(match), 1, "Counter is stale until repaired")

        report = synchronizer.repair_all()
        self.assertEqual(report.corrected, 1)
        self.assertEqual(self.stored_count(match), 2)

    def test_match_delete_cascades_without_errors(self):
        match = make_match(self.creator)
        services.join_match(match.id, self.players[0])

        services.delete_match(match.id, self.creator)

        self.assertFalse(Match.objects.filter(pk=match.pk).exists())
        self.assertFalse(Participant.objects.filter(match_id=match.pk).exists())


class RecountTestCase(TransactionTestCase):

    def setUp(self):
        self.creator = make_user("creator")
        self.match = make_match(self.creator)

    def test_recount_is_idempotent_and_touches_only_the_counter(self):
        Match.objects.filter(pk=self.match.pk).update(current_players=0)
        before = Match.objects.get(pk=self.match.pk)

        first = synchronizer.sync(self.match.id)
        second = synchronizer.sync(self.match.id)

        self.assertEqual((first.count, first.changed), (1, True))
        self.assertEqual((second.count, second.changed), (1, False))

        after = Match.objects.get(pk=self.match.pk)
        self.assertEqual(after.current_players, 1)
        self.assertEqual(after.updated_at, before.updated_at, "recount must not bump updated_at")

    def test_recount_returns_count(self):
        self.assertEqual(synchronizer.recount(self.match.id), 1)

    def test_delete_change_uses_old_match_id(self):
        other = make_match(self.creator)
        Match.objects.filter(pk=self.match.pk).update(current_players=7)

        change = ParticipantChange(
            kind=ParticipantChange.KIND_DELETE,
            old=ParticipantSnapshot(match_id=self.match.id),
            new=ParticipantSnapshot(match_id=other.id),
        )
        self.assertEqual(change.match_id, self.match.id)

        synchronizer.on_participant_change(change)
        self.assertEqual(Match.objects.get(pk=self.match.pk).current_players, 1)

    @mock.patch("matches.tasks.recount_match_task.delay")
    def test_on_participant_change_swallows_database_errors(self, delay):
        change = ParticipantChange(
            kind=ParticipantChange.KIND_UPDATE,
            new=ParticipantSnapshot(match_id=self.match.id),
        )
        with mock.patch.object(
            ParticipantCountSynchronizer, "sync", side_effect=DatabaseError("boom")
        ):
            synchronizer.on_participant_change(change)  # must not raise

        delay.assert_called_once_with(str(self.match.id))

    @mock.patch("matches.tasks.recount_match_task.delay", side_effect=BrokerUnavailable("no broker"))
    def test_unreachable_broker_leaves_counter_for_repair(self, delay):
        change = ParticipantChange(
            kind=ParticipantChange.KIND_UPDATE,
            new=ParticipantSnapshot(match_id=self.match.id),
        )
        with mock.patch.object(
            ParticipantCountSynchronizer, "sync", side_effect=DatabaseError("boom")
        ):
            synchronizer.on_participant_change(change)

        delay.assert_called_once()

    def test_recount_task_fixes_stale_counter(self):
        Match.objects.filter(pk=self.match.pk).update(current_players=0)

        self.assertEqual(recount_match_task.apply(args=[str(self.match.id)]).get(), 1)
        self.assertEqual(Match.objects.get(pk=self.match.pk).current_players, 1)


class RepairTestCase(TransactionTestCase):

    def setUp(self):
        self.creator = make_user("creator")
        self.player = make_user("player")

    def test_find_drift_and_repair_report(self):
        healthy = make_match(self.creator)
        drifted = make_match(self.creator)
        services.join_match(drifted.id, self.player)

        # queryset.update() bypasses the participant signals
        Participant.objects.filter(match=drifted, user=self.player).update(status=Participant.STATUS_LEFT)

        rows = list(synchronizer.find_drift())
        self.assertEqual([m.id for m in rows], [drifted.id])
        self.assertEqual((rows[0].current_players, rows[0].live_count), (2, 1))

        report = synchronizer.repair_all(sample_size=10)
        self.assertEqual(report.checked, 2)
        self.assertEqual(report.corrected, 1)
        self.assertEqual(len(report.sample), 1)
        self.assertEqual(report.sample[0].match_id, drifted.id)
        self.assertEqual((report.sample[0].previous_count, report.sample[0].corrected_count), (2, 1))
        self.assertEqual(Match.objects.get(pk=healthy.pk).current_players, 1)

        again = synchronizer.repair_all()
        self.assertEqual(again.corrected, 0)
        self.assertEqual(again.sample, [])

    def test_repair_sample_is_bounded(self):
        matches = [make_match(self.creator) for _ in range(3)]
        Match.objects.filter(pk__in=[m.pk for m in matches]).update(current_players=4)

        report = synchronizer.repair_all(sample_size=2)

        self.assertEqual(report.corrected, 3)
        self.assertEqual(len(report.sample), 2)
        self.assertFalse(synchronizer.find_drift().exists())
        self.assertEqual(report.as_dict()["sample"][0]["corrected_count"], 1)
