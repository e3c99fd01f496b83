import uuid
from datetime import timedelta
from unittest import mock

from django.test import SimpleTestCase, TransactionTestCase
from django.utils import timezone

from matches.models import Match, Participant
from matches.recurring import create_recurring_matches, next_occurrence
from .helpers import make_user, make_match


class NextOccurrenceTestCase(SimpleTestCase):

    def test_intervals(self):
        start = timezone.now() - timedelta(hours=1)
        self.assertEqual(next_occurrence(start, Match.RECURRENCE_WEEKLY), start + timedelta(days=7))
        self.assertEqual(next_occurrence(start, Match.RECURRENCE_BIWEEKLY), start + timedelta(days=14))
        self.assertIsNone(next_occurrence(start, Match.RECURRENCE_NONE))

    def test_missed_slots_are_skipped(self):
        start = timezone.now() - timedelta(days=20)
        nxt = next_occurrence(start, Match.RECURRENCE_WEEKLY, after=timezone.now())
        self.assertEqual(nxt, start + timedelta(days=21))


class RecurringJobTestCase(TransactionTestCase):

    def setUp(self):
        self.creator = make_user("creator")
        self.player = make_user("player")

    def past_series_match(self, recurrence=Match.RECURRENCE_WEEKLY, end_date=None, hours_ago=2):
        return make_match(
            self.creator,
            date_time=timezone.now() - timedelta(hours=hours_ago),
            recurrence_type=recurrence,
            recurrence_end_date=end_date,
            series_id=uuid.uuid4(),
            max_players=6,
            is_public=True,
        )

    def test_creates_next_occurrence_with_creator_joined(self):
        latest = self.past_series_match()

        results = create_recurring_matches()

        self.assertEqual(results, {"processed": 1, "created": 1, "skipped": 0, "errors": 0})
        new = Match.objects.filter(series_id=latest.series_id).exclude(pk=latest.pk).get()
        self.assertEqual(new.date_time, latest.date_time + timedelta(days=7))
        self.assertEqual(new.max_players, 6)
        self.assertTrue(new.is_public)
        self.assertEqual(new.current_players, 1)
        self.assertTrue(
            Participant.objects.filter(match=new, user=self.creator, status=Participant.STATUS_JOINED).exists()
        )

    def test_players_are_not_copied(self):
        from matches import services

        latest = self.past_series_match()
        services.join_match(latest.id, self.player)

        create_recurring_matches()

        new = Match.objects.filter(series_id=latest.series_id).exclude(pk=latest.pk).get()
        self.assertEqual(new.current_players, 1)

    def test_second_run_skips_series_with_future_match(self):
        self.past_series_match(recurrence=Match.RECURRENCE_BIWEEKLY)
        create_recurring_matches()

        results = create_recurring_matches()
        self.assertEqual(results["created"], 0)
        self.assertEqual(results["skipped"], 1)

    def test_end_date_stops_series(self):
        self.past_series_match(end_date=timezone.now() - timedelta(minutes=30))
        self.past_series_match(end_date=timezone.now() + timedelta(days=3))

        results = create_recurring_matches()

        self.assertEqual(results["processed"], 2)
        self.assertEqual(results["created"], 0)
        self.assertEqual(results["skipped"], 2)

    def test_non_recurring_matches_are_ignored(self):
        make_match(self.creator, date_time=timezone.now() - timedelta(hours=3))

        results = create_recurring_matches()
        self.assertEqual(results["processed"], 0)

    def test_stopped_series_is_not_restarted(self):
        from matches import services

        first = self.past_series_match(hours_ago=24)
        create_recurring_matches()
        upcoming = Match.objects.filter(series_id=first.series_id).exclude(pk=first.pk).get()

        Match.objects.filter(pk=first.pk).update(status=Match.STATUS_COMPLETED)
        services.stop_recurring(upcoming.id, self.creator)
        self.assertFalse(
            Match.objects.filter(series_id=first.series_id)
            .exclude(recurrence_type=Match.RECURRENCE_NONE)
            .exists()
        )

        later = upcoming.date_time + timedelta(hours=2)
        with mock.patch("matches.recurring.now", return_value=later):
            results = create_recurring_matches()

        self.assertEqual(results["created"], 0)
        self.assertEqual(Match.objects.filter(series_id=first.series_id).count(), 2)
