from datetime import timedelta
from unittest import mock

from django.core.cache import cache
from django.test import TestCase, override_settings
from django.utils import timezone

from clubs.models import Club
from matches.datetime_utils import format_duration, format_match_datetime
from matches.models import Match
from matches.weather import (
    WeatherUnavailable,
    condensation_risk,
    get_match_weather,
    risk_level,
)
from .helpers import make_user


def owm_entry(dt, temp=12.0, humidity=100, wind=0.0, clouds=0):
    return {
        "dt": int(dt.timestamp()),
        "main": {"temp": temp, "humidity": humidity},
        "wind": {"speed": wind},
        "clouds": {"all": clouds},
        "weather": [{"main": "Clear", "icon": "01n"}],
    }


class FormattingTestCase(TestCase):

    def test_format_duration(self):
        self.assertEqual(format_duration(45), "45mins")
        self.assertEqual(format_duration(60), "1h")
        self.assertEqual(format_duration(90), "1h 30m")
        self.assertEqual(format_duration(120), "2h")
        self.assertEqual(format_duration(None), "1h 30m")
        self.assertEqual(format_duration(0), "1h 30m")
        self.assertEqual(format_duration("abc"), "1h 30m")

    def test_format_match_datetime(self):
        dt = timezone.now()
        self.assertTrue(format_match_datetime(dt, 60).endswith("(1h)"))


class CondensationRiskTestCase(TestCase):

    def test_formula(self):
        self.assertEqual(condensation_risk(10, 95, 0, 0), (20, "low"))
        self.assertEqual(condensation_risk(10, 100, 0, 0), (40, "medium"))
        self.assertEqual(condensation_risk(10, 50, 3, 50), (0, "low"))

    def test_levels(self):
        self.assertEqual(risk_level(29.9), "low")
        self.assertEqual(risk_level(30), "medium")
        self.assertEqual(risk_level(60), "high")


@override_settings(OPENWEATHERMAP_API_KEY="test-key")
class MatchWeatherTestCase(TestCase):

    def setUp(self):
        cache.clear()
        self.creator = make_user("creator")
        self.club = Club.objects.create(
            name="The Campus",
            slug="the-campus",
            latitude="37.0352",
            longitude="-8.0245",
        )

    def make_match(self, hours_ahead, club=None):
        return Match.objects.create(
            creator=self.creator,
            club=club or self.club,
            date_time=timezone.now() + timedelta(hours=hours_ahead),
            location=self.club.name,
        )

    @mock.patch("matches.weather.requests.get")
    def test_forecast_uses_nearest_entry_and_caches(self, mock_get):
        match = self.make_match(hours_ahead=10)
        far = owm_entry(match.date_time + timedelta(hours=9), humidity=40, wind=5)
        near = owm_entry(match.date_time + timedelta(minutes=30), temp=12.4, humidity=100)
        mock_get.return_value.json.return_value = {"list": [far, near]}
        mock_get.return_value.raise_for_status.return_value = None

        report = get_match_weather(match)

        self.assertEqual(report.temperature, 12)
        self.assertEqual(report.humidity, 100)
        self.assertEqual(report.condensation_risk, 40)
        self.assertEqual(report.risk_level, "medium")
        self.assertIn("/forecast", mock_get.call_args[0][0])

        get_match_weather(match)
        self.assertEqual(mock_get.call_count, 1, "Second lookup must come from cache")

    @mock.patch("matches.weather.requests.get")
    def test_started_match_uses_current_weather(self, mock_get):
        match = self.make_match(hours_ahead=-0.5)
        mock_get.return_value.json.return_value = owm_entry(timezone.now(), humidity=95)
        mock_get.return_value.raise_for_status.return_value = None

        report = get_match_weather(match)

        self.assertIn("/weather", mock_get.call_args[0][0])
        self.assertEqual(report.condensation_risk, 20)

    @mock.patch("matches.weather.requests.get")
    def test_beyond_forecast_window(self, mock_get):
        match = self.make_match(hours_ahead=72)
        with self.assertRaises(WeatherUnavailable) as ctx:
            get_match_weather(match)
        self.assertEqual(ctx.exception.status_code, 404)
        mock_get.assert_not_called()

    def test_club_without_coordinates(self):
        club = Club.objects.create(name="No Coords", slug="no-coords")
        match = self.make_match(hours_ahead=5, club=club)
        with self.assertRaises(WeatherUnavailable):
            get_match_weather(match)
