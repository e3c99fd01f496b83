# matches/weather.py
"""
Court weather and glass condensation risk for matches at a known club.

Current conditions are used once the match has started, the nearest
3-hourly forecast entry within 48 hours before that. Results are cached
for an hour per (club, forecast slot).
"""
import logging
from datetime import timedelta
from dataclasses import dataclass, asdict

import requests
from django.conf import settings
from django.core.cache import cache

from .datetime_utils import hours_until

logger = logging.getLogger("padel.matches")

OPENWEATHERMAP_BASE_URL = "https://api.openweathermap.org/data/2.5"
CACHE_TTL_SECONDS = 60 * 60
FORECAST_WINDOW_HOURS = 48
REQUEST_TIMEOUT_SECONDS = 10


class WeatherUnavailable(Exception):
    def __init__(self, message, status_code=404):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class WeatherReport:
    temperature: int
    humidity: int
    wind_speed: float
    cloud_cover: int
    condition: str
    icon: str
    condensation_risk: int
    risk_level: str

    def as_dict(self):
        return asdict(self)


def risk_level(risk: float) -> str:
    if risk < 30:
        return "low"
    if risk < 60:
        return "medium"
    return "high"


def condensation_risk(temperature: float, humidity: float, wind_speed: float, cloud_cover: float):
    """
    Risk (0-100) that dew forms on the court glass.

    A clear sky cools the glass more, wind clears moisture:
    CF = 0.5 + 0.5 * (1 - C/100)
    DP = T - (100 - RH) / 5
    TG = T - CF
    risk = clamp((DP - TG + 1) * 20 - W * 5, 0, 100)
    """
    cooling = 0.5 + 0.5 * (1 - cloud_cover / 100)
    dew_point = temperature - (100 - humidity) / 5
    glass_temp = temperature - cooling
    risk = max(0.0, min(100.0, (dew_point - glass_temp + 1) * 20 - wind_speed * 5))
    return round(risk), risk_level(risk)


def _forecast_slot(match):
    """Match start rounded to the nearest 3-hour forecast step."""
    start = match.date_time.replace(minute=0, second=0, microsecond=0)
    slot = start.replace(hour=0) + timedelta(hours=round(match.date_time.hour / 3) * 3)
    return slot.isoformat()


def _fetch(endpoint: str, club) -> dict:
    try:
        response = requests.get(
            f"{OPENWEATHERMAP_BASE_URL}/{endpoint}",
            params={
                "lat": float(club.latitude),
                "lon": float(club.longitude),
                "units": "metric",
                "appid": settings.OPENWEATHERMAP_API_KEY,
            },
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"OpenWeatherMap {endpoint} request failed for club={club.id}: {e}")
        raise WeatherUnavailable("Failed to fetch weather data", status_code=503)
    return response.json()


def _nearest_entry(entries, match):
    target = match.date_time.timestamp()
    return min(entries, key=lambda entry: abs(entry["dt"] - target))


def get_match_weather(match) -> WeatherReport:
    club = match.club
    if club is None:
        raise WeatherUnavailable("Weather data unavailable for this location")
    if not club.has_coordinates:
        raise WeatherUnavailable("Location coordinates not available")

    cache_key = f"weather:{club.id}:{_forecast_slot(match)}"
    cached = cache.get(cache_key)
    if cached:
        return WeatherReport(**cached)

    if not settings.OPENWEATHERMAP_API_KEY:
        raise WeatherUnavailable("Weather API not configured", status_code=503)

    hours_to_start = hours_until(match.date_time)

    if hours_to_start <= 0:
        data = _fetch("weather", club)
    elif hours_to_start <= FORECAST_WINDOW_HOURS:
        forecast = _fetch("forecast", club)
        entries = forecast.get("list") or []
        if not entries:
            raise WeatherUnavailable("Forecast not available yet")
        data = _nearest_entry(entries, match)
    else:
        raise WeatherUnavailable("Forecast not available yet")

    temperature = data["main"]["temp"]
    humidity = data["main"]["humidity"]
    wind_speed = data["wind"]["speed"]
    clouds = data["clouds"]["all"]
    conditions = data.get("weather") or [{}]

    risk, level = condensation_risk(temperature, humidity, wind_speed, clouds)

    report = WeatherReport(
        temperature=round(temperature),
        humidity=humidity,
        wind_speed=round(wind_speed, 1),
        cloud_cover=clouds,
        condition=conditions[0].get("main", "Unknown"),
        icon=conditions[0].get("icon", "01d"),
        condensation_risk=risk,
        risk_level=level,
    )
    cache.set(cache_key, report.as_dict(), CACHE_TTL_SECONDS)
    return report
