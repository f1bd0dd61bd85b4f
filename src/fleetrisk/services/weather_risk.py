"""Weather risk evaluator: independent additive rules capped at a maximum bump."""

from __future__ import annotations

from ..constants import (
    PRECIPITATION_LIGHT_MAX,
    PRECIPITATION_MODERATE_MAX,
    SNOW_IDS,
    TEMPERATURE_FREEZING_BELOW,
    TEMPERATURE_HEAT_ABOVE,
    THUNDERSTORM_IDS,
    WEATHER_MAX_BUMP,
    WEATHER_REASONS,
    WIND_ELEVATED_MIN,
    WIND_STRONG_ABOVE,
)
from ..models.weather import WeatherReading, WeatherRisk


def _precipitation(mm: float) -> tuple[int, str | None]:
    if mm > PRECIPITATION_MODERATE_MAX:
        return 3, "precipitation_heavy"
    if mm > PRECIPITATION_LIGHT_MAX:
        return 2, "precipitation_moderate"
    if mm > 0:
        return 1, "precipitation_light"
    return 0, None


def _wind(speed: float) -> tuple[int, str | None]:
    if speed > WIND_STRONG_ABOVE:
        return 2, "wind_strong"
    if speed >= WIND_ELEVATED_MIN:
        return 1, "wind_elevated"
    return 0, None


def _temperature(celsius: float) -> tuple[int, str | None]:
    if celsius < TEMPERATURE_FREEZING_BELOW:
        return 1, "freezing"
    if celsius > TEMPERATURE_HEAT_ABOVE:
        return 1, "heat"
    return 0, None


def _condition(weather_id: int) -> tuple[int, str | None]:
    if weather_id in THUNDERSTORM_IDS:
        return 2, "thunderstorm"
    if weather_id in SNOW_IDS:
        return 2, "snow"
    return 0, None


def calculate_weather_risk(weather: WeatherReading) -> WeatherRisk:
    """Sum the precipitation, wind, temperature and condition rules, capped at 4."""
    score = 0
    reasons: list[str] = []
    for points, key in (
        _precipitation(weather.precipitation),
        _wind(weather.wind_speed),
        _temperature(weather.temperature),
        _condition(weather.weather_id),
    ):
        score += points
        if key is not None:
            reasons.append(WEATHER_REASONS[key])
    return WeatherRisk(bump=min(WEATHER_MAX_BUMP, score), reasons=tuple(reasons))
