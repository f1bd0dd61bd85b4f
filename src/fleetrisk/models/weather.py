"""Weather data models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class WeatherReading(BaseModel):
    """Normalized current weather at one coordinate (metric units)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: float = 0.0
    wind_speed: float = Field(default=0.0, validation_alias=AliasChoices("wind_speed", "windSpeed"))
    weather_main: str = Field(default="Unknown", validation_alias=AliasChoices("weather_main", "weatherMain"))
    weather_id: int = Field(default=0, validation_alias=AliasChoices("weather_id", "weatherId"))
    precipitation: float = 0.0


class WeatherRisk(BaseModel):
    """Bounded risk bump derived from a weather reading."""

    model_config = ConfigDict(frozen=True)

    bump: int = 0
    reasons: tuple[str, ...] = ()
