"""Sensor time-series data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SensorSample(BaseModel):
    """A single (timestamp, value) reading."""

    model_config = ConfigDict(frozen=True)

    t: datetime
    v: float


class SensorChannel(BaseModel):
    """One named channel; samples are kept ascending by time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(validation_alias=AliasChoices("name", "channelName", "Name"))
    samples: tuple[SensorSample, ...] = ()

    @field_validator("samples")
    @classmethod
    def _sort_by_time(cls, samples: tuple[SensorSample, ...]) -> tuple[SensorSample, ...]:
        return tuple(sorted(samples, key=lambda s: s.t))


class SensorSeries(BaseModel):
    """All channels fetched for one vehicle over a recent window."""

    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    channels: tuple[SensorChannel, ...] = ()

    def channel(self, name: str) -> SensorChannel | None:
        """Look up a channel by name, ignoring case."""
        wanted = name.lower()
        for ch in self.channels:
            if ch.name.lower() == wanted:
                return ch
        return None

    def samples(self, name: str) -> tuple[SensorSample, ...]:
        ch = self.channel(name)
        return ch.samples if ch is not None else ()
