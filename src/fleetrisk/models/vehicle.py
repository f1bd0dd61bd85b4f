"""Vehicle telemetry data model."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Last known GPS position."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float = Field(default=0.0, validation_alias=AliasChoices("lat", "Latitude"))
    lng: float = Field(default=0.0, validation_alias=AliasChoices("lng", "Longitude"))


class VehicleTelemetry(BaseModel):
    """One poll of a vehicle as reported by the fleet provider.

    ``last_position_time`` stays a raw string; the risk engine decides how
    to treat a value that does not parse.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "Code"))
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    plate: str | None = Field(default=None, validation_alias=AliasChoices("plate", "SPZ"))
    speed: float = Field(default=0.0, validation_alias=AliasChoices("speed", "Speed"))
    last_position_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("last_position_time", "lastPositionTime", "LastPositionTimestamp"),
    )
    position: Position = Field(
        default_factory=Position,
        validation_alias=AliasChoices("position", "LastPosition"),
    )
    odometer: float | None = Field(default=None, validation_alias=AliasChoices("odometer", "Odometer"))
