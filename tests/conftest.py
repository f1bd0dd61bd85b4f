"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from fleetrisk.adapters import normalize_sensor_payload
from fleetrisk.config import Settings
from fleetrisk.models.risk import RiskAssessment, RiskReason, RiskReasonKind
from fleetrisk.models.sensor import SensorSeries
from fleetrisk.models.vehicle import VehicleTelemetry

GPS_BASE_URL = "https://gps.example.com/api/v1"
WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"

NOW = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)


SAMPLE_VEHICLE = {
    "Code": "V-001",
    "Name": "Dodávka Praha",
    "SPZ": "1AB 2345",
    "Speed": 72,
    "BatteryPercentage": 88,
    "Odometer": 48250.4,
    "LastPosition": {"Latitude": "50.0755", "Longitude": "14.4378"},
    "LastPositionTimestamp": "2026-10-19T07:55:00Z",
}

SAMPLE_WEATHER_RAW = {
    "coord": {"lon": 14.4378, "lat": 50.0755},
    "weather": [{"id": 501, "main": "Rain", "description": "moderate rain"}],
    "main": {"temp": 6.4, "humidity": 87},
    "wind": {"speed": 9.3, "deg": 240},
    "rain": {"1h": 3.2},
    "name": "Prague",
}

SAMPLE_SENSORS_RAW = [
    {
        "Name": "FuelActualVolume",
        "data": [
            {"t": "2026-10-19T07:50:00Z", "v": 50.0},
            {"t": "2026-10-19T07:40:00Z", "v": 51.2},
            {"t": "2026-10-19T07:55:00Z", "v": 44.0},
        ],
    },
    {
        "name": "speed",
        "Data": [
            {"t": "2026-10-19T07:50:00Z", "v": 0},
            {"t": "2026-10-19T07:55:00Z", "v": 0},
        ],
    },
]


def _make_vehicle(
    speed: float = 0.0,
    minutes_ago: float | None = 5,
    vehicle_id: str = "V-001",
    odometer: float | None = None,
    timestamp: str | None = None,
) -> VehicleTelemetry:
    if timestamp is None and minutes_ago is not None:
        timestamp = (NOW - timedelta(minutes=minutes_ago)).isoformat()
    return VehicleTelemetry(
        id=vehicle_id,
        name=f"Vehicle {vehicle_id}",
        speed=speed,
        last_position_time=timestamp,
        odometer=odometer,
    )


def _make_series(
    fuel: list[tuple[float, float]],
    speed: list[tuple[float, float]] | None = None,
    vehicle_id: str = "V-001",
) -> SensorSeries:
    """Build a series from (minutes before NOW, value) pairs."""

    def points(pairs: list[tuple[float, float]]) -> list[dict]:
        return [{"t": (NOW - timedelta(minutes=m)).isoformat(), "v": v} for m, v in pairs]

    raw = [{"Name": "FuelActualVolume", "data": points(fuel)}]
    if speed is not None:
        raw.append({"Name": "Speed", "data": points(speed)})
    return normalize_sensor_payload(vehicle_id, raw)


def _make_assessment(
    score: int,
    reasons: list[tuple[RiskReasonKind, float] | tuple[RiskReasonKind, float, int]] | None = None,
) -> RiskAssessment:
    built = []
    for entry in reasons or []:
        kind, value, *rest = entry
        built.append(RiskReason(type=kind, value=value, count=rest[0] if rest else None))
    return RiskAssessment(
        vehicle_id="V-001",
        risk_score=score,
        reasons=tuple(built),
        calculated_at=NOW,
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_vehicle():
    """Factory fixture for telemetry snapshots relative to NOW."""
    return _make_vehicle


@pytest.fixture
def make_series():
    """Factory fixture for sensor series relative to NOW."""
    return _make_series


@pytest.fixture
def make_assessment():
    """Factory fixture for assessments with hand-picked reasons."""
    return _make_assessment


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gps_api_base=GPS_BASE_URL,
        gps_api_user="api_user",
        gps_api_password="secret",
        openweather_key="weather-key",
        openweather_base=WEATHER_BASE_URL,
        _env_file=None,
    )


@pytest.fixture(autouse=True)
def call_log(tmp_path, monkeypatch) -> Iterator[Path]:
    """Point the call log at tmp_path; yields the log file path."""
    import fleetrisk.api_logging as mod

    log_file = tmp_path / "logs" / "api_calls.log"
    monkeypatch.setattr(mod, "_LOG_DIR", str(log_file.parent))
    monkeypatch.setattr(mod, "_LOG_FILE", str(log_file))
    monkeypatch.setattr(mod, "_logger", None)
    yield log_file
    named_logger = logging.getLogger(mod.LOGGER_NAME)
    for h in named_logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            named_logger.removeHandler(h)
