"""Normalization of upstream provider payloads into canonical models.

Upstream shapes drift (``Name`` vs ``name``, ``data`` vs ``Data``, optional
``rain``/``snow`` blocks); everything downstream of this module only sees
the canonical models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fleetrisk.models.sensor import SensorChannel, SensorSample, SensorSeries
from fleetrisk.models.weather import WeatherReading


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 value into an aware datetime, or None if unusable.

    Naive timestamps are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_value(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def normalize_samples(points: Any) -> tuple[SensorSample, ...]:
    """Drop invalid points and sort the rest ascending by time."""
    if not isinstance(points, list):
        return ()
    samples: list[SensorSample] = []
    for point in points:
        if not isinstance(point, dict):
            continue
        t = parse_timestamp(point.get("t"))
        v = _parse_value(point.get("v"))
        if t is None or v is None:
            continue
        samples.append(SensorSample(t=t, v=v))
    samples.sort(key=lambda s: s.t)
    return tuple(samples)


def normalize_sensor_payload(vehicle_id: str, raw: Any) -> SensorSeries:
    """Convert the provider's sensor response into a :class:`SensorSeries`.

    Accepts ``[{"Name"|"name": ..., "data"|"Data": [{"t": ..., "v": ...}]}]``.
    Anything that is not a list yields a series without channels.
    """
    if not isinstance(raw, list):
        return SensorSeries(vehicle_id=vehicle_id)

    channels: list[SensorChannel] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        name = item.get("Name") or item.get("name") or ""
        points = item.get("data")
        if points is None:
            points = item.get("Data")
        channels.append(SensorChannel(name=str(name), samples=normalize_samples(points)))
    return SensorSeries(vehicle_id=vehicle_id, channels=tuple(channels))


def normalize_weather(raw: dict[str, Any]) -> WeatherReading:
    """Map a raw current-weather payload onto a :class:`WeatherReading`.

    Precipitation is the last-hour rain accumulation, falling back to
    last-hour snow, then 0.
    """
    main = raw.get("main") or {}
    wind = raw.get("wind") or {}
    conditions = raw.get("weather") or []
    first = conditions[0] if conditions and isinstance(conditions[0], dict) else {}

    precipitation = (raw.get("rain") or {}).get("1h")
    if precipitation is None:
        precipitation = (raw.get("snow") or {}).get("1h")

    return WeatherReading(
        temperature=main.get("temp") or 0.0,
        wind_speed=wind.get("speed") or 0.0,
        weather_main=first.get("main") or "Unknown",
        weather_id=first.get("id") or 0,
        precipitation=precipitation or 0.0,
    )
