"""Public client classes for the fleet telemetry and weather providers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from fleetrisk._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from fleetrisk._window import TimeWindow
from fleetrisk.adapters import normalize_sensor_payload, normalize_weather
from fleetrisk.exceptions import FleetRiskValidationError
from fleetrisk.models.sensor import SensorSeries
from fleetrisk.models.vehicle import VehicleTelemetry
from fleetrisk.models.weather import WeatherReading

DEFAULT_WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


def _validate(model_type: Any, data: Any, name: str) -> Any:
    """Validate provider data against a model type."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except Exception as exc:
        raise FleetRiskValidationError(f"Failed to validate {name} response: {exc}") from exc


def _expect_list(data: Any, name: str) -> list[Any]:
    if not isinstance(data, list):
        raise FleetRiskValidationError(f"Expected a list in {name} response, got {type(data).__name__}")
    return data


def _sensor_path(vehicle_code: str, names: Sequence[str]) -> str:
    return f"/vehicle/{vehicle_code}/sensors/{','.join(names)}"


class FleetClient:
    """Synchronous client for the fleet telemetry provider.

    Usage:
        with FleetClient(base_url, credentials=("user", "secret")) as fleet:
            vehicles = fleet.vehicles("GROUP1")
            series = fleet.sensors(vehicles[0].id, ["FuelActualVolume", "Speed"], TimeWindow.last(90))
    """

    def __init__(
        self,
        base_url: str,
        credentials: tuple[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout, credentials=credentials)

    def __enter__(self) -> FleetClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def groups(self) -> list[dict[str, Any]]:
        """Get the vehicle groups visible to the account."""
        return _expect_list(self._transport.get("/groups"), "groups")

    def vehicles(self, group_code: str) -> list[VehicleTelemetry]:
        """Get the latest telemetry of every vehicle in a group."""
        data = _expect_list(self._transport.get(f"/vehicles/group/{group_code}"), "vehicles")
        return _validate(list[VehicleTelemetry], data, "vehicles")

    def vehicle(self, vehicle_code: str) -> VehicleTelemetry:
        """Get the latest telemetry of one vehicle."""
        return _validate(VehicleTelemetry, self._transport.get(f"/vehicle/{vehicle_code}"), "vehicle")

    def eco_driving_events(self, vehicle_code: str, window: TimeWindow) -> list[dict[str, Any]]:
        """Get eco-driving events of one vehicle inside *window*."""
        data = self._transport.get(f"/vehicle/{vehicle_code}/eco-driving-events", window.to_params())
        return _expect_list(data, "eco-driving-events")

    def sensors(self, vehicle_code: str, names: Sequence[str], window: TimeWindow) -> SensorSeries:
        """Get normalized sensor channels of one vehicle inside *window*."""
        data = self._transport.get(_sensor_path(vehicle_code, names), window.to_params())
        return normalize_sensor_payload(vehicle_code, data)


class AsyncFleetClient:
    """Asynchronous client for the fleet telemetry provider.

    Usage:
        async with AsyncFleetClient(base_url, credentials=("user", "secret")) as fleet:
            vehicles = await fleet.vehicles("GROUP1")
    """

    def __init__(
        self,
        base_url: str,
        credentials: tuple[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, credentials=credentials)

    async def __aenter__(self) -> AsyncFleetClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def groups(self) -> list[dict[str, Any]]:
        return _expect_list(await self._transport.get("/groups"), "groups")

    async def vehicles(self, group_code: str) -> list[VehicleTelemetry]:
        data = _expect_list(await self._transport.get(f"/vehicles/group/{group_code}"), "vehicles")
        return _validate(list[VehicleTelemetry], data, "vehicles")

    async def vehicle(self, vehicle_code: str) -> VehicleTelemetry:
        return _validate(VehicleTelemetry, await self._transport.get(f"/vehicle/{vehicle_code}"), "vehicle")

    async def eco_driving_events(self, vehicle_code: str, window: TimeWindow) -> list[dict[str, Any]]:
        data = await self._transport.get(f"/vehicle/{vehicle_code}/eco-driving-events", window.to_params())
        return _expect_list(data, "eco-driving-events")

    async def sensors(self, vehicle_code: str, names: Sequence[str], window: TimeWindow) -> SensorSeries:
        data = await self._transport.get(_sensor_path(vehicle_code, names), window.to_params())
        return normalize_sensor_payload(vehicle_code, data)


class WeatherClient:
    """Synchronous client for the current-weather provider (metric units)."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_WEATHER_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def current(self, lat: float, lng: float) -> WeatherReading:
        """Get normalized current weather at a coordinate."""
        params = [
            ("lat", str(lat)),
            ("lon", str(lng)),
            ("units", "metric"),
            ("appid", self._api_key),
        ]
        data = self._transport.get("/weather", params)
        if not isinstance(data, dict):
            raise FleetRiskValidationError(f"Expected an object in weather response, got {type(data).__name__}")
        return normalize_weather(data)
