"""Repository backed by the GPS fleet provider and the weather provider."""

from __future__ import annotations

from datetime import datetime

from ..api_logging import log_api_call, log_cache_lookup
from ..cache import TTLCache
from ..client import FleetClient, WeatherClient
from ..config import Settings
from ..constants import ECO_WINDOW_MINUTES, FUEL_CHANNEL, SPEED_CHANNEL
from .._window import TimeWindow
from ..exceptions import FleetRiskError
from ..models.sensor import SensorSeries
from ..models.vehicle import VehicleTelemetry
from ..models.weather import WeatherReading
from .base import FleetDataRepository
from .errors import FleetDataError


def weather_cache_key(lat: float, lng: float) -> str:
    return f"{lat}_{lng}"


class GpsFleetRepository(FleetDataRepository):
    """Fetches telemetry, sensors and eco events from the GPS provider.

    Weather readings are cached per coordinate for ``settings.weather_cache_ttl``
    seconds.
    """

    def __init__(
        self,
        settings: Settings,
        weather_cache: TTLCache[WeatherReading] | None = None,
    ) -> None:
        settings.require_gps_credentials()
        self._settings = settings
        self._weather_cache = weather_cache if weather_cache is not None else TTLCache(settings.weather_cache_ttl)

    def _fleet_client(self) -> FleetClient:
        return FleetClient(
            self._settings.gps_api_base,
            credentials=self._settings.gps_credentials,
            timeout=self._settings.http_timeout,
        )

    @log_api_call
    def get_vehicles(self, group_code: str) -> list[VehicleTelemetry]:
        try:
            with self._fleet_client() as fleet:
                return fleet.vehicles(group_code)
        except FleetRiskError as exc:
            raise FleetDataError(f"Failed to fetch vehicles for group {group_code}: {exc}") from exc

    @log_api_call
    def get_sensor_series(self, vehicle_id: str, now: datetime | None = None) -> SensorSeries:
        window = TimeWindow.last(self._settings.fuel_window_minutes, now)
        try:
            with self._fleet_client() as fleet:
                return fleet.sensors(vehicle_id, [FUEL_CHANNEL, SPEED_CHANNEL], window)
        except FleetRiskError as exc:
            raise FleetDataError(f"Failed to fetch sensors for vehicle {vehicle_id}: {exc}") from exc

    @log_api_call
    def get_weather(self, lat: float, lng: float) -> WeatherReading:
        key = weather_cache_key(lat, lng)
        cached = self._weather_cache.get(key)
        log_cache_lookup("weather", key, hit=cached is not None)
        if cached is not None:
            return cached

        if not self._settings.openweather_key:
            raise FleetDataError("OPENWEATHER_KEY not configured")
        try:
            with WeatherClient(
                self._settings.openweather_key,
                base_url=self._settings.openweather_base,
                timeout=self._settings.http_timeout,
            ) as weather:
                reading = weather.current(lat, lng)
        except FleetRiskError as exc:
            raise FleetDataError(f"Failed to fetch weather for {key}: {exc}") from exc

        self._weather_cache.set(key, reading)
        return reading

    @log_api_call
    def get_eco_event_count(self, vehicle_id: str, now: datetime | None = None) -> int:
        window = TimeWindow.last(ECO_WINDOW_MINUTES, now)
        try:
            with self._fleet_client() as fleet:
                return len(fleet.eco_driving_events(vehicle_id, window))
        except FleetRiskError as exc:
            raise FleetDataError(f"Failed to fetch eco events for vehicle {vehicle_id}: {exc}") from exc
