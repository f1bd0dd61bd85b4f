"""Abstract base repository for fleet data access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..models.sensor import SensorSeries
from ..models.vehicle import VehicleTelemetry
from ..models.weather import WeatherReading


class FleetDataRepository(ABC):
    """Provider-agnostic interface for the inputs of a risk evaluation."""

    @abstractmethod
    def get_vehicles(self, group_code: str) -> list[VehicleTelemetry]: ...

    @abstractmethod
    def get_sensor_series(self, vehicle_id: str, now: datetime | None = None) -> SensorSeries: ...

    @abstractmethod
    def get_weather(self, lat: float, lng: float) -> WeatherReading: ...

    @abstractmethod
    def get_eco_event_count(self, vehicle_id: str, now: datetime | None = None) -> int: ...
