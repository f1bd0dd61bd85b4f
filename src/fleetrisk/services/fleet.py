"""Fleet risk service: per-vehicle view assembly on top of the data layer."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import TypeVar

from ..api_logging import log_service_call
from ..data.base import FleetDataRepository
from ..data.errors import FleetDataError
from ..models.fleet import FleetSummary, VehicleRiskView
from ..models.risk import RiskLevel
from ..models.sensor import SensorSeries
from ..models.vehicle import VehicleTelemetry
from ..models.weather import WeatherReading
from .action_intelligence import get_action_intelligence
from .fuel_anomaly import detect_fuel_anomaly
from .risk_engine import calculate_risk, combine_assessment
from .risk_trend import compute_risk_trend
from .service_estimate import service_estimate_for
from .weather_risk import calculate_weather_risk


T = TypeVar("T")


def build_vehicle_view(
    vehicle: VehicleTelemetry,
    now: datetime,
    weather: WeatherReading | None = None,
    sensors: SensorSeries | None = None,
    eco_event_count: int = 0,
) -> VehicleRiskView:
    """Run every scorer for one vehicle and assemble the result.

    Missing inputs are simply left out of the combined score.
    """
    weather_risk = calculate_weather_risk(weather) if weather is not None else None
    fuel = detect_fuel_anomaly(vehicle.id, sensors) if sensors is not None else None

    assessment = combine_assessment(
        calculate_risk(vehicle, now),
        weather=weather_risk,
        fuel=fuel,
        eco_event_count=eco_event_count,
    )
    return VehicleRiskView(
        assessment=assessment,
        trend=compute_risk_trend(assessment),
        action=get_action_intelligence(assessment),
        service=service_estimate_for(vehicle),
        weather=weather_risk,
        fuel=fuel,
    )


def summarize_fleet(views: Iterable[VehicleRiskView]) -> FleetSummary:
    """Count vehicles per risk level."""
    counts = {level: 0 for level in RiskLevel}
    total = 0
    for view in views:
        counts[view.assessment.risk_level] += 1
        total += 1
    return FleetSummary(
        total=total,
        critical=counts[RiskLevel.CRITICAL],
        warning=counts[RiskLevel.WARNING],
        ok=counts[RiskLevel.OK],
    )


def _or_none(fetch: Callable[[], T]) -> T | None:
    try:
        return fetch()
    except FleetDataError:
        return None


class FleetRiskService:
    """Fetches inputs through a repository and evaluates vehicles."""

    def __init__(self, repo: FleetDataRepository, max_workers: int = 4) -> None:
        self._repo = repo
        self._max_workers = max_workers

    def _evaluate(self, vehicle: VehicleTelemetry, now: datetime) -> VehicleRiskView:
        pos = vehicle.position
        weather = _or_none(lambda: self._repo.get_weather(pos.lat, pos.lng))
        sensors = _or_none(lambda: self._repo.get_sensor_series(vehicle.id, now))
        eco_count = _or_none(lambda: self._repo.get_eco_event_count(vehicle.id, now)) or 0
        return build_vehicle_view(vehicle, now, weather=weather, sensors=sensors, eco_event_count=eco_count)

    @log_service_call
    def assess_vehicle(self, vehicle: VehicleTelemetry, now: datetime | None = None) -> VehicleRiskView:
        """Evaluate one vehicle; unavailable weather, sensor or eco data is skipped."""
        return self._evaluate(vehicle, now or datetime.now(timezone.utc))

    @log_service_call
    def assess_group(self, group_code: str, now: datetime | None = None) -> list[VehicleRiskView]:
        """Evaluate every vehicle of a group, in provider order.

        Raises FleetDataError if the vehicle list itself cannot be fetched.
        """
        now = now or datetime.now(timezone.utc)
        vehicles = self._repo.get_vehicles(group_code)
        if self._max_workers <= 1 or len(vehicles) <= 1:
            return [self._evaluate(v, now) for v in vehicles]
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(lambda v: self._evaluate(v, now), vehicles))

    @log_service_call
    def summarize(self, views: list[VehicleRiskView]) -> FleetSummary:
        return summarize_fleet(views)
