"""Service interval tracking from a real or deterministically mocked odometer."""

from __future__ import annotations

import math

from ..constants import (
    MOCK_ODOMETER_MIN,
    MOCK_ODOMETER_RANGE,
    SERVICE_CRITICAL_KM,
    SERVICE_INTERVAL_MIN,
    SERVICE_INTERVAL_SPREAD,
    SERVICE_WARNING_KM,
)
from ..models.service import ServiceEstimate, ServiceStatus
from ..models.vehicle import VehicleTelemetry


def stable_hash(text: str) -> int:
    """Non-negative 32-bit string hash that is stable across processes."""
    h = 0
    for char in text:
        h = (31 * h + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def service_status(remaining_km: float) -> ServiceStatus:
    if remaining_km <= SERVICE_CRITICAL_KM:
        return ServiceStatus.CRITICAL
    if remaining_km <= SERVICE_WARNING_KM:
        return ServiceStatus.WARNING
    return ServiceStatus.OK


def progress_percent(odometer: float, last_service_at: float, interval: int) -> int:
    """Share of the current interval already driven, 0-100."""
    if interval <= 0:
        return 0
    used = (odometer - last_service_at) / interval
    return min(100, max(0, round(used * 100)))


def interval_for_odometer(odometer: float) -> int:
    return SERVICE_INTERVAL_MIN + abs(math.floor(odometer)) % SERVICE_INTERVAL_SPREAD


def _estimate(odometer: float, interval: int, last_service_at: float, *, mocked: bool) -> ServiceEstimate:
    next_service_at = last_service_at + interval
    remaining_km = next_service_at - odometer
    return ServiceEstimate(
        odometer=odometer,
        service_interval=interval,
        last_service_at=last_service_at,
        next_service_at=next_service_at,
        remaining_km=remaining_km,
        status=service_status(remaining_km),
        progress_percent=progress_percent(odometer, last_service_at, interval),
        mocked=mocked,
    )


def estimate_service(odometer: float, interval: int | None = None) -> ServiceEstimate:
    """Estimate service milestones for a real odometer reading (km).

    The interval defaults to one seeded from the odometer itself.
    """
    if interval is None:
        interval = interval_for_odometer(odometer)
    last_service_at = odometer - (odometer % interval) if interval > 0 else odometer
    return _estimate(odometer, interval, last_service_at, mocked=False)


def mock_service_estimate(vehicle_id: str) -> ServiceEstimate:
    """Deterministic stand-in for vehicles that report no odometer."""
    interval = SERVICE_INTERVAL_MIN + stable_hash(vehicle_id) % SERVICE_INTERVAL_SPREAD
    since_last = stable_hash(vehicle_id + "_progress") % interval
    odometer = MOCK_ODOMETER_MIN + stable_hash(vehicle_id + "_odo") % (MOCK_ODOMETER_RANGE + 1)
    return _estimate(float(odometer), interval, float(odometer - since_last), mocked=True)


def service_estimate_for(vehicle: VehicleTelemetry) -> ServiceEstimate:
    """Use the real odometer when the vehicle reports one, else the mock."""
    if vehicle.odometer is not None:
        return estimate_service(vehicle.odometer)
    return mock_service_estimate(vehicle.id)
