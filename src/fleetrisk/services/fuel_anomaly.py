"""Fuel anomaly detection from the two most recent fuel-level samples.

A large drop over a short interval while the vehicle is not moving looks
like a leak or siphoning; ordinary consumption while driving does not.
"""

from __future__ import annotations

from ..constants import (
    FUEL_CHANNEL,
    FUEL_DROP_HIGH_ABOVE,
    FUEL_DROP_LOW_MIN,
    FUEL_HIGH_MAX_DURATION_MINUTES,
    FUEL_HIGH_RISK_IMPACT,
    FUEL_LOW_RISK_IMPACT,
    FUEL_REASON_HIGH,
    FUEL_REASON_LOW,
    SIMULATED_DURATION_MINUTES,
    SPEED_CHANNEL,
    STATIONARY_SPEED_BELOW,
)
from ..models.fuel import FuelAnomalySeverity, FuelAnomalyStatus, FuelAnomalyVerdict
from ..models.sensor import SensorSample, SensorSeries


def nearest_sample(samples: tuple[SensorSample, ...], target: SensorSample) -> SensorSample | None:
    """Return the sample closest in time to *target*; earlier sample wins ties."""
    if not samples:
        return None
    return min(samples, key=lambda s: abs((s.t - target.t).total_seconds()))


def _classify(
    vehicle_id: str,
    fuel_drop: float,
    duration_minutes: float,
    is_stationary: bool,
) -> FuelAnomalyVerdict:
    if is_stationary and fuel_drop > FUEL_DROP_HIGH_ABOVE and duration_minutes <= FUEL_HIGH_MAX_DURATION_MINUTES:
        return FuelAnomalyVerdict(
            vehicle_id=vehicle_id,
            status=FuelAnomalyStatus.ANOMALY,
            severity=FuelAnomalySeverity.HIGH,
            reason=FUEL_REASON_HIGH,
            fuel_drop=fuel_drop,
            duration_minutes=duration_minutes,
            risk_impact=FUEL_HIGH_RISK_IMPACT,
        )
    if is_stationary and FUEL_DROP_LOW_MIN <= fuel_drop <= FUEL_DROP_HIGH_ABOVE:
        return FuelAnomalyVerdict(
            vehicle_id=vehicle_id,
            status=FuelAnomalyStatus.ANOMALY,
            severity=FuelAnomalySeverity.LOW,
            reason=FUEL_REASON_LOW,
            fuel_drop=fuel_drop,
            duration_minutes=duration_minutes,
            risk_impact=FUEL_LOW_RISK_IMPACT,
        )
    return FuelAnomalyVerdict(vehicle_id=vehicle_id, status=FuelAnomalyStatus.NORMAL)


def detect_fuel_anomaly(vehicle_id: str, series: SensorSeries) -> FuelAnomalyVerdict:
    """Classify the latest fuel-level change of one vehicle.

    *series* is expected to hold the ``FuelActualVolume`` and ``Speed``
    channels over the trailing fuel window. Channels keep their samples
    sorted by time, so the two latest fuel readings are the last two.
    """
    fuel = series.samples(FUEL_CHANNEL)
    if len(fuel) < 2:
        return FuelAnomalyVerdict(vehicle_id=vehicle_id, status=FuelAnomalyStatus.INSUFFICIENT_DATA)

    prev, curr = fuel[-2], fuel[-1]
    fuel_drop = round(prev.v - curr.v, 2)
    if fuel_drop <= 0:
        # refuel or sensor noise
        return FuelAnomalyVerdict(vehicle_id=vehicle_id, status=FuelAnomalyStatus.NORMAL)

    duration_minutes = round((curr.t - prev.t).total_seconds() / 60, 1)
    if duration_minutes <= 0:
        return FuelAnomalyVerdict(vehicle_id=vehicle_id, status=FuelAnomalyStatus.INSUFFICIENT_DATA)

    closest = nearest_sample(series.samples(SPEED_CHANNEL), curr)
    is_stationary = closest is not None and closest.v < STATIONARY_SPEED_BELOW

    return _classify(vehicle_id, fuel_drop, duration_minutes, is_stationary)


def simulate_fuel_anomaly(
    fuel_drop: float,
    duration_minutes: float = SIMULATED_DURATION_MINUTES,
    vehicle_id: str = "",
) -> FuelAnomalyVerdict:
    """Classify a synthetic drop as if the vehicle were standing still.

    For demos and tests only; skips the sample-count checks of
    :func:`detect_fuel_anomaly`.
    """
    return _classify(vehicle_id, round(fuel_drop, 2), round(duration_minutes, 1), is_stationary=True)
