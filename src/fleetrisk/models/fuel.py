"""Fuel anomaly verdict model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FuelAnomalyStatus(str, Enum):
    NORMAL = "normal"
    INSUFFICIENT_DATA = "insufficient_data"
    ANOMALY = "anomaly"


class FuelAnomalySeverity(str, Enum):
    LOW = "low"
    HIGH = "high"


class FuelAnomalyVerdict(BaseModel):
    """Outcome of the two-sample fuel drop check.

    ``severity``, ``reason``, ``fuel_drop`` and ``duration_minutes`` are set
    only for anomalies.
    """

    model_config = ConfigDict(frozen=True)

    vehicle_id: str = ""
    status: FuelAnomalyStatus
    severity: FuelAnomalySeverity | None = None
    reason: str | None = None
    fuel_drop: float | None = None
    duration_minutes: float | None = None
    risk_impact: int = 0
