"""Service / maintenance estimate model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ServiceStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class ServiceEstimate(BaseModel):
    """Position of a vehicle inside its current service interval (km)."""

    model_config = ConfigDict(frozen=True)

    odometer: float
    service_interval: int
    last_service_at: float
    next_service_at: float
    remaining_km: float
    status: ServiceStatus
    progress_percent: int
    mocked: bool = False
