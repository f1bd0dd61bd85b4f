"""Per-vehicle view and fleet summary models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fleetrisk.models.action import ActionIntelligence
from fleetrisk.models.fuel import FuelAnomalyVerdict
from fleetrisk.models.risk import RiskAssessment
from fleetrisk.models.service import ServiceEstimate
from fleetrisk.models.trend import RiskTrend
from fleetrisk.models.weather import WeatherRisk


class VehicleRiskView(BaseModel):
    """Everything computed for one vehicle in one evaluation cycle."""

    model_config = ConfigDict(frozen=True)

    assessment: RiskAssessment
    trend: RiskTrend
    action: ActionIntelligence
    service: ServiceEstimate
    weather: WeatherRisk | None = None
    fuel: FuelAnomalyVerdict | None = None


class FleetSummary(BaseModel):
    """Vehicle counts per risk level."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    critical: int = 0
    warning: int = 0
    ok: int = 0
