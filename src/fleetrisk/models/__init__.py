"""Fleet risk data models."""

from fleetrisk.models.action import ActionIntelligence, ActionLevel
from fleetrisk.models.fleet import FleetSummary, VehicleRiskView
from fleetrisk.models.fuel import FuelAnomalySeverity, FuelAnomalyStatus, FuelAnomalyVerdict
from fleetrisk.models.risk import RiskAssessment, RiskLevel, RiskReason, RiskReasonKind
from fleetrisk.models.sensor import SensorChannel, SensorSample, SensorSeries
from fleetrisk.models.service import ServiceEstimate, ServiceStatus
from fleetrisk.models.trend import RiskTrend, TrendDirection
from fleetrisk.models.vehicle import Position, VehicleTelemetry
from fleetrisk.models.weather import WeatherReading, WeatherRisk

__all__ = [
    "ActionIntelligence",
    "ActionLevel",
    "FleetSummary",
    "FuelAnomalySeverity",
    "FuelAnomalyStatus",
    "FuelAnomalyVerdict",
    "Position",
    "RiskAssessment",
    "RiskLevel",
    "RiskReason",
    "RiskReasonKind",
    "RiskTrend",
    "SensorChannel",
    "SensorSample",
    "SensorSeries",
    "ServiceEstimate",
    "ServiceStatus",
    "TrendDirection",
    "VehicleRiskView",
    "VehicleTelemetry",
    "WeatherReading",
    "WeatherRisk",
]
