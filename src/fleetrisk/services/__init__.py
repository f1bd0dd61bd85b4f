"""Service layer: risk scoring and view assembly."""

from .action_intelligence import get_action_intelligence
from .fleet import FleetRiskService, build_vehicle_view, summarize_fleet
from .fuel_anomaly import detect_fuel_anomaly, simulate_fuel_anomaly
from .risk_engine import calculate_risk, combine_assessment, risk_level_for_score
from .risk_trend import compute_risk_trend, simulate_previous_score
from .service_estimate import estimate_service, mock_service_estimate, service_estimate_for
from .weather_risk import calculate_weather_risk

__all__ = [
    "FleetRiskService",
    "build_vehicle_view",
    "calculate_risk",
    "calculate_weather_risk",
    "combine_assessment",
    "compute_risk_trend",
    "detect_fuel_anomaly",
    "estimate_service",
    "get_action_intelligence",
    "mock_service_estimate",
    "risk_level_for_score",
    "service_estimate_for",
    "simulate_fuel_anomaly",
    "simulate_previous_score",
    "summarize_fleet",
]
