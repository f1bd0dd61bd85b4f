"""fleetrisk: operational risk scoring for vehicle fleets."""

from fleetrisk._window import TimeWindow
from fleetrisk.cache import TTLCache
from fleetrisk.client import AsyncFleetClient, FleetClient, WeatherClient
from fleetrisk.config import Settings
from fleetrisk.exceptions import (
    FleetRiskAPIError,
    FleetRiskConfigError,
    FleetRiskConnectionError,
    FleetRiskError,
    FleetRiskTimeoutError,
    FleetRiskValidationError,
)

__all__ = [
    "AsyncFleetClient",
    "FleetClient",
    "FleetRiskAPIError",
    "FleetRiskConfigError",
    "FleetRiskConnectionError",
    "FleetRiskError",
    "FleetRiskTimeoutError",
    "FleetRiskValidationError",
    "Settings",
    "TTLCache",
    "TimeWindow",
    "WeatherClient",
]

__version__ = "0.1.0"
