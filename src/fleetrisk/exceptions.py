"""Custom exceptions for the fleet risk package."""

from __future__ import annotations


class FleetRiskError(Exception):
    """Base exception for all fleet risk errors."""


class FleetRiskConnectionError(FleetRiskError):
    """Raised when a provider API cannot be reached."""


class FleetRiskTimeoutError(FleetRiskError):
    """Raised when a request to a provider API times out."""


class FleetRiskAPIError(FleetRiskError):
    """Raised when a provider API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class FleetRiskValidationError(FleetRiskError):
    """Raised when provider response data fails model validation."""


class FleetRiskConfigError(FleetRiskError):
    """Raised when required settings are missing."""
