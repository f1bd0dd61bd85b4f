"""Data layer: repository factory and re-exports."""

from __future__ import annotations

from ..config import Settings
from .base import FleetDataRepository
from .errors import FleetDataError


def get_repository(settings: Settings | None = None) -> FleetDataRepository:
    """Return the GPS-provider repository configured from the environment."""
    from .gps_repo import GpsFleetRepository

    return GpsFleetRepository(settings if settings is not None else Settings())


__all__ = [
    "FleetDataError",
    "FleetDataRepository",
    "get_repository",
]
