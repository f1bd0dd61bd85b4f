"""Formatting helpers for fleet risk output."""

from __future__ import annotations

from .constants import RISK_LEVEL_LABELS, SERVICE_STATUS_LABELS
from .models.risk import RiskLevel
from .models.service import ServiceStatus


def format_km(km: float | None) -> str:
    """Format kilometres with Czech digit grouping, or '\u2014' if None."""
    if km is None:
        return "\u2014"
    grouped = f"{round(km):,}".replace(",", "\u00a0")
    return f"{grouped} km"


def risk_level_label(level: RiskLevel) -> str:
    return RISK_LEVEL_LABELS[level.value]


def service_status_label(status: ServiceStatus) -> str:
    return SERVICE_STATUS_LABELS[status.value]
