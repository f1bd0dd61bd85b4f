"""Risk trend data model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RiskTrend(BaseModel):
    """Simulated change of the risk score over the last 24 hours."""

    model_config = ConfigDict(frozen=True)

    delta: int
    direction: TrendDirection
    label: str
    emoji: str
    color: str
