"""Risk assessment data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from fleetrisk.models.vehicle import Position


class RiskLevel(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class RiskReasonKind(str, Enum):
    SPEED_EXTREME = "speedExtreme"
    SPEED_HIGH = "speedHigh"
    SPEED_ABOVE_LIMIT = "speedAboveLimit"
    SPEED_SLIGHTLY_ELEVATED = "speedSlightlyElevated"
    NO_UPDATE = "noUpdate"
    NO_UPDATE_CRITICAL = "noUpdateCritical"
    ECO_EVENT = "ecoEvent"


class RiskReason(BaseModel):
    """One piece of evidence contributing to a risk score.

    ``value`` is km/h for speed reasons, minutes for staleness reasons and
    the event count for eco events.
    """

    model_config = ConfigDict(frozen=True)

    type: RiskReasonKind
    value: float
    count: int | None = None


class RiskAssessment(BaseModel):
    """Risk snapshot of one vehicle at one evaluation time."""

    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    vehicle_name: str = ""
    plate: str = ""
    speed: float = 0.0
    risk_score: int = 0
    risk_level: RiskLevel = RiskLevel.OK
    reasons: tuple[RiskReason, ...] = ()
    calculated_at: datetime
    position: Position = Position()

    def find_reason(self, kind: RiskReasonKind) -> RiskReason | None:
        """Return the first reason of the given kind, if any."""
        return next((r for r in self.reasons if r.type == kind), None)
