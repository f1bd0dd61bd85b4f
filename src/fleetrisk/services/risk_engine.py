"""Core risk engine: speed and staleness scoring for one vehicle."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from ..adapters import parse_timestamp
from ..constants import (
    CRITICAL_STALENESS_MINUTES,
    ECO_EVENT_FEW_SCORE,
    ECO_EVENT_MANY_SCORE,
    ECO_EVENT_MANY_THRESHOLD,
    RISK_CRITICAL_THRESHOLD,
    RISK_WARNING_THRESHOLD,
    SPEED_BANDS,
    STALENESS_BANDS,
)
from ..models.fuel import FuelAnomalyVerdict
from ..models.risk import RiskAssessment, RiskLevel, RiskReason, RiskReasonKind
from ..models.vehicle import VehicleTelemetry
from ..models.weather import WeatherRisk


def risk_level_for_score(score: int) -> RiskLevel:
    """Map a combined score onto ok / warning / critical."""
    if score >= RISK_CRITICAL_THRESHOLD:
        return RiskLevel.CRITICAL
    if score >= RISK_WARNING_THRESHOLD:
        return RiskLevel.WARNING
    return RiskLevel.OK


def speed_risk(speed: float) -> tuple[int, RiskReason | None]:
    """Return the score and reason of the single speed band *speed* falls into."""
    for lower, score, kind in SPEED_BANDS:
        if speed > lower:
            return score, RiskReason(type=RiskReasonKind(kind), value=speed)
    return 0, None


def minutes_since(timestamp: str | datetime | None, now: datetime) -> float:
    """Minutes elapsed between *timestamp* and *now*; inf if it does not parse."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return math.inf
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - parsed).total_seconds() / 60


def staleness_risk(minutes: float) -> tuple[int, RiskReason | None]:
    """Return the score and reason of the single staleness band for *minutes*."""
    for lower, score in STALENESS_BANDS:
        if minutes > lower:
            kind = (
                RiskReasonKind.NO_UPDATE_CRITICAL
                if minutes > CRITICAL_STALENESS_MINUTES
                else RiskReasonKind.NO_UPDATE
            )
            shown = minutes if math.isinf(minutes) else math.floor(minutes)
            return score, RiskReason(type=kind, value=shown)
    return 0, None


def calculate_risk(vehicle: VehicleTelemetry, now: datetime | None = None) -> RiskAssessment:
    """Score one telemetry snapshot.

    *now* is the evaluation wall-clock time and becomes ``calculated_at``;
    it defaults to the current UTC time.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    score = 0
    reasons: list[RiskReason] = []

    for points, reason in (
        speed_risk(vehicle.speed),
        staleness_risk(minutes_since(vehicle.last_position_time, now)),
    ):
        score += points
        if reason is not None:
            reasons.append(reason)

    return RiskAssessment(
        vehicle_id=vehicle.id,
        vehicle_name=vehicle.name,
        plate=vehicle.plate or "",
        speed=vehicle.speed,
        risk_score=score,
        risk_level=risk_level_for_score(score),
        reasons=tuple(reasons),
        calculated_at=now,
        position=vehicle.position,
    )


def eco_event_score(count: int) -> int:
    if count > ECO_EVENT_MANY_THRESHOLD:
        return ECO_EVENT_MANY_SCORE
    if count >= 1:
        return ECO_EVENT_FEW_SCORE
    return 0


def combine_assessment(
    assessment: RiskAssessment,
    weather: WeatherRisk | None = None,
    fuel: FuelAnomalyVerdict | None = None,
    eco_event_count: int = 0,
) -> RiskAssessment:
    """Fold weather, fuel and eco-event contributions into a new assessment.

    The level is re-derived from the combined score; the input is left as is.
    """
    score = assessment.risk_score
    reasons = list(assessment.reasons)

    if weather is not None:
        score += weather.bump
    if fuel is not None:
        score += fuel.risk_impact
    if eco_event_count >= 1:
        score += eco_event_score(eco_event_count)
        reasons.append(
            RiskReason(type=RiskReasonKind.ECO_EVENT, value=eco_event_count, count=eco_event_count),
        )

    return assessment.model_copy(
        update={
            "risk_score": score,
            "risk_level": risk_level_for_score(score),
            "reasons": tuple(reasons),
        },
    )
