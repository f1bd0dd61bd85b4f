"""Deterministic 24-hour risk trend derived from a single assessment."""

from __future__ import annotations

from ..constants import (
    ECO_EVENT_MANY_THRESHOLD,
    TREND_CRITICAL_OFFLINE_CUTOFF_MINUTES,
    TREND_CRITICAL_OFFLINE_SHIFT,
    TREND_DISPLAY,
    TREND_ECO_FEW_SHIFT,
    TREND_ECO_MANY_SHIFT,
    TREND_SPEED_EXTREME_SHIFT,
    TREND_STALE_SHIFT,
)
from ..models.risk import RiskAssessment, RiskReasonKind
from ..models.trend import RiskTrend, TrendDirection


def simulate_previous_score(assessment: RiskAssessment) -> int:
    """Estimate the score 24 hours ago by backing out transient reasons.

    A vehicle offline for less than a day was presumably online yesterday;
    extreme speed is assumed transient; eco events accumulate over the day.
    """
    if assessment.risk_score == 0:
        return 0

    previous = assessment.risk_score

    critical_offline = assessment.find_reason(RiskReasonKind.NO_UPDATE_CRITICAL)
    if critical_offline is not None:
        if critical_offline.value < TREND_CRITICAL_OFFLINE_CUTOFF_MINUTES:
            previous -= TREND_CRITICAL_OFFLINE_SHIFT
    elif assessment.find_reason(RiskReasonKind.NO_UPDATE) is not None:
        previous -= TREND_STALE_SHIFT

    if assessment.find_reason(RiskReasonKind.SPEED_EXTREME) is not None:
        previous -= TREND_SPEED_EXTREME_SHIFT

    eco = assessment.find_reason(RiskReasonKind.ECO_EVENT)
    if eco is not None and eco.count is not None:
        if eco.count > ECO_EVENT_MANY_THRESHOLD:
            previous -= TREND_ECO_MANY_SHIFT
        elif eco.count >= 1:
            previous -= TREND_ECO_FEW_SHIFT

    return max(0, previous)


def compute_risk_trend(assessment: RiskAssessment) -> RiskTrend:
    delta = assessment.risk_score - simulate_previous_score(assessment)
    if delta > 0:
        direction = TrendDirection.UP
    elif delta < 0:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.STABLE
    return RiskTrend(delta=delta, direction=direction, **TREND_DISPLAY[direction.value])
