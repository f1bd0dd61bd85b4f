"""Operational urgency derived from a risk assessment."""

from __future__ import annotations

from ..constants import ACTION_DISPLAY, ACTION_OFFLINE_MINUTES, RISK_CRITICAL_THRESHOLD, RISK_WARNING_THRESHOLD
from ..models.action import ActionIntelligence, ActionLevel
from ..models.risk import RiskAssessment, RiskReasonKind


def _build(level: ActionLevel) -> ActionIntelligence:
    return ActionIntelligence(level=level, **ACTION_DISPLAY[level.value])


def get_action_intelligence(assessment: RiskAssessment) -> ActionIntelligence:
    """Resolve the urgency tier; first matching rule wins.

    1. immediate: score >= 6 and (offline >= 6 h or extreme speed)
    2. soon: score >= 3
    3. monitor: everything else
    """
    long_offline = any(
        r.type == RiskReasonKind.NO_UPDATE_CRITICAL and r.value >= ACTION_OFFLINE_MINUTES
        for r in assessment.reasons
    )
    speeding = assessment.find_reason(RiskReasonKind.SPEED_EXTREME) is not None

    if assessment.risk_score >= RISK_CRITICAL_THRESHOLD and (long_offline or speeding):
        return _build(ActionLevel.IMMEDIATE)
    if assessment.risk_score >= RISK_WARNING_THRESHOLD:
        return _build(ActionLevel.SOON)
    return _build(ActionLevel.MONITOR)
