"""Action intelligence data model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ActionLevel(str, Enum):
    IMMEDIATE = "immediate"
    SOON = "soon"
    MONITOR = "monitor"


class ActionIntelligence(BaseModel):
    """Operational urgency of a vehicle with its display metadata."""

    model_config = ConfigDict(frozen=True)

    level: ActionLevel
    label: str
    badge_tone: str
    dot_tone: str
