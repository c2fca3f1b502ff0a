"""Cognitive load — derived scores, status levels and character states."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from oz_engine.models.drift import DriftReading
from oz_engine.models.work import WorkItemCounts


class Status(str, Enum):
    """Overall city status, ordered from calmest to worst."""
    STABLE = "stable"
    ELEVATED = "elevated"
    CRITICAL = "critical"
    OVERLOAD = "overload"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = [Status.STABLE, Status.ELEVATED, Status.CRITICAL, Status.OVERLOAD]


class CharacterLevel(str, Enum):
    """Three-level severity shared by every character."""
    CALM = "calm"
    STRAINED = "strained"
    BROKEN = "broken"


class TinManState(str, Enum):
    HEALTHY = "healthy"
    STRESSED = "stressed"
    BURNOUT = "burnout"


class ScarecrowState(str, Enum):
    SHARP = "sharp"
    FOGGY = "foggy"
    SCATTERED = "scattered"


class LionState(str, Enum):
    BRAVE = "brave"
    ANXIOUS = "anxious"
    FROZEN = "frozen"


class DorothyState(str, Enum):
    DECISIVE = "decisive"
    WAVERING = "wavering"
    PARALYZED = "paralyzed"


class Subsystem(str, Enum):
    """Emotional routing subsystems a user can hand a thought to."""
    TINMAN = "tinman"
    SCARECROW = "scarecrow"
    LION = "lion"
    DOROTHY = "dorothy"
    TOTO = "toto"


class LoadScores(BaseModel):
    """Five independent burden scores, each clamped to [0, 100]."""

    ram_usage: float = Field(ge=0, le=100, default=0.0)
    emotional_load: float = Field(ge=0, le=100, default=0.0)     # Tin Man
    logic_load: float = Field(ge=0, le=100, default=0.0)         # Scarecrow
    anxiety_level: float = Field(ge=0, le=100, default=0.0)      # Lion
    executive_load: float = Field(ge=0, le=100, default=0.0)     # Dorothy


class CharacterStates(BaseModel):
    tin_man: TinManState = TinManState.HEALTHY
    scarecrow: ScarecrowState = ScarecrowState.SHARP
    lion: LionState = LionState.BRAVE
    dorothy: DorothyState = DorothyState.DECISIVE


class CognitiveLoad(BaseModel):
    """Full snapshot handed to the UI layer."""

    counts: WorkItemCounts
    scores: LoadScores
    status: Status
    status_message: str
    characters: CharacterStates
    toto_alert: bool = False
    drift: Optional[DriftReading] = None
    recommended_subsystem: Optional[Subsystem] = None
