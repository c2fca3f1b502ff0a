"""Quest gravity — how strongly a quest pulls attention back to it."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EnergyCost(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


class EmotionalWeight(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    OVERWHELMING = "overwhelming"


class MeaningLevel(str, Enum):
    ROUTINE = "routine"
    IMPORTANT = "important"
    CRITICAL = "critical"
    LIFE_CHANGING = "life-changing"


class RewardType(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EPIC = "epic"


class Quest(BaseModel):
    id: str
    title: str
    estimated_minutes: Optional[float] = Field(ge=0, default=None)
    energy_cost: Optional[EnergyCost] = None
    emotional_weight: Optional[EmotionalWeight] = None
    meaning_level: Optional[MeaningLevel] = None
    reward_type: Optional[RewardType] = None
    is_overdue: bool = False
    is_planet_quest: bool = False


class QuestGravity(BaseModel):
    time: int
    energy: int
    emotion: int
    meaning: int
    reward: int
    total_mass: float
    visual_mass: float = Field(ge=0, le=100)


class GravityCheck(BaseModel):
    is_stable: bool
    gravity_ratio: float
    recommendation: str
