"""Journey — the seven-day first-week progression."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class JourneyFeature(str, Enum):
    VOID_EVENT = "voidEvent"
    CONTROLLED_BURN = "controlledBurn"
    EMOTIONAL_ROUTING = "emotionalRouting"
    CITY_EXPANSION = "cityExpansion"
    IDENTITY_LOCK = "identityLock"


class DayMilestone(BaseModel):
    day: int
    title: str
    description: str
    feature: Optional[JourneyFeature] = None


class JourneyProgress(BaseModel):
    day: int
    percent: float
    milestones: List[DayMilestone]
    unlocked_features: List[JourneyFeature]
