"""Journey progress — the first week, one unlock per day from day 3."""

from typing import List

from oz_engine.models.dialogue import OnboardingStage
from oz_engine.models.journey import DayMilestone, JourneyFeature, JourneyProgress

JOURNEY_DAYS = 7

MILESTONES: List[DayMilestone] = [
    DayMilestone(day=1, title="Arrival", description="Storm sorted. First quest given."),
    DayMilestone(day=2, title="Pattern Reveal", description="Your drift tendencies revealed."),
    DayMilestone(
        day=3, title="First Void", description="Void Event unlocked. No punishment.",
        feature=JourneyFeature.VOID_EVENT,
    ),
    DayMilestone(
        day=4, title="Controlled Burn", description="Your rage engine, harnessed.",
        feature=JourneyFeature.CONTROLLED_BURN,
    ),
    DayMilestone(
        day=5, title="Emotional Routing", description="Tin Man, Lion, Toto active.",
        feature=JourneyFeature.EMOTIONAL_ROUTING,
    ),
    DayMilestone(
        day=6, title="City Expansion", description="Upgrade your city with quests.",
        feature=JourneyFeature.CITY_EXPANSION,
    ),
    DayMilestone(
        day=7, title="Identity Lock", description="This city is yours.",
        feature=JourneyFeature.IDENTITY_LOCK,
    ),
]

_UNLOCK_DAY = {m.feature: m.day for m in MILESTONES if m.feature is not None}

_DAY_STAGES = [
    OnboardingStage.DAY1,
    OnboardingStage.DAY2,
    OnboardingStage.DAY3,
    OnboardingStage.DAY4,
    OnboardingStage.DAY5,
    OnboardingStage.DAY6,
    OnboardingStage.DAY7,
]


def clamp_day(day: int) -> int:
    return max(1, min(JOURNEY_DAYS, day))


def is_feature_unlocked(feature: JourneyFeature, day: int) -> bool:
    return day >= _UNLOCK_DAY[feature]


def stage_for_day(day: int) -> OnboardingStage:
    return _DAY_STAGES[clamp_day(day) - 1]


def journey_progress(day: int) -> JourneyProgress:
    day = clamp_day(day)
    return JourneyProgress(
        day=day,
        percent=day / JOURNEY_DAYS * 100,
        milestones=MILESTONES,
        unlocked_features=[f for f in JourneyFeature if is_feature_unlocked(f, day)],
    )
