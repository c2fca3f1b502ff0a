"""
Quest Gravity — the pull of a quest versus the pull of distractions.

A quest's mass is a weighted sum of five 1-10 factors. Overdue quests
pull harder (x1.5) and the planet quest hardest (x2). Distractions build
"novelty gravity" from open tabs, unprocessed ideas and emotional load.
When novelty outweighs the quest, the user is liable to drift.
"""

from typing import Optional

from oz_engine.models.gravity import (
    EmotionalWeight,
    EnergyCost,
    GravityCheck,
    MeaningLevel,
    Quest,
    QuestGravity,
    RewardType,
)

GRAVITY_WEIGHTS = {
    "time": 1.0,
    "energy": 1.5,
    "emotion": 1.2,
    "meaning": 2.0,
    "reward": 1.3,
}

OVERDUE_MULTIPLIER = 1.5
PLANET_MULTIPLIER = 2.0

# 10 * sum(weights) * planet multiplier
MAX_THEORETICAL_MASS = 140.0

_ENERGY = {EnergyCost.LOW: 2, EnergyCost.MEDIUM: 5, EnergyCost.HIGH: 8, EnergyCost.EXTREME: 10}
_EMOTION = {
    EmotionalWeight.LIGHT: 2,
    EmotionalWeight.MODERATE: 5,
    EmotionalWeight.HEAVY: 8,
    EmotionalWeight.OVERWHELMING: 10,
}
_MEANING = {
    MeaningLevel.ROUTINE: 3,
    MeaningLevel.IMPORTANT: 6,
    MeaningLevel.CRITICAL: 8,
    MeaningLevel.LIFE_CHANGING: 10,
}
_REWARD = {RewardType.SMALL: 3, RewardType.MEDIUM: 5, RewardType.LARGE: 8, RewardType.EPIC: 10}


def _time_score(minutes: Optional[float]) -> int:
    if not minutes:
        return 5
    if minutes <= 5:
        return 2
    if minutes <= 15:
        return 4
    if minutes <= 30:
        return 6
    if minutes <= 60:
        return 8
    return 10


def calculate_quest_gravity(quest: Quest) -> QuestGravity:
    time = _time_score(quest.estimated_minutes)
    energy = _ENERGY.get(quest.energy_cost, 5)
    emotion = _EMOTION.get(quest.emotional_weight, 4)
    meaning = _MEANING.get(quest.meaning_level, 5)
    reward = _REWARD.get(quest.reward_type, 5)

    total_mass = (
        time * GRAVITY_WEIGHTS["time"]
        + energy * GRAVITY_WEIGHTS["energy"]
        + emotion * GRAVITY_WEIGHTS["emotion"]
        + meaning * GRAVITY_WEIGHTS["meaning"]
        + reward * GRAVITY_WEIGHTS["reward"]
    )
    if quest.is_overdue:
        total_mass *= OVERDUE_MULTIPLIER
    if quest.is_planet_quest:
        total_mass *= PLANET_MULTIPLIER

    return QuestGravity(
        time=time,
        energy=energy,
        emotion=emotion,
        meaning=meaning,
        reward=reward,
        total_mass=total_mass,
        visual_mass=min(100.0, total_mass / MAX_THEORETICAL_MASS * 100),
    )


def ambient_novelty_gravity(
    tab_count: int,
    unprocessed_ideas: int,
    emotional_load: float,
) -> float:
    """Pull of distractions, 0-100."""
    return min(100.0, tab_count * 3 + unprocessed_ideas * 5 + emotional_load * 0.3)


def gravity_check(quest_gravity: float, novelty_gravity: float) -> GravityCheck:
    ratio = quest_gravity / max(1.0, novelty_gravity)

    if ratio < 0.5:
        recommendation = (
            "Quest gravity critical. Consider increasing task importance "
            "or reducing distractions."
        )
    elif ratio < 1:
        recommendation = "Quest gravity weakening. Stay focused on your current mission."
    elif ratio < 2:
        recommendation = "Gravity stable. You're in orbit."
    else:
        recommendation = "Strong gravitational lock. Excellent focus!"

    return GravityCheck(is_stable=ratio >= 1, gravity_ratio=ratio, recommendation=recommendation)
