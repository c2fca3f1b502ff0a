"""
Status Classifier — discrete states derived from the load scores.

Every function here is total: any real score maps to exactly one level,
and a higher score never maps to a calmer level.
"""

from typing import Optional

from oz_engine.models.config import CharacterThresholds, StatusThresholds, ThresholdPair
from oz_engine.models.load import (
    CharacterLevel,
    CharacterStates,
    DorothyState,
    LionState,
    LoadScores,
    ScarecrowState,
    Status,
    Subsystem,
    TinManState,
)

STATUS_MESSAGES = {
    Status.OVERLOAD: "⚠️ Emerald City power grid critical! Pausing non-essential quests.",
    Status.CRITICAL: "🌪️ Storm approaching the city. Consider closing some loops.",
    Status.ELEVATED: "☁️ Clouds gathering. Stay focused on current quests.",
    Status.STABLE: "✨ Emerald City is glowing bright. All systems optimal.",
}

# Any single axis at or above its alarm level wakes Toto.
TOTO_RAM_ALARM = 65
TOTO_EMOTIONAL_ALARM = 60
TOTO_ANXIETY_ALARM = 60
TOTO_DRIFT_ALARM = 60

SUBSYSTEM_RECOMMEND_ABOVE = 60

_TIN_MAN = {
    CharacterLevel.CALM: TinManState.HEALTHY,
    CharacterLevel.STRAINED: TinManState.STRESSED,
    CharacterLevel.BROKEN: TinManState.BURNOUT,
}
_SCARECROW = {
    CharacterLevel.CALM: ScarecrowState.SHARP,
    CharacterLevel.STRAINED: ScarecrowState.FOGGY,
    CharacterLevel.BROKEN: ScarecrowState.SCATTERED,
}
_LION = {
    CharacterLevel.CALM: LionState.BRAVE,
    CharacterLevel.STRAINED: LionState.ANXIOUS,
    CharacterLevel.BROKEN: LionState.FROZEN,
}
_DOROTHY = {
    CharacterLevel.CALM: DorothyState.DECISIVE,
    CharacterLevel.STRAINED: DorothyState.WAVERING,
    CharacterLevel.BROKEN: DorothyState.PARALYZED,
}


def classify_status(
    ram_usage: float,
    thresholds: Optional[StatusThresholds] = None,
) -> Status:
    """
    Map overall RAM usage to a status:
      >= 85  overload
      >= 65  critical
      >= 40  elevated
      else   stable
    """
    t = thresholds or StatusThresholds()
    if ram_usage >= t.overload:
        return Status.OVERLOAD
    elif ram_usage >= t.critical:
        return Status.CRITICAL
    elif ram_usage >= t.elevated:
        return Status.ELEVATED
    else:
        return Status.STABLE


def classify_character(score: float, thresholds: ThresholdPair) -> CharacterLevel:
    """Three-level mapping reused by every character."""
    if score >= thresholds.burnout:
        return CharacterLevel.BROKEN
    if score >= thresholds.stressed:
        return CharacterLevel.STRAINED
    return CharacterLevel.CALM


def classify_characters(
    scores: LoadScores,
    thresholds: Optional[CharacterThresholds] = None,
) -> CharacterStates:
    t = thresholds or CharacterThresholds()
    return CharacterStates(
        tin_man=_TIN_MAN[classify_character(scores.emotional_load, t.tin_man)],
        scarecrow=_SCARECROW[classify_character(scores.logic_load, t.scarecrow)],
        lion=_LION[classify_character(scores.anxiety_level, t.lion)],
        dorothy=_DOROTHY[classify_character(scores.executive_load, t.dorothy)],
    )


def toto_alert(scores: LoadScores, drift_level: float = 0.0) -> bool:
    """Any-critical-axis alarm, independent of the primary status."""
    return (
        scores.ram_usage >= TOTO_RAM_ALARM
        or scores.emotional_load >= TOTO_EMOTIONAL_ALARM
        or scores.anxiety_level >= TOTO_ANXIETY_ALARM
        or drift_level >= TOTO_DRIFT_ALARM
    )


def recommend_subsystem(scores: LoadScores, alert: bool) -> Optional[Subsystem]:
    """Which routing subsystem to highlight, first match wins."""
    if scores.emotional_load > SUBSYSTEM_RECOMMEND_ABOVE:
        return Subsystem.TINMAN
    if scores.logic_load > SUBSYSTEM_RECOMMEND_ABOVE:
        return Subsystem.SCARECROW
    if scores.anxiety_level > SUBSYSTEM_RECOMMEND_ABOVE:
        return Subsystem.LION
    if alert:
        return Subsystem.TOTO
    return None


def status_message(status: Status) -> str:
    return STATUS_MESSAGES.get(status, STATUS_MESSAGES[Status.STABLE])
