"""Wizard dialogue — message value objects and their key spaces."""

from enum import Enum

from pydantic import BaseModel


class Tone(str, Enum):
    NEUTRAL = "neutral"
    ENCOURAGING = "encouraging"
    CALMING = "calming"
    WARNING = "warning"
    CELEBRATING = "celebrating"


class MessageCategory(str, Enum):
    GREETING = "greeting"
    STATUS = "status"
    INTERVENTION = "intervention"
    COMPLETION = "completion"
    ONBOARDING = "onboarding"


class OnboardingStage(str, Enum):
    """Seven daily stages of the first week, plus the legacy onboarding keys."""
    DAY1 = "day1"
    DAY2 = "day2"
    DAY3 = "day3"
    DAY4 = "day4"
    DAY5 = "day5"
    DAY6 = "day6"
    DAY7 = "day7"
    # Legacy aliases
    TORNADO = "tornado"
    SORTING = "sorting"
    FIRST_CITY = "firstCity"
    FIRST_QUEST = "firstQuest"
    ENCOURAGEMENT = "encouragement"


class InterventionKey(str, Enum):
    NEW_PROJECT = "newProject"
    OVERLOAD = "overload"
    DELAY = "delay"
    ROUTE = "route"
    BLOCK = "block"
    PROCEED = "proceed"
    DRIFT = "drift"
    VOID = "void"
    CONTROLLED_BURN = "controlledBurn"


class WizardMessage(BaseModel):
    """A line of wizard copy. Built fresh per request."""

    model_config = {"frozen": True}

    text: str
    tone: Tone
    category: MessageCategory
