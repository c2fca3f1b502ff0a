"""
Dialogue Selector — picks the wizard's line for a situation.

Greeting and completion lines are drawn at random from a pool; onboarding,
intervention and status lines are exact lookups. Every key space has a
fallback, so no request resolves to "no message".
"""

import random
import re
from enum import Enum
from typing import Optional, Type, TypeVar, Union

from oz_engine.dialogue.messages import (
    CALMING_PHRASES,
    COMPLETIONS,
    DEFAULT_INTERVENTION,
    DEFAULT_ONBOARDING_STAGE,
    GREETING_TONES,
    GREETINGS,
    IMPULSE_QUESTIONS,
    INTERVENTIONS,
    ONBOARDING,
    STATUS_TONES,
    SUBSYSTEM_RESPONSES,
    TOTO_RESPONSES,
)
from oz_engine.load.classifier import status_message
from oz_engine.models.dialogue import (
    InterventionKey,
    MessageCategory,
    OnboardingStage,
    Tone,
    WizardMessage,
)
from oz_engine.models.impulse import ImpulseType, RouteDestination
from oz_engine.models.load import Status

E = TypeVar("E", bound=Enum)

# Leading emoji and variation selectors on status lines
_DECORATION = re.compile(r"^[^\w\"']+")


def coerce_key(enum_cls: Type[E], value: Union[E, str, None]) -> Optional[E]:
    """Lenient enum lookup: unknown or missing keys become None."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def strip_decoration(text: str) -> str:
    return _DECORATION.sub("", text).strip()


class DialogueSelector:
    """
    The Wizard's voice. Randomness comes from the injected generator so
    callers can seed or stub it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def get_message(
        self,
        category: Union[MessageCategory, str],
        status: Union[Status, str, None] = None,
        stage: Union[OnboardingStage, str, None] = None,
        intervention_type: Union[InterventionKey, str, None] = None,
    ) -> WizardMessage:
        """Dispatch on category. Unknown categories get the status line."""
        category = coerce_key(MessageCategory, category) or MessageCategory.STATUS
        status = coerce_key(Status, status) or Status.STABLE

        if category == MessageCategory.GREETING:
            return self.greeting(status)
        if category == MessageCategory.COMPLETION:
            return self.completion()
        if category == MessageCategory.ONBOARDING:
            return self.onboarding(stage)
        if category == MessageCategory.INTERVENTION:
            return self.intervention(intervention_type)
        return self.status(status)

    def greeting(self, status: Union[Status, str, None] = None) -> WizardMessage:
        status = coerce_key(Status, status) or Status.STABLE
        return WizardMessage(
            text=self._rng.choice(GREETINGS[status]),
            tone=GREETING_TONES[status],
            category=MessageCategory.GREETING,
        )

    def completion(self) -> WizardMessage:
        return WizardMessage(
            text=self._rng.choice(COMPLETIONS),
            tone=Tone.CELEBRATING,
            category=MessageCategory.COMPLETION,
        )

    def onboarding(self, stage: Union[OnboardingStage, str, None]) -> WizardMessage:
        key = coerce_key(OnboardingStage, stage) or DEFAULT_ONBOARDING_STAGE
        text, tone = ONBOARDING[key]
        return WizardMessage(text=text, tone=tone, category=MessageCategory.ONBOARDING)

    def intervention(self, intervention_type: Union[InterventionKey, str, None]) -> WizardMessage:
        key = coerce_key(InterventionKey, intervention_type)
        text, tone = INTERVENTIONS.get(key, DEFAULT_INTERVENTION)
        return WizardMessage(text=text, tone=tone, category=MessageCategory.INTERVENTION)

    def status(self, status: Union[Status, str, None] = None) -> WizardMessage:
        status = coerce_key(Status, status) or Status.STABLE
        return WizardMessage(
            text=strip_decoration(status_message(status)),
            tone=STATUS_TONES[status],
            category=MessageCategory.STATUS,
        )

    # --- Companion lines (not WizardMessages) ---

    def toto_response(self, status: Union[Status, str, None] = None) -> str:
        status = coerce_key(Status, status) or Status.STABLE
        return self._rng.choice(TOTO_RESPONSES[status])

    def impulse_question(self, impulse_type: Union[ImpulseType, str, None]) -> str:
        key = coerce_key(ImpulseType, impulse_type) or ImpulseType.OTHER
        return IMPULSE_QUESTIONS[key]

    def subsystem_response(self, destination: Union[RouteDestination, str]) -> str:
        key = coerce_key(RouteDestination, destination) or RouteDestination.DOROTHY
        return self._rng.choice(SUBSYSTEM_RESPONSES[key])

    def calming_phrase(self) -> str:
        return self._rng.choice(CALMING_PHRASES)
