"""
Intervention Gate — Toto's firewall between an impulse and the action.

Behavioral Contract:
- Accepts an Impulse and the current Status
- Classifies the impulse through a fixed table (never computed)
- Destructive impulses are blocked, whatever the load
- Under overload, "proceed" is withheld; delay and route stay available
- Route offers every destination; the classification only suggests one
- Never raises for in-domain input: refusal is the BLOCK outcome
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Union

from oz_engine.clock import to_naive_utc, utcnow
from oz_engine.dialogue.selector import DialogueSelector, coerce_key
from oz_engine.models.config import GateConfig
from oz_engine.models.impulse import (
    GateAction,
    GateDecision,
    GateOutcome,
    Impulse,
    ImpulseClassification,
    ImpulseType,
    RouteDestination,
)
from oz_engine.models.load import Status

logger = logging.getLogger(__name__)

IMPULSE_CLASSIFICATIONS: Dict[ImpulseType, ImpulseClassification] = {
    ImpulseType.PROJECT: ImpulseClassification.NOVELTY,
    ImpulseType.IDEA: ImpulseClassification.NOVELTY,
    ImpulseType.OTHER: ImpulseClassification.NOVELTY,
    ImpulseType.PURCHASE: ImpulseClassification.EMOTIONAL,
    ImpulseType.MESSAGE: ImpulseClassification.FEAR,
    ImpulseType.RESEARCH: ImpulseClassification.LOGIC,
    ImpulseType.REORGANIZE: ImpulseClassification.EXECUTIVE,
    ImpulseType.TASK: ImpulseClassification.LEGITIMATE,
    ImpulseType.ABANDON: ImpulseClassification.DESTRUCTIVE,
}

SUGGESTED_DESTINATIONS: Dict[ImpulseClassification, Optional[RouteDestination]] = {
    ImpulseClassification.EMOTIONAL: RouteDestination.TINMAN,
    ImpulseClassification.LOGIC: RouteDestination.SCARECROW,
    ImpulseClassification.FEAR: RouteDestination.LION,
    ImpulseClassification.EXECUTIVE: RouteDestination.DOROTHY,
    ImpulseClassification.NOVELTY: RouteDestination.DOROTHY,
    ImpulseClassification.LEGITIMATE: None,
    ImpulseClassification.DESTRUCTIVE: None,
}

FALLBACK_DESTINATION = RouteDestination.DOROTHY

ALL_DESTINATIONS: List[RouteDestination] = list(RouteDestination)


def classify_impulse(impulse_type: Union[ImpulseType, str, None]) -> ImpulseClassification:
    """Table lookup. Unknown types are treated as OTHER."""
    key = coerce_key(ImpulseType, impulse_type) or ImpulseType.OTHER
    return IMPULSE_CLASSIFICATIONS[key]


def suggest_destination(classification: ImpulseClassification) -> Optional[RouteDestination]:
    return SUGGESTED_DESTINATIONS.get(classification)


def _allowed_actions(classification: ImpulseClassification, status: Status) -> List[GateAction]:
    """
    Decision table:
      destructive       block only
      status overload   delay, route
      otherwise         proceed, delay, route
    """
    if classification == ImpulseClassification.DESTRUCTIVE:
        return [GateAction.BLOCK]
    if status == Status.OVERLOAD:
        return [GateAction.DELAY, GateAction.ROUTE]
    return [GateAction.PROCEED, GateAction.DELAY, GateAction.ROUTE]


class InterventionGate:
    """
    Evaluates impulses against the current load and resolves the user's
    choice into a terminal outcome.
    """

    def __init__(
        self,
        config: Optional[GateConfig] = None,
        dialogue: Optional[DialogueSelector] = None,
    ):
        self.config = config or GateConfig()
        self._dialogue = dialogue or DialogueSelector()

    def evaluate(
        self,
        impulse: Impulse,
        status: Union[Status, str, None] = None,
    ) -> GateDecision:
        """Build the menu the user is offered for this impulse."""
        status = coerce_key(Status, status) or Status.STABLE
        classification = classify_impulse(impulse.type)
        allowed = _allowed_actions(classification, status)
        blocked = allowed == [GateAction.BLOCK]

        if blocked:
            logger.info(
                "Blocked %s impulse %r (status=%s)",
                impulse.type.value, impulse.name, status.value,
            )
        else:
            logger.debug(
                "Impulse %s classified %s, allowed=%s",
                impulse.type.value, classification.value, [a.value for a in allowed],
            )

        return GateDecision(
            impulse=impulse,
            classification=classification,
            status=status,
            blocked=blocked,
            allowed_actions=allowed,
            delay_options=[] if blocked else list(self.config.delay_options_minutes),
            route_options=[] if blocked else list(ALL_DESTINATIONS),
            suggested_destination=None if blocked else suggest_destination(classification),
            question=self._dialogue.impulse_question(impulse.type),
            toto_response=self._dialogue.toto_response(status),
        )

    def resolve(
        self,
        decision: GateDecision,
        action: Union[GateAction, str],
        minutes: Optional[int] = None,
        destination: Union[RouteDestination, str, None] = None,
        now: Optional[datetime] = None,
    ) -> GateOutcome:
        """
        Turn the user's pick into an outcome. Anything the decision did not
        offer resolves to BLOCK rather than raising.

        The menu is rebuilt from the impulse and status; the decision's own
        blocked flag, allowed actions and delay options are not trusted.
        """
        now = to_naive_utc(now) if now is not None else utcnow()
        chosen = coerce_key(GateAction, action)
        status = coerce_key(Status, decision.status) or Status.STABLE
        classification = classify_impulse(decision.impulse.type)
        allowed = _allowed_actions(classification, status)

        if allowed == [GateAction.BLOCK]:
            return GateOutcome(kind=GateAction.BLOCK, reason="destructive_impulse")

        if chosen == GateAction.BLOCK:
            return GateOutcome(kind=GateAction.BLOCK, reason="declined")

        if chosen is None or chosen not in allowed:
            logger.info(
                "Refused %r for %s impulse under %s",
                action, decision.impulse.type.value, status.value,
            )
            return GateOutcome(kind=GateAction.BLOCK, reason="action_not_allowed")

        if chosen == GateAction.DELAY:
            if minutes not in self.config.delay_options_minutes:
                minutes = self.config.default_delay_minutes
            return GateOutcome(
                kind=GateAction.DELAY,
                pending_minutes=minutes,
                pending_until=now + timedelta(minutes=minutes),
            )

        if chosen == GateAction.ROUTE:
            target = (
                coerce_key(RouteDestination, destination)
                or suggest_destination(classification)
                or FALLBACK_DESTINATION
            )
            return GateOutcome(kind=GateAction.ROUTE, destination=target)

        return GateOutcome(kind=GateAction.PROCEED)
