"""Impulses — pending user actions and the gate's rulings on them."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator

from oz_engine.models.load import Status


class ImpulseType(str, Enum):
    """Coarse kind of action the user is about to take."""
    PROJECT = "project"         # Start a new project
    TASK = "task"               # Work on / add a task in the current quest
    IDEA = "idea"               # Chase a fresh idea
    PURCHASE = "purchase"
    MESSAGE = "message"         # Send or answer a loaded message
    RESEARCH = "research"       # Go down a research rabbit hole
    REORGANIZE = "reorganize"   # Re-plan, re-sort, re-prioritize
    ABANDON = "abandon"         # Delete or walk away from existing work
    OTHER = "other"


class ImpulseClassification(str, Enum):
    NOVELTY = "novelty"
    EMOTIONAL = "emotional"
    FEAR = "fear"
    LOGIC = "logic"
    EXECUTIVE = "executive"
    LEGITIMATE = "legitimate"
    DESTRUCTIVE = "destructive"


class RouteDestination(str, Enum):
    TINMAN = "tinman"
    SCARECROW = "scarecrow"
    LION = "lion"
    DOROTHY = "dorothy"


class GateAction(str, Enum):
    """Terminal states of the gate."""
    PROCEED = "proceed"
    DELAY = "delay"
    ROUTE = "route"
    BLOCK = "block"


class Impulse(BaseModel):
    type: ImpulseType = ImpulseType.OTHER
    name: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_is_other(cls, v):
        # Impulse types come from UI strings and may grow over time
        if isinstance(v, str) and v not in [t.value for t in ImpulseType]:
            return ImpulseType.OTHER
        return v


class GateDecision(BaseModel):
    """What the gate offers the user for one impulse."""

    impulse: Impulse
    classification: ImpulseClassification
    status: Status
    blocked: bool = False
    allowed_actions: List[GateAction]
    delay_options: List[int] = []
    route_options: List[RouteDestination] = []
    suggested_destination: Optional[RouteDestination] = None
    question: str
    toto_response: Optional[str] = None


class GateOutcome(BaseModel):
    """The user's resolved choice."""

    kind: GateAction
    pending_minutes: Optional[int] = None
    pending_until: Optional[datetime] = None
    destination: Optional[RouteDestination] = None
    reason: Optional[str] = None            # Machine-readable, set on block
