"""Drift — session-scoped activity state and the derived drift reading."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class DriftState(BaseModel):
    """
    The single mutable cell of the engine. Written by the Activity Tracker,
    read by the Drift Estimator. Lives for one user session.
    """

    last_quest_id: Optional[str] = None
    last_active_time: datetime
    drift_triggered_at: Optional[datetime] = None


class DriftReading(BaseModel):
    """A sampled drift measurement."""

    drift_level: float = Field(ge=0, le=100)
    is_in_void: bool
    idle_minutes: float = Field(ge=0, default=0.0)
    drift_from_inactivity: float = 0.0
    drift_from_loops: float = 0.0
    drift_triggered_at: Optional[datetime] = None


class DriftSignalState(BaseModel):
    """Recent event history kept beside DriftState for signal detection."""

    last_quest_progress: datetime
    tab_count: int = Field(ge=0, default=1)
    previous_loop_count: int = Field(ge=0, default=0)
    idea_entries: List[datetime] = []
    activity_pattern: List[datetime] = []


class DriftSignals(BaseModel):
    time_bleed: bool = False          # too long without quest progress
    tab_cascade: bool = False         # too many tabs or apps open
    idea_storm: bool = False          # brain dumps arriving in a burst
    emotional_spike: bool = False     # erratic activity rhythm
    loop_expansion: bool = False      # open loops growing

    @property
    def active_count(self) -> int:
        return sum(1 for active in self.model_dump().values() if active)


class DriftSignalReading(BaseModel):
    """Behavioural signals sampled alongside the drift score."""

    signals: DriftSignals
    active_signal_count: int = Field(ge=0, le=5)
    is_void_triggered: bool
    drift_level: float = Field(ge=0, le=100)
    minutes_since_quest_progress: float = Field(ge=0)
    tab_count: int
    previous_loop_count: int
