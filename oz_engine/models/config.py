"""Engine configuration — tunable constants with the product defaults."""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class LoadWeights(BaseModel):
    """Per-item contribution to RAM usage, in percentage points."""

    project: float = Field(ge=0, default=15)
    task: float = Field(ge=0, default=3)
    dump: float = Field(ge=0, default=10)
    overdue: float = Field(ge=0, default=8)


class ThresholdPair(BaseModel):
    """Scores >= stressed are level 2, >= burnout are level 3."""

    stressed: float = Field(ge=0, le=100, default=40)
    burnout: float = Field(ge=0, le=100, default=70)

    @model_validator(mode="after")
    def _ordered(self):
        if self.stressed > self.burnout:
            raise ValueError("stressed threshold must not exceed burnout threshold")
        return self


class CharacterThresholds(BaseModel):
    tin_man: ThresholdPair = ThresholdPair()
    scarecrow: ThresholdPair = ThresholdPair()
    lion: ThresholdPair = ThresholdPair()
    dorothy: ThresholdPair = ThresholdPair()


class StatusThresholds(BaseModel):
    elevated: float = 40
    critical: float = 65
    overload: float = 85

    @model_validator(mode="after")
    def _monotonic(self):
        if not (self.elevated <= self.critical <= self.overload):
            raise ValueError("status thresholds must be non-decreasing")
        return self


class SignalWeights(BaseModel):
    """Drift points contributed by each active signal."""

    time_bleed: float = Field(ge=0, le=100, default=25)
    tab_cascade: float = Field(ge=0, le=100, default=20)
    idea_storm: float = Field(ge=0, le=100, default=20)
    emotional_spike: float = Field(ge=0, le=100, default=20)
    loop_expansion: float = Field(ge=0, le=100, default=15)


class DriftSignalConfig(BaseModel):
    """Thresholds for the five behavioural drift signals."""

    time_bleed_minutes: float = Field(gt=0, default=15)
    tab_cascade_threshold: int = Field(ge=0, default=3)
    idea_storm_count: int = Field(ge=1, default=3)
    window_seconds: float = Field(gt=0, default=60)
    spike_min_events: int = Field(ge=3, default=5)
    # Variance of inter-activity gaps, in seconds squared
    spike_variance: float = Field(ge=0, default=10.0)
    void_signal_count: int = Field(ge=1, le=5, default=3)
    weights: SignalWeights = SignalWeights()


class DriftConfig(BaseModel):
    inactivity_rate_per_minute: float = Field(ge=0, default=5)
    inactivity_cap: float = Field(ge=0, le=100, default=50)
    loop_cap: float = Field(ge=0, le=100, default=50)
    task_weight: float = Field(ge=0, default=2)
    dump_weight: float = Field(ge=0, default=5)
    void_threshold: float = Field(ge=0, le=100, default=75)
    signals: DriftSignalConfig = DriftSignalConfig()


class GateConfig(BaseModel):
    delay_options_minutes: List[int] = [5, 10, 30, 60]
    default_delay_minutes: int = 10

    @field_validator("delay_options_minutes")
    @classmethod
    def _positive(cls, v: List[int]) -> List[int]:
        if not v or any(m <= 0 for m in v):
            raise ValueError("delay options must be a non-empty list of positive minutes")
        return sorted(v)

    @model_validator(mode="after")
    def _default_on_menu(self):
        if self.default_delay_minutes not in self.delay_options_minutes:
            raise ValueError("default delay must be one of the delay options")
        return self


class EngineConfig(BaseModel):
    """All tunables in one place."""

    weights: LoadWeights = LoadWeights()
    status_thresholds: StatusThresholds = StatusThresholds()
    character_thresholds: CharacterThresholds = CharacterThresholds()
    drift: DriftConfig = DriftConfig()
    gate: GateConfig = GateConfig()
