"""Oz Engine data models."""

from oz_engine.models.config import (
    CharacterThresholds,
    DriftConfig,
    DriftSignalConfig,
    EngineConfig,
    GateConfig,
    LoadWeights,
    SignalWeights,
    StatusThresholds,
    ThresholdPair,
)
from oz_engine.models.dialogue import (
    InterventionKey,
    MessageCategory,
    OnboardingStage,
    Tone,
    WizardMessage,
)
from oz_engine.models.drift import (
    DriftReading,
    DriftSignalReading,
    DriftSignals,
    DriftSignalState,
    DriftState,
)
from oz_engine.models.gravity import GravityCheck, Quest, QuestGravity
from oz_engine.models.impulse import (
    GateAction,
    GateDecision,
    GateOutcome,
    Impulse,
    ImpulseClassification,
    ImpulseType,
    RouteDestination,
)
from oz_engine.models.journey import DayMilestone, JourneyFeature, JourneyProgress
from oz_engine.models.load import (
    CharacterLevel,
    CharacterStates,
    CognitiveLoad,
    DorothyState,
    LionState,
    LoadScores,
    ScarecrowState,
    Status,
    Subsystem,
    TinManState,
)
from oz_engine.models.orbit import ProjectOrbit, ProjectOrbitAssignment, ProjectRef
from oz_engine.models.work import (
    BrainDumpRecord,
    ProjectRecord,
    TaskRecord,
    WorkItemCounts,
)

__all__ = [
    "BrainDumpRecord",
    "CharacterLevel",
    "CharacterStates",
    "CharacterThresholds",
    "CognitiveLoad",
    "DayMilestone",
    "DorothyState",
    "DriftConfig",
    "DriftReading",
    "DriftSignalConfig",
    "DriftSignalReading",
    "DriftSignals",
    "DriftSignalState",
    "DriftState",
    "EngineConfig",
    "GateAction",
    "GateConfig",
    "GateDecision",
    "GateOutcome",
    "GravityCheck",
    "Impulse",
    "ImpulseClassification",
    "ImpulseType",
    "InterventionKey",
    "JourneyFeature",
    "JourneyProgress",
    "LionState",
    "LoadScores",
    "LoadWeights",
    "MessageCategory",
    "OnboardingStage",
    "ProjectOrbit",
    "ProjectOrbitAssignment",
    "ProjectRecord",
    "ProjectRef",
    "Quest",
    "QuestGravity",
    "ScarecrowState",
    "SignalWeights",
    "Status",
    "StatusThresholds",
    "Subsystem",
    "TaskRecord",
    "ThresholdPair",
    "TinManState",
    "Tone",
    "WizardMessage",
    "WorkItemCounts",
]
