"""
Oz Engine API — FastAPI endpoints.

Exposes the engine to the host UI:
- Cognitive load snapshots
- Session activity and drift
- Project orbits
- Wizard dialogue
- Impulse gating
- Quest gravity
- Journey progress
- Engine configuration
"""

import logging
import random
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from oz_engine.dialogue.selector import DialogueSelector
from oz_engine.drift.estimator import evaluate_drift, evaluate_drift_signals
from oz_engine.drift.tracker import ActivityTracker
from oz_engine.gravity.engine import (
    ambient_novelty_gravity,
    calculate_quest_gravity,
    gravity_check,
)
from oz_engine.intervention.gate import InterventionGate
from oz_engine.journey.progress import journey_progress
from oz_engine.load.aggregator import LoadAggregator, count_work_items
from oz_engine.models.config import EngineConfig
from oz_engine.models.gravity import Quest
from oz_engine.models.impulse import GateAction, GateDecision, Impulse, RouteDestination
from oz_engine.models.orbit import ProjectRef
from oz_engine.models.work import (
    BrainDumpRecord,
    ProjectRecord,
    TaskRecord,
    WorkItemCounts,
)
from oz_engine.orbit.partitioner import open_project_refs, partition_orbits

logger = logging.getLogger(__name__)


# --- Request/Response Models ---

class LoadCountsRequest(BaseModel):
    counts: WorkItemCounts = WorkItemCounts()
    session_id: Optional[str] = None


class LoadRecordsRequest(BaseModel):
    projects: Optional[List[ProjectRecord]] = None
    tasks: Optional[List[TaskRecord]] = None
    brain_dumps: Optional[List[BrainDumpRecord]] = None
    session_id: Optional[str] = None


class ActivityRequest(BaseModel):
    at: Optional[datetime] = None


class QuestProgressRequest(BaseModel):
    quest_id: Optional[str] = None
    at: Optional[datetime] = None


class TabsRequest(BaseModel):
    opened: int = Field(ge=1, default=1)


class OrbitRequest(BaseModel):
    projects: List[ProjectRef] = []


class OrbitRecordsRequest(BaseModel):
    projects: Optional[List[ProjectRecord]] = None


class ImpulseEvaluateRequest(BaseModel):
    impulse: Impulse
    status: Optional[str] = None
    counts: Optional[WorkItemCounts] = None


class ImpulseResolveRequest(BaseModel):
    decision: GateDecision
    action: GateAction
    minutes: Optional[int] = None
    destination: Optional[RouteDestination] = None


class GravityRequest(BaseModel):
    quest: Quest
    tab_count: int = 0
    unprocessed_ideas: int = 0
    emotional_load: float = 0.0


# --- Application Factory ---

def create_app(
    activity_tracker: Optional[ActivityTracker] = None,
    dialogue_selector: Optional[DialogueSelector] = None,
    config: Optional[EngineConfig] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Oz Engine API",
        description="Cognitive load, drift and impulse control for the Emerald City",
        version="0.1.0-alpha",
    )

    # Initialize components
    cfg = config or EngineConfig()
    tracker = activity_tracker or ActivityTracker()
    dialogue = dialogue_selector or DialogueSelector(rng)
    aggregator = LoadAggregator(cfg)
    gate = InterventionGate(cfg.gate, dialogue)

    # Store components on app state for access in endpoints
    app.state.config = cfg
    app.state.activity_tracker = tracker
    app.state.dialogue = dialogue
    app.state.aggregator = aggregator
    app.state.gate = gate

    def _drift_for(session_id: Optional[str], counts: WorkItemCounts):
        if not session_id:
            return None
        return evaluate_drift(
            tracker,
            session_id,
            counts.open_tasks,
            counts.unprocessed_dumps,
            config=aggregator.config.drift,
        )

    # === COGNITIVE LOAD ===

    @app.post("/load/counts")
    def evaluate_counts(req: LoadCountsRequest):
        """Snapshot from pre-computed counts."""
        drift = _drift_for(req.session_id, req.counts)
        return aggregator.evaluate(req.counts, drift=drift).model_dump(mode="json")

    @app.post("/load/evaluate")
    def evaluate_records(req: LoadRecordsRequest):
        """Snapshot from raw backend records. Missing collections count as empty."""
        counts = count_work_items(req.projects, req.tasks, req.brain_dumps)
        drift = _drift_for(req.session_id, counts)
        return aggregator.evaluate(counts, drift=drift).model_dump(mode="json")

    # === SESSIONS & DRIFT ===

    @app.post("/sessions/{session_id}/activity")
    def record_activity(session_id: str, req: Optional[ActivityRequest] = None):
        """Click/keypress heartbeat from the host UI."""
        state = tracker.record_activity(session_id, at=req.at if req else None)
        return state.model_dump(mode="json")

    @app.post("/sessions/{session_id}/quest-progress")
    def mark_quest_progress(session_id: str, req: QuestProgressRequest):
        state = tracker.mark_quest_progress(session_id, req.quest_id, at=req.at)
        return state.model_dump(mode="json")

    @app.get("/sessions/{session_id}/drift")
    def get_drift(session_id: str, open_tasks: int = 0, unprocessed_dumps: int = 0):
        """Sample drift for a session."""
        if not tracker.has_session(session_id):
            raise HTTPException(404, "Session not found")
        if open_tasks < 0 or unprocessed_dumps < 0:
            raise HTTPException(422, "Counts must be non-negative")
        reading = evaluate_drift(
            tracker, session_id, open_tasks, unprocessed_dumps,
            config=aggregator.config.drift,
        )
        return reading.model_dump(mode="json")

    @app.post("/sessions/{session_id}/tabs")
    def record_tabs(session_id: str, req: Optional[TabsRequest] = None):
        """New tabs or apps opened by the user."""
        signals = tracker.record_tab_opened(session_id, req.opened if req else 1)
        return signals.model_dump(mode="json")

    @app.post("/sessions/{session_id}/brain-dumps")
    def record_brain_dump(session_id: str, req: Optional[ActivityRequest] = None):
        signals = tracker.record_brain_dump(session_id, at=req.at if req else None)
        return signals.model_dump(mode="json")

    @app.get("/sessions/{session_id}/drift-signals")
    def get_drift_signals(session_id: str, open_loops: int = 0):
        """Sample the behavioural drift signals for a session."""
        if not tracker.has_session(session_id):
            raise HTTPException(404, "Session not found")
        if open_loops < 0:
            raise HTTPException(422, "Counts must be non-negative")
        reading = evaluate_drift_signals(
            tracker, session_id, open_loops,
            config=aggregator.config.drift.signals,
        )
        return reading.model_dump(mode="json")

    @app.delete("/sessions/{session_id}")
    def reset_session(session_id: str):
        if not tracker.reset_session(session_id):
            raise HTTPException(404, "Session not found")
        return {"status": "reset", "session_id": session_id}

    # === ORBITS ===

    @app.post("/orbits")
    def assign_orbits(req: OrbitRequest):
        return partition_orbits(req.projects).model_dump(mode="json")

    @app.post("/orbits/records")
    def assign_orbits_from_records(req: OrbitRecordsRequest):
        """Same as /orbits, filtering completed projects first."""
        return partition_orbits(open_project_refs(req.projects)).model_dump(mode="json")

    # === DIALOGUE ===

    @app.get("/messages/{category}")
    def get_message(
        category: str,
        status: Optional[str] = None,
        stage: Optional[str] = None,
        intervention_type: Optional[str] = None,
    ):
        message = dialogue.get_message(
            category, status=status, stage=stage, intervention_type=intervention_type
        )
        return message.model_dump(mode="json")

    # === IMPULSES ===

    @app.post("/impulses/evaluate")
    def evaluate_impulse(req: ImpulseEvaluateRequest):
        """Gate an impulse against an explicit status, or one derived from counts."""
        status = req.status
        if status is None and req.counts is not None:
            status = aggregator.evaluate(req.counts).status
        return gate.evaluate(req.impulse, status).model_dump(mode="json")

    @app.post("/impulses/resolve")
    def resolve_impulse(req: ImpulseResolveRequest):
        outcome = gate.resolve(
            req.decision, req.action, minutes=req.minutes, destination=req.destination
        )
        return outcome.model_dump(mode="json")

    # === GRAVITY ===

    @app.post("/gravity/quests")
    def quest_gravity(req: GravityRequest):
        gravity = calculate_quest_gravity(req.quest)
        novelty = ambient_novelty_gravity(
            req.tab_count, req.unprocessed_ideas, req.emotional_load
        )
        check = gravity_check(gravity.visual_mass, novelty)
        return {
            "gravity": gravity.model_dump(mode="json"),
            "novelty_gravity": novelty,
            "check": check.model_dump(mode="json"),
        }

    # === JOURNEY ===

    @app.get("/journey/{day}")
    def get_journey(day: int):
        return journey_progress(day).model_dump(mode="json")

    # === CONFIGURATION ===

    @app.get("/config")
    def get_config():
        return aggregator.config.model_dump()

    @app.put("/config")
    def update_config(new_config: EngineConfig):
        """Replace all tunables."""
        aggregator.config = new_config
        gate.config = new_config.gate
        app.state.config = new_config
        logger.info("Engine configuration replaced")
        return new_config.model_dump()

    return app


# Default application instance
app = create_app()
