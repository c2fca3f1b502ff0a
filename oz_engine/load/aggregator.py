"""
Load Aggregator — turns raw work-item counts into the five burden scores.

Behavioral Contract:
- Pure and deterministic for a fixed input
- Outputs are clamped to [0, 100]; inputs are never rejected for being large
- Missing upstream collections count as empty (stable, no-load baseline)
- The five scores are independent; they are allowed to disagree
"""

import logging
from datetime import datetime
from typing import Iterable, Optional

from oz_engine.clock import to_naive_utc, utcnow
from oz_engine.load.classifier import (
    classify_characters,
    classify_status,
    recommend_subsystem,
    status_message,
    toto_alert,
)
from oz_engine.models.config import EngineConfig, LoadWeights
from oz_engine.models.drift import DriftReading
from oz_engine.models.load import CognitiveLoad, LoadScores
from oz_engine.models.work import (
    BrainDumpRecord,
    ProjectRecord,
    TaskRecord,
    WorkItemCounts,
)

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def count_work_items(
    projects: Optional[Iterable[ProjectRecord]] = None,
    tasks: Optional[Iterable[TaskRecord]] = None,
    brain_dumps: Optional[Iterable[BrainDumpRecord]] = None,
    now: Optional[datetime] = None,
) -> WorkItemCounts:
    """Reduce backend records to counts. None means the data is not loaded yet."""
    now = to_naive_utc(now) if now is not None else utcnow()

    projects = list(projects or [])
    tasks = list(tasks or [])
    brain_dumps = list(brain_dumps or [])

    open_tasks = [t for t in tasks if not t.is_completed]

    return WorkItemCounts(
        open_projects=sum(1 for p in projects if not p.is_completed),
        open_tasks=len(open_tasks),
        unprocessed_dumps=sum(1 for b in brain_dumps if not b.ai_summary),
        overdue_tasks=sum(
            1 for t in open_tasks
            if t.due_date is not None and to_naive_utc(t.due_date) < now
        ),
        blocked_tasks=sum(1 for t in open_tasks if t.blocked_by),
        # Setbacks weigh on the Tin Man even once the task is closed
        setback_tasks=sum(1 for t in tasks if t.is_setback),
    )


def compute_load_scores(
    counts: WorkItemCounts,
    weights: Optional[LoadWeights] = None,
) -> LoadScores:
    """
    Weighted sums per character:
      RAM usage (overall)  projects, tasks, dumps, overdue via LoadWeights
      Tin Man (emotional)  setbacks*20 + blocked*15 + overdue*10
      Scarecrow (logic)    tasks*5 + dumps*15
      Lion (anxiety)       overdue*25 + blocked*10 + 20 if more than 3 projects
      Dorothy (executive)  projects*10 + tasks (flat 30 past 10) + dumps*12 + blocked*8
    """
    w = weights or LoadWeights()
    c = counts

    ram_usage = (
        c.open_projects * w.project
        + c.open_tasks * w.task
        + c.unprocessed_dumps * w.dump
        + c.overdue_tasks * w.overdue
    )
    emotional_load = c.setback_tasks * 20 + c.blocked_tasks * 15 + c.overdue_tasks * 10
    logic_load = c.open_tasks * 5 + c.unprocessed_dumps * 15
    anxiety_level = (
        c.overdue_tasks * 25
        + c.blocked_tasks * 10
        + (20 if c.open_projects > 3 else 0)
    )
    executive_load = (
        c.open_projects * 10
        + (30 if c.open_tasks > 10 else c.open_tasks * 3)
        + c.unprocessed_dumps * 12
        + c.blocked_tasks * 8
    )

    return LoadScores(
        ram_usage=_clamp(ram_usage),
        emotional_load=_clamp(emotional_load),
        logic_load=_clamp(logic_load),
        anxiety_level=_clamp(anxiety_level),
        executive_load=_clamp(executive_load),
    )


class LoadAggregator:
    """
    Builds the full CognitiveLoad snapshot: scores, status, characters,
    Toto's alarm and the recommended routing subsystem.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def evaluate(
        self,
        counts: WorkItemCounts,
        drift: Optional[DriftReading] = None,
    ) -> CognitiveLoad:
        scores = compute_load_scores(counts, self.config.weights)
        status = classify_status(scores.ram_usage, self.config.status_thresholds)
        alert = toto_alert(scores, drift.drift_level if drift else 0.0)

        logger.debug(
            "Load evaluated: ram=%.1f status=%s toto_alert=%s",
            scores.ram_usage, status.value, alert,
        )

        return CognitiveLoad(
            counts=counts,
            scores=scores,
            status=status,
            status_message=status_message(status),
            characters=classify_characters(scores, self.config.character_thresholds),
            toto_alert=alert,
            drift=drift,
            recommended_subsystem=recommend_subsystem(scores, alert),
        )

    def evaluate_records(
        self,
        projects: Optional[Iterable[ProjectRecord]] = None,
        tasks: Optional[Iterable[TaskRecord]] = None,
        brain_dumps: Optional[Iterable[BrainDumpRecord]] = None,
        drift: Optional[DriftReading] = None,
        now: Optional[datetime] = None,
    ) -> CognitiveLoad:
        """Count backend records, then evaluate."""
        counts = count_work_items(projects, tasks, brain_dumps, now=now)
        return self.evaluate(counts, drift=drift)
