"""Tests for the Load Aggregator."""

from datetime import datetime, timedelta, timezone

import pytest

from oz_engine.load.aggregator import LoadAggregator, compute_load_scores, count_work_items
from oz_engine.models.config import EngineConfig, LoadWeights
from oz_engine.models.drift import DriftReading
from oz_engine.models.load import (
    DorothyState,
    LionState,
    ScarecrowState,
    Status,
    Subsystem,
    TinManState,
)
from oz_engine.models.work import (
    BrainDumpRecord,
    ProjectRecord,
    TaskRecord,
    WorkItemCounts,
)


class TestComputeLoadScores:
    def test_zero_counts_zero_scores(self):
        scores = compute_load_scores(WorkItemCounts())
        assert scores.ram_usage == 0
        assert scores.emotional_load == 0
        assert scores.logic_load == 0
        assert scores.anxiety_level == 0
        assert scores.executive_load == 0

    def test_weighted_sums(self):
        counts = WorkItemCounts(
            open_projects=2,
            open_tasks=4,
            unprocessed_dumps=1,
            overdue_tasks=1,
            blocked_tasks=1,
            setback_tasks=1,
        )
        scores = compute_load_scores(counts)
        assert scores.ram_usage == 2 * 15 + 4 * 3 + 1 * 10 + 1 * 8          # 60
        assert scores.emotional_load == 1 * 20 + 1 * 15 + 1 * 10          # 45
        assert scores.logic_load == 4 * 5 + 1 * 15                         # 35
        assert scores.anxiety_level == 1 * 25 + 1 * 10                     # 35
        assert scores.executive_load == 2 * 10 + 4 * 3 + 1 * 12 + 1 * 8    # 52

    def test_anxiety_project_bonus_only_above_three(self):
        assert compute_load_scores(WorkItemCounts(open_projects=3)).anxiety_level == 0
        assert compute_load_scores(WorkItemCounts(open_projects=4)).anxiety_level == 20

    def test_executive_task_term_flattens_past_ten(self):
        assert compute_load_scores(WorkItemCounts(open_tasks=10)).executive_load == 30
        assert compute_load_scores(WorkItemCounts(open_tasks=11)).executive_load == 30
        assert compute_load_scores(WorkItemCounts(open_tasks=50)).executive_load == 30

    def test_all_scores_clamped(self):
        counts = WorkItemCounts(
            open_projects=10000,
            open_tasks=10000,
            unprocessed_dumps=10000,
            overdue_tasks=10000,
            blocked_tasks=10000,
            setback_tasks=10000,
        )
        scores = compute_load_scores(counts)
        assert scores.ram_usage == 100
        assert scores.emotional_load == 100
        assert scores.logic_load == 100
        assert scores.anxiety_level == 100
        assert scores.executive_load == 100

    def test_ram_monotonic_in_projects(self):
        previous = -1.0
        for n in range(0, 20):
            counts = WorkItemCounts(open_projects=n, open_tasks=2, unprocessed_dumps=1, overdue_tasks=1)
            ram = compute_load_scores(counts).ram_usage
            assert ram >= previous
            assert ram <= 100
            previous = ram

    def test_custom_weights(self):
        weights = LoadWeights(project=50, task=0, dump=0, overdue=0)
        scores = compute_load_scores(WorkItemCounts(open_projects=1, open_tasks=5), weights)
        assert scores.ram_usage == 50


class TestCountWorkItems:
    def setup_method(self):
        self.now = datetime(2026, 3, 1, 12, 0, 0)

    def test_none_collections_are_empty(self):
        counts = count_work_items(None, None, None, now=self.now)
        assert counts == WorkItemCounts()

    def test_counting_rules(self):
        projects = [
            ProjectRecord(id="p1", created_at=self.now),
            ProjectRecord(id="p2", created_at=self.now, is_completed=True),
        ]
        tasks = [
            TaskRecord(id="t1"),
            TaskRecord(id="t2", due_date=self.now - timedelta(days=1)),
            TaskRecord(id="t3", due_date=self.now + timedelta(days=1)),
            TaskRecord(id="t4", blocked_by="t1"),
            TaskRecord(id="t5", is_completed=True, due_date=self.now - timedelta(days=3)),
            TaskRecord(id="t6", is_completed=True, is_setback=True),
            TaskRecord(id="t7", is_setback=True),
        ]
        dumps = [
            BrainDumpRecord(id="b1"),
            BrainDumpRecord(id="b2", ai_summary="Sorted into two quests"),
            BrainDumpRecord(id="b3", ai_summary=""),
        ]

        counts = count_work_items(projects, tasks, dumps, now=self.now)
        assert counts.open_projects == 1
        assert counts.open_tasks == 5
        assert counts.overdue_tasks == 1
        assert counts.blocked_tasks == 1
        assert counts.setback_tasks == 2
        assert counts.unprocessed_dumps == 2

    def test_aware_due_dates_compare_with_naive_now(self):
        due = datetime(2026, 3, 1, 11, 0, 0, tzinfo=timezone.utc)
        counts = count_work_items(tasks=[TaskRecord(due_date=due)], now=self.now)
        assert counts.overdue_tasks == 1


class TestLoadAggregator:
    def setup_method(self):
        self.aggregator = LoadAggregator()

    def test_empty_is_stable(self):
        load = self.aggregator.evaluate(WorkItemCounts())
        assert load.status == Status.STABLE
        assert load.toto_alert is False
        assert load.recommended_subsystem is None
        assert load.characters.tin_man == TinManState.HEALTHY
        assert load.characters.scarecrow == ScarecrowState.SHARP
        assert load.characters.lion == LionState.BRAVE
        assert load.characters.dorothy == DorothyState.DECISIVE
        assert "glowing bright" in load.status_message

    def test_overloaded_snapshot(self):
        counts = WorkItemCounts(
            open_projects=5,
            open_tasks=12,
            unprocessed_dumps=3,
            overdue_tasks=2,
            blocked_tasks=2,
            setback_tasks=2,
        )
        load = self.aggregator.evaluate(counts)
        assert load.scores.ram_usage == 100
        assert load.status == Status.OVERLOAD
        assert load.toto_alert is True
        assert load.characters.tin_man == TinManState.BURNOUT        # 40+30+20 = 90
        assert load.characters.scarecrow == ScarecrowState.SCATTERED
        assert load.characters.lion == LionState.FROZEN              # 50+20+20 = 90
        assert load.characters.dorothy == DorothyState.PARALYZED
        assert load.recommended_subsystem == Subsystem.TINMAN

    def test_drift_can_raise_toto_alert(self):
        drift = DriftReading(drift_level=60, is_in_void=False)
        load = self.aggregator.evaluate(WorkItemCounts(), drift=drift)
        assert load.status == Status.STABLE
        assert load.toto_alert is True
        assert load.recommended_subsystem == Subsystem.TOTO
        assert load.drift == drift

    def test_evaluate_records(self):
        now = datetime(2026, 3, 1)
        load = self.aggregator.evaluate_records(
            projects=[ProjectRecord(id=f"p{i}", created_at=now) for i in range(3)],
            tasks=None,
            brain_dumps=[BrainDumpRecord()],
            now=now,
        )
        assert load.counts.open_projects == 3
        assert load.scores.ram_usage == 55
        assert load.status == Status.ELEVATED

    def test_config_thresholds_respected(self):
        config = EngineConfig(status_thresholds={"elevated": 10, "critical": 20, "overload": 30})
        aggregator = LoadAggregator(config)
        load = aggregator.evaluate(WorkItemCounts(open_projects=2))
        assert load.status == Status.OVERLOAD
