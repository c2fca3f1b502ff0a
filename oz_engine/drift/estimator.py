"""
Drift Estimator — how far the user has drifted from their quests.

Drift combines two capped halves:
  inactivity  min(50, idle_minutes * 5)          (caps after 10 idle minutes)
  open loops  min(50, open_tasks * 2 + dumps * 5)
The sum is capped at 100; at 75 or above the user is "in the void".

Idle time is sampled when drift is read, not pushed by a timer. A reading
only moves when somebody asks for it.

A second, behavioural reading counts five signals (time bleed, tab cascade,
idea storm, emotional spike, loop expansion). Three or more at once also
mean the void.
"""

import logging
import statistics
from datetime import datetime, timedelta
from typing import List, Optional

from oz_engine.clock import to_naive_utc, utcnow
from oz_engine.drift.tracker import ActivityTracker
from oz_engine.models.config import DriftConfig, DriftSignalConfig
from oz_engine.models.drift import (
    DriftReading,
    DriftSignalReading,
    DriftSignals,
    DriftSignalState,
)

logger = logging.getLogger(__name__)


def compute_drift(
    idle_minutes: float,
    open_tasks: int,
    unprocessed_dumps: int,
    config: Optional[DriftConfig] = None,
) -> DriftReading:
    """Pure drift computation from already-sampled inputs."""
    cfg = config or DriftConfig()
    idle_minutes = max(0.0, idle_minutes)

    from_inactivity = min(cfg.inactivity_cap, idle_minutes * cfg.inactivity_rate_per_minute)
    from_loops = min(
        cfg.loop_cap,
        open_tasks * cfg.task_weight + unprocessed_dumps * cfg.dump_weight,
    )
    level = min(100.0, from_inactivity + from_loops)

    return DriftReading(
        drift_level=level,
        is_in_void=level >= cfg.void_threshold,
        idle_minutes=idle_minutes,
        drift_from_inactivity=from_inactivity,
        drift_from_loops=from_loops,
    )


def evaluate_drift(
    tracker: ActivityTracker,
    session_id: str,
    open_tasks: int,
    unprocessed_dumps: int,
    config: Optional[DriftConfig] = None,
    now: Optional[datetime] = None,
) -> DriftReading:
    """
    Sample a session's idle time and compute its drift.

    Stamps drift_triggered_at on the first reading inside the void and
    clears it once a reading falls back out.
    """
    now = to_naive_utc(now) if now is not None else utcnow()
    reading = compute_drift(
        tracker.idle_minutes(session_id, now=now),
        open_tasks,
        unprocessed_dumps,
        config,
    )

    state = tracker.get_state(session_id)
    if reading.is_in_void:
        if state.drift_triggered_at is None:
            state = tracker.mark_drift_triggered(session_id, at=now)
            logger.info(
                "Session %s entered the void (drift=%.1f)", session_id, reading.drift_level
            )
    elif state.drift_triggered_at is not None:
        state = tracker.clear_drift_triggered(session_id)
        logger.info("Session %s returned from the void", session_id)

    return reading.model_copy(update={"drift_triggered_at": state.drift_triggered_at})


def _within_window(events: List[datetime], now: datetime, window: timedelta) -> List[datetime]:
    return [t for t in events if timedelta(0) <= now - t < window]


def _is_erratic(activity: List[datetime], cfg: DriftSignalConfig) -> bool:
    """High variance in the gaps between interactions."""
    if len(activity) < cfg.spike_min_events:
        return False
    gaps = [(b - a).total_seconds() for a, b in zip(activity, activity[1:])]
    return statistics.pvariance(gaps) > cfg.spike_variance


def detect_drift_signals(
    state: DriftSignalState,
    open_loops: int,
    now: datetime,
    config: Optional[DriftSignalConfig] = None,
) -> DriftSignalReading:
    """
    Pure signal detection over a session's event history.

    Loop expansion compares open_loops with the previously observed count
    and only fires once a previous count exists.
    """
    cfg = config or DriftSignalConfig()
    now = to_naive_utc(now)
    window = timedelta(seconds=cfg.window_seconds)
    since_progress = max(0.0, (now - state.last_quest_progress).total_seconds() / 60.0)

    signals = DriftSignals(
        time_bleed=since_progress > cfg.time_bleed_minutes,
        tab_cascade=state.tab_count > cfg.tab_cascade_threshold,
        idea_storm=len(_within_window(state.idea_entries, now, window)) >= cfg.idea_storm_count,
        emotional_spike=_is_erratic(_within_window(state.activity_pattern, now, window), cfg),
        loop_expansion=open_loops > state.previous_loop_count > 0,
    )

    w = cfg.weights
    level = (
        (w.time_bleed if signals.time_bleed else 0)
        + (w.tab_cascade if signals.tab_cascade else 0)
        + (w.idea_storm if signals.idea_storm else 0)
        + (w.emotional_spike if signals.emotional_spike else 0)
        + (w.loop_expansion if signals.loop_expansion else 0)
    )
    active = signals.active_count

    return DriftSignalReading(
        signals=signals,
        active_signal_count=active,
        is_void_triggered=active >= cfg.void_signal_count,
        drift_level=min(100.0, level),
        minutes_since_quest_progress=since_progress,
        tab_count=state.tab_count,
        previous_loop_count=state.previous_loop_count,
    )


def evaluate_drift_signals(
    tracker: ActivityTracker,
    session_id: str,
    open_loops: int,
    config: Optional[DriftSignalConfig] = None,
    now: Optional[datetime] = None,
) -> DriftSignalReading:
    """Sample a session's drift signals and record the open-loop count seen."""
    now = to_naive_utc(now) if now is not None else utcnow()
    previous = tracker.observe_open_loops(session_id, open_loops, now=now)
    reading = detect_drift_signals(previous, open_loops, now, config)

    if reading.is_void_triggered:
        logger.info(
            "Session %s shows %d drift signals (%s)",
            session_id,
            reading.active_signal_count,
            ", ".join(k for k, v in reading.signals.model_dump().items() if v),
        )
    return reading
