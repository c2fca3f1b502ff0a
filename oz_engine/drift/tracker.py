"""
Activity Tracker — per-session record of the last user interaction.

The only mutable state in the engine. One DriftState per session, held
in memory; the host restores it from session storage if it has one.
lastActiveTime only ever moves forward, so a stale read just means a
slightly low drift estimate.

Beside each DriftState sits a DriftSignalState: the short event history
(activity rhythm, brain-dump bursts, open tabs, open-loop count) that the
drift signals are read from.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional

from oz_engine.clock import to_naive_utc, utcnow
from oz_engine.models.drift import DriftSignalState, DriftState

logger = logging.getLogger(__name__)

# Events kept per history list; older ones are dropped
HISTORY_LIMIT = 20


def _append_event(events: List[datetime], at: datetime) -> List[datetime]:
    return sorted(events + [at])[-HISTORY_LIMIT:]


class ActivityTracker:
    """
    In-memory session store for the prototype.
    Production would back this with the host's session storage.
    """

    def __init__(self):
        self._sessions: Dict[str, DriftState] = {}
        self._signals: Dict[str, DriftSignalState] = {}
        self._lock = threading.Lock()

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get_state(self, session_id: str) -> DriftState:
        """Get a session's state, starting the session clock on first use."""
        with self._lock:
            return self._get_or_create(session_id, utcnow())

    def get_signal_state(self, session_id: str) -> DriftSignalState:
        with self._lock:
            self._get_or_create(session_id, utcnow())
            return self._signals[session_id]

    def restore(
        self,
        session_id: str,
        state: DriftState,
        signals: Optional[DriftSignalState] = None,
    ) -> None:
        """Hydrate a session from previously persisted state."""
        last_active = to_naive_utc(state.last_active_time)
        with self._lock:
            self._sessions[session_id] = state.model_copy(
                update={"last_active_time": last_active}
            )
            if signals is None:
                signals = DriftSignalState(last_quest_progress=last_active)
            self._signals[session_id] = signals

    def record_activity(self, session_id: str, at: Optional[datetime] = None) -> DriftState:
        """Register a click or keypress."""
        at = to_naive_utc(at) if at is not None else utcnow()
        with self._lock:
            return self._touch(session_id, at)

    def mark_quest_progress(
        self,
        session_id: str,
        quest_id: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> DriftState:
        """
        Quest progress counts as activity and remembers which quest moved.
        Without a quest id the previously recorded one is kept.
        """
        at = to_naive_utc(at) if at is not None else utcnow()
        with self._lock:
            state = self._touch(session_id, at)
            if quest_id is not None:
                state = state.model_copy(update={"last_quest_id": quest_id})
                self._sessions[session_id] = state

            signals = self._signals[session_id]
            if at > signals.last_quest_progress:
                self._signals[session_id] = signals.model_copy(
                    update={"last_quest_progress": at}
                )
            return state

    def record_tab_opened(self, session_id: str, count: int = 1) -> DriftSignalState:
        with self._lock:
            self._get_or_create(session_id, utcnow())
            signals = self._signals[session_id]
            signals = signals.model_copy(
                update={"tab_count": max(0, signals.tab_count + count)}
            )
            self._signals[session_id] = signals
            return signals

    def record_brain_dump(self, session_id: str, at: Optional[datetime] = None) -> DriftSignalState:
        """A new brain-dump entry, for idea-storm detection."""
        at = to_naive_utc(at) if at is not None else utcnow()
        with self._lock:
            self._get_or_create(session_id, at)
            signals = self._signals[session_id]
            signals = signals.model_copy(
                update={"idea_entries": _append_event(signals.idea_entries, at)}
            )
            self._signals[session_id] = signals
            return signals

    def observe_open_loops(
        self,
        session_id: str,
        open_loops: int,
        now: Optional[datetime] = None,
    ) -> DriftSignalState:
        """
        Record the current open-loop count. Returns the signal state as it
        was before, so growth is measured against the last observation.
        """
        now = to_naive_utc(now) if now is not None else utcnow()
        with self._lock:
            self._get_or_create(session_id, now)
            before = self._signals[session_id]
            after = before.model_copy(update={"previous_loop_count": max(0, open_loops)})
            self._signals[session_id] = after
            return before

    def reset_signals(self, session_id: str, at: Optional[datetime] = None) -> DriftSignalState:
        """Start the signal history over, as after a return from the void."""
        at = to_naive_utc(at) if at is not None else utcnow()
        with self._lock:
            self._get_or_create(session_id, at)
            signals = DriftSignalState(last_quest_progress=at)
            self._signals[session_id] = signals
            return signals

    def idle_minutes(self, session_id: str, now: Optional[datetime] = None) -> float:
        now = to_naive_utc(now) if now is not None else utcnow()
        with self._lock:
            state = self._get_or_create(session_id, now)
        return max(0.0, (now - state.last_active_time).total_seconds() / 60.0)

    def mark_drift_triggered(self, session_id: str, at: Optional[datetime] = None) -> DriftState:
        at = to_naive_utc(at) if at is not None else utcnow()
        with self._lock:
            state = self._get_or_create(session_id, at)
            state = state.model_copy(update={"drift_triggered_at": at})
            self._sessions[session_id] = state
            return state

    def clear_drift_triggered(self, session_id: str) -> DriftState:
        with self._lock:
            state = self._get_or_create(session_id, utcnow())
            state = state.model_copy(update={"drift_triggered_at": None})
            self._sessions[session_id] = state
            return state

    def reset_session(self, session_id: str) -> bool:
        """Forget a session. Returns False if it was never seen."""
        with self._lock:
            if session_id in self._sessions:
                del self._sessions[session_id]
                self._signals.pop(session_id, None)
                logger.debug("Session %s reset", session_id)
                return True
            return False

    def _touch(self, session_id: str, at: datetime) -> DriftState:
        """Forward-only activity update. Caller holds the lock."""
        state = self._get_or_create(session_id, at)
        if at > state.last_active_time:
            state = state.model_copy(update={"last_active_time": at})
            self._sessions[session_id] = state

        signals = self._signals[session_id]
        self._signals[session_id] = signals.model_copy(
            update={"activity_pattern": _append_event(signals.activity_pattern, at)}
        )
        return state

    def _get_or_create(self, session_id: str, now: datetime) -> DriftState:
        state = self._sessions.get(session_id)
        if state is None:
            state = DriftState(last_active_time=now)
            self._sessions[session_id] = state
            logger.debug("Session %s started", session_id)
        if session_id not in self._signals:
            self._signals[session_id] = DriftSignalState(last_quest_progress=state.last_active_time)
        return state
