"""Tests for the FastAPI API endpoints."""

import random
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from oz_engine.api.app import create_app
from oz_engine.dialogue.messages import GREETINGS
from oz_engine.dialogue.selector import DialogueSelector
from oz_engine.drift.tracker import ActivityTracker
from oz_engine.models.load import Status


@pytest.fixture
def tracker():
    return ActivityTracker()


@pytest.fixture
def client(tracker):
    """Create a test client with fresh components."""
    app = create_app(
        activity_tracker=tracker,
        dialogue_selector=DialogueSelector(random.Random(0)),
    )
    return TestClient(app)


class TestLoadEndpoints:
    def test_counts(self, client):
        response = client.post("/load/counts", json={
            "counts": {"open_projects": 4, "open_tasks": 10, "unprocessed_dumps": 1},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["scores"]["ram_usage"] == 100
        assert data["status"] == "overload"
        assert data["characters"]["dorothy"] == "paralyzed"
        assert data["drift"] is None

    def test_negative_counts_rejected(self, client):
        response = client.post("/load/counts", json={"counts": {"open_tasks": -2}})
        assert response.status_code == 422

    def test_records_missing_collections(self, client):
        response = client.post("/load/evaluate", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "stable"
        assert data["counts"]["open_tasks"] == 0

    def test_records_with_session_drift(self, client, tracker):
        tracker.record_activity("s1", at=datetime.utcnow() - timedelta(minutes=30))
        response = client.post("/load/evaluate", json={
            "tasks": [{"id": "t1"}, {"id": "t2", "blocked_by": "t1"}],
            "brain_dumps": [{"id": "b1"}],
            "session_id": "s1",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["counts"]["blocked_tasks"] == 1
        # 50 idle + (2*2 + 1*5) loops
        assert data["drift"]["drift_level"] == pytest.approx(59)
        assert data["drift"]["is_in_void"] is False


class TestSessionEndpoints:
    def test_activity_then_drift(self, client):
        assert client.post("/sessions/abc/activity").status_code == 200
        response = client.get("/sessions/abc/drift", params={"open_tasks": 5, "unprocessed_dumps": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["drift_from_loops"] == 20
        assert data["is_in_void"] is False

    def test_drift_unknown_session(self, client):
        assert client.get("/sessions/ghost/drift").status_code == 404

    def test_drift_negative_counts(self, client):
        client.post("/sessions/abc/activity")
        response = client.get("/sessions/abc/drift", params={"open_tasks": -1})
        assert response.status_code == 422

    def test_quest_progress(self, client):
        response = client.post("/sessions/abc/quest-progress", json={"quest_id": "q7"})
        assert response.status_code == 200
        assert response.json()["last_quest_id"] == "q7"

    def test_quest_progress_without_id_keeps_quest(self, client):
        client.post("/sessions/abc/quest-progress", json={"quest_id": "q7"})
        response = client.post("/sessions/abc/quest-progress", json={})
        assert response.json()["last_quest_id"] == "q7"

    def test_drift_signals(self, client):
        assert client.post("/sessions/abc/tabs", json={"opened": 3}).json()["tab_count"] == 4
        for _ in range(3):
            client.post("/sessions/abc/brain-dumps")

        response = client.get("/sessions/abc/drift-signals", params={"open_loops": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["signals"]["tab_cascade"] is True
        assert data["signals"]["idea_storm"] is True
        assert data["active_signal_count"] == 2
        assert data["is_void_triggered"] is False

    def test_drift_signals_unknown_session(self, client):
        assert client.get("/sessions/ghost/drift-signals").status_code == 404

    def test_tabs_must_be_positive(self, client):
        assert client.post("/sessions/abc/tabs", json={"opened": 0}).status_code == 422

    def test_reset(self, client):
        client.post("/sessions/abc/activity")
        assert client.delete("/sessions/abc").status_code == 200
        assert client.delete("/sessions/abc").status_code == 404


class TestOrbitEndpoints:
    def test_orbits(self, client):
        base = datetime(2026, 1, 1)
        projects = [
            {"id": f"p{i}", "created_at": (base + timedelta(days=i)).isoformat()}
            for i in range(8)
        ]
        response = client.post("/orbits", json={"projects": projects})
        assert response.status_code == 200
        data = response.json()
        assert data["planet"] == "p0"
        assert data["moons"] == ["p1", "p2"]
        assert data["probes"] == ["p3", "p4", "p5"]
        assert data["archived_count"] == 2
        assert data["can_add_moon"] is False

    def test_orbits_from_records(self, client):
        response = client.post("/orbits/records", json={"projects": [
            {"id": "old", "created_at": "2026-01-01T00:00:00", "is_completed": True},
            {"id": "new", "created_at": "2026-02-01T00:00:00"},
        ]})
        assert response.json()["planet"] == "new"


class TestMessageEndpoints:
    def test_greeting(self, client):
        response = client.get("/messages/greeting", params={"status": "critical"})
        assert response.status_code == 200
        data = response.json()
        assert data["text"] in GREETINGS[Status.CRITICAL]
        assert data["tone"] == "warning"

    def test_onboarding(self, client):
        first = client.get("/messages/onboarding", params={"stage": "day7"}).json()
        second = client.get("/messages/onboarding", params={"stage": "day7"}).json()
        assert first == second
        assert first["tone"] == "celebrating"

    def test_unknown_category_falls_back(self, client):
        response = client.get("/messages/nonsense")
        assert response.status_code == 200
        assert response.json()["category"] == "status"


class TestImpulseEndpoints:
    def test_evaluate_and_resolve(self, client):
        decision = client.post("/impulses/evaluate", json={
            "impulse": {"type": "idea", "name": "Learn the banjo"},
            "status": "elevated",
        }).json()
        assert "proceed" in decision["allowed_actions"]

        outcome = client.post("/impulses/resolve", json={
            "decision": decision,
            "action": "delay",
            "minutes": 60,
        }).json()
        assert outcome["kind"] == "delay"
        assert outcome["pending_minutes"] == 60

    def test_status_from_counts(self, client):
        decision = client.post("/impulses/evaluate", json={
            "impulse": {"type": "project"},
            "counts": {"open_projects": 6},
        }).json()
        assert decision["status"] == "overload"
        assert "proceed" not in decision["allowed_actions"]

    def test_destructive_blocked(self, client):
        decision = client.post("/impulses/evaluate", json={
            "impulse": {"type": "abandon"},
            "status": "stable",
        }).json()
        assert decision["blocked"] is True
        outcome = client.post("/impulses/resolve", json={
            "decision": decision, "action": "proceed",
        }).json()
        assert outcome["kind"] == "block"

    def test_unknown_impulse_type(self, client):
        response = client.post("/impulses/evaluate", json={"impulse": {"type": "juggling"}})
        assert response.status_code == 200
        assert response.json()["classification"] == "novelty"

    def test_unknown_status_treated_as_stable(self, client):
        response = client.post("/impulses/evaluate", json={
            "impulse": {"type": "project"},
            "status": "apocalyptic",
        })
        assert response.status_code == 200
        assert response.json()["status"] == "stable"
        assert "proceed" in response.json()["allowed_actions"]

    def test_resolve_rejects_forged_decision(self, client):
        decision = client.post("/impulses/evaluate", json={
            "impulse": {"type": "abandon", "name": "Quit the course"},
            "status": "overload",
        }).json()
        decision.update({
            "classification": "destructive",
            "blocked": False,
            "allowed_actions": ["proceed"],
        })
        outcome = client.post("/impulses/resolve", json={
            "decision": decision, "action": "proceed",
        }).json()
        assert outcome["kind"] == "block"
        assert outcome["reason"] == "destructive_impulse"

    def test_resolve_overload_forged_proceed(self, client):
        decision = client.post("/impulses/evaluate", json={
            "impulse": {"type": "idea"},
            "status": "overload",
        }).json()
        decision["allowed_actions"] = ["proceed", "delay", "route"]
        outcome = client.post("/impulses/resolve", json={
            "decision": decision, "action": "proceed",
        }).json()
        assert outcome["kind"] == "block"
        assert outcome["reason"] == "action_not_allowed"


class TestGravityAndJourney:
    def test_gravity(self, client):
        response = client.post("/gravity/quests", json={
            "quest": {"id": "q1", "title": "Write chapter", "meaning_level": "critical"},
            "tab_count": 10,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["novelty_gravity"] == 30
        assert data["gravity"]["meaning"] == 8

    def test_journey(self, client):
        data = client.get("/journey/5").json()
        assert data["day"] == 5
        assert "emotionalRouting" in data["unlocked_features"]


class TestConfigEndpoints:
    def test_get_and_update(self, client):
        config = client.get("/config").json()
        assert config["weights"]["project"] == 15

        config["weights"]["project"] = 50
        response = client.put("/config", json=config)
        assert response.status_code == 200

        data = client.post("/load/counts", json={"counts": {"open_projects": 1}}).json()
        assert data["scores"]["ram_usage"] == 50
        assert data["status"] == "elevated"

    def test_invalid_config_rejected(self, client):
        config = client.get("/config").json()
        config["status_thresholds"]["elevated"] = 99
        assert client.put("/config", json=config).status_code == 422
