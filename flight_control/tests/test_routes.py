"""Tests for the HTTP control surface."""

import pytest
from fastapi.testclient import TestClient
from flight_control.clock import VirtualClock
from flight_control.config import Config
from flight_control.main import app
from flight_control.services import singleton
from flight_control.services.flight_control_service import FlightControlService


@pytest.fixture
def client(monkeypatch, tmp_path):
    """Client bound to a service whose clock never moves on its own."""
    config = Config(LOG_FILE=str(tmp_path / "test.log"), EVENT_LOG_FILE=None)
    service = FlightControlService(config=config, clock=VirtualClock())
    monkeypatch.setattr(singleton, "_flight_control_service", service)
    with TestClient(app) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_add_flights_and_status(client):
    """Test add flight endpoint and status counters."""
    first = client.post("/api/flights").json()
    second = client.post("/api/flights").json()
    
    assert first["id"] == "FL001"
    assert second["id"] == "FL002"
    assert first["status"] == "queued"
    
    status = client.get("/api/status").json()
    assert status["queue_length"] == 2
    assert status["busy"] is False
    assert status["can_start_takeoff"] is True
    assert status["can_trigger_emergency"] is False
    assert status["next_flight_id"] == "FL003"


def test_takeoff_on_empty_queue_is_skipped(client):
    """Test skipped outcome is a normal 200 response."""
    response = client.post("/api/takeoff")
    
    assert response.status_code == 200
    body = response.json()
    assert body["outcome"] == "skipped"
    assert body["reason"] == "queue_empty"
    assert body["status"]["busy"] is False


def test_busy_run_blocks_second_sequence(client):
    """Test mutual exclusion through the API; enqueue still allowed."""
    client.post("/api/flights")
    
    started = client.post("/api/takeoff").json()
    assert started["outcome"] == "started"
    assert started["status"]["busy"] is True
    assert started["status"]["active_sequence"] == "takeoff"
    
    emergency = client.post("/api/emergency").json()
    assert emergency["outcome"] == "skipped"
    assert emergency["reason"] == "busy"
    
    again = client.post("/api/takeoff").json()
    assert again["reason"] == "busy"
    
    added = client.post("/api/flights")
    assert added.status_code == 200
    assert added.json()["id"] == "FL002"


def test_reset_restores_initial_state(client):
    """Test reset endpoint."""
    client.post("/api/flights")
    client.post("/api/takeoff")
    
    body = client.post("/api/reset").json()
    
    assert body["outcome"] == "completed"
    assert body["status"]["busy"] is False
    assert body["status"]["queue_length"] == 0
    assert client.post("/api/flights").json()["id"] == "FL001"


def test_list_flights(client):
    """Test flights grouped by container."""
    client.post("/api/flights")
    client.post("/api/flights")
    
    body = client.get("/api/flights").json()
    
    assert [f["id"] for f in body["queue"]] == ["FL001", "FL002"]
    assert body["runway"] is None
    assert body["airborne"] == []
    assert body["completed"] == []


def test_events_history(client):
    """Test recorded notifications endpoint."""
    client.post("/api/flights")
    
    body = client.get("/api/events", params={"limit": 0}).json()
    
    assert body["total"] == 2
    assert [e["event"] for e in body["events"]] == ["flight_enqueued", "system_status_changed"]
    
    limited = client.get("/api/events", params={"limit": 1}).json()
    assert len(limited["events"]) == 1


def test_get_single_flight(client):
    """Test lookup of one flight, and 404 for an unknown id."""
    client.post("/api/flights")
    
    found = client.get("/api/flights/FL001")
    assert found.status_code == 200
    assert found.json()["status"] == "queued"
    
    missing = client.get("/api/flights/FL999")
    assert missing.status_code == 404
