"""Tests for flight registry and queue modules."""

import pytest
from flight_control.flight_queue import FlightQueue
from flight_control.models.flight import Flight, FlightStatus
from flight_control.models.system_state import SystemState
from flight_control.registry import FlightRegistry
from flight_control.utils import format_flight_id


@pytest.fixture
def state():
    """Create empty system state for testing."""
    return SystemState()


def test_format_flight_id():
    """Test id formatting and padding."""
    assert format_flight_id(1) == "FL001"
    assert format_flight_id(42) == "FL042"
    assert format_flight_id(1000) == "FL1000"
    assert format_flight_id(7, prefix="AB", width=2) == "AB07"


def test_create_flight_assigns_monotonic_ids(state):
    """Test ids FL001, FL002, FL003 in creation order."""
    registry = FlightRegistry(state)
    
    flights = [registry.create_flight() for _ in range(3)]
    
    assert [f.id for f in flights] == ["FL001", "FL002", "FL003"]
    assert [f.name for f in flights] == ["Flight 1", "Flight 2", "Flight 3"]
    assert all(f.status == FlightStatus.QUEUED for f in flights)
    assert state.next_sequence == 4


def test_create_flight_does_not_enqueue(state):
    """Test creation only allocates; the queue is untouched."""
    registry = FlightRegistry(state)
    registry.create_flight()
    assert state.queue == []


def test_find_across_containers(state):
    """Test lookup in queue, airborne and completed."""
    registry = FlightRegistry(state)
    queued, flying, done = (registry.create_flight() for _ in range(3))
    state.queue.append(queued)
    state.airborne[flying.id] = flying
    state.completed.append(done)
    
    assert registry.find("FL001") is queued
    assert registry.find("FL002") is flying
    assert registry.find("FL003") is done
    assert registry.find("FL999") is None


def test_queue_is_fifo(state):
    """Test dequeue order equals enqueue order."""
    registry = FlightRegistry(state)
    queue = FlightQueue(state)
    for _ in range(4):
        queue.enqueue(registry.create_flight())
    
    assert queue.ids() == ["FL001", "FL002", "FL003", "FL004"]
    
    order = []
    while queue:
        order.append(queue.dequeue_front().id)
    
    assert order == ["FL001", "FL002", "FL003", "FL004"]
    assert len(queue) == 0


def test_dequeue_empty_returns_none(state):
    """Test empty queue gives None instead of raising."""
    queue = FlightQueue(state)
    assert queue.dequeue_front() is None


def test_state_locate_and_clear():
    """Test container lookup and reset of the state."""
    flight = Flight(id="FL001", name="Flight 1", sequence=1)
    state = SystemState(queue=[flight], next_sequence=2, busy=True)
    
    assert state.locate("FL001") == ["queue"]
    
    state.clear()
    
    assert state.locate("FL001") == []
    assert state.next_sequence == 1
    assert state.busy is False
    assert state.to_status().queue_length == 0
