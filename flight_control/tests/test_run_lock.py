"""Tests for the exclusive run lock and deferred cleanups."""

import asyncio
from flight_control.clock import VirtualClock
from flight_control.config import SEQUENCE_EMERGENCY_LANDING, SEQUENCE_TAKEOFF
from flight_control.deferred import DeferredCleanupRegistry
from flight_control.models.system_state import SystemState
from flight_control.run_lock import ExclusiveRunLock


def test_lock_is_exclusive():
    """Test second acquisition fails while held."""
    state = SystemState()
    lock = ExclusiveRunLock(state)
    
    token = lock.acquire(SEQUENCE_TAKEOFF)
    
    assert token is not None
    assert state.busy is True
    assert state.active_sequence == SEQUENCE_TAKEOFF
    assert lock.acquire(SEQUENCE_EMERGENCY_LANDING) is None
    
    assert lock.release(token) is True
    assert state.busy is False
    assert state.active_sequence is None


def test_stale_token_cannot_release():
    """Test a revoked holder cannot release a later holder's lock."""
    state = SystemState()
    lock = ExclusiveRunLock(state)
    
    old = lock.acquire(SEQUENCE_TAKEOFF)
    lock.revoke()
    new = lock.acquire(SEQUENCE_EMERGENCY_LANDING)
    
    assert lock.release(old) is False
    assert state.busy is True
    assert lock.release(new) is True


def test_cleanup_fires_after_delay():
    """Test deferred callback runs once its delay has elapsed."""
    clock = VirtualClock()
    fired = []
    
    async def scenario():
        registry = DeferredCleanupRegistry(clock)
        registry.schedule("FL001", 2000, lambda: fired.append("FL001"))
        assert "FL001" in registry
        
        await clock.advance(1999)
        assert fired == []
        
        await clock.advance(1)
        assert fired == ["FL001"]
        assert registry.pending == 0
    
    asyncio.run(scenario())


def test_cancel_all_prevents_callbacks():
    """Test cancelled cleanups never fire."""
    clock = VirtualClock()
    fired = []
    
    async def scenario():
        registry = DeferredCleanupRegistry(clock)
        registry.schedule("FL001", 2000, lambda: fired.append("FL001"))
        registry.schedule("FL002", 3000, lambda: fired.append("FL002"))
        await clock.advance(0)
        
        assert registry.cancel_all() == 2
        
        await clock.advance(5000)
        assert registry.pending == 0
    
    asyncio.run(scenario())
    assert fired == []


def test_rescheduling_same_key_replaces_entry():
    """Test only the latest cleanup for a key fires."""
    clock = VirtualClock()
    fired = []
    
    async def scenario():
        registry = DeferredCleanupRegistry(clock)
        registry.schedule("FL001", 1000, lambda: fired.append("first"))
        registry.schedule("FL001", 1000, lambda: fired.append("second"))
        await clock.run_until_idle()
    
    asyncio.run(scenario())
    assert fired == ["second"]
