"""Emergency landing controller: lands every flight airborne at trigger time."""

import asyncio
import logging
from typing import Tuple
from .clock import SuspensionClock, Timings
from .config import SEQUENCE_EMERGENCY_LANDING
from .deferred import DeferredCleanupRegistry
from .models.flight import Flight, FlightStatus
from .models.run_result import RunResult, SkipReason
from .models.system_state import SystemState
from .run_lock import ExclusiveRunLock
from .sinks import StatusSink
from .takeoff_scheduler import set_status

logger = logging.getLogger(__name__)


class EmergencyLandingController:
    """Lands a snapshot of the airborne set, one flight after another."""
    
    def __init__(
        self,
        state: SystemState,
        lock: ExclusiveRunLock,
        clock: SuspensionClock,
        sink: StatusSink,
        timings: Timings,
        cleanups: DeferredCleanupRegistry,
    ):
        self.state = state
        self.lock = lock
        self.clock = clock
        self.sink = sink
        self.timings = timings
        self.cleanups = cleanups
    
    def trigger_emergency_landing(self) -> RunResult:
        """
        Snapshot the airborne set and land it in a background task.
        
        Only flights airborne at this call are landed by the run, in the
        order they became airborne.
        
        Returns:
            RunResult: started, or skipped with the reason
        """
        if self.lock.busy:
            logger.info("Emergency landing skipped: another sequence is in progress")
            return RunResult.skip(SkipReason.BUSY)
        if not self.state.airborne:
            logger.info("Emergency landing skipped: nothing airborne")
            return RunResult.skip(SkipReason.NOTHING_AIRBORNE)
        
        loop = asyncio.get_running_loop()
        token = self.lock.acquire(SEQUENCE_EMERGENCY_LANDING)
        snapshot: Tuple[str, ...] = tuple(self.state.airborne)
        logger.warning(f"Emergency landing triggered for {len(snapshot)} flight(s): {', '.join(snapshot)}")
        self.sink.system_status_changed(self.state.to_status())
        
        task = loop.create_task(self._run(token, snapshot))
        self.lock.attach(token, task)
        return RunResult.start()
    
    async def _run(self, token: int, snapshot: Tuple[str, ...]) -> None:
        landed = 0
        try:
            for flight_id in snapshot:
                flight = self.state.airborne.get(flight_id)
                if flight is None:
                    continue
                await self._land(flight)
                landed += 1
                await self.clock.wait(self.timings.landing_spacing)
        except Exception:
            logger.exception("Emergency landing aborted")
            for flight in self.state.airborne.values():
                if flight.status == FlightStatus.LANDING:
                    flight.status = FlightStatus.AIRBORNE
            raise
        finally:
            released = self.lock.release(token)
        
        if released:
            logger.info(f"Emergency landing complete: {landed} flight(s) down")
            self.sink.system_status_changed(self.state.to_status())
    
    async def _land(self, flight: Flight) -> None:
        logger.info(f"Landing: {flight.id}")
        set_status(self.sink, flight, FlightStatus.LANDING)
        await self.clock.wait(self.timings.landing_descent)
        
        del self.state.airborne[flight.id]
        self.state.completed.append(flight)
        set_status(self.sink, flight, FlightStatus.COMPLETED)
        self.sink.system_status_changed(self.state.to_status())
        
        delay = self.timings.cleanup_delay
        self.sink.visual_cleanup_scheduled(flight, delay)
        self.cleanups.schedule(flight.id, delay, lambda: self.sink.visual_remove_requested(flight))
