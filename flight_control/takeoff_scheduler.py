"""Takeoff scheduler: drains the queue one flight at a time."""

import asyncio
import logging
from .clock import SuspensionClock, Timings
from .config import SEQUENCE_TAKEOFF
from .flight_queue import FlightQueue
from .models.flight import Flight, FlightStatus
from .models.run_result import RunResult, SkipReason
from .models.system_state import SystemState
from .run_lock import ExclusiveRunLock
from .sinks import StatusSink

logger = logging.getLogger(__name__)


def set_status(sink: StatusSink, flight: Flight, new_status: FlightStatus) -> None:
    """Apply a lifecycle transition and notify the sink."""
    old_status = flight.status
    flight.status = new_status
    sink.flight_status_changed(flight, old_status, new_status)


class TakeoffScheduler:
    """Runs queued flights through positioning -> taking_off -> airborne -> completed."""
    
    def __init__(
        self,
        state: SystemState,
        queue: FlightQueue,
        lock: ExclusiveRunLock,
        clock: SuspensionClock,
        sink: StatusSink,
        timings: Timings,
    ):
        """
        Initialize takeoff scheduler.
        
        Args:
            state: Shared system state
            queue: Flight queue to drain
            lock: Run lock shared with the emergency landing controller
            clock: Clock pacing every transition
            sink: Notification target
            timings: Protocol durations
        """
        self.state = state
        self.queue = queue
        self.lock = lock
        self.clock = clock
        self.sink = sink
        self.timings = timings
    
    def start_takeoff_run(self) -> RunResult:
        """
        Start draining the queue in a background task.
        
        Starting requires a running event loop. The lock is taken
        before this method returns, so a second start request (or an
        emergency trigger) issued right after is skipped.
        
        Returns:
            RunResult: started, or skipped with the reason
        """
        if self.lock.busy:
            logger.info("Takeoff run skipped: another sequence is in progress")
            return RunResult.skip(SkipReason.BUSY)
        if not self.queue:
            logger.info("Takeoff run skipped: no flights queued")
            return RunResult.skip(SkipReason.QUEUE_EMPTY)
        
        loop = asyncio.get_running_loop()
        token = self.lock.acquire(SEQUENCE_TAKEOFF)
        logger.info(f"Takeoff run started with {len(self.queue)} flight(s) queued")
        self.sink.system_status_changed(self.state.to_status())
        
        task = loop.create_task(self._run(token))
        self.lock.attach(token, task)
        return RunResult.start()
    
    async def _run(self, token: int) -> None:
        processed = 0
        try:
            while True:
                # Re-checked after each spacing wait: flights added mid-run are taken too.
                flight = self.queue.dequeue_front()
                if flight is None:
                    break
                await self._take_off(flight)
                processed += 1
                await self.clock.wait(self.timings.takeoff_spacing)
        except Exception:
            logger.exception("Takeoff run aborted")
            self._return_runway_to_queue()
            raise
        finally:
            released = self.lock.release(token)

        if released:
            logger.info(f"All flights completed ({processed} this run)")
            self.sink.system_status_changed(self.state.to_status())
            self.sink.queue_refresh_requested(self.queue.ids())
    
    def _return_runway_to_queue(self) -> None:
        # The sink may be what failed, so no notification here.
        flight = self.state.runway
        if flight is None:
            return
        self.state.runway = None
        flight.status = FlightStatus.QUEUED
        self.state.queue.insert(0, flight)
        logger.warning(f"{flight.id} returned to the head of the queue")

    async def _take_off(self, flight: Flight) -> None:
        logger.info(f"Taking off: {flight.id}")
        
        # queued -> positioning
        self.state.runway = flight
        set_status(self.sink, flight, FlightStatus.POSITIONING)
        self.sink.visual_create_requested(flight)
        self.sink.system_status_changed(self.state.to_status())
        await self.clock.wait(self.timings.positioning)
        
        # positioning -> taking_off
        set_status(self.sink, flight, FlightStatus.TAKING_OFF)
        await self.clock.wait(self.timings.takeoff_animation)
        
        # taking_off -> airborne
        self.state.runway = None
        self.state.airborne[flight.id] = flight
        set_status(self.sink, flight, FlightStatus.AIRBORNE)
        self.sink.visual_remove_requested(flight)
        self.sink.system_status_changed(self.state.to_status())
        await self.clock.wait(self.timings.airborne_dwell)
        
        # airborne -> completed
        del self.state.airborne[flight.id]
        self.state.completed.append(flight)
        set_status(self.sink, flight, FlightStatus.COMPLETED)
        self.sink.system_status_changed(self.state.to_status())
        logger.info(f"Completed: {flight.id}")
