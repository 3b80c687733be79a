"""Flight control system: the request side of the core."""

import asyncio
import logging
from typing import Optional
from .clock import RealClock, SuspensionClock, Timings
from .config import FIRST_SEQUENCE, FLIGHT_ID_PREFIX, FLIGHT_ID_WIDTH
from .deferred import DeferredCleanupRegistry
from .emergency_landing import EmergencyLandingController
from .flight_queue import FlightQueue
from .models.flight import Flight
from .models.run_result import RunResult
from .models.system_state import SystemState, SystemStatus
from .registry import FlightRegistry
from .run_lock import ExclusiveRunLock
from .sinks import StatusSink
from .takeoff_scheduler import TakeoffScheduler

logger = logging.getLogger(__name__)


class FlightControlSystem:
    """Owns the state and exposes add / start / trigger / reset / query.

    Presentation only talks to this object and listens on the sink; it never
    reaches into the containers directly.
    """

    def __init__(
        self,
        clock: Optional[SuspensionClock] = None,
        sink: Optional[StatusSink] = None,
        timings: Optional[Timings] = None,
        state: Optional[SystemState] = None,
        id_prefix: str = FLIGHT_ID_PREFIX,
        id_width: int = FLIGHT_ID_WIDTH,
    ):
        """
        Initialize the system.

        Args:
            clock: Suspension clock (RealClock if omitted)
            sink: Notification target (no-op sink if omitted)
            timings: Protocol durations (recorded defaults if omitted)
            state: Pre-built state, e.g. with flights already airborne
            id_prefix: Flight id prefix
            id_width: Zero-padded width of flight ids
        """
        self.clock = clock if clock is not None else RealClock()
        self.sink = sink if sink is not None else StatusSink()
        self.timings = timings if timings is not None else Timings()
        self.state = state if state is not None else SystemState()

        self.registry = FlightRegistry(self.state, prefix=id_prefix, width=id_width)
        self.queue = FlightQueue(self.state)
        self.lock = ExclusiveRunLock(self.state)
        self.cleanups = DeferredCleanupRegistry(self.clock)
        self.takeoff = TakeoffScheduler(
            self.state, self.queue, self.lock, self.clock, self.sink, self.timings
        )
        self.emergency = EmergencyLandingController(
            self.state, self.lock, self.clock, self.sink, self.timings, self.cleanups
        )

    def add_flight(self) -> Flight:
        """
        Create a flight and append it to the queue. Allowed while busy.

        Returns:
            The queued flight
        """
        flight = self.registry.create_flight()
        self.queue.enqueue(flight)
        logger.info(f"Added: {flight.id}")
        self.sink.flight_enqueued(flight)
        self.sink.system_status_changed(self.state.to_status())
        return flight

    def start_takeoff_run(self) -> RunResult:
        return self.takeoff.start_takeoff_run()

    def trigger_emergency_landing(self) -> RunResult:
        return self.emergency.trigger_emergency_landing()

    def reset(self) -> None:
        """Return to the empty initial state. Always succeeds."""
        self.lock.revoke()
        self.cleanups.cancel_all()
        self.state.clear(first_sequence=FIRST_SEQUENCE)
        self.sink.visuals_cleared()
        self.sink.system_status_changed(self.state.to_status())
        logger.info("System reset")

    def query_status(self) -> SystemStatus:
        return self.state.to_status()

    @property
    def active_run(self) -> Optional[asyncio.Task]:
        """Task of the orchestrated sequence currently holding the lock."""
        return self.lock.task

    async def wait_idle(self) -> None:
        """Wait until the active orchestrated sequence (if any) has finished.

        Returns normally when the run completes or is cancelled by ``reset()``;
        an exception raised inside the run is re-raised here.
        """
        task = self.active_run
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled():
            task.result()
