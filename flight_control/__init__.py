"""Airport flight-control core: takeoff queue, emergency landing and status notifications."""

from .system import FlightControlSystem
from .models import Flight, FlightStatus, RunOutcome, RunResult, SystemState, SystemStatus

__all__ = [
    "FlightControlSystem",
    "Flight",
    "FlightStatus",
    "RunOutcome",
    "RunResult",
    "SystemState",
    "SystemStatus",
]
