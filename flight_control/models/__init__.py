"""Flight control models package."""

from .flight import Flight, FlightStatus
from .system_state import SystemState, SystemStatus
from .run_result import RunOutcome, RunResult, SkipReason

__all__ = [
    "Flight",
    "FlightStatus",
    "SystemState",
    "SystemStatus",
    "RunOutcome",
    "RunResult",
    "SkipReason",
]
