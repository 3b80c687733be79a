"""Outcome of an orchestrated sequence request."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class RunOutcome(str, Enum):
    STARTED = "started"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    QUEUE_EMPTY = "queue_empty"
    BUSY = "busy"
    NOTHING_AIRBORNE = "nothing_airborne"


class RunResult(BaseModel):
    """Result of start_takeoff_run / trigger_emergency_landing.
    
    A skipped request is not a fault: nothing in the state changed.
    """
    
    outcome: RunOutcome
    reason: Optional[SkipReason] = None
    
    @property
    def started(self) -> bool:
        return self.outcome == RunOutcome.STARTED
    
    @classmethod
    def start(cls) -> "RunResult":
        return cls(outcome=RunOutcome.STARTED)
    
    @classmethod
    def skip(cls, reason: SkipReason) -> "RunResult":
        return cls(outcome=RunOutcome.SKIPPED, reason=reason)
