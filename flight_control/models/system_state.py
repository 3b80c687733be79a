"""System state model."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from .flight import Flight


class SystemStatus(BaseModel):
    """Snapshot of the counters pushed to the status sink."""
    
    busy: bool
    active_sequence: Optional[str] = None
    queue_length: int
    airborne_count: int
    completed_count: int
    runway: Optional[str] = None  # id of the flight positioning / taking off


class SystemState(BaseModel):
    """Represents the containers owned by the flight control system.
    
    A flight lives in exactly one of queue, runway, airborne or completed.
    The runway holds at most one flight, and only while it is positioning
    or taking off.
    """
    
    queue: List[Flight] = Field(default_factory=list)
    runway: Optional[Flight] = None
    airborne: Dict[str, Flight] = Field(default_factory=dict)  # insertion order = admission order
    completed: List[Flight] = Field(default_factory=list)
    busy: bool = False
    active_sequence: Optional[str] = None
    next_sequence: int = 1
    
    def to_status(self) -> SystemStatus:
        """Build the status snapshot for notifications and queries."""
        return SystemStatus(
            busy=self.busy,
            active_sequence=self.active_sequence,
            queue_length=len(self.queue),
            airborne_count=len(self.airborne),
            completed_count=len(self.completed),
            runway=self.runway.id if self.runway is not None else None,
        )
    
    def locate(self, flight_id: str) -> List[str]:
        """
        Names of every container currently holding the flight.
        
        Args:
            flight_id: Flight id to look for
            
        Returns:
            Container names ("queue", "runway", "airborne", "completed")
        """
        found = []
        if any(f.id == flight_id for f in self.queue):
            found.append("queue")
        if self.runway is not None and self.runway.id == flight_id:
            found.append("runway")
        if flight_id in self.airborne:
            found.append("airborne")
        if any(f.id == flight_id for f in self.completed):
            found.append("completed")
        return found
    
    def clear(self, first_sequence: int = 1) -> None:
        """Empty every container and restore the id counter."""
        self.queue.clear()
        self.runway = None
        self.airborne.clear()
        self.completed.clear()
        self.busy = False
        self.active_sequence = None
        self.next_sequence = first_sequence
