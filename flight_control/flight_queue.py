"""FIFO queue of flights waiting for takeoff."""

from typing import List, Optional
from .models.flight import Flight
from .models.system_state import SystemState


class FlightQueue:
    """Strict FIFO view over the state's queue. No priorities, no reordering."""
    
    def __init__(self, state: SystemState):
        self.state = state
    
    def enqueue(self, flight: Flight) -> None:
        """Append a flight to the tail. Always allowed, even while busy."""
        self.state.queue.append(flight)
    
    def dequeue_front(self) -> Optional[Flight]:
        """
        Remove and return the head of the queue.
        
        Returns:
            Head flight, or None when the queue is empty
        """
        if not self.state.queue:
            return None
        return self.state.queue.pop(0)
    
    def ids(self) -> List[str]:
        return [f.id for f in self.state.queue]
    
    def __len__(self) -> int:
        return len(self.state.queue)
    
    def __bool__(self) -> bool:
        return bool(self.state.queue)
