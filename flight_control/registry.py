"""Flight registry: id assignment and lookup."""

import logging
from typing import Optional
from .models.flight import Flight, FlightStatus
from .models.system_state import SystemState
from .utils import format_flight_id
from .config import FLIGHT_ID_PREFIX, FLIGHT_ID_WIDTH

logger = logging.getLogger(__name__)


class FlightRegistry:
    """Creates flights with monotonically increasing ids."""
    
    def __init__(
        self,
        state: SystemState,
        prefix: str = FLIGHT_ID_PREFIX,
        width: int = FLIGHT_ID_WIDTH,
    ):
        """
        Initialize registry.
        
        Args:
            state: System state holding the id counter
            prefix: Flight id prefix
            width: Zero-padded width of the numeric part
        """
        self.state = state
        self.prefix = prefix
        self.width = width
    
    def create_flight(self) -> Flight:
        """
        Allocate the next id and create a queued flight.
        
        Returns:
            New flight in queued status (not yet enqueued)
        """
        sequence = self.state.next_sequence
        flight = Flight(
            id=format_flight_id(sequence, self.prefix, self.width),
            name=f"Flight {sequence}",
            sequence=sequence,
            status=FlightStatus.QUEUED,
        )
        self.state.next_sequence = sequence + 1
        logger.debug(f"Created {flight.id}")
        return flight
    
    def find(self, flight_id: str) -> Optional[Flight]:
        """Look a flight up in whichever container holds it."""
        for flight in self.state.queue:
            if flight.id == flight_id:
                return flight
        if self.state.runway is not None and self.state.runway.id == flight_id:
            return self.state.runway
        if flight_id in self.state.airborne:
            return self.state.airborne[flight_id]
        for flight in self.state.completed:
            if flight.id == flight_id:
                return flight
        return None
