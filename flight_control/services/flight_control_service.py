"""Service for flight control management."""

import logging
from typing import Dict, List, Optional
from ..clock import RealClock, SuspensionClock, Timings
from ..config import Config
from ..sinks import CompositeSink, JSONLinesSink, LoggingStatusSink, RecordingSink, StatusSink
from ..system import FlightControlSystem
from ..utils import format_flight_id

logger = logging.getLogger(__name__)


class FlightControlService:
    """Service wiring the flight control core to the API."""
    
    def __init__(self, config: Optional[Config] = None, clock: Optional[SuspensionClock] = None):
        """
        Initialize flight control service.
        
        Args:
            config: Configuration (read from environment if omitted)
            clock: Clock override (RealClock scaled by TIME_SCALE if omitted)
        """
        self.config = config if config is not None else Config()
        self.recorder = RecordingSink(limit=self.config.EVENT_HISTORY_LIMIT)
        self.event_file: Optional[JSONLinesSink] = None
        
        sinks: List[StatusSink] = [LoggingStatusSink(), self.recorder]
        if self.config.EVENT_LOG_FILE:
            self.event_file = JSONLinesSink(self.config.EVENT_LOG_FILE)
            sinks.append(self.event_file)
        
        self.system = FlightControlSystem(
            clock=clock or RealClock(time_scale=self.config.TIME_SCALE),
            sink=CompositeSink(sinks),
            timings=Timings.from_config(self.config),
            id_prefix=self.config.FLIGHT_ID_PREFIX,
            id_width=self.config.FLIGHT_ID_WIDTH,
        )
        logger.info("Flight control service initialized")
    
    def get_status(self) -> Dict:
        """
        Get current system status.
        
        Returns:
            Status dictionary with counters and the flags the UI uses
            to enable its controls
        """
        status = self.system.query_status()
        state = self.system.state
        return {
            **status.model_dump(mode="json"),
            "can_start_takeoff": not status.busy and status.queue_length > 0,
            "can_trigger_emergency": not status.busy and status.airborne_count > 0,
            "next_flight_id": format_flight_id(
                state.next_sequence, self.system.registry.prefix, self.system.registry.width
            ),
        }
    
    def get_flights(self) -> Dict:
        """
        Get every flight grouped by container.
        
        Returns:
            Dictionary with queue, runway, airborne and completed flights
        """
        state = self.system.state
        return {
            "queue": [f.model_dump(mode="json") for f in state.queue],
            "runway": state.runway.model_dump(mode="json") if state.runway is not None else None,
            "airborne": [f.model_dump(mode="json") for f in state.airborne.values()],
            "completed": [f.model_dump(mode="json") for f in state.completed],
        }
    
    def get_events(self, limit: Optional[int] = 50) -> Dict:
        """
        Get recent notifications.
        
        Args:
            limit: Number of recent events to return (None for all kept)
        
        Returns:
            Events dictionary
        """
        events = self.recorder.recent(limit)
        return {"events": events, "total": len(self.recorder.events)}
    
    def get_flight(self, flight_id: str) -> Optional[Dict]:
        """
        Look a flight up by id in whichever container holds it.
        
        Returns:
            Flight dictionary, or None for an unknown id
        """
        flight = self.system.registry.find(flight_id)
        return flight.model_dump(mode="json") if flight is not None else None
    
    def add_flight(self) -> Dict:
        flight = self.system.add_flight()
        return flight.model_dump(mode="json")
    
    def start_takeoff_run(self) -> Dict:
        result = self.system.start_takeoff_run()
        return {
            "message": "Takeoff run started" if result.started else "Takeoff run skipped",
            **result.model_dump(mode="json"),
            "status": self.system.query_status().model_dump(mode="json"),
        }

    def trigger_emergency_landing(self) -> Dict:
        result = self.system.trigger_emergency_landing()
        return {
            "message": "Emergency landing started" if result.started else "Emergency landing skipped",
            **result.model_dump(mode="json"),
            "status": self.system.query_status().model_dump(mode="json"),
        }

    def reset(self) -> Dict:
        """Reset the system. The notification history is kept."""
        self.system.reset()
        return {
            "message": "System reset",
            "outcome": "completed",
            "reason": None,
            "status": self.system.query_status().model_dump(mode="json"),
        }
    
    def close(self) -> None:
        """Stop any active run and pending cleanups, then close the event log."""
        self.system.reset()
        if self.event_file is not None:
            self.event_file.close()
            self.event_file = None
