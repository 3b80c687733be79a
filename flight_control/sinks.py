"""Status sinks: the notification boundary towards presentation."""

import json
import logging
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Any, Deque, Dict, Iterable, List, Optional
from .models.flight import Flight, FlightStatus
from .models.system_state import SystemStatus

logger = logging.getLogger(__name__)


class StatusSink:
    """Receives lifecycle notifications. Every method is a no-op here."""
    
    def flight_enqueued(self, flight: Flight) -> None:
        pass
    
    def flight_status_changed(self, flight: Flight, old_status: FlightStatus, new_status: FlightStatus) -> None:
        pass
    
    def system_status_changed(self, status: SystemStatus) -> None:
        pass
    
    def visual_create_requested(self, flight: Flight) -> None:
        pass
    
    def visual_remove_requested(self, flight: Flight) -> None:
        pass
    
    def visual_cleanup_scheduled(self, flight: Flight, delay_ms: int) -> None:
        pass
    
    def queue_refresh_requested(self, queue_ids: List[str]) -> None:
        pass
    
    def visuals_cleared(self) -> None:
        pass


def _event(name: str, **payload: Any) -> Dict[str, Any]:
    return {"event": name, **payload}


class EventSink(StatusSink):
    """Turns every notification into a plain dict and hands it to ``record``."""
    
    def record(self, event: Dict[str, Any]) -> None:
        raise NotImplementedError
    
    def flight_enqueued(self, flight: Flight) -> None:
        self.record(_event("flight_enqueued", flight=flight.model_dump(mode="json")))
    
    def flight_status_changed(self, flight: Flight, old_status: FlightStatus, new_status: FlightStatus) -> None:
        self.record(_event(
            "flight_status_changed",
            flight_id=flight.id,
            old_status=FlightStatus(old_status).value,
            new_status=FlightStatus(new_status).value,
        ))
    
    def system_status_changed(self, status: SystemStatus) -> None:
        self.record(_event("system_status_changed", status=status.model_dump(mode="json")))
    
    def visual_create_requested(self, flight: Flight) -> None:
        self.record(_event("visual_create_requested", flight_id=flight.id))
    
    def visual_remove_requested(self, flight: Flight) -> None:
        self.record(_event("visual_remove_requested", flight_id=flight.id))
    
    def visual_cleanup_scheduled(self, flight: Flight, delay_ms: int) -> None:
        self.record(_event("visual_cleanup_scheduled", flight_id=flight.id, delay_ms=delay_ms))
    
    def queue_refresh_requested(self, queue_ids: List[str]) -> None:
        self.record(_event("queue_refresh_requested", queue=list(queue_ids)))
    
    def visuals_cleared(self) -> None:
        self.record(_event("visuals_cleared"))


class RecordingSink(EventSink):
    """Keeps notifications in memory, newest last."""
    
    def __init__(self, limit: Optional[int] = None):
        """
        Initialize recording sink.
        
        Args:
            limit: Maximum number of events kept (None for unbounded)
        """
        self.events: Deque[Dict[str, Any]] = deque(maxlen=limit)
    
    def record(self, event: Dict[str, Any]) -> None:
        self.events.append(event)
    
    def names(self) -> List[str]:
        return [e["event"] for e in self.events]
    
    def of(self, name: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] == name]
    
    def recent(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        events = list(self.events)
        if limit is not None and limit > 0:
            events = events[-limit:]
        return events


class LoggingStatusSink(EventSink):
    """Writes every notification to the log at DEBUG."""
    
    def record(self, event: Dict[str, Any]) -> None:
        logger.debug(f"notify {event['event']}: {event}")


class JSONLinesSink(EventSink):
    """JSON-structured notification log for machine parsing."""
    
    def __init__(self, log_file: str = "flight_events.jsonl"):
        """
        Initialize JSON-lines sink.
        
        Args:
            log_file: Path to JSON log file
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = open(self.log_file, "a")
    
    def record(self, event: Dict[str, Any]) -> None:
        entry = {"timestamp": datetime.now().isoformat(), **event}
        json.dump(entry, self.file_handle)
        self.file_handle.write("\n")
        self.file_handle.flush()
    
    def close(self) -> None:
        """Close log file."""
        self.file_handle.close()


class CompositeSink(StatusSink):
    """Fans every notification out to several sinks, in order."""
    
    def __init__(self, sinks: Iterable[StatusSink]):
        self.sinks = list(sinks)
    
    def flight_enqueued(self, flight):
        for sink in self.sinks:
            sink.flight_enqueued(flight)
    
    def flight_status_changed(self, flight, old_status, new_status):
        for sink in self.sinks:
            sink.flight_status_changed(flight, old_status, new_status)
    
    def system_status_changed(self, status):
        for sink in self.sinks:
            sink.system_status_changed(status)
    
    def visual_create_requested(self, flight):
        for sink in self.sinks:
            sink.visual_create_requested(flight)
    
    def visual_remove_requested(self, flight):
        for sink in self.sinks:
            sink.visual_remove_requested(flight)
    
    def visual_cleanup_scheduled(self, flight, delay_ms):
        for sink in self.sinks:
            sink.visual_cleanup_scheduled(flight, delay_ms)
    
    def queue_refresh_requested(self, queue_ids):
        for sink in self.sinks:
            sink.queue_refresh_requested(queue_ids)
    
    def visuals_cleared(self):
        for sink in self.sinks:
            sink.visuals_cleared()
