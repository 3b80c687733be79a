"""API schemas for request/response models."""

from .flight_schemas import FlightResponse, FlightListResponse
from .control_schemas import OperationResponse
from .status_schemas import StatusResponse
from .events_schemas import EventsResponse

__all__ = [
    "FlightResponse",
    "FlightListResponse",
    "OperationResponse",
    "StatusResponse",
    "EventsResponse",
]
