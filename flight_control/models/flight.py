"""Flight model."""

from enum import Enum
from pydantic import BaseModel


class FlightStatus(str, Enum):
    """Lifecycle states of a flight."""
    
    QUEUED = "queued"
    POSITIONING = "positioning"
    TAKING_OFF = "taking_off"
    AIRBORNE = "airborne"
    LANDING = "landing"
    COMPLETED = "completed"


class Flight(BaseModel):
    """Represents a flight moving through queued -> airborne -> completed."""
    
    id: str
    name: str
    sequence: int
    status: FlightStatus = FlightStatus.QUEUED
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "FL001",
                "name": "Flight 1",
                "sequence": 1,
                "status": "queued",
            }
        }
    }
