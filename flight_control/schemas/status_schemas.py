"""Schemas for status endpoints."""

from pydantic import BaseModel, Field
from typing import Optional


class StatusResponse(BaseModel):
    """Response model for system status."""
    
    busy: bool
    active_sequence: Optional[str] = None
    queue_length: int
    airborne_count: int
    completed_count: int
    runway: Optional[str] = None
    can_start_takeoff: bool = Field(..., description="Queue non-empty and not busy")
    can_trigger_emergency: bool = Field(..., description="Something airborne and not busy")
    next_flight_id: str
