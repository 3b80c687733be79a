"""Schemas for flight endpoints."""

from pydantic import BaseModel
from typing import List, Optional


class FlightResponse(BaseModel):
    """Response model for a single flight."""
    
    id: str
    name: str
    sequence: int
    status: str


class FlightListResponse(BaseModel):
    """Response model for flights grouped by container."""
    
    queue: List[FlightResponse]
    runway: Optional[FlightResponse] = None
    airborne: List[FlightResponse]
    completed: List[FlightResponse]
