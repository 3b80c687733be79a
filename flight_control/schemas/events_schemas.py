"""Schemas for notification history."""

from pydantic import BaseModel
from typing import List, Dict, Any


class EventsResponse(BaseModel):
    """Response model for recorded notifications."""
    
    events: List[Dict[str, Any]]
    total: int
