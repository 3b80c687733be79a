"""Schemas for takeoff / emergency / reset endpoints."""

from pydantic import BaseModel, Field
from typing import Optional
from ..models.system_state import SystemStatus


class OperationResponse(BaseModel):
    """Response model for an orchestrated-sequence request."""
    
    message: str
    outcome: str = Field(..., description="started, skipped or completed (reset)")
    reason: Optional[str] = Field(None, description="Why the request was skipped")
    status: SystemStatus
