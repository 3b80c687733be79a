"""Routes for the notification history."""

import logging
from typing import Optional
from fastapi import APIRouter
from ..schemas.events_schemas import EventsResponse
from ..services.singleton import get_flight_control_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["events"])


@router.get("/events", response_model=EventsResponse)
async def get_events(limit: Optional[int] = 50):
    """
    Get recent status notifications.
    
    Args:
        limit: Number of recent events to return (0 or None for all kept)
    
    Returns:
        Recorded notifications, oldest first
    """
    service = get_flight_control_service()
    events_data = service.get_events(limit=limit if limit and limit > 0 else None)
    return EventsResponse(**events_data)
