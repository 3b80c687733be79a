"""Routes for status endpoints."""

import logging
from fastapi import APIRouter
from ..schemas.status_schemas import StatusResponse
from ..services.singleton import get_flight_control_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status():
    """
    Get current system status.
    
    Returns:
        Busy flag, container counts and control availability
    """
    service = get_flight_control_service()
    status_data = service.get_status()
    return StatusResponse(**status_data)
