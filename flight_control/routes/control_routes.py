"""Routes for orchestrated sequences (takeoff, emergency landing) and reset."""

import logging
from fastapi import APIRouter, HTTPException
from ..schemas.control_schemas import OperationResponse
from ..services.singleton import get_flight_control_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["control"])


@router.post("/takeoff", response_model=OperationResponse)
async def start_takeoff_run():
    """
    Start draining the queue (runs in the background).
    
    A request made while another sequence runs, or with nothing queued,
    is skipped rather than rejected.
    
    Returns:
        Outcome and current status
    """
    service = get_flight_control_service()
    
    try:
        return OperationResponse(**service.start_takeoff_run())
    except Exception as e:
        logger.error(f"Error starting takeoff run: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/emergency", response_model=OperationResponse)
async def trigger_emergency_landing():
    """
    Land every airborne flight (runs in the background).
    
    Returns:
        Outcome and current status
    """
    service = get_flight_control_service()
    
    try:
        return OperationResponse(**service.trigger_emergency_landing())
    except Exception as e:
        logger.error(f"Error triggering emergency landing: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/reset", response_model=OperationResponse)
async def reset():
    """
    Clear every container and restart flight ids at 1.
    
    Returns:
        Confirmation and the empty status
    """
    service = get_flight_control_service()
    return OperationResponse(**service.reset())
