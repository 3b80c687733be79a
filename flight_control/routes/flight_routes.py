"""Routes for adding and listing flights."""

import logging
from fastapi import APIRouter, HTTPException
from ..schemas.flight_schemas import FlightResponse, FlightListResponse
from ..services.singleton import get_flight_control_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["flights"])


@router.post("/flights", response_model=FlightResponse)
async def add_flight():
    """
    Add a flight to the tail of the queue (allowed while a run is active).
    
    Returns:
        The new flight
    """
    service = get_flight_control_service()
    return FlightResponse(**service.add_flight())


@router.get("/flights", response_model=FlightListResponse)
async def list_flights():
    """
    List flights by container.
    
    Returns:
        Queue, runway, airborne and completed flights
    """
    service = get_flight_control_service()
    return FlightListResponse(**service.get_flights())


@router.get("/flights/{flight_id}", response_model=FlightResponse)
async def get_flight(flight_id: str):
    """
    Get a single flight and its current status.
    
    Args:
        flight_id: Flight id (e.g. FL001)
    
    Returns:
        The flight
    """
    service = get_flight_control_service()
    flight = service.get_flight(flight_id)
    if flight is None:
        raise HTTPException(status_code=404, detail=f"Flight {flight_id} not found")
    return FlightResponse(**flight)
