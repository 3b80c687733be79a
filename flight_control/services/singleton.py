"""Singleton pattern for shared service instances."""

from .flight_control_service import FlightControlService

# Global service instance (singleton pattern)
_flight_control_service: FlightControlService = None


def get_flight_control_service() -> FlightControlService:
    """
    Get or create the singleton flight control service instance.
    
    Returns:
        FlightControlService instance
    """
    global _flight_control_service
    if _flight_control_service is None:
        _flight_control_service = FlightControlService()
    return _flight_control_service


def shutdown_flight_control_service() -> None:
    """Close and drop the singleton, if one was created."""
    global _flight_control_service
    if _flight_control_service is not None:
        _flight_control_service.close()
        _flight_control_service = None
