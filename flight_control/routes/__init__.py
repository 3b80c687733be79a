"""Routes package for API endpoints."""

from .flight_routes import router as flight_router
from .control_routes import router as control_router
from .status_routes import router as status_router
from .events_routes import router as events_router

__all__ = ["flight_router", "control_router", "status_router", "events_router"]
