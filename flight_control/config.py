"""Configuration module for protocol durations, id format, and settings."""

from typing import Optional
from pydantic_settings import BaseSettings


# Flight id format: FL001, FL002, ...
FLIGHT_ID_PREFIX = "FL"
FLIGHT_ID_WIDTH = 3
FIRST_SEQUENCE = 1


# Recorded protocol durations (milliseconds)
POSITIONING_MS = 500
TAKEOFF_ANIMATION_MS = 3000
AIRBORNE_DWELL_MS = 4000
TAKEOFF_SPACING_MS = 2000
LANDING_DESCENT_MS = 3000
LANDING_SPACING_MS = 1000
CLEANUP_DELAY_MS = 2000


# Names of the two orchestrated sequences sharing the run lock
SEQUENCE_TAKEOFF = "takeoff"
SEQUENCE_EMERGENCY_LANDING = "emergency_landing"


class Config(BaseSettings):
    """Application configuration with environment variable support."""
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "flight_control.log"
    EVENT_LOG_FILE: Optional[str] = None  # JSON-lines notification log, disabled by default
    EVENT_HISTORY_LIMIT: int = 500
    
    # Flight ids
    FLIGHT_ID_PREFIX: str = FLIGHT_ID_PREFIX
    FLIGHT_ID_WIDTH: int = FLIGHT_ID_WIDTH
    
    # Protocol durations (ms)
    POSITIONING_MS: int = POSITIONING_MS
    TAKEOFF_ANIMATION_MS: int = TAKEOFF_ANIMATION_MS
    AIRBORNE_DWELL_MS: int = AIRBORNE_DWELL_MS
    TAKEOFF_SPACING_MS: int = TAKEOFF_SPACING_MS
    LANDING_DESCENT_MS: int = LANDING_DESCENT_MS
    LANDING_SPACING_MS: int = LANDING_SPACING_MS
    CLEANUP_DELAY_MS: int = CLEANUP_DELAY_MS
    
    # Multiplier applied to every real-time wait (0.1 = ten times faster)
    TIME_SCALE: float = 1.0
    
    # API server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
