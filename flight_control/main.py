"""FastAPI main application for flight control."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Config
from .logger import configure_logging
from .routes import flight_router, control_router, status_router, events_router
from .services.singleton import shutdown_flight_control_service

# Configure logging
config = Config()
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Flight control API starting")
    yield
    shutdown_flight_control_service()
    logger.info("Flight control API stopped")


# Initialize FastAPI app
app = FastAPI(title="Airport Flight Control API", version="1.0.0", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(flight_router)
app.include_router(control_router)
app.include_router(status_router)
app.include_router(events_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Airport Flight Control API", "status": "running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
