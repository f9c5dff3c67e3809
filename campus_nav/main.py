import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Any
from datetime import datetime, timezone

from campus_nav.api import buildings, directions, shuttle
from campus_nav.config import settings
from campus_nav.core.buildings import get_polygon_store

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Lifespan manager for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: fail fast on a broken building asset
    store = get_polygon_store()
    logger.info(f"Application starting up with {len(store)} buildings")
    yield
    # Shutdown
    logger.info("Application shutting down")

app = FastAPI(
    title="Concordia Campus Navigation API",
    description="Building resolution and shuttle routing for the SGW and Loyola campuses",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(buildings.router, prefix="/api/buildings", tags=["Buildings"])
app.include_router(directions.router, prefix="/api/directions", tags=["Directions"])
app.include_router(shuttle.router, prefix="/api/shuttle", tags=["Shuttle"])

@app.get("/")
async def root():
    return {
        "message": "Concordia Campus Navigation API",
        "status": "active",
        "campuses": ["SGW", "Loyola"],
        "version": "1.0.0",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# Health check endpoint
@app.get("/health")
async def health_check(store: buildings.StoreDep) -> dict[str, Any]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "buildings": len(store)
    }
