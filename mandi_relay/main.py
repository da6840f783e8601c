"""
Mandi Chat Relay Backend - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (translation, supported languages, health)
- WebSocket connections for multilingual room chat
- Metrics exporter and relay shutdown
"""
from contextlib import asynccontextmanager
import logging
from datetime import datetime, UTC
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mandi_relay import __version__
from mandi_relay.api import router as api_router
from mandi_relay.api.websocket import router as ws_router
from mandi_relay.config.constants import SERVICE_NAME
from mandi_relay.config.settings import settings
from mandi_relay.services.connection import ConnectionHub
from mandi_relay.services.metrics import start_metrics_server
from mandi_relay.services.relay import RelayEngine
from mandi_relay.services.translation import get_translation_service

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # === STARTUP ===
    logger.info("🚀 Starting Mandi Chat Relay...")

    if settings.METRICS_ENABLED:
        start_metrics_server(port=settings.METRICS_PORT)

    logger.info(f"🌐 Frontend URL: {settings.FRONTEND_URL}")
    logger.info("📡 WebSocket relay ready for connections")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("🛑 Shutting down...")
    await app.state.relay_engine.shutdown()


app = FastAPI(
    title="Mandi Chat Relay",
    description="Multilingual real-time chat relay for marketplace negotiation",
    version=__version__,
    lifespan=lifespan
)

# Relay wiring: one hub, one translator, one engine per application
app.state.connection_hub = ConnectionHub()
app.state.translation_service = get_translation_service()
app.state.relay_engine = RelayEngine(
    hub=app.state.connection_hub,
    translator=app.state.translation_service,
    typing_timeout=settings.TYPING_INDICATOR_TIMEOUT_SEC,
    translation_timeout=settings.TRANSLATION_TIMEOUT_SEC,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include REST API routes
app.include_router(api_router, prefix="/api")

# Include WebSocket routes
app.include_router(ws_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Return the structured error body for unknown endpoints."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "error": {"code": "NOT_FOUND", "message": "Endpoint not found"},
            },
        )
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Mandi Chat Relay",
        "version": __version__,
        "status": "running"
    }


def describe_state(engine: RelayEngine, hub: ConnectionHub) -> Dict[str, Any]:
    """Snapshot of relay state for health reporting."""
    return {
        "active_connections": hub.get_total_connections(),
        "active_rooms": engine.rooms.room_count(),
        "active_sessions": len(engine.sessions),
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "OK",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(UTC).isoformat(),
        **describe_state(app.state.relay_engine, app.state.connection_hub),
    }
