"""FastAPI application for the generation proxy.

This module initializes the FastAPI app with CORS middleware and routes.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from presenter_hub import __version__
from presenter_hub.api.routes import presentation_router
from presenter_hub.config.settings import get_settings
from presenter_hub.utils.error_handling import ConfigurationError

logger = logging.getLogger(__name__)


def _environment() -> str:
    """Environment name from settings, or the ENVIRONMENT variable if config fails to load."""
    try:
        return get_settings().environment
    except ConfigurationError as e:
        logger.warning(f"Could not load environment from settings: {e}")
        return os.getenv("ENVIRONMENT", "development")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info(f"Starting Smart Presenter Hub proxy (environment: {_environment()})")
    yield
    logger.info("Shutting down Smart Presenter Hub proxy")


app = FastAPI(
    title="Smart Presenter Hub API",
    description="Generate presentation text from a topic using Gemini",
    version=__version__,
    lifespan=lifespan,
)


def _cors_origins() -> list[str]:
    try:
        return get_settings().api.cors_origins
    except ConfigurationError as e:
        logger.warning(f"Could not load CORS origins from settings, allowing all: {e}")
        return ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(presentation_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Welcome message."""
    return "Welcome to the Smart Presenter Hub backend!"


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": _environment(),
        "version": __version__,
    }
