"""API routes."""

from presenter_hub.api.routes.presentation import router as presentation_router

__all__ = [
    "presentation_router",
]
