"""Serialization models."""

from presenter_hub.models.deck import DeckModel, SlideModel
from presenter_hub.models.generation import ErrorResponse, GenerationResult, PresentationRequest

__all__ = [
    "DeckModel",
    "SlideModel",
    "ErrorResponse",
    "GenerationResult",
    "PresentationRequest",
]
