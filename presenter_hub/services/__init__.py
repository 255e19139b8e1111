"""Business logic services."""

from presenter_hub.services.deck_builder import DeckBuilder, build_deck
from presenter_hub.services.deck_repository import (
    DeckLibrary,
    DeckRepository,
    InMemoryDeckRepository,
    JsonFileDeckRepository,
)
from presenter_hub.services.generation_client import GenerationClient
from presenter_hub.services.presentation_service import (
    PresentationService,
    create_presentation_service,
)
from presenter_hub.services.request_fence import RequestFence
from presenter_hub.services.slide_parser import BoundaryStrategy, parse_slides

__all__ = [
    "BoundaryStrategy",
    "DeckBuilder",
    "DeckLibrary",
    "DeckRepository",
    "GenerationClient",
    "InMemoryDeckRepository",
    "JsonFileDeckRepository",
    "PresentationService",
    "RequestFence",
    "build_deck",
    "create_presentation_service",
    "parse_slides",
]
