"""Presentation workflow: generate, parse, build, save.

This is the client-side orchestration around the generation proxy. It owns
no global state: the client, builder and library are injected, and
``create_presentation_service`` wires defaults from settings.
"""

import logging
from typing import List, Optional

from presenter_hub.domain.deck import Deck
from presenter_hub.models.generation import GenerationResult, PresentationRequest
from presenter_hub.services.deck_builder import DeckBuilder
from presenter_hub.services.deck_repository import DeckLibrary, JsonFileDeckRepository
from presenter_hub.services.generation_client import GenerationClient
from presenter_hub.services.request_fence import RequestFence

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "gemini-api"


def resolve_deck_title(request: PresentationRequest, result: GenerationResult) -> str:
    """Pick the deck title for a generation result.

    A non-default ``source`` names the deck; otherwise the title echoed by
    the proxy is used, falling back to the requested title.
    """
    if result.source and result.source != DEFAULT_SOURCE:
        return result.source
    return result.title or request.title


class PresentationService:
    """Generates decks through the proxy and manages saved decks."""

    def __init__(
        self,
        client: GenerationClient,
        library: DeckLibrary,
        builder: Optional[DeckBuilder] = None,
        fence: Optional[RequestFence] = None,
    ):
        self.client = client
        self.library = library
        self.builder = builder or DeckBuilder()
        self.fence = fence or RequestFence()

    def generate_presentation(self, request: PresentationRequest) -> Optional[Deck]:
        """Generate a deck for a topic.

        Args:
            request: Topic, content and options for the generator

        Returns:
            The new Deck, or None if a newer request superseded this one
            while it was in flight. The deck may have no slides when the
            generator's text contained no recognizable slide markers.

        Raises:
            GenerationError: If the proxy call fails; nothing is built
        """
        ticket = self.fence.issue()
        result = self.client.generate(request)

        if not self.fence.is_current(ticket):
            logger.info(
                "Discarding stale generation result",
                extra={"ticket": ticket, "latest_ticket": self.fence.latest},
            )
            return None

        deck = self.builder.build(resolve_deck_title(request, result), result.result)
        if deck.is_empty:
            logger.warning(
                "Generated text contained no recognizable slides",
                extra={"deck_id": deck.id, "result_length": len(result.result)},
            )
        return deck

    def save(self, deck: Deck) -> bool:
        return self.library.save_deck(deck)

    def list_saved(self) -> List[Deck]:
        return self.library.list_decks()

    def get_saved(self, deck_id: str) -> Optional[Deck]:
        return self.library.get_deck(deck_id)

    def delete(self, deck_id: str) -> bool:
        return self.library.delete_deck(deck_id)


def create_presentation_service(settings=None) -> PresentationService:
    """Build a PresentationService from application settings."""
    if settings is None:
        from presenter_hub.config.settings import get_settings

        settings = get_settings()

    client = GenerationClient(
        base_url=settings.proxy.base_url,
        timeout=settings.proxy.timeout,
    )
    repository = JsonFileDeckRepository(settings.storage.path, key=settings.storage.key)
    return PresentationService(client=client, library=DeckLibrary(repository))
