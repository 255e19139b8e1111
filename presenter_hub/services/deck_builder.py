"""Build Deck objects from raw generation output."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from presenter_hub.domain.deck import Deck
from presenter_hub.domain.slide import SlideRecord
from presenter_hub.services.slide_parser import parse_slides
from presenter_hub.utils.error_handling import IdentifierGenerationError

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class DeckBuilder:
    """Wraps parsed slides into a Deck with a fresh identity.

    The id factory and clock are injectable so tests can pin them.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _uuid4_str,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.id_factory = id_factory
        self.clock = clock

    def _new_id(self) -> str:
        try:
            deck_id = self.id_factory()
        except Exception as e:
            raise IdentifierGenerationError(f"Failed to generate deck identifier: {e}") from e
        if not deck_id:
            raise IdentifierGenerationError("Identifier factory returned an empty id")
        return str(deck_id)

    def build(self, title: str, raw_text: str) -> Deck:
        """Parse raw text and wrap the slides in a new Deck.

        Args:
            title: Deck title
            raw_text: Unparsed model output, stored verbatim

        Returns:
            New Deck; its slides may be empty if nothing was recognized

        Raises:
            IdentifierGenerationError: If no identifier could be produced
        """
        slides = parse_slides(raw_text)
        deck = Deck(
            deck_id=self._new_id(),
            title=title,
            created_at=self.clock(),
            raw_text=raw_text,
            slides=slides,
        )
        logger.info(
            "Built deck",
            extra={"deck_id": deck.id, "slide_count": len(slides)},
        )
        return deck

    def rebuild_slides(self, deck: Deck) -> List[SlideRecord]:
        """Re-derive a deck's slides from its raw text, discarding edits.

        Args:
            deck: Deck to reset

        Returns:
            The freshly parsed slides, now also set on the deck
        """
        deck.slides = parse_slides(deck.raw_text)
        logger.info(
            "Rebuilt deck slides from raw text",
            extra={"deck_id": deck.id, "slide_count": len(deck.slides)},
        )
        return deck.slides


_deck_builder: Optional[DeckBuilder] = None


def get_deck_builder() -> DeckBuilder:
    """Get the global DeckBuilder instance."""
    global _deck_builder
    if _deck_builder is None:
        _deck_builder = DeckBuilder()
    return _deck_builder


def build_deck(title: str, raw_text: str) -> Deck:
    """Build a Deck with the default uuid4 identifiers and UTC clock."""
    return get_deck_builder().build(title, raw_text)
