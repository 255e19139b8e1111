"""Deck class holding parsed slides together with the raw generation text."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .slide import SlideRecord


class Deck:
    """A generated presentation: ordered slides plus metadata.

    ``id``, ``created_at`` and ``raw_text`` are fixed at construction and
    exposed read-only. Edits go through ``update_slide`` and ``rename`` and
    only ever touch the derived slides and the title, so the slides can
    always be re-derived from ``raw_text``.

    Attributes:
        title: Deck title shown to the user
        slides: Ordered list of SlideRecord objects
    """

    def __init__(
        self,
        deck_id: str,
        title: str,
        created_at: datetime,
        raw_text: str,
        slides: Optional[List[SlideRecord]] = None,
    ):
        """Initialize a Deck.

        Args:
            deck_id: Unique identifier, never changes
            title: Deck title
            created_at: Creation timestamp
            raw_text: Unparsed generation output, kept verbatim
            slides: Parsed slides in source order
        """
        self._id = deck_id
        self._created_at = created_at
        self._raw_text = raw_text
        self.title = title
        self.slides = slides if slides is not None else []

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def is_empty(self) -> bool:
        """True when no slide boundaries were recognized in the raw text."""
        return not self.slides

    def get_slide(self, index: int) -> SlideRecord:
        """Retrieve slide by index.

        Raises:
            IndexError: If index is out of range
        """
        return self.slides[index]

    def update_slide(
        self,
        index: int,
        title: Optional[str] = None,
        body: Optional[str] = None,
    ) -> SlideRecord:
        """Edit the title and/or body of one slide in place.

        Args:
            index: Index of the slide to edit
            title: New title, or None to keep the current one
            body: New body, or None to keep the current one

        Returns:
            The edited SlideRecord

        Raises:
            IndexError: If index is out of range
            ValueError: If the new title is blank
        """
        slide = self.slides[index]
        if title is not None:
            if not title.strip():
                raise ValueError("Slide title must not be empty")
            slide.title = title
        if body is not None:
            slide.body = body
        return slide

    def rename(self, title: str) -> None:
        """Change the deck title."""
        self.title = title

    def __str__(self) -> str:
        return f"Deck {self._id}: {self.title} ({len(self.slides)} slides)"

    def __repr__(self) -> str:
        return (
            f"Deck(id={self._id!r}, title={self.title!r}, "
            f"slide_count={len(self.slides)}, raw_text_length={len(self._raw_text)})"
        )
