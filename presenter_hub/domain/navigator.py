"""Cursor for stepping through the slides of a deck."""

from typing import Optional, Tuple

from .deck import Deck
from .slide import SlideRecord


class SlideNavigator:
    """Tracks the current slide of a deck.

    The cursor is clamped to ``[0, len(slides) - 1]`` on every read, so a
    deck whose slides shrink underneath the navigator never yields an
    out-of-range index. Stepping past either end is a no-op.
    """

    def __init__(self, deck: Deck, index: int = 0):
        self.deck = deck
        self._index = index

    def _clamp(self, index: int) -> int:
        last = len(self.deck.slides) - 1
        if last < 0:
            return 0
        return max(0, min(index, last))

    @property
    def index(self) -> int:
        self._index = self._clamp(self._index)
        return self._index

    @property
    def current(self) -> Optional[SlideRecord]:
        """The slide under the cursor, or None for an empty deck."""
        if not self.deck.slides:
            return None
        return self.deck.slides[self.index]

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index < len(self.deck.slides) - 1

    @property
    def position(self) -> Tuple[int, int]:
        """1-based position and total, for "3 / 7" style display."""
        total = len(self.deck.slides)
        if total == 0:
            return (0, 0)
        return (self.index + 1, total)

    def next(self) -> int:
        """Advance one slide unless already on the last one."""
        if self.has_next:
            self._index = self.index + 1
        return self.index

    def previous(self) -> int:
        """Go back one slide unless already on the first one."""
        if self.has_previous:
            self._index = self.index - 1
        return self.index

    def go_to(self, index: int) -> int:
        """Jump to a slide, clamping out-of-range targets."""
        self._index = self._clamp(index)
        return self._index
