"""SlideRecord class for representing one parsed slide."""

import copy
from typing import Any, Dict


class SlideRecord:
    """A single slide parsed from generated text.

    Attributes:
        title: Slide heading, never empty
        body: Slide body text, may be empty
        order: 0-based position of the slide within its deck
    """

    def __init__(self, title: str, body: str = "", order: int = 0):
        """Initialize a SlideRecord.

        Args:
            title: Slide heading (must be non-empty after trimming)
            body: Slide body text
            order: 0-based position in the deck

        Raises:
            ValueError: If the title is blank
        """
        if not title or not title.strip():
            raise ValueError("Slide title must not be empty")
        self.title = title
        self.body = body
        self.order = order

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-dict representation of this slide."""
        return {"title": self.title, "body": self.body, "order": self.order}

    def clone(self) -> "SlideRecord":
        """Create a copy of this slide."""
        return SlideRecord(
            title=copy.copy(self.title),
            body=copy.copy(self.body),
            order=self.order,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlideRecord):
            return NotImplemented
        return (self.title, self.body, self.order) == (other.title, other.body, other.order)

    def __str__(self) -> str:
        """String representation showing a body preview."""
        preview_length = 60
        preview = self.body[:preview_length]
        if len(self.body) > preview_length:
            preview += "..."
        return f"Slide {self.order + 1}: {self.title} - {preview}"

    def __repr__(self) -> str:
        return f"SlideRecord(title={self.title!r}, order={self.order}, body_length={len(self.body)})"
