"""Pydantic models for the serialized deck form.

Stored collections and JSON exports use camelCase keys
(``createdAt``, ``rawText``). These models validate that shape when decks
come back from storage and convert them into domain objects.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from presenter_hub.domain.deck import Deck
from presenter_hub.domain.slide import SlideRecord


class SlideModel(BaseModel):
    """Serialized SlideRecord."""

    title: str = Field(..., min_length=1)
    body: str = ""
    order: int = Field(0, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Slide title must not be blank")
        return v


class DeckModel(BaseModel):
    """Serialized Deck."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str
    created_at: datetime = Field(..., alias="createdAt")
    slides: list[SlideModel] = Field(default_factory=list)
    raw_text: str = Field("", alias="rawText")

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckModel":
        """Build the serialized model from a domain Deck."""
        return cls(
            id=deck.id,
            title=deck.title,
            created_at=deck.created_at,
            slides=[SlideModel(**slide.to_dict()) for slide in deck.slides],
            raw_text=deck.raw_text,
        )

    def to_deck(self) -> Deck:
        """Convert into a domain Deck."""
        return Deck(
            deck_id=self.id,
            title=self.title,
            created_at=self.created_at,
            raw_text=self.raw_text,
            slides=[
                SlideRecord(title=s.title, body=s.body, order=s.order)
                for s in self.slides
            ],
        )

    def to_json_dict(self) -> dict:
        """Dump with camelCase aliases and JSON-safe values."""
        return self.model_dump(by_alias=True, mode="json")
