"""Persistence for the saved deck collection.

The whole collection is stored as one blob under one well-known key and is
always loaded and saved wholesale (read-modify-write, last writer wins).
Callers depend on the ``DeckRepository`` interface so the storage backend
can be swapped for an in-memory fake in tests.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from presenter_hub.domain.deck import Deck
from presenter_hub.models.deck import DeckModel
from presenter_hub.utils.error_handling import StorageError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "saved_presentations"


class DeckRepository(ABC):
    """Load/save capability for the serialized deck collection."""

    @abstractmethod
    def load(self) -> List[Dict[str, Any]]:
        """Return the stored collection, or an empty list if unavailable."""

    @abstractmethod
    def save(self, records: List[Dict[str, Any]]) -> None:
        """Replace the stored collection.

        Raises:
            StorageError: If the collection cannot be written
        """


class InMemoryDeckRepository(DeckRepository):
    """Repository holding the collection in process memory."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self._records = json.loads(json.dumps(records or []))

    def load(self) -> List[Dict[str, Any]]:
        return json.loads(json.dumps(self._records))

    def save(self, records: List[Dict[str, Any]]) -> None:
        self._records = json.loads(json.dumps(records))


class JsonFileDeckRepository(DeckRepository):
    """Repository storing the collection under one key of a JSON file.

    Other keys in the same file are left untouched on save.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_blob(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            blob = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(
                f"Unreadable deck storage, using empty collection: {e}",
                extra={"path": str(self.path)},
            )
            return {}
        if not isinstance(blob, dict):
            logger.warning(
                "Deck storage root is not an object, using empty collection",
                extra={"path": str(self.path)},
            )
            return {}
        return blob

    def load(self) -> List[Dict[str, Any]]:
        records = self._read_blob().get(self.key)
        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning(
                "Stored deck collection is not a list, using empty collection",
                extra={"path": str(self.path), "key": self.key},
            )
            return []
        return records

    def save(self, records: List[Dict[str, Any]]) -> None:
        blob = self._read_blob()
        blob[self.key] = records
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(blob, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageError(
                f"Failed to write deck storage: {e}",
                details={"path": str(self.path)},
            ) from e


def _record_id(record: Any) -> Optional[str]:
    return record.get("id") if isinstance(record, dict) else None


class DeckLibrary:
    """Saved-deck operations on top of a DeckRepository.

    Records are validated one by one. A record that fails validation is
    skipped when listing but kept in storage, so saving or deleting other
    decks never drops it.
    """

    def __init__(self, repository: DeckRepository):
        self.repository = repository

    def list_decks(self) -> List[Deck]:
        """Load every saved deck that passes validation."""
        decks = []
        for record in self.repository.load():
            try:
                decks.append(DeckModel.model_validate(record).to_deck())
            except ValidationError as e:
                logger.warning(
                    "Skipping invalid saved deck record",
                    extra={"deck_id": _record_id(record), "error_count": e.error_count()},
                )
        return decks

    def get_deck(self, deck_id: str) -> Optional[Deck]:
        """Return the saved deck with this id, if any."""
        for deck in self.list_decks():
            if deck.id == deck_id:
                return deck
        return None

    def save_deck(self, deck: Deck) -> bool:
        """Insert or replace a deck, matched by id.

        Returns:
            True if the collection was written, False on storage failure
        """
        records = self.repository.load()
        record = DeckModel.from_deck(deck).to_json_dict()
        for idx, existing in enumerate(records):
            if _record_id(existing) == deck.id:
                records[idx] = record
                action = "updated"
                break
        else:
            records.append(record)
            action = "added"

        try:
            self.repository.save(records)
        except StorageError as e:
            logger.error(f"Error saving presentation: {e}", extra={"deck_id": deck.id})
            return False

        logger.info(
            "Saved deck",
            extra={"deck_id": deck.id, "action": action, "deck_count": len(records)},
        )
        return True

    def delete_deck(self, deck_id: str) -> bool:
        """Remove a saved deck.

        Returns:
            True if a deck was removed, False if it was not found

        Raises:
            StorageError: If the collection cannot be written
        """
        records = self.repository.load()
        remaining = [record for record in records if _record_id(record) != deck_id]
        if len(remaining) == len(records):
            return False
        self.repository.save(remaining)
        logger.info("Deleted deck", extra={"deck_id": deck_id})
        return True
