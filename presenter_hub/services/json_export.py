"""Structured-data (JSON) export of a deck."""

import json
import logging
import re
from pathlib import Path

from presenter_hub.domain.deck import Deck
from presenter_hub.models.deck import DeckModel
from presenter_hub.utils.error_handling import ExportError
from presenter_hub.utils.text_cleanup import safe_filename_stem

logger = logging.getLogger(__name__)


def export_deck_json(deck: Deck, indent: int = 2) -> str:
    """Serialize a deck to JSON in its stored camelCase form."""
    return json.dumps(DeckModel.from_deck(deck).to_json_dict(), ensure_ascii=False, indent=indent)


def json_export_filename(deck: Deck) -> str:
    """Download filename: the deck title with whitespace runs as underscores.

    Path separators are replaced too, so the file always lands directly in
    the output directory.
    """
    stem = safe_filename_stem(re.sub(r"\s+", "_", deck.title.strip()))
    return f"{stem}.json"


def write_deck_json(deck: Deck, output_dir: str | Path) -> Path:
    """Write the JSON export into a directory.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(output_dir) / json_export_filename(deck)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_deck_json(deck), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write JSON export: {e}", details={"path": str(path)}) from e

    logger.info("Exported deck to JSON", extra={"deck_id": deck.id, "path": str(path)})
    return path
