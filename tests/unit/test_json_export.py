"""Unit tests for JSON export."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from presenter_hub.services.json_export import (
    export_deck_json,
    json_export_filename,
    write_deck_json,
)
from presenter_hub.utils.error_handling import ExportError


def test_export_uses_stored_shape(sample_deck):
    data = json.loads(export_deck_json(sample_deck))

    assert data["id"] == "deck-sample"
    assert data["title"] == "Sample Deck"
    assert data["createdAt"].startswith("2024-05-01T12:00:00")
    assert data["rawText"] == sample_deck.raw_text
    assert data["slides"][1] == {"title": "Two", "body": "B", "order": 1}


def test_export_does_not_modify_deck(sample_deck):
    before = [slide.clone() for slide in sample_deck.slides]

    export_deck_json(sample_deck)

    assert sample_deck.slides == before


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Sample Deck", "Sample_Deck.json"),
        ("  Solar   power\tcosts ", "Solar_power_costs.json"),
        ("   ", "presentation.json"),
    ],
)
def test_filename(sample_deck, title, expected):
    sample_deck.rename(title)
    assert json_export_filename(sample_deck) == expected


def test_write(sample_deck, tmp_path: Path):
    path = write_deck_json(sample_deck, tmp_path / "out")

    assert path == tmp_path / "out" / "Sample_Deck.json"
    assert json.loads(path.read_text(encoding="utf-8"))["id"] == "deck-sample"


def test_write_failure(sample_deck, tmp_path: Path):
    with patch.object(Path, "write_text", side_effect=OSError("read-only")):
        with pytest.raises(ExportError, match="read-only"):
            write_deck_json(sample_deck, tmp_path)


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Q1/Q2 Review", "Q1_Q2_Review.json"),
        ("../../escaped", ".._.._escaped.json"),
        ("..", "presentation.json"),
        ('a\\b:c*"d"', "a_b_c__d_.json"),
    ],
)
def test_filename_path_characters_replaced(sample_deck, title, expected):
    sample_deck.rename(title)
    assert json_export_filename(sample_deck) == expected


def test_write_stays_in_output_dir(sample_deck, tmp_path: Path):
    """Test a title with parent-directory parts cannot escape the output dir."""
    out = tmp_path / "a" / "b" / "exports"
    sample_deck.rename("../../escaped")

    path = write_deck_json(sample_deck, out)

    assert path.parent == out
    assert path.exists()
    assert not (tmp_path / "a" / "escaped.json").exists()
