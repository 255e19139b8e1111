"""
Pytest configuration and shared fixtures.

This module provides fixtures that are available to all test modules.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generator

import pytest
import yaml

from presenter_hub.config.settings import get_settings
from presenter_hub.domain.deck import Deck
from presenter_hub.domain.slide import SlideRecord
from presenter_hub.services.deck_builder import DeckBuilder


PLAIN_TEXT = (
    "Slide 1: Intro\nWelcome to the talk.\n\n"
    "Slide 2: Details\nMore info here."
)

EMPHASIZED_TEXT = (
    "**Slide 1: Overview**\n\n**Content:**\nThis is the overview.\n\n"
    "**Slide 2: Summary**\n\n**Content:**\nFinal thoughts."
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """
    Clear settings cache before each test.

    This ensures each test gets fresh settings.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def plain_text() -> str:
    """Generator output in the plain "Slide N: Title" format."""
    return PLAIN_TEXT


@pytest.fixture
def emphasized_text() -> str:
    """Generator output in the bold "**Slide N: Title**" format."""
    return EMPHASIZED_TEXT


@pytest.fixture
def fixed_builder() -> DeckBuilder:
    """DeckBuilder with predictable ids and a pinned clock."""
    counter = iter(range(1, 10_000))
    return DeckBuilder(
        id_factory=lambda: f"deck-{next(counter)}",
        clock=lambda: datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_deck() -> Deck:
    """A three-slide deck built by hand."""
    return Deck(
        deck_id="deck-sample",
        title="Sample Deck",
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        raw_text="Slide 1: One\nA\n\nSlide 2: Two\nB\n\nSlide 3: Three\nC",
        slides=[
            SlideRecord(title="One", body="A", order=0),
            SlideRecord(title="Two", body="B", order=1),
            SlideRecord(title="Three", body="C", order=2),
        ],
    )


@pytest.fixture
def sample_config(tmp_path: Path) -> dict[str, Any]:
    """
    Provide a sample configuration dictionary for testing.

    Returns:
        Sample configuration
    """
    return {
        "llm": {
            "model": "gemini-test",
            "temperature": 0.5,
            "max_output_tokens": 1024,
            "timeout": 30,
        },
        "proxy": {"base_url": "http://proxy.test", "timeout": 5},
        "api": {
            "host": "127.0.0.1",
            "port": 5000,
            "cors_origins": ["http://localhost:5173"],
        },
        "storage": {
            "path": str(tmp_path / "data" / "presentations.json"),
            "key": "saved_presentations",
        },
        "export": {"output_dir": str(tmp_path / "exports")},
        "logging": {
            "level": "INFO",
            "format": "text",
            "log_file": None,
            "max_file_size_mb": 1,
            "backup_count": 1,
        },
        "environment": "test",
    }


@pytest.fixture
def sample_prompts() -> dict[str, Any]:
    """
    Provide sample prompts for testing.

    Returns:
        Sample prompts dictionary
    """
    return {
        "slide_by_slide": 'Slides about "{title}". Content: {content}.',
        "outline": 'Outline about "{title}".',
    }


@pytest.fixture
def config_dir(
    tmp_path: Path,
    sample_config: dict,
    sample_prompts: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """
    Write config.yaml and prompts.yaml to a temp dir and point the loader at it.

    Returns:
        Path to the temporary config directory
    """
    directory = tmp_path / "config"
    directory.mkdir()
    with open(directory / "config.yaml", "w") as f:
        yaml.dump(sample_config, f)
    with open(directory / "prompts.yaml", "w") as f:
        yaml.dump(sample_prompts, f)

    monkeypatch.setenv("PRESENTER_HUB_CONFIG_DIR", str(directory))
    for var in ("API_PORT", "LOG_LEVEL", "PROXY_BASE_URL", "STORAGE_PATH", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    yield directory
