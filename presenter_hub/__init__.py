"""Smart Presenter Hub: turn generated presentation text into slide decks."""

__version__ = "0.1.0"
