"""
presenter-hub CLI - generate, inspect and export slide decks.

Usage:
    presenter-hub serve                     # Run the generation proxy
    presenter-hub generate "Solar power"    # Generate and save a deck
    presenter-hub parse output.txt          # Parse a saved model response
    presenter-hub list                      # List saved decks
    presenter-hub show DECK_ID              # Print one deck
    presenter-hub export DECK_ID --format pptx
    presenter-hub delete DECK_ID
"""

import json
import sys
from pathlib import Path

import click

from presenter_hub.config.settings import get_settings
from presenter_hub.domain.deck import Deck
from presenter_hub.domain.navigator import SlideNavigator
from presenter_hub.models.deck import DeckModel
from presenter_hub.models.generation import PresentationRequest
from presenter_hub.services.json_export import write_deck_json
from presenter_hub.services.pptx_export import write_deck_pptx
from presenter_hub.services.presentation_service import create_presentation_service
from presenter_hub.services.slide_parser import parse_slides, select_strategy
from presenter_hub.utils.error_handling import (
    ConfigurationError,
    ExportError,
    GenerationError,
    StorageError,
)
from presenter_hub.utils.logging_config import setup_logging_from_settings


def _echo_deck(deck: Deck) -> None:
    click.echo(f"{deck.title}  [{deck.id}]")
    click.echo(f"Created: {deck.created_at.isoformat()}")
    if deck.is_empty:
        click.echo("No slides recognized in the generated text.")
        return
    navigator = SlideNavigator(deck)
    while True:
        slide = navigator.current
        position, total = navigator.position
        click.echo("")
        click.echo(f"[{position} / {total}] {slide.title}")
        if slide.body:
            click.echo(slide.body)
        if not navigator.has_next:
            break
        navigator.next()


@click.group()
@click.pass_context
def cli(ctx):
    """presenter-hub - AI-generated slide decks from a topic."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    setup_logging_from_settings(settings)
    ctx.obj = settings


@cli.command()
@click.option("--host", default=None, help="Bind address (default from config)")
@click.option("--port", default=None, type=int, help="Port (default from config)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
@click.pass_obj
def serve(settings, host, port, reload):
    """Run the generation proxy."""
    import uvicorn

    uvicorn.run(
        "presenter_hub.api.main:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
    )


@cli.command()
@click.argument("title")
@click.option("--content", default="", help="Extra guidance for the generator")
@click.option("--slide-by-slide", is_flag=True, help="Request the strict 'Slide X: Title' format")
@click.option("--api-key", envvar="GEMINI_API_KEY", default=None, help="Gemini API key")
@click.option("--no-save", is_flag=True, help="Do not add the deck to the saved collection")
@click.pass_obj
def generate(settings, title, content, slide_by_slide, api_key, no_save):
    """Generate a deck for TITLE through the proxy."""
    service = create_presentation_service(settings)
    request = PresentationRequest(
        title=title,
        content=content,
        slide_by_slide=slide_by_slide,
        api_key=api_key,
    )
    try:
        deck = service.generate_presentation(request)
    except GenerationError as e:
        click.echo(f"Generation failed: {e}", err=True)
        sys.exit(1)

    if deck is None:
        click.echo("Request was superseded; result discarded.")
        return

    _echo_deck(deck)
    if not no_save:
        if service.save(deck):
            click.echo(f"\nSaved deck {deck.id}")
        else:
            click.echo("\nFailed to save presentation", err=True)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print slides as JSON")
def parse(path, as_json):
    """Parse a saved model response from PATH and print its slides."""
    raw_text = path.read_text(encoding="utf-8")
    slides = parse_slides(raw_text)
    if as_json:
        click.echo(json.dumps([slide.to_dict() for slide in slides], indent=2, ensure_ascii=False))
        return
    strategy = select_strategy(raw_text)
    click.echo(f"Strategy: {strategy.value if strategy else 'none'}")
    click.echo(f"Slides: {len(slides)}")
    for slide in slides:
        click.echo(f"  {slide.order + 1}. {slide.title}")


@cli.command(name="list")
@click.pass_obj
def list_decks(settings):
    """List saved decks."""
    decks = create_presentation_service(settings).list_saved()
    if not decks:
        click.echo("No saved presentations.")
        return
    for deck in decks:
        click.echo(f"{deck.id}  {deck.created_at:%Y-%m-%d %H:%M}  {deck.slide_count:>3} slides  {deck.title}")


@cli.command()
@click.argument("deck_id")
@click.option("--json", "as_json", is_flag=True, help="Print the stored JSON form")
@click.pass_obj
def show(settings, deck_id, as_json):
    """Print a saved deck."""
    deck = create_presentation_service(settings).get_saved(deck_id)
    if deck is None:
        click.echo(f"Deck not found: {deck_id}", err=True)
        sys.exit(1)
    if as_json:
        click.echo(json.dumps(DeckModel.from_deck(deck).to_json_dict(), indent=2, ensure_ascii=False))
        return
    _echo_deck(deck)


@cli.command()
@click.argument("deck_id")
@click.option(
    "--format",
    "export_format",
    type=click.Choice(["json", "pptx"]),
    default="pptx",
    show_default=True,
)
@click.option("--output", "output_dir", default=None, help="Output directory (default from config)")
@click.pass_obj
def export(settings, deck_id, export_format, output_dir):
    """Export a saved deck to JSON or PowerPoint."""
    deck = create_presentation_service(settings).get_saved(deck_id)
    if deck is None:
        click.echo(f"Deck not found: {deck_id}", err=True)
        sys.exit(1)

    output_dir = output_dir or settings.export.output_dir
    writer = write_deck_json if export_format == "json" else write_deck_pptx
    try:
        path = writer(deck, output_dir)
    except ExportError as e:
        click.echo(f"Export failed: {e}", err=True)
        sys.exit(1)
    click.echo(f"Exported to {path}")


@cli.command()
@click.argument("deck_id")
@click.pass_obj
def delete(settings, deck_id):
    """Delete a saved deck."""
    try:
        removed = create_presentation_service(settings).delete(deck_id)
    except StorageError as e:
        click.echo(f"Delete failed: {e}", err=True)
        sys.exit(1)
    if not removed:
        click.echo(f"Deck not found: {deck_id}", err=True)
        sys.exit(1)
    click.echo(f"Deleted {deck_id}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
