"""PowerPoint export of a deck using python-pptx.

Each SlideRecord becomes one slide on a blank layout: a centered bold
title, a word-wrapped body box and a small "Slide N" footer.
"""

import logging
from pathlib import Path

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_AUTO_SIZE, PP_ALIGN
from pptx.util import Inches, Pt

from presenter_hub.domain.deck import Deck
from presenter_hub.domain.slide import SlideRecord
from presenter_hub.utils.error_handling import ExportError
from presenter_hub.utils.text_cleanup import safe_filename_stem

logger = logging.getLogger(__name__)

SLIDE_WIDTH = Inches(10)
SLIDE_HEIGHT = Inches(7.5)
BLANK_LAYOUT_INDEX = 6

BACKGROUND_COLOR = RGBColor(0xF7, 0xF6, 0xF3)
TITLE_COLOR = RGBColor(0x2E, 0x2E, 0x2E)
BODY_COLOR = RGBColor(0x3C, 0x3C, 0x3C)
FOOTER_COLOR = RGBColor(0x88, 0x88, 0x88)

TITLE_FONT_SIZE = Pt(28)
BODY_FONT_SIZE = Pt(16)
FOOTER_FONT_SIZE = Pt(10)


def _add_text_box(slide, left, top, width, height):
    box = slide.shapes.add_textbox(left, top, width, height)
    frame = box.text_frame
    frame.word_wrap = True
    return box, frame


def _add_slide(presentation, record: SlideRecord, number: int) -> None:
    slide = presentation.slides.add_slide(presentation.slide_layouts[BLANK_LAYOUT_INDEX])

    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = BACKGROUND_COLOR

    _, title_frame = _add_text_box(slide, Inches(0.5), Inches(0.1), Inches(9), Inches(1))
    title_para = title_frame.paragraphs[0]
    title_para.text = record.title
    title_para.alignment = PP_ALIGN.CENTER
    title_para.font.size = TITLE_FONT_SIZE
    title_para.font.bold = True
    title_para.font.color.rgb = TITLE_COLOR

    _, body_frame = _add_text_box(slide, Inches(0.7), Inches(1.5), Inches(8.6), Inches(4.5))
    body_frame.auto_size = MSO_AUTO_SIZE.TEXT_TO_FIT_SHAPE
    for idx, line in enumerate(record.body.split("\n")):
        para = body_frame.paragraphs[0] if idx == 0 else body_frame.add_paragraph()
        para.text = line
        para.alignment = PP_ALIGN.LEFT
        para.line_spacing = 1.2
        para.font.size = BODY_FONT_SIZE
        para.font.color.rgb = BODY_COLOR

    _, footer_frame = _add_text_box(slide, Inches(8.5), Inches(6.8), Inches(1.3), Inches(0.4))
    footer_para = footer_frame.paragraphs[0]
    footer_para.text = f"Slide {number}"
    footer_para.alignment = PP_ALIGN.RIGHT
    footer_para.font.size = FOOTER_FONT_SIZE
    footer_para.font.color.rgb = FOOTER_COLOR


def build_pptx(deck: Deck):
    """Build an in-memory python-pptx Presentation for a deck.

    The deck's slides are read only.
    """
    presentation = Presentation()
    presentation.slide_width = SLIDE_WIDTH
    presentation.slide_height = SLIDE_HEIGHT
    for number, record in enumerate(deck.slides, start=1):
        _add_slide(presentation, record, number)
    return presentation


def pptx_export_filename(deck: Deck) -> str:
    """Filename for the slideshow export, safe on common filesystems."""
    return f"{safe_filename_stem(deck.title)}.pptx"


def write_deck_pptx(deck: Deck, output_dir: str | Path) -> Path:
    """Write the deck as a .pptx file into a directory.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the presentation cannot be built or written
    """
    path = Path(output_dir) / pptx_export_filename(deck)
    try:
        presentation = build_pptx(deck)
        path.parent.mkdir(parents=True, exist_ok=True)
        presentation.save(str(path))
    except Exception as e:
        raise ExportError(f"Failed to write PPTX export: {e}", details={"path": str(path)}) from e

    logger.info(
        "Exported deck to PPTX",
        extra={"deck_id": deck.id, "slide_count": len(deck.slides), "path": str(path)},
    )
    return path
