"""Parse model-generated presentation text into SlideRecord objects.

The generator is asked for "Slide N: Title" headings but does not reliably
follow the requested format. Each known heading convention is a named
boundary strategy; the parser tries them in a fixed priority order and
uses the first one that finds at least one marker.

Malformed input never raises: it degrades to fewer slides, or none.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Pattern

from presenter_hub.domain.slide import SlideRecord
from presenter_hub.utils.text_cleanup import clean_body, clean_title, normalize_newlines

logger = logging.getLogger(__name__)


class BoundaryStrategy(str, Enum):
    """Recognized slide heading conventions, in priority order."""

    EMPHASIZED = "emphasized"  # **Slide 1: Title**  /  **Slide 1:** Title
    HEADING = "heading"  # ## Slide 1: Title
    PLAIN = "plain"  # Slide 1: Title


_SLIDE_LABEL = r"slide[ \t]+(?P<number>\d+)[ \t]*:(?P<title>[^\n]*)$"

_MARKER_PATTERNS: Dict[BoundaryStrategy, Pattern[str]] = {
    BoundaryStrategy.EMPHASIZED: re.compile(
        r"^[ \t]*(?:\*\*|__)[ \t]*" + _SLIDE_LABEL, re.IGNORECASE | re.MULTILINE
    ),
    BoundaryStrategy.HEADING: re.compile(
        r"^[ \t]*#{1,6}[ \t]*(?:\*\*|__)?[ \t]*" + _SLIDE_LABEL,
        re.IGNORECASE | re.MULTILINE,
    ),
    BoundaryStrategy.PLAIN: re.compile(
        r"^[ \t]*" + _SLIDE_LABEL, re.IGNORECASE | re.MULTILINE
    ),
}

STRATEGY_ORDER = (
    BoundaryStrategy.EMPHASIZED,
    BoundaryStrategy.HEADING,
    BoundaryStrategy.PLAIN,
)


@dataclass(frozen=True)
class SlideMarker:
    """A slide heading located in the raw text.

    Attributes:
        start: Offset where the marker line begins
        end: Offset just past the marker line
        number: The "N" the generator wrote (informational only)
        raw_title: Title text as written, before cleanup
    """

    start: int
    end: int
    number: int
    raw_title: str


def detect_markers(text: str, strategy: BoundaryStrategy) -> List[SlideMarker]:
    """Find every slide marker of one convention in the text.

    Args:
        text: Raw text with LF line endings
        strategy: Heading convention to look for

    Returns:
        Markers in order of appearance
    """
    pattern = _MARKER_PATTERNS[strategy]
    return [
        SlideMarker(
            start=match.start(),
            end=match.end(),
            number=int(match.group("number")),
            raw_title=match.group("title"),
        )
        for match in pattern.finditer(text)
    ]


def select_strategy(raw_text: Optional[str]) -> Optional[BoundaryStrategy]:
    """Return the strategy the parser would use for this text, if any."""
    if not raw_text:
        return None
    text = normalize_newlines(raw_text)
    for strategy in STRATEGY_ORDER:
        if detect_markers(text, strategy):
            return strategy
    return None


def count_shadowed_markers(text: str, strategy: BoundaryStrategy) -> int:
    """Count markers of strategies ranked below ``strategy``.

    Only one convention splits the text, so these markers end up inside
    slide bodies.
    """
    lower = STRATEGY_ORDER[STRATEGY_ORDER.index(strategy) + 1:]
    return sum(len(detect_markers(text, other)) for other in lower)


def parse_slides(raw_text: Optional[str]) -> List[SlideRecord]:
    """Split generated text into ordered slide records.

    Text before the first marker is discarded. Each segment runs from its
    marker to the next marker or the end of the text. Segments whose title
    is empty after cleanup are dropped, and ``order`` is assigned from the
    position in the output rather than from the marker's slide number.

    Args:
        raw_text: Model output, possibly None or empty

    Returns:
        List of SlideRecord objects, empty if no marker was recognized
    """
    if not raw_text or not raw_text.strip():
        return []

    text = normalize_newlines(raw_text)

    markers: List[SlideMarker] = []
    used_strategy: Optional[BoundaryStrategy] = None
    for strategy in STRATEGY_ORDER:
        markers = detect_markers(text, strategy)
        if markers:
            used_strategy = strategy
            break

    if not markers:
        logger.info(
            "No slide markers recognized",
            extra={"raw_text_length": len(text)},
        )
        return []

    shadowed = count_shadowed_markers(text, used_strategy)
    if shadowed:
        logger.warning(
            "Mixed slide heading styles; lower-priority markers kept as body text",
            extra={"strategy": used_strategy.value, "shadowed_markers": shadowed},
        )

    slides: List[SlideRecord] = []
    dropped = 0
    for idx, marker in enumerate(markers):
        segment_end = markers[idx + 1].start if idx + 1 < len(markers) else len(text)
        title = clean_title(marker.raw_title)
        if not title:
            dropped += 1
            continue
        body = clean_body(text[marker.end:segment_end])
        slides.append(SlideRecord(title=title, body=body, order=len(slides)))

    logger.info(
        "Parsed slides",
        extra={
            "strategy": used_strategy.value if used_strategy else None,
            "marker_count": len(markers),
            "slide_count": len(slides),
            "dropped_markers": dropped,
        },
    )
    return slides
