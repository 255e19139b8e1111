"""Cleanup helpers for model-generated slide text.

The generator echoes formatting it was asked not to use: bold markers
around headings, ``Content:`` labels, Windows line endings and stray blank
lines. These helpers strip those artifacts without touching the wording.
"""

import re
from typing import List

# Emphasis markers that may wrap a whole title, e.g. "__Intro__" or "*Intro*".
_WRAPPING_MARKERS = ("__", "*")

_SPACE_RUN_RE = re.compile(r"[ \t]{2,}")

# Characters that are invalid or unsafe in a filename on common filesystems.
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

# A line that is only a "Content:" label, optionally bolded or a heading.
_LABEL_LINE_RE = re.compile(
    r"^\s*(?:#{1,6}\s*)?(?:\*\*|__)?\s*content\s*:\s*(?:\*\*|__)?\s*$",
    re.IGNORECASE,
)

# A "Content:" label followed by text on the same line.
_LABEL_PREFIX_RE = re.compile(
    r"^\s*(?:\*\*|__)?\s*content\s*:\s*(?:\*\*|__)?\s*",
    re.IGNORECASE,
)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _strip_unpaired_underscores(title: str) -> str:
    """Drop an unpaired ``__`` left over from an underscore-bold marker line.

    Paired runs such as ``__init__`` are left alone.
    """
    if title.count("__") % 2 == 0:
        return title
    if title.endswith("__"):
        return title[:-2]
    if title.startswith("__"):
        return title[2:]
    head, _, tail = title.rpartition("__")
    return head + tail


def _unwrap_emphasis(title: str) -> str:
    """Remove emphasis markers wrapping the whole title, e.g. ``*Intro*``."""
    for marker in _WRAPPING_MARKERS:
        size = len(marker)
        if len(title) > 2 * size and title.startswith(marker) and title.endswith(marker):
            inner = title[size:-size]
            if marker not in inner:
                return inner.strip()
    return title


def clean_title(raw_title: str) -> str:
    """Strip residual emphasis markers and whitespace from a slide title.

    Bold ``**`` markers are always removed, e.g. "Intro** - part one".
    Underscores are only removed when they wrap the title or were left
    unpaired by the marker line, so identifiers like ``__init__`` survive.

    Args:
        raw_title: Text found after "Slide N:" on the marker line

    Returns:
        The bare title, possibly empty
    """
    title = raw_title.replace("**", "").strip()
    title = _strip_unpaired_underscores(title).strip()
    title = _unwrap_emphasis(title)
    return _SPACE_RUN_RE.sub(" ", title).strip()


def safe_filename_stem(title: str, default: str = "presentation") -> str:
    """Turn a deck title into a filename stem that stays in its directory.

    Path separators and other characters invalid in filenames become
    ``_``. Blank results and the ``.``/``..`` names fall back to ``default``.
    """
    stem = _INVALID_FILENAME_CHARS.sub("_", title).strip()
    if stem in ("", ".", ".."):
        return default
    return stem


def is_label_line(line: str) -> bool:
    """Return True if the line is only a ``Content:`` label."""
    return bool(_LABEL_LINE_RE.match(line))


def strip_label_prefix(line: str) -> str:
    """Remove a leading ``Content:`` label from a body line."""
    return _LABEL_PREFIX_RE.sub("", line, count=1)


def collapse_blank_lines(lines: List[str]) -> List[str]:
    """Drop leading/trailing blank lines and squeeze inner runs to one."""
    result: List[str] = []
    for line in lines:
        if not line.strip():
            if result and result[-1] != "":
                result.append("")
            continue
        result.append(line)
    while result and result[-1] == "":
        result.pop()
    return result


def clean_body(raw_body: str) -> str:
    """Normalize the body text of one slide segment.

    Args:
        raw_body: Everything in the segment after the marker line

    Returns:
        Body text with labels removed and blank lines tidied, possibly empty
    """
    lines = []
    for line in normalize_newlines(raw_body).split("\n"):
        if is_label_line(line):
            continue
        lines.append(strip_label_prefix(line).rstrip())
    return "\n".join(collapse_blank_lines(lines)).strip()
