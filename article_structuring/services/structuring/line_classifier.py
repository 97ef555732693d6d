"""Line classification for generated markdown-like passages.

Each passage line is one of:
- TITLE: ``# `` document title, discarded
- HEADING: ``## `` or ``### `` section heading
- BULLET: line starting with ``-`` or ``*``, always its own paragraph
- PROSE: any other non-blank line
- BLANK: empty or whitespace-only line, a paragraph boundary
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

HEADING_PREFIXES = ("## ", "### ")
TITLE_PREFIX = "# "
BULLET_PREFIXES = ("-", "*")

_HEADING_MARKER = re.compile(r"^#+\s*")
_BULLET_MARKER = re.compile(r"^[-*]\s*")


class LineKind(str, Enum):
    """Kind of a passage line."""

    TITLE = "title"
    HEADING = "heading"
    BULLET = "bullet"
    PROSE = "prose"
    BLANK = "blank"


class ClassifiedLine(NamedTuple):
    """A passage line with its kind and payload text.

    Attributes:
        kind: Line kind
        text: Heading title, bullet text without marker, or prose line;
            empty for TITLE and BLANK
    """

    kind: LineKind
    text: str


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single passage line.

    Args:
        line: Raw line without its newline

    Returns:
        ClassifiedLine with kind and payload

    Example:
        >>> classify_line("## Background")
        ClassifiedLine(kind=<LineKind.HEADING: 'heading'>, text='Background')
        >>> classify_line("- First point [1]")
        ClassifiedLine(kind=<LineKind.BULLET: 'bullet'>, text='First point [1]')
    """
    # Prefixes are matched before trailing whitespace goes: "## " is still a heading.
    raw = line.rstrip("\r\n")
    text = raw.rstrip()

    if not text.strip():
        return ClassifiedLine(LineKind.BLANK, "")

    if raw.startswith(HEADING_PREFIXES):
        return ClassifiedLine(LineKind.HEADING, _HEADING_MARKER.sub("", text).strip())

    if raw.startswith(TITLE_PREFIX):
        return ClassifiedLine(LineKind.TITLE, "")

    if raw.startswith(BULLET_PREFIXES):
        return ClassifiedLine(LineKind.BULLET, _BULLET_MARKER.sub("", text))

    return ClassifiedLine(LineKind.PROSE, text)


def classify_passage(passage: str) -> list[ClassifiedLine]:
    """Classify every line of a passage, in order."""
    return [classify_line(line) for line in passage.splitlines()]
