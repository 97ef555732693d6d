"""Fallback source assignment.

Two fallbacks keep a structured document useful when the generated text
does not cooperate:

- Round-robin distribution gives paragraphs without citation markers a
  window of sources, cycling through the deduplicated source list.
- The empty-result section wraps the whole passage when no section survived.
"""

from __future__ import annotations

import math

import structlog

from article_structuring.models.document import Paragraph, Section
from article_structuring.models.source import Source, dedupe_by_url
from article_structuring.services.structuring.citations import strip_citation_markers

logger = structlog.get_logger(__name__)

EMPTY_RESULT_SECTION_ID = "section-1"


def fallback_window_size(
    pool_size: int, paragraph_count: int, min_sources: int = 2, max_sources: int = 4
) -> int:
    """Sources per unsourced paragraph.

    ``max(min_sources, ceil(pool_size / paragraph_count))``, capped at
    ``max_sources`` and at the pool size so a window never repeats a source.

    Example:
        >>> fallback_window_size(pool_size=10, paragraph_count=4)
        3
        >>> fallback_window_size(pool_size=3, paragraph_count=6)
        2
    """
    if pool_size <= 0 or paragraph_count <= 0:
        return 0

    size = max(min_sources, math.ceil(pool_size / paragraph_count))
    return min(size, max_sources, pool_size)


def take_window(pool: list[Source], cursor: int, size: int) -> tuple[list[Source], int]:
    """Take ``size`` sources starting at ``cursor``, wrapping around.

    Returns:
        Tuple of (window, next cursor)
    """
    window = [pool[(cursor + offset) % len(pool)] for offset in range(size)]
    return window, (cursor + size) % len(pool)


def _assign_paragraphs(
    paragraphs: list[Paragraph], pool: list[Source], cursor: int, size: int
) -> tuple[list[Paragraph], int]:
    assigned: list[Paragraph] = []
    for paragraph in paragraphs:
        if paragraph.sources:
            assigned.append(paragraph)
            continue

        window, cursor = take_window(pool, cursor, size)
        assigned.append(paragraph.model_copy(update={"sources": window}))
    return assigned, cursor


def distribute_fallback_sources(
    sections: list[Section],
    all_sources: list[Source],
    min_sources: int = 2,
    max_sources: int = 4,
) -> list[Section]:
    """Give every paragraph without sources a round-robin window of sources.

    Paragraphs that already cite sources are left untouched. The cursor is
    threaded through the sections in document order, so every source is
    used once before any source repeats.

    Args:
        sections: Structured sections
        all_sources: Sources in citation order
        min_sources: Lower bound of a window
        max_sources: Upper bound of a window

    Returns:
        New sections; the input is not modified
    """
    pool = dedupe_by_url(all_sources)
    unsourced = sum(
        1 for section in sections for paragraph in section.paragraphs if not paragraph.sources
    )
    size = fallback_window_size(len(pool), unsourced, min_sources, max_sources)
    if size == 0:
        return sections

    logger.debug(
        "fallback_distribution", paragraphs=unsourced, pool_size=len(pool), window_size=size
    )

    cursor = 0
    distributed: list[Section] = []
    for section in sections:
        paragraphs, cursor = _assign_paragraphs(section.paragraphs, pool, cursor, size)
        distributed.append(section.model_copy(update={"paragraphs": paragraphs}))
    return distributed


def build_empty_result_section(passage: str, all_sources: list[Source], limit: int = 3) -> Section:
    """Single section holding the whole passage, markers stripped.

    Used when structuring produced no section at all. An empty passage still
    yields one section with an empty paragraph.
    """
    return Section(
        id=EMPTY_RESULT_SECTION_ID,
        paragraphs=[
            Paragraph(
                text=strip_citation_markers(passage),
                sources=dedupe_by_url(all_sources)[:limit],
            )
        ],
    )
