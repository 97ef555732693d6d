"""Structuring engine: generated passage + citations -> structured document.

Pipeline for one passage:
1. Build the source table from the citation list
2. Classify lines and accumulate paragraphs into section runs
3. Distribute fallback sources to paragraphs without citation markers
4. Fall back to a single section when nothing survived

The engine never raises on passage content: unknown markers are dropped,
malformed URLs degrade their labels, and an empty result becomes a single
fallback section.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from article_structuring.core.config import Settings, settings as default_settings
from article_structuring.models.document import Document
from article_structuring.models.source import CitationInput
from article_structuring.services.structuring.accumulator import ParagraphAccumulator
from article_structuring.services.structuring.citations import (
    build_source_table,
    coerce_citations,
)
from article_structuring.services.structuring.fallback import (
    build_empty_result_section,
    distribute_fallback_sources,
)
from article_structuring.services.structuring.line_classifier import LineKind, classify_passage

logger = structlog.get_logger(__name__)


class StructuringEngine:
    """Converts a generated passage and its citation list into a `Document`.

    Stateless between calls; one instance can serve any number of passages.

    Example:
        >>> engine = StructuringEngine()
        >>> document = engine.structure(
        ...     "## Background\\nApple announced a new phone [1].",
        ...     [{"url": "https://reuters.com/a"}],
        ... )
        >>> document.sections[0].title
        'Background'
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize engine.

        Args:
            settings: Pipeline settings (defaults to the global settings)
        """
        self.settings = settings or default_settings

    def structure(
        self,
        passage: str,
        citations: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    ) -> Document:
        """Structure a passage into sections and paragraphs.

        Args:
            passage: Generated text with headings, bullets and [n] markers
            citations: Ordered citation list; marker [k] refers to entry k

        Returns:
            Document with non-empty sections and all sources in citation order

        Raises:
            pydantic.ValidationError: If a citation entry has no string url
        """
        passage = passage or ""
        source_table = build_source_table(coerce_citations(citations), self.settings)
        all_sources = list(source_table.values())

        accumulator = ParagraphAccumulator(
            source_table=source_table,
            split_threshold=self.settings.PARAGRAPH_SPLIT_THRESHOLD,
        )

        for line in classify_passage(passage):
            if line.kind is LineKind.HEADING:
                accumulator.start_section(line.text)
            elif line.kind is LineKind.BULLET:
                accumulator.add_bullet(line.text)
            elif line.kind is LineKind.PROSE:
                accumulator.add_prose(line.text)
            elif line.kind is LineKind.BLANK:
                accumulator.flush_paragraph()
            # TITLE lines carry no content

        accumulator.flush_section()
        sections = accumulator.sections

        if self.settings.ENABLE_FALLBACK_DISTRIBUTION and all_sources:
            sections = distribute_fallback_sources(
                sections,
                all_sources,
                min_sources=self.settings.FALLBACK_MIN_SOURCES,
                max_sources=self.settings.FALLBACK_MAX_SOURCES,
            )

        if not sections:
            logger.warning(
                "structuring_empty_result",
                passage_length=len(passage),
                sources=len(all_sources),
            )
            sections = [
                build_empty_result_section(
                    passage, all_sources, limit=self.settings.EMPTY_RESULT_SOURCE_LIMIT
                )
            ]

        document = Document(sections=sections, all_sources=all_sources)

        logger.info(
            "passage_structured",
            sections=len(document.sections),
            paragraphs=len(document.paragraphs),
            sources=len(all_sources),
        )

        return document


def structure(
    passage: str,
    citations: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    settings: Settings | None = None,
) -> Document:
    """Structure a passage with a default-configured engine.

    See `StructuringEngine.structure`.
    """
    return StructuringEngine(settings).structure(passage, citations)
