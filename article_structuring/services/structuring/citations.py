"""Citation markers and the source table.

A citation marker is an inline ``[<digits>]`` token referring to the
1-indexed position in the provider's citation list.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from article_structuring.core.config import Settings
from article_structuring.models.document import Paragraph
from article_structuring.models.source import CitationInput, Source
from article_structuring.utils.url_utils import domain_name, favicon_url, parse_hostname

logger = structlog.get_logger(__name__)

CITATION_MARKER = re.compile(r"\[(\d+)\]")
# A run of markers with the spacing around it: "phone [1][2] [3]." -> "phone."
_MARKER_RUN = re.compile(r"(?P<before>[ \t]*)\[\d+\](?:[ \t]*\[\d+\])*(?P<after>[ \t]*)")


def _join_marker_run(match: re.Match[str]) -> str:
    # Words on both sides of a removed run keep exactly one space between them.
    if match.group("before"):
        return " " if match.group("after") else ""
    return match.group("after")


def coerce_citations(
    citations: Iterable[CitationInput | Mapping[str, Any]] | None,
) -> list[CitationInput]:
    """Validate caller citations into `CitationInput` models.

    Raises:
        pydantic.ValidationError: If an entry has no string ``url``
    """
    coerced = []
    for citation in citations or []:
        if isinstance(citation, CitationInput):
            coerced.append(citation)
        else:
            coerced.append(CitationInput.model_validate(citation))
    return coerced


def build_source(index: int, citation: CitationInput, settings: Settings | None = None) -> Source:
    """Build the source for the citation at 1-based ``index``."""
    if parse_hostname(citation.url) is None:
        logger.warning("malformed_citation_url", index=index, url=citation.url[:120])

    return Source(
        id=f"source-{index}",
        name=domain_name(citation.url),
        url=citation.url,
        title=citation.title,
        favicon=favicon_url(citation.url, settings),
    )


def build_source_table(
    citations: list[CitationInput], settings: Settings | None = None
) -> dict[int, Source]:
    """Map 1-based citation index to its source.

    Duplicate URLs in the citation list keep separate entries; deduplication
    happens where paragraph and document lists are built.
    """
    return {
        index: build_source(index, citation, settings)
        for index, citation in enumerate(citations, start=1)
    }


def strip_citation_markers(text: str) -> str:
    """Remove every citation marker and trim surrounding whitespace."""
    # Nested input such as "[1[2]]" exposes a new marker after one pass.
    stripped = _MARKER_RUN.sub(_join_marker_run, text)
    while CITATION_MARKER.search(stripped):
        stripped = _MARKER_RUN.sub(_join_marker_run, stripped)
    return stripped.strip()


def collect_cited_sources(text: str, source_table: Mapping[int, Source]) -> list[Source]:
    """Sources referenced by the markers in ``text``, unique by id and URL.

    Markers pointing past the citation list are dropped.
    """
    collected: list[Source] = []
    for match in CITATION_MARKER.finditer(text):
        number = int(match.group(1))
        source = source_table.get(number)
        if source is None:
            logger.debug("citation_marker_dropped", marker=number, available=len(source_table))
            continue
        if any(s.id == source.id or s.url == source.url for s in collected):
            continue
        collected.append(source)
    return collected


def extract_paragraph(raw: str, source_table: Mapping[int, Source]) -> Paragraph | None:
    """Turn accumulated raw text into a paragraph.

    Args:
        raw: Accumulated text, markers included
        source_table: 1-based citation index to source

    Returns:
        Paragraph with cleaned text and cited sources, or None when nothing
        but markers and whitespace remains
    """
    cleaned = strip_citation_markers(raw)
    if not cleaned:
        return None

    return Paragraph(text=cleaned, sources=collect_cited_sources(raw, source_table))
