"""Structuring engine for generated passages with citation markers."""

from .accumulator import INTRO_SECTION_ID, ParagraphAccumulator
from .citations import (
    CITATION_MARKER,
    build_source_table,
    collect_cited_sources,
    extract_paragraph,
    strip_citation_markers,
)
from .engine import StructuringEngine, structure
from .fallback import (
    build_empty_result_section,
    distribute_fallback_sources,
    fallback_window_size,
)
from .line_classifier import ClassifiedLine, LineKind, classify_line, classify_passage

__all__ = [
    "CITATION_MARKER",
    "INTRO_SECTION_ID",
    "ClassifiedLine",
    "LineKind",
    "ParagraphAccumulator",
    "StructuringEngine",
    "build_empty_result_section",
    "build_source_table",
    "classify_line",
    "classify_passage",
    "collect_cited_sources",
    "distribute_fallback_sources",
    "extract_paragraph",
    "fallback_window_size",
    "strip_citation_markers",
    "structure",
]
