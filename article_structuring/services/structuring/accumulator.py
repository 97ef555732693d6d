"""Paragraph and section accumulation state for one structuring run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog

from article_structuring.models.document import Paragraph, Section
from article_structuring.models.source import Source
from article_structuring.services.structuring.citations import extract_paragraph

logger = structlog.get_logger(__name__)

INTRO_SECTION_ID = "section-intro"


@dataclass
class ParagraphAccumulator:
    """State carried across passage lines.

    Attributes:
        source_table: 1-based citation index to source, read-only for the run
        split_threshold: Buffer length above which a prose line starts a new paragraph
        section_title: Title of the open section run, None for the intro run
        section_open: Whether a titled section run has started
        buffer: In-progress paragraph text
        pending: Paragraphs flushed into the open section run
        sections: Emitted sections
    """

    source_table: Mapping[int, Source]
    split_threshold: int = 200
    section_title: str | None = None
    section_open: bool = False
    buffer: str = ""
    pending: list[Paragraph] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    def add_prose(self, line: str) -> None:
        """Append a prose line, space-joined, splitting long accumulations."""
        if self.buffer and len(self.buffer) > self.split_threshold:
            self.flush_paragraph()

        self.buffer = f"{self.buffer} {line}" if self.buffer else line

    def add_bullet(self, text: str) -> None:
        """Emit a bullet as its own paragraph, never merged with prose."""
        self.flush_paragraph()
        self.buffer = text
        self.flush_paragraph()

    def flush_paragraph(self) -> None:
        """Turn the buffer into a paragraph of the open section run."""
        raw, self.buffer = self.buffer, ""
        if not raw.strip():
            return

        paragraph = extract_paragraph(raw, self.source_table)
        if paragraph is None:
            logger.debug("empty_paragraph_dropped", raw_length=len(raw))
            return

        self.pending.append(paragraph)

    def start_section(self, title: str) -> None:
        """Close the open run and start a new one at a heading.

        A bare heading ("## ") still marks the boundary; its section has no title.
        """
        self.flush_section()
        self.section_title = title or None
        self.section_open = True

    def flush_section(self) -> None:
        """Close the open run, emitting it only if it kept any paragraphs."""
        self.flush_paragraph()
        paragraphs, self.pending = self.pending, []

        if not paragraphs:
            if self.section_open:
                logger.debug("empty_section_dropped", title=self.section_title)
            return

        if self.section_open:
            section_id = f"section-{len(self.sections) + 1}"
        else:
            section_id = INTRO_SECTION_ID

        self.sections.append(
            Section(id=section_id, title=self.section_title, paragraphs=paragraphs)
        )
