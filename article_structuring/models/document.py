"""Structured document models produced by the structuring engine."""

from __future__ import annotations

from pydantic import BaseModel, Field

from article_structuring.models.source import Source


class Paragraph(BaseModel):
    """One unit of prose with its cited sources.

    Attributes:
        text: Content with citation markers removed and whitespace trimmed
        sources: Sources cited by the paragraph, unique by URL, in first-cited order
    """

    text: str = Field(..., description="Cleaned paragraph text")
    sources: list[Source] = Field(default_factory=list, description="Cited sources")


class Section(BaseModel):
    """Titled or untitled run of paragraphs.

    Attributes:
        id: ``section-intro`` for the leading untitled run, else ``section-{n}``
        title: Heading text, absent for the intro run
        paragraphs: Non-empty list of paragraphs
    """

    id: str = Field(..., description="Section identifier")
    title: str | None = Field(default=None, description="Heading text")
    paragraphs: list[Paragraph] = Field(default_factory=list, description="Section paragraphs")


class Document(BaseModel):
    """Output of one structuring run.

    Attributes:
        sections: Ordered sections, never empty
        all_sources: Every citation as a source, in citation order
    """

    sections: list[Section] = Field(default_factory=list, description="Ordered sections")
    all_sources: list[Source] = Field(default_factory=list, description="All sources in citation order")

    @property
    def paragraphs(self) -> list[Paragraph]:
        """All paragraphs across sections, in document order."""
        return [paragraph for section in self.sections for paragraph in section.paragraphs]
