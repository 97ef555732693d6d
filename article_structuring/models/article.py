"""Article models assembled around a structured document."""

from __future__ import annotations

from pydantic import BaseModel, Field

from article_structuring.models.document import Section
from article_structuring.models.source import Source


class SourceCard(BaseModel):
    """Source shown in the horizontal card strip above an article."""

    id: str = Field(..., description="Source identifier")
    name: str = Field(..., description="Short source label")
    url: str = Field(..., description="Source URL")
    favicon: str = Field(default="", description="Favicon URL")
    title: str = Field(..., description="Card title (source title or name)")


class Article(BaseModel):
    """Render-ready article.

    Attributes:
        slug: URL-safe identifier derived from the title
        title: Article title
        sections: Structured sections
        all_sources: Every source in citation order
        total_sources: Number of sources
        source_cards: Leading sources as cards
        sidebar_sections: Titles of titled sections, for the outline sidebar
        related_queries: Suggested follow-up queries
    """

    slug: str = Field(..., description="URL-safe article identifier")
    title: str = Field(..., description="Article title")
    sections: list[Section] = Field(default_factory=list, description="Article sections")
    all_sources: list[Source] = Field(default_factory=list, description="All sources")
    total_sources: int = Field(default=0, ge=0, description="Number of sources")
    source_cards: list[SourceCard] = Field(default_factory=list, description="Source cards")
    sidebar_sections: list[str] = Field(default_factory=list, description="Section titles")
    related_queries: list[str] = Field(default_factory=list, description="Follow-up queries")
