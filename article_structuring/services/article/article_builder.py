"""Assemble render-ready articles around a structured document."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from article_structuring.core.config import Settings, settings as default_settings
from article_structuring.models.article import Article, SourceCard
from article_structuring.models.document import Paragraph, Section
from article_structuring.models.source import CitationInput, Source, SourceGroup, dedupe_by_url
from article_structuring.services.display.chip_grouping import SourceGrouper
from article_structuring.services.structuring.citations import build_source_table, coerce_citations
from article_structuring.services.structuring.engine import StructuringEngine

logger = structlog.get_logger(__name__)

PLACEHOLDER_SECTION_ID = "section-1"

RELATED_QUERY_TEMPLATES = [
    "{title} latest updates",
    "{title} analysis",
    "{title} impact",
    "{title} future outlook",
]

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str, max_length: int = 60) -> str:
    """Generate a URL-safe slug from a title.

    Example:
        >>> generate_slug("Apple's New Phone: What We Know!")
        "apple-s-new-phone-what-we-know"
    """
    slug = _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")
    return slug[:max_length]


def section_sources(section: Section) -> list[Source]:
    """All sources cited in a section, unique by URL, in paragraph order."""
    return dedupe_by_url([source for paragraph in section.paragraphs for source in paragraph.sources])


class ArticleBuilder:
    """Builds `Article` objects from generated passages.

    Example:
        >>> builder = ArticleBuilder()
        >>> article = builder.build("Apple launches phone", passage, citations)
        >>> article.slug
        'apple-launches-phone'
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize builder.

        Args:
            settings: Pipeline settings (defaults to the global settings)
        """
        self.settings = settings or default_settings
        self.engine = StructuringEngine(self.settings)
        self.grouper = SourceGrouper(self.settings)

    def build(
        self,
        title: str,
        passage: str,
        citations: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    ) -> Article:
        """Structure a passage and wrap it as an article.

        Args:
            title: Article title (topic the passage was generated for)
            passage: Generated passage
            citations: Ordered citation list for the passage

        Returns:
            Article with sections, source cards, outline and related queries
        """
        document = self.engine.structure(passage, citations)

        article = Article(
            slug=generate_slug(title, self.settings.SLUG_MAX_LENGTH),
            title=title,
            sections=document.sections,
            all_sources=document.all_sources,
            total_sources=len(document.all_sources),
            source_cards=self._build_source_cards(document.all_sources),
            sidebar_sections=[section.title for section in document.sections if section.title],
            related_queries=self._build_related_queries(title),
        )

        logger.info(
            "article_built",
            slug=article.slug,
            sections=len(article.sections),
            sources=article.total_sources,
        )

        return article

    def build_placeholder(
        self,
        title: str,
        existing_sources: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    ) -> Article:
        """Minimal article for when the passage provider returned nothing.

        Args:
            title: Article title
            existing_sources: Sources already known for the topic

        Returns:
            Article with one generic paragraph carrying every existing source
        """
        sources = list(
            build_source_table(coerce_citations(existing_sources), self.settings).values()
        )

        logger.warning("placeholder_article_built", title=title[:100], sources=len(sources))

        section = Section(
            id=PLACEHOLDER_SECTION_ID,
            paragraphs=[
                Paragraph(
                    text=f"{title}. This article explores the latest developments and insights in this area.",
                    sources=sources,
                )
            ],
        )

        return Article(
            slug=generate_slug(title, self.settings.SLUG_MAX_LENGTH),
            title=title,
            sections=[section],
            all_sources=sources,
            total_sources=len(sources),
            source_cards=self._build_source_cards(sources),
        )

    def chips_for(self, article: Article) -> list[list[list[SourceGroup]]]:
        """Display chips for every paragraph, per section then per paragraph."""
        return [
            [self.grouper.group(paragraph.sources) for paragraph in section.paragraphs]
            for section in article.sections
        ]

    def _build_source_cards(self, sources: list[Source]) -> list[SourceCard]:
        return [
            SourceCard(
                id=source.id,
                name=source.name,
                url=source.url,
                favicon=source.favicon,
                title=source.title or source.name,
            )
            for source in sources[: self.settings.SOURCE_CARD_LIMIT]
        ]

    def _build_related_queries(self, title: str) -> list[str]:
        queries = [template.format(title=title) for template in RELATED_QUERY_TEMPLATES]
        return queries[: self.settings.RELATED_QUERY_LIMIT]


def build_article(
    title: str,
    passage: str,
    citations: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    settings: Settings | None = None,
) -> Article:
    """Build an article with a default-configured builder."""
    return ArticleBuilder(settings).build(title, passage, citations)


def build_placeholder_article(
    title: str,
    existing_sources: Iterable[CitationInput | Mapping[str, Any]] | None = None,
    settings: Settings | None = None,
) -> Article:
    """Build a placeholder article with a default-configured builder."""
    return ArticleBuilder(settings).build_placeholder(title, existing_sources)
