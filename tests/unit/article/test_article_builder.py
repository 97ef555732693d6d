"""Unit tests for article assembly."""

from __future__ import annotations

import pytest

from article_structuring.core.config import Settings
from article_structuring.models.document import Paragraph, Section
from article_structuring.models.source import CitationInput
from article_structuring.services.article import (
    ArticleBuilder,
    build_article,
    build_placeholder_article,
    generate_slug,
    section_sources,
)

PASSAGE = """Apple unveiled a phone [1]. Pre-orders open Friday [2].

## Background
The last model shipped in 2023 [3][4].

## Outlook
Analysts see upside [5][6][7].
"""


@pytest.fixture
def builder(test_settings: Settings) -> ArticleBuilder:
    """Builder with default settings."""
    return ArticleBuilder(test_settings)


@pytest.fixture
def seven_citations() -> list[CitationInput]:
    """Seven citations, one of them a video."""
    urls = [
        "https://www.reuters.com/a",
        "https://apple.com/b",
        "https://techcrunch.com/c",
        "https://techcrunch.com/d",
        "https://www.youtube.com/watch?v=e",
        "https://bloomberg.com/f",
        "https://wsj.com/g",
    ]
    return [CitationInput(url=url) for url in urls]


@pytest.mark.unit
class TestGenerateSlug:
    """Test slug generation."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Apple Launches Phone", "apple-launches-phone"),
            ("Apple's New Phone: What We Know!", "apple-s-new-phone-what-we-know"),
            ("  --Leading and trailing--  ", "leading-and-trailing"),
            ("Café prices 2025", "caf-prices-2025"),
            ("!!!", ""),
        ],
    )
    def test_slug(self, title: str, expected: str) -> None:
        """Test non-alphanumeric runs become single dashes."""
        assert generate_slug(title) == expected

    def test_slug_truncated(self) -> None:
        """Test slugs are capped at the maximum length."""
        assert len(generate_slug("word " * 40)) == 60
        assert generate_slug("abcdefghij", max_length=4) == "abcd"


@pytest.mark.unit
class TestBuildArticle:
    """Test building an article from a passage."""

    def test_article_fields(self, builder: ArticleBuilder, seven_citations: list[CitationInput]) -> None:
        """Test slug, outline, sources and related queries."""
        article = builder.build("Apple Launches Phone", PASSAGE, seven_citations)

        assert article.slug == "apple-launches-phone"
        assert article.title == "Apple Launches Phone"
        assert [s.id for s in article.sections] == ["section-intro", "section-2", "section-3"]
        assert article.sidebar_sections == ["Background", "Outlook"]
        assert article.total_sources == 7
        assert article.related_queries == [
            "Apple Launches Phone latest updates",
            "Apple Launches Phone analysis",
            "Apple Launches Phone impact",
            "Apple Launches Phone future outlook",
        ]

    def test_source_cards(self, builder: ArticleBuilder, seven_citations: list[CitationInput]) -> None:
        """Test the first six sources become cards titled by name when untitled."""
        article = builder.build("Apple", PASSAGE, seven_citations)

        assert [c.id for c in article.source_cards] == [f"source-{i}" for i in range(1, 7)]
        assert article.source_cards[0].title == "reuters"
        assert article.source_cards[0].favicon.startswith("https://www.google.com/s2/favicons")

    def test_card_title_prefers_source_title(self, builder: ArticleBuilder) -> None:
        """Test cards use the citation title when present."""
        article = builder.build("T", "Text [1].", [{"url": "https://a.com", "title": "A Story"}])

        assert article.source_cards[0].title == "A Story"

    def test_limits_from_settings(self, seven_citations: list[CitationInput]) -> None:
        """Test card and related-query limits follow settings."""
        settings = Settings(_env_file=None, SOURCE_CARD_LIMIT=2, RELATED_QUERY_LIMIT=1)

        article = build_article("Apple", PASSAGE, seven_citations, settings)

        assert len(article.source_cards) == 2
        assert article.related_queries == ["Apple latest updates"]

    def test_chips_for_article(self, builder: ArticleBuilder, seven_citations: list[CitationInput]) -> None:
        """Test chips are grouped per section and per paragraph."""
        article = builder.build("Apple", PASSAGE, seven_citations)

        chips = builder.chips_for(article)

        assert len(chips) == 3
        background = chips[1][0]
        assert len(background) == 1
        assert background[0].primary.name == "techcrunch"
        assert background[0].additional_count == 1
        outlook = chips[2][0]
        assert [g.is_video for g in outlook] == [False, False, True]


@pytest.mark.unit
class TestPlaceholderArticle:
    """Test the placeholder for a failed passage provider."""

    def test_placeholder(self) -> None:
        """Test one generic paragraph carries every existing source.

        Given: A title and two known sources
        When: Building a placeholder article
        Then: One section, one paragraph, both sources, no related queries
        """
        article = build_placeholder_article(
            "Apple Launches Phone",
            [{"url": "https://reuters.com/a"}, {"url": "https://apple.com/b"}],
        )

        assert len(article.sections) == 1
        paragraph = article.sections[0].paragraphs[0]
        assert paragraph.text == (
            "Apple Launches Phone. This article explores the latest developments and insights in this area."
        )
        assert [s.id for s in paragraph.sources] == ["source-1", "source-2"]
        assert article.all_sources == paragraph.sources
        assert article.related_queries == []
        assert article.total_sources == 2

    def test_placeholder_without_sources(self, builder: ArticleBuilder) -> None:
        """Test a placeholder can be built with no sources at all."""
        article = builder.build_placeholder("Topic")

        assert article.sections[0].paragraphs[0].sources == []
        assert article.source_cards == []


@pytest.mark.unit
def test_section_sources_deduplicated(make_source) -> None:
    """Test section sources are flattened and unique by URL."""
    a, b = make_source(1, "https://a.com"), make_source(2, "https://b.com")
    a_again = make_source(3, "https://a.com")
    section = Section(
        id="section-1",
        paragraphs=[
            Paragraph(text="one", sources=[a, b]),
            Paragraph(text="two", sources=[a_again, b]),
        ],
    )

    assert section_sources(section) == [a, b]
