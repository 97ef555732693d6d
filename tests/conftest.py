"""Pytest configuration for tests."""
# ruff: noqa: E402  # Module imports after sys.path manipulation

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from article_structuring.core.config import Settings
from article_structuring.models.source import CitationInput, Source
from article_structuring.services.structuring.citations import build_source_table


@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def news_citations() -> list[CitationInput]:
    """Three citations from distinct news domains."""
    return [
        CitationInput(url="https://www.reuters.com/technology/apple-phone"),
        CitationInput(url="https://apple.com/newsroom/launch", title="Apple Newsroom"),
        CitationInput(url="https://techcrunch.com/2025/03/01/apple"),
    ]


@pytest.fixture
def source_table(news_citations: list[CitationInput], test_settings: Settings) -> dict[int, Source]:
    """Source table built from the news citations."""
    return build_source_table(news_citations, test_settings)


@pytest.fixture
def make_source() -> Callable[[int, str], Source]:
    """Factory for bare sources: make_source(1, url) -> Source(id='source-1', ...)."""

    def _make(index: int, url: str) -> Source:
        return Source(id=f"source-{index}", name=url, url=url)

    return _make
