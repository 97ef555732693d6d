"""Article assembly around structured documents."""

from .article_builder import (
    ArticleBuilder,
    build_article,
    build_placeholder_article,
    generate_slug,
    section_sources,
)

__all__ = [
    "ArticleBuilder",
    "build_article",
    "build_placeholder_article",
    "generate_slug",
    "section_sources",
]
