"""Data models for citation inputs, sources, documents and articles."""

from article_structuring.models.article import Article, SourceCard
from article_structuring.models.document import Document, Paragraph, Section
from article_structuring.models.source import CitationInput, Source, SourceGroup, dedupe_by_url

__all__ = [
    "Article",
    "CitationInput",
    "Document",
    "Paragraph",
    "Section",
    "Source",
    "SourceCard",
    "SourceGroup",
    "dedupe_by_url",
]
