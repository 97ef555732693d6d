"""Map a provider's citation URL list to citation inputs."""

from __future__ import annotations

from typing import Any

import structlog

from article_structuring.models.source import CitationInput

logger = structlog.get_logger(__name__)


class CitationMapper:
    """Map provider citation URLs to `CitationInput` records."""

    @staticmethod
    def map_citations(citation_urls: list[Any] | None) -> list[CitationInput]:
        """
        Map citation URLs to CitationInput objects.

        Search-augmented providers return only an ordered list of URLs, so
        titles are left unset. Positions are preserved even for blank or
        non-string entries: marker [k] must keep pointing at the k-th entry.

        Args:
            citation_urls: Citation URLs from the provider response metadata

        Returns:
            List of CitationInput objects, one per entry
        """
        citations = []
        blank = 0

        for url in citation_urls or []:
            if isinstance(url, str) and url.strip():
                citations.append(CitationInput(url=url.strip()))
            else:
                blank += 1
                citations.append(CitationInput(url=""))

        logger.info("citations_mapped", count=len(citations), blank=blank)

        return citations
