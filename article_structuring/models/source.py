"""Citation input and source models.

`CitationInput` is what a passage-producing provider hands over; `Source` is
the labelled reference the structuring engine attaches to paragraphs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CitationInput(BaseModel):
    """One entry of the provider's ordered citation list.

    Marker ``[k]`` in the passage refers to the k-th entry (1-indexed).
    """

    url: str = Field(..., description="Cited URL")
    title: str | None = Field(default=None, description="Optional human-readable title")


class Source(BaseModel):
    """Cited reference with derived display metadata.

    Two sources with equal ``url`` are the same source wherever a paragraph
    or document source list is built.
    """

    id: str = Field(..., description="Identifier unique within one run (source-{n})")
    name: str = Field(..., description="Short label from the hostname (e.g. 'reuters')")
    url: str = Field(..., description="Source URL, identity for deduplication")
    title: str | None = Field(default=None, description="Optional human-readable title")
    favicon: str = Field(default="", description="Favicon URL, empty when the URL is malformed")

    model_config = {"frozen": True}


class SourceGroup(BaseModel):
    """One display chip: a primary source plus the sources folded into it."""

    primary: Source = Field(..., description="Representative source shown on the chip")
    additional: list[Source] = Field(
        default_factory=list, description="Remaining sources in the group (shown as +N)"
    )
    is_video: bool = Field(default=False, description="Whether the group holds video sources")

    @property
    def additional_count(self) -> int:
        """Number of sources behind the "+N" badge."""
        return len(self.additional)


def dedupe_by_url(sources: list[Source]) -> list[Source]:
    """Drop repeated URLs, keeping first-occurrence order."""
    seen: set[str] = set()
    unique: list[Source] = []
    for source in sources:
        if source.url in seen:
            continue
        seen.add(source.url)
        unique.append(source)
    return unique
