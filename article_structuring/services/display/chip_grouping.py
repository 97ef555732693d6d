"""Group paragraph sources into display chips.

Text sources are grouped by their short domain label (at most a few
groups are kept); video sources always share one trailing group.
"""

from __future__ import annotations

import structlog

from article_structuring.core.config import Settings, settings as default_settings
from article_structuring.models.source import Source, SourceGroup
from article_structuring.utils.url_utils import domain_name

logger = structlog.get_logger(__name__)


def is_video_url(url: str, patterns: list[str]) -> bool:
    """Check whether a URL points at a known video host.

    Args:
        url: Source URL
        patterns: URL substrings identifying video hosts

    Returns:
        True if any pattern occurs in the URL
    """
    url_lower = url.lower()
    return any(pattern in url_lower for pattern in patterns)


class SourceGrouper:
    """Builds display chips from a paragraph's sources.

    Example:
        >>> grouper = SourceGrouper()
        >>> groups = grouper.group(paragraph.sources)
        >>> [(g.primary.name, g.additional_count, g.is_video) for g in groups]
        [('techcrunch', 1, False), ('youtube', 0, True)]
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize grouper.

        Args:
            settings: Settings providing video patterns and the group cap
        """
        cfg = settings or default_settings
        self.video_patterns = [pattern.lower() for pattern in cfg.VIDEO_URL_PATTERNS]
        self.max_text_groups = cfg.MAX_TEXT_CHIP_GROUPS

    def partition(self, sources: list[Source]) -> tuple[list[Source], list[Source]]:
        """Split sources into (text, video), preserving order."""
        text: list[Source] = []
        video: list[Source] = []
        for source in sources:
            if is_video_url(source.url, self.video_patterns):
                video.append(source)
            else:
                text.append(source)
        return text, video

    def group(self, sources: list[Source]) -> list[SourceGroup]:
        """Group sources for display.

        Args:
            sources: A paragraph's deduplicated sources

        Returns:
            Up to ``max_text_groups`` text groups in first-seen order,
            followed by one video group when any video source exists
        """
        if not sources:
            return []

        text, video = self.partition(sources)

        by_domain: dict[str, list[Source]] = {}
        for source in text:
            by_domain.setdefault(domain_name(source.url), []).append(source)

        groups = [
            SourceGroup(primary=members[0], additional=members[1:], is_video=False)
            for members in by_domain.values()
        ]

        if len(groups) > self.max_text_groups:
            logger.debug(
                "chip_groups_capped", groups=len(groups), kept=self.max_text_groups
            )
            groups = groups[: self.max_text_groups]

        if video:
            groups.append(SourceGroup(primary=video[0], additional=video[1:], is_video=True))

        return groups


def group_for_display(sources: list[Source], settings: Settings | None = None) -> list[SourceGroup]:
    """Group a paragraph's sources into display chips.

    See `SourceGrouper.group`.
    """
    return SourceGrouper(settings).group(sources)
