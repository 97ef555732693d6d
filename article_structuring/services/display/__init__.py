"""Display preparation for paragraph sources."""

from .chip_grouping import SourceGrouper, group_for_display, is_video_url

__all__ = [
    "SourceGrouper",
    "group_for_display",
    "is_video_url",
]
