"""Citation-aware article structuring.

Turns generated prose with inline ``[n]`` citation markers into structured
sections and paragraphs, and groups paragraph sources into display chips.
"""

from article_structuring.services.display import group_for_display
from article_structuring.services.structuring import structure

__all__ = [
    "structure",
    "group_for_display",
]
