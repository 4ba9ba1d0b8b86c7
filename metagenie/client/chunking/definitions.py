"""Segmentation policy definitions and platform text limits.

This module defines the data structures that describe how long text is cut
into bounded segments, plus the per-platform character limits the
publishing backend enforces.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..core.enums import Platform

# Per-platform caption limits (characters)
PLATFORM_CAPTION_LIMITS = {
    Platform.INSTAGRAM: 2200,
    Platform.THREADS: 500,
    Platform.YOUTUBE: 5000,
}

THREADS_POST_MAX_CHARS = 500
THREADS_AUTO_SPLIT_MAX_CHARS = 10000
THREADS_MAX_CHAIN_POSTS = 30

SOFT_FLOOR_RATIO = 0.55


@dataclass(frozen=True)
class SegmentPolicy:
    """Bounds applied when cutting text into segments.

    Attributes:
        limit: Maximum characters per segment
        max_segments: Maximum number of segments returned by parsers
        soft_floor_ratio: Fraction of ``limit`` below which a natural cut
            point is rejected in favour of a hard cut
    """

    limit: int = THREADS_POST_MAX_CHARS
    max_segments: int = THREADS_MAX_CHAIN_POSTS
    soft_floor_ratio: float = SOFT_FLOOR_RATIO

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.limit < 1:
            raise ValueError("SegmentPolicy limit must be at least 1")
        if self.max_segments < 1:
            raise ValueError("SegmentPolicy max_segments must be at least 1")
        if not 0 <= self.soft_floor_ratio <= 1:
            raise ValueError("SegmentPolicy soft_floor_ratio must be between 0 and 1")

    @property
    def soft_floor(self) -> int:
        """Earliest index at which a natural cut point is accepted."""
        return math.floor(self.limit * self.soft_floor_ratio)


class ParseStrategy(str, Enum):
    """How generated text was recognised as already segmented."""

    RULE = "rule"  # --- separators
    NUMBERED = "numbered"  # 1. / 1) / 1- list items
    PARAGRAPH = "paragraph"  # blank-line delimited
