"""Text segmentation for multi-post content.

This module turns long text into ordered segments that fit a per-post
character limit, and parses AI-generated threads back into the same shape.

Architecture:
    - definitions.py: Segment policy, parse strategies, platform limits
    - splitter.py: Priority-ordered cut point search (split_by_limit)
    - parser.py: Structure sniffing and fallback (parse_generated_segments)
    - limits.py: Caption limits for a platform selection
    - telemetry.py: Structured logging

All functions are pure and never raise for string input.
"""

from __future__ import annotations

from .definitions import (
    PLATFORM_CAPTION_LIMITS,
    THREADS_AUTO_SPLIT_MAX_CHARS,
    THREADS_MAX_CHAIN_POSTS,
    THREADS_POST_MAX_CHARS,
    ParseStrategy,
    SegmentPolicy,
)
from .limits import caption_limit_for, estimate_thread_posts
from .parser import detect_strategy, parse_generated_segments
from .splitter import split_by_limit, split_with_policy

__all__ = [
    "PLATFORM_CAPTION_LIMITS",
    "THREADS_AUTO_SPLIT_MAX_CHARS",
    "THREADS_MAX_CHAIN_POSTS",
    "THREADS_POST_MAX_CHARS",
    "ParseStrategy",
    "SegmentPolicy",
    "caption_limit_for",
    "estimate_thread_posts",
    "detect_strategy",
    "parse_generated_segments",
    "split_by_limit",
    "split_with_policy",
]
