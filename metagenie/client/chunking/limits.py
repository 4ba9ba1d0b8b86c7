"""Caption limits for a platform selection."""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..core.enums import Platform
from .definitions import (
    PLATFORM_CAPTION_LIMITS,
    THREADS_AUTO_SPLIT_MAX_CHARS,
    THREADS_POST_MAX_CHARS,
)


def caption_limit_for(
    platforms: Iterable[Platform | str], *, threads_auto_split: bool = False
) -> int:
    """Maximum caption length accepted by every selected platform.

    When Threads auto-splits long text into a chain it no longer constrains
    the caption, so it is left out of the minimum.

    Args:
        platforms: Selected target platforms
        threads_auto_split: Whether Threads text is split into a chain

    Returns:
        Character limit for the caption field
    """
    limits = []
    for platform in platforms:
        platform = Platform(platform)
        if platform == Platform.THREADS and threads_auto_split:
            continue
        limits.append(PLATFORM_CAPTION_LIMITS[platform])

    if limits:
        return min(limits)
    if threads_auto_split:
        return THREADS_AUTO_SPLIT_MAX_CHARS
    return PLATFORM_CAPTION_LIMITS[Platform.THREADS]


def estimate_thread_posts(text: str | None, post_limit: int = THREADS_POST_MAX_CHARS) -> int:
    """Rough number of chained posts ``text`` will be split into."""
    trimmed = (text or "").strip()
    if not trimmed:
        return 0
    return max(1, math.ceil(len(trimmed) / post_limit))
