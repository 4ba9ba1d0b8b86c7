"""Parsing of AI-generated multi-segment text.

Generated threads rarely follow the requested delimiter convention
exactly, so the splitting strategy is chosen by sniffing the content:

    1. ``---`` separators
    2. numbered list items (``1.``, ``1)``, ``1-``, ``1 ``)
    3. blank-line delimited paragraphs

Each part loses its list marker and is re-split to the segment limit.
When fewer than two segments come out, the text was most likely not
segmented at all and the whole normalized text is split by length instead.
"""

from __future__ import annotations

import re

from .definitions import (
    THREADS_MAX_CHAIN_POSTS,
    THREADS_POST_MAX_CHARS,
    ParseStrategy,
    SegmentPolicy,
)
from .splitter import split_with_policy
from .telemetry import log_generated_parse

_RULE_SPLIT = re.compile(r"\n?\s*-{3,}\s*\n?")
_NUMBERED_LINE = re.compile(r"^\s*\d+[).\s-]", re.MULTILINE)
_NUMBERED_SPLIT = re.compile(r"\n(?=\s*\d+[).\s-])")
_PARAGRAPH_SPLIT = re.compile(r"\n{2,}")
_LEADING_MARKER = re.compile(r"^\s*\d+[).\s-]+")


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_strategy(text: str) -> ParseStrategy:
    if "---" in text:
        return ParseStrategy.RULE
    if _NUMBERED_LINE.search(text):
        return ParseStrategy.NUMBERED
    return ParseStrategy.PARAGRAPH


def split_parts(text: str, strategy: ParseStrategy) -> list[str]:
    if strategy == ParseStrategy.RULE:
        return _RULE_SPLIT.split(text)
    if strategy == ParseStrategy.NUMBERED:
        return _NUMBERED_SPLIT.split(text)
    return _PARAGRAPH_SPLIT.split(text)


def strip_list_marker(part: str) -> str:
    return _LEADING_MARKER.sub("", part, count=1).strip()


def parse_generated_segments(
    raw_text: str | None,
    limit: int = THREADS_POST_MAX_CHARS,
    max_segments: int = THREADS_MAX_CHAIN_POSTS,
) -> list[str]:
    """Parse generated text into at most ``max_segments`` bounded segments.

    Examples:
        >>> parse_generated_segments("A\\n---\\nB\\n---\\nC")
        ['A', 'B', 'C']
        >>> parse_generated_segments("1. First point\\n2. Second point")
        ['First point', 'Second point']
    """
    policy = SegmentPolicy(limit=limit, max_segments=max_segments)

    cleaned = normalize_line_endings(raw_text or "").strip()
    if not cleaned:
        return []

    strategy = detect_strategy(cleaned)
    parts = [strip_list_marker(part) for part in split_parts(cleaned, strategy)]
    parts = [part for part in parts if part]

    segments = [
        segment for part in parts for segment in split_with_policy(part, policy) if segment
    ]

    fallback = len(segments) < 2
    if fallback:
        # Re-split the whole text, not the leftover part
        segments = split_with_policy(cleaned, policy)

    result = segments[: policy.max_segments]
    log_generated_parse(
        strategy=strategy,
        parts=len(parts),
        segments=len(result),
        fallback=fallback,
        truncated=len(segments) - len(result),
    )
    return result
