"""Structured logging for segmentation operations."""

from __future__ import annotations

import logging

from .definitions import ParseStrategy

logger = logging.getLogger(__name__)


def log_text_split(*, limit: int, input_length: int, segments: int) -> None:
    """Log a completed split of long text.

    Args:
        limit: Per-segment character limit
        input_length: Length of the trimmed input
        segments: Number of segments produced
    """
    logger.debug(
        "text_split_completed",
        extra={"limit": limit, "input_length": input_length, "segments": segments},
    )


def log_generated_parse(
    *,
    strategy: ParseStrategy,
    parts: int,
    segments: int,
    fallback: bool,
    truncated: int = 0,
) -> None:
    """Log the outcome of parsing generated multi-segment text.

    Args:
        strategy: Splitting strategy chosen by content sniffing
        parts: Non-empty parts the strategy produced
        segments: Segments returned to the caller
        fallback: Whether the whole text was re-split instead
        truncated: Segments dropped by the max-segment bound
    """
    logger.debug(
        "generated_text_parsed",
        extra={
            "strategy": strategy.value,
            "parts": parts,
            "segments": segments,
            "fallback": fallback,
            "truncated": truncated,
        },
    )
