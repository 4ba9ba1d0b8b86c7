"""Bounded-length splitting of long text.

Cut points are tried in priority order inside a lookahead window of
``limit + 1`` characters: the last line break, then the end of the last
sentence, then the last space. A candidate is only accepted at or after the
soft floor; when none qualifies the text is cut hard at ``limit``. Every
candidate lies inside the window, so no segment can exceed the limit and
every iteration consumes at least one character.
"""

from __future__ import annotations

from .definitions import THREADS_POST_MAX_CHARS, SegmentPolicy
from .telemetry import log_text_split

_SENTENCE_ENDINGS = (". ", "! ", "? ")


def split_by_limit(text: str | None, limit: int = THREADS_POST_MAX_CHARS) -> list[str]:
    """Split ``text`` into trimmed, non-empty segments of at most ``limit`` chars.

    Examples:
        >>> split_by_limit("", 500)
        []
        >>> split_by_limit("short", 500)
        ['short']
        >>> split_by_limit("aaaa bbbb cccc", 9)
        ['aaaa bbbb', 'cccc']
    """
    return split_with_policy(text, SegmentPolicy(limit=limit))


def split_with_policy(text: str | None, policy: SegmentPolicy) -> list[str]:
    remaining = (text or "").strip()
    if not remaining:
        return []
    if len(remaining) <= policy.limit:
        return [remaining]

    input_length = len(remaining)
    segments: list[str] = []
    while len(remaining) > policy.limit:
        window = remaining[: policy.limit + 1]
        cut = find_cut(window, policy)

        segment = remaining[:cut].strip()
        if segment:
            segments.append(segment)
        remaining = remaining[cut:].strip()

    if remaining:
        segments.append(remaining)

    log_text_split(limit=policy.limit, input_length=input_length, segments=len(segments))
    return segments


def find_cut(window: str, policy: SegmentPolicy) -> int:
    """Index at which ``window`` should be cut."""
    floor = policy.soft_floor

    newline = window.rfind("\n")
    if newline >= floor:
        return newline

    sentence = max(window.rfind(ending) for ending in _SENTENCE_ENDINGS)
    if sentence >= floor:
        # keep the punctuation with the sentence it ends
        return sentence + 1

    space = window.rfind(" ")
    if space >= floor:
        return space

    return policy.limit
