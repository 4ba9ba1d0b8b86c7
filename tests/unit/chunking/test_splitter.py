"""Unit tests for bounded-length text splitting."""

from __future__ import annotations

import re

import pytest

from metagenie.client.chunking import SegmentPolicy, split_by_limit
from metagenie.client.chunking.splitter import find_cut


def _squash(text: str) -> str:
    return re.sub(r"\s+", "", text)


class TestSplitByLimit:
    """Test split_by_limit behavior."""

    def test_empty_input(self):
        """Test empty and whitespace-only input yields no segments."""
        assert split_by_limit("", 500) == []
        assert split_by_limit("   \n\t ", 500) == []
        assert split_by_limit(None, 500) == []

    def test_short_input_single_segment(self):
        """Test text under the limit is returned trimmed as one segment."""
        assert split_by_limit("short", 500) == ["short"]
        assert split_by_limit("  padded  ", 500) == ["padded"]

    def test_exactly_limit_is_single_segment(self):
        """Test text of exactly limit characters is not split."""
        text = "x" * 20
        assert split_by_limit(text, 20) == [text]

    def test_prefers_newline(self):
        """Test a newline past the soft floor wins over later spaces."""
        text = "first line here\nsecond line is a bit longer"
        segments = split_by_limit(text, 20)

        assert segments[0] == "first line here"
        assert all(len(s) <= 20 for s in segments)

    def test_newline_before_soft_floor_is_ignored(self):
        """Test a newline below the soft floor falls through to sentence/space cuts."""
        # soft floor for 20 is 11; the newline sits at index 2
        text = "ab\ncdefgh ijklmnop qrstuvwxyz"
        segments = split_by_limit(text, 20)

        assert segments[0] == "ab\ncdefgh ijklmnop"

    def test_sentence_boundary_keeps_punctuation(self):
        """Test sentence cuts land just after the punctuation mark."""
        text = "One two three. Four five six seven eight"
        segments = split_by_limit(text, 20)

        assert segments[0] == "One two three."
        assert segments[1] == "Four five six seven"
        assert segments[2] == "eight"

    def test_question_and_exclamation_boundaries(self):
        """Test ! and ? followed by a space are sentence boundaries."""
        assert split_by_limit("Really now? Yes indeed friend", 16)[0] == "Really now?"
        assert split_by_limit("Stop it now! Right away please", 16)[0] == "Stop it now!"

    def test_space_fallback(self):
        """Test plain spaces are used when no newline or sentence end qualifies."""
        text = "aaaa bbbb cccc dddd"
        assert split_by_limit(text, 9) == ["aaaa bbbb", "cccc dddd"]

    def test_hard_cut_for_unbroken_word(self):
        """Test a word longer than the limit is cut exactly at the limit."""
        text = "x" * 25
        assert split_by_limit(text, 10) == ["x" * 10, "x" * 10, "x" * 5]

    def test_space_below_soft_floor_forces_hard_cut(self):
        """Test a space too early in the window is rejected."""
        # soft floor for 10 is 5; only space is at index 1
        text = "a " + "b" * 20
        segments = split_by_limit(text, 10)

        assert segments[0] == "a " + "b" * 8
        assert all(len(s) <= 10 for s in segments)

    def test_limit_of_one(self):
        """Test the smallest limit still terminates and respects bounds."""
        assert split_by_limit("abc", 1) == ["a", "b", "c"]

    def test_invalid_limit_rejected(self):
        """Test a non-positive limit is a configuration error."""
        with pytest.raises(ValueError, match="limit must be at least 1"):
            split_by_limit("text", 0)

    @pytest.mark.parametrize("limit", [7, 20, 55, 120, 500])
    def test_bounds_and_reconstruction(self, limit):
        """Test segments are bounded, non-empty and reconstruct the input."""
        text = (
            "Launch week is here! We shipped scheduling, analytics and a new composer.\n"
            "Threads support lands today. Want the details? Read on.\n\n"
            + "Supercalifragilisticexpialidocious " * 6
            + "and that is the whole story. Thanks for following along!"
        ) * 3

        segments = split_by_limit(text, limit)

        assert segments
        assert all(segment for segment in segments)
        assert all(len(segment) <= limit for segment in segments)
        assert all(segment == segment.strip() for segment in segments)
        assert _squash("".join(segments)) == _squash(text)


class TestFindCut:
    """Test cut point priority."""

    def test_newline_beats_sentence(self):
        """Test newline has priority even when a sentence end is later."""
        policy = SegmentPolicy(limit=20)
        window = "abcdefghijkl\nmn. opqrs"[:21]
        assert find_cut(window, policy) == 12

    def test_default_hard_cut(self):
        """Test the hard cut equals the limit."""
        policy = SegmentPolicy(limit=10)
        assert find_cut("x" * 11, policy) == 10
