# tests/test_locator.py
"""
Tests for offset recovery.

Verifies the three tiers (exact, prefix, approximate) and that locate()
always returns an in-bounds span.
"""

from docchunk.chunking.locator import (
    APPROXIMATE,
    EXACT,
    PREFIX,
    locate,
    locate_span,
    next_search_position,
)


class TestLocate:
    """Tests for locate / locate_span."""

    def test_exact_case_insensitive(self):
        match = locate_span("Hello World", "world", 0)
        assert (match.start, match.end, match.strategy) == (6, 10, EXACT)

    def test_exact_trims_body(self):
        assert locate("Hello World", "  World \n", 0) == (6, 10)

    def test_respects_search_from(self):
        assert locate("abc abc abc", "abc", 1) == (4, 6)

    def test_prefix_tier_when_whitespace_differs(self):
        original = "The quick brown fox\njumps over"
        match = locate_span(original, "The quick brown fox jumps over", 0)

        assert match.strategy == PREFIX
        assert match.start == 0
        assert match.end == len(original) - 1

    def test_approximate_tier(self):
        match = locate_span("abc def", "zzz", 3)
        assert (match.start, match.end, match.strategy) == (3, 5, APPROXIMATE)

    def test_search_from_clamped_into_text(self):
        start, end = locate("abc", "abc", 99)
        assert 0 <= start <= end <= 2

    def test_negative_search_from(self):
        assert locate("abc", "abc", -10) == (0, 2)

    def test_blank_body(self):
        assert locate("abc def", "   ", 4) == (4, 4)

    def test_end_clamped_to_text(self):
        start, end = locate("short", "short text that is longer", 0)
        assert end == 4
        assert start <= end

    def test_never_raises_on_regex_characters(self):
        match = locate_span("cost is $5 (approx.) [sic]", "$5 (approx.) [sic]", 0)
        assert match.strategy == EXACT
        assert match.start == 8


class TestNextSearchPosition:
    """Tests for next_search_position."""

    def test_backs_up_by_overlap(self):
        assert next_search_position(10, 3) == 8

    def test_never_negative(self):
        assert next_search_position(2, 5) == 0

    def test_no_overlap_moves_past_end(self):
        assert next_search_position(10, 0) == 11
