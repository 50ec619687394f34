# tests/test_assembly.py
"""
Tests for fragment coalescing and overlap assembly.
"""

from docchunk.chunking.assembly import AssembledBody, apply_overlap, coalesce


class TestCoalesce:
    """Tests for coalesce."""

    def test_joins_with_single_space_up_to_budget(self):
        assert coalesce(["ab", "cd", "efgh"], 5) == ["ab cd", "efgh"]

    def test_strips_and_skips_blank_fragments(self):
        assert coalesce(["  ab ", "   ", "cd"], 10) == ["ab cd"]

    def test_oversized_fragment_kept_alone(self):
        assert coalesce(["ab", "cdefghij", "k"], 5) == ["ab", "cdefghij", "k"]

    def test_empty(self):
        assert coalesce([], 10) == []


class TestApplyOverlap:
    """Tests for apply_overlap."""

    def test_prepends_tail_of_previous(self):
        result = apply_overlap(["hello world", "next part"], 5)

        assert result == [
            AssembledBody("hello world", False),
            AssembledBody("world next part", True),
        ]

    def test_disabled_when_zero(self):
        result = apply_overlap(["a", "b"], 0)
        assert result == [AssembledBody("a", False), AssembledBody("b", False)]

    def test_disabled_when_negative(self):
        result = apply_overlap(["abc", "def"], -3)
        assert [r.text for r in result] == ["abc", "def"]
        assert not any(r.has_overlap for r in result)

    def test_short_body_carries_nothing(self):
        """A body no longer than the overlap passes nothing on, but the flag stays set."""
        result = apply_overlap(["ab", "cdef", "gh"], 3)

        assert [r.text for r in result] == ["ab", "cdef", "def gh"]
        assert [r.has_overlap for r in result] == [False, True, True]

    def test_composes_left_to_right(self):
        result = apply_overlap(["abcdef", "gh", "ij"], 4)
        assert [r.text for r in result] == ["abcdef", "cdef gh", "f gh ij"]

    def test_does_not_mutate_input(self):
        bodies = ["hello world", "next part"]
        apply_overlap(bodies, 5)
        assert bodies == ["hello world", "next part"]
