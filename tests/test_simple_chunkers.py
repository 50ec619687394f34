# tests/test_simple_chunkers.py
"""
Tests for the non-recursive chunkers.

Tests:
- FixedSizeChunker: sliding window, overlap flags, validation
- SentenceChunker: punctuation heuristic, grouping, spans
- ParagraphChunker: blank-line splitting, trimming, exact spans
- TokenChunker: word grouping and spans
"""

import pytest

from docchunk.chunking.plugins import (
    FixedSizeChunker,
    ParagraphChunker,
    SentenceChunker,
    TokenChunker,
)
from docchunk.chunking.plugins.sentence import split_sentences
from docchunk.exceptions import ConfigurationError


class TestFixedSizeChunker:
    """Tests for FixedSizeChunker."""

    def test_chunker_id_format(self):
        assert FixedSizeChunker(chunk_size=500, overlap=50).chunker_id == "fixed_size:500:50"

    def test_window_with_overlap(self):
        chunks = FixedSizeChunker(chunk_size=4, overlap=1).chunk_text("abcdefghij")

        assert [c.content for c in chunks] == ["abcd", "defg", "ghij"]
        assert [(c.start_index, c.end_index) for c in chunks] == [(0, 3), (3, 6), (6, 9)]
        assert [c.metadata["hasOverlap"] for c in chunks] == [False, True, True]

    def test_last_window_clipped(self):
        chunks = FixedSizeChunker(chunk_size=4).chunk_text("abcdefghij")

        assert [c.content for c in chunks] == ["abcd", "efgh", "ij"]
        assert chunks[-1].end_index == 9
        assert not any(c.metadata["hasOverlap"] for c in chunks)

    def test_metadata(self):
        chunk = FixedSizeChunker(chunk_size=4, overlap=1).chunk_text("abcdef")[0]
        assert chunk.chunk_type == "FixedSize"
        assert chunk.metadata["chunkSize"] == 4
        assert chunk.metadata["overlap"] == 1

    def test_empty_input(self):
        assert FixedSizeChunker(chunk_size=4).chunk_text("") == []

    def test_validation_chunk_size(self):
        with pytest.raises(ConfigurationError, match="chunk_size"):
            FixedSizeChunker(chunk_size=0)

    def test_validation_overlap_too_large(self):
        with pytest.raises(ValueError, match="overlap"):
            FixedSizeChunker(chunk_size=10, overlap=10)

    def test_validation_negative_overlap(self):
        with pytest.raises(ConfigurationError, match="overlap"):
            FixedSizeChunker(chunk_size=10, overlap=-1)


class TestSentenceChunker:
    """Tests for SentenceChunker."""

    TEXT = "One. Two! Three? Four. Five."

    def test_split_sentences(self):
        assert split_sentences(self.TEXT) == ["One", "Two", "Three", "Four", "Five."]

    def test_groups_and_spans(self):
        chunks = SentenceChunker(max_sentences_per_chunk=2).chunk_text(self.TEXT)

        assert [c.content for c in chunks] == ["One Two", "Three Four", "Five."]
        assert [c.start_index for c in chunks] == [0, 10, 23]
        assert [c.end_index for c in chunks] == [6, 19, 27]
        assert [c.metadata["sentenceCount"] for c in chunks] == [2, 2, 1]
        assert chunks[0].metadata["maxSentencesPerChunk"] == 2
        assert chunks[0].chunk_type == "Sentence"

    def test_repeated_sentence_located_in_order(self):
        chunks = SentenceChunker(max_sentences_per_chunk=1).chunk_text("Yes. No. Yes. End.")
        assert [c.start_index for c in chunks] == [0, 5, 9, 14]

    def test_empty_input(self):
        assert SentenceChunker().chunk_text("") == []
        assert SentenceChunker().chunk_text("   ") == []

    def test_validation(self):
        with pytest.raises(ConfigurationError):
            SentenceChunker(max_sentences_per_chunk=0)


class TestParagraphChunker:
    """Tests for ParagraphChunker."""

    def test_splits_on_blank_lines(self):
        text = "First para.\n\n\nSecond para here.\n  \nThird."
        chunks = ParagraphChunker().chunk_text(text)

        assert [c.content for c in chunks] == ["First para.", "Second para here.", "Third."]
        assert [(c.start_index, c.end_index) for c in chunks] == [(0, 10), (14, 30), (35, 40)]
        assert [c.metadata["wordCount"] for c in chunks] == [2, 3, 1]

    def test_windows_line_endings(self):
        chunks = ParagraphChunker().chunk_text("a\r\n\r\nb")
        assert [c.content for c in chunks] == ["a", "b"]

    def test_single_line_breaks_do_not_split(self):
        chunks = ParagraphChunker().chunk_text("line one\nline two")
        assert len(chunks) == 1

    def test_spans_match_content(self, sample_document):
        for chunk in ParagraphChunker().chunk_text(sample_document):
            assert sample_document[chunk.start_index : chunk.end_index + 1] == chunk.content

    def test_empty_input(self):
        assert ParagraphChunker().chunk_text("") == []
        assert ParagraphChunker().chunk_text("\n\n\n") == []


class TestTokenChunker:
    """Tests for TokenChunker."""

    def test_groups_words(self):
        text = "one two  three\nfour five"
        chunks = TokenChunker(max_tokens_per_chunk=2).chunk_text(text)

        assert [c.content for c in chunks] == ["one two", "three four", "five"]
        assert [(c.start_index, c.end_index) for c in chunks] == [(0, 6), (9, 18), (20, 23)]
        assert [c.metadata["tokenCount"] for c in chunks] == [2, 2, 1]
        assert chunks[0].chunk_type == "Token"

    def test_repeated_words_located_in_order(self):
        chunks = TokenChunker(max_tokens_per_chunk=1).chunk_text("a a a")
        assert [c.start_index for c in chunks] == [0, 2, 4]

    def test_chunker_id(self):
        assert TokenChunker(max_tokens_per_chunk=50).chunker_id == "token:50"

    def test_empty_input(self):
        assert TokenChunker().chunk_text("") == []

    def test_validation(self):
        with pytest.raises(ConfigurationError):
            TokenChunker(max_tokens_per_chunk=0)
