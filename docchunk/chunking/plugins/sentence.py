# docchunk/chunking/plugins/sentence.py
"""
Sentence-count chunker.

Sentences are found with a punctuation heuristic: a run of . ! or ? followed
by whitespace ends a sentence (the terminator is consumed). Groups of
max_sentences_per_chunk sentences are joined with single spaces.

Chunker ID format: "sentence:{max_sentences_per_chunk}"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from docchunk.core.chunk import Chunk
from docchunk.exceptions import ConfigurationError

CHUNK_TYPE = "Sentence"

SENTENCE_BOUNDARY = re.compile(r"[.!?]+\s+")


def split_sentences(text: str) -> List[str]:
    """Split text on sentence terminators, dropping blank pieces."""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


@dataclass
class SentenceChunker:
    """Groups a fixed number of sentences per chunk."""

    plugin_name: str = field(default="sentence", repr=False)
    max_sentences_per_chunk: int = 3

    def __post_init__(self) -> None:
        if self.max_sentences_per_chunk < 1:
            raise ConfigurationError(
                f"max_sentences_per_chunk must be >= 1, got {self.max_sentences_per_chunk}"
            )

    @property
    def chunker_id(self) -> str:
        return f"{self.plugin_name}:{self.max_sentences_per_chunk}"

    def chunk_text(self, text: str) -> List[Chunk]:
        sentences = split_sentences(text)
        if not sentences:
            return []

        chunks: List[Chunk] = []
        cursor = 0
        last = len(text) - 1

        for i in range(0, len(sentences), self.max_sentences_per_chunk):
            group = sentences[i : i + self.max_sentences_per_chunk]
            content = " ".join(group)

            start = text.find(group[0], cursor)
            if start < 0:
                start = cursor
            cursor = start + len(group[0])

            chunks.append(
                Chunk(
                    id=len(chunks) + 1,
                    content=content,
                    start_index=start,
                    end_index=min(start + len(content) - 1, last),
                    length=len(content),
                    chunk_type=CHUNK_TYPE,
                    metadata={
                        "sentenceCount": len(group),
                        "maxSentencesPerChunk": self.max_sentences_per_chunk,
                    },
                )
            )

        return chunks


__all__ = ["SentenceChunker", "split_sentences"]
