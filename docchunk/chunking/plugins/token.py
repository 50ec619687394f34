# docchunk/chunking/plugins/token.py
"""
Word-count ("token") chunker.

Tokens are approximated as whitespace-delimited words; groups of
max_tokens_per_chunk words are joined with single spaces.

Chunker ID format: "token:{max_tokens_per_chunk}"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from docchunk.core.chunk import Chunk
from docchunk.exceptions import ConfigurationError

CHUNK_TYPE = "Token"


@dataclass
class TokenChunker:
    """Groups a fixed number of words per chunk."""

    plugin_name: str = field(default="token", repr=False)
    max_tokens_per_chunk: int = 100

    def __post_init__(self) -> None:
        if self.max_tokens_per_chunk < 1:
            raise ConfigurationError(
                f"max_tokens_per_chunk must be >= 1, got {self.max_tokens_per_chunk}"
            )

    @property
    def chunker_id(self) -> str:
        return f"{self.plugin_name}:{self.max_tokens_per_chunk}"

    def chunk_text(self, text: str) -> List[Chunk]:
        words = text.split()
        if not words:
            return []

        chunks: List[Chunk] = []
        cursor = 0
        last = len(text) - 1

        for i in range(0, len(words), self.max_tokens_per_chunk):
            group = words[i : i + self.max_tokens_per_chunk]
            content = " ".join(group)

            # Locate the group by its first word, then skip past the whole group
            start = text.find(group[0], cursor)
            cursor = start
            for word in group:
                cursor = text.find(word, cursor) + len(word)

            chunks.append(
                Chunk(
                    id=len(chunks) + 1,
                    content=content,
                    start_index=start,
                    end_index=min(start + len(content) - 1, last),
                    length=len(content),
                    chunk_type=CHUNK_TYPE,
                    metadata={
                        "tokenCount": len(group),
                        "maxTokensPerChunk": self.max_tokens_per_chunk,
                    },
                )
            )

        return chunks


__all__ = ["TokenChunker"]
