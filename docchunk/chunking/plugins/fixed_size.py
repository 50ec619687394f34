# docchunk/chunking/plugins/fixed_size.py
"""
Simple fixed-size character chunker.

Slides a window of chunk_size characters with step chunk_size - overlap.
The last window is clipped to the end of the text. No structural awareness;
spans are exact.

Chunker ID format: "fixed_size:{chunk_size}:{overlap}"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from docchunk.core.chunk import Chunk
from docchunk.exceptions import ConfigurationError

CHUNK_TYPE = "FixedSize"


@dataclass
class FixedSizeChunker:
    """
    Fixed-size character chunker with optional overlap.

    Example:
        >>> chunker = FixedSizeChunker(chunk_size=500, overlap=50)
        >>> chunker.chunker_id
        'fixed_size:500:50'
    """

    plugin_name: str = field(default="fixed_size", repr=False)
    chunk_size: int = 500
    overlap: int = 0

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.overlap < 0:
            raise ConfigurationError(f"overlap must be >= 0, got {self.overlap}")
        if self.overlap >= self.chunk_size:
            raise ConfigurationError(
                f"overlap ({self.overlap}) must be < chunk_size ({self.chunk_size})"
            )

    @property
    def chunker_id(self) -> str:
        return f"{self.plugin_name}:{self.chunk_size}:{self.overlap}"

    def chunk_text(self, text: str) -> List[Chunk]:
        if not text or not text.strip():
            return []

        chunks: List[Chunk] = []
        step = self.chunk_size - self.overlap
        pos = 0

        while pos < len(text):
            end = min(pos + self.chunk_size, len(text))
            content = text[pos:end]

            chunks.append(
                Chunk(
                    id=len(chunks) + 1,
                    content=content,
                    start_index=pos,
                    end_index=end - 1,
                    length=len(content),
                    chunk_type=CHUNK_TYPE,
                    metadata={
                        "chunkSize": self.chunk_size,
                        "overlap": self.overlap,
                        "hasOverlap": self.overlap > 0 and pos > 0,
                    },
                )
            )

            if end == len(text):
                break
            pos += step

        return chunks


__all__ = ["FixedSizeChunker"]
