# docchunk/chunking/plugins/recursive.py
"""
Recursive character text splitter.

Pipeline:
    text → split_by_separators() → coalesce() → apply_overlap() → locate_span()

Chunks respect natural boundaries (paragraphs > lines > sentences > words)
and fall back to character slices only for unsplittable runs. Spans are
recovered best-effort because assembly rewrites whitespace.

Chunker ID format: "recursive:{chunk_size}:{chunk_overlap}"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from docchunk.chunking.assembly import apply_overlap, coalesce
from docchunk.chunking.locator import locate_span, next_search_position
from docchunk.chunking.splitter import split_by_separators
from docchunk.core.chunk import Chunk
from docchunk.exceptions import ConfigurationError
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import CHUNKING

logger = get_logger(__name__)

CHUNK_TYPE = "RecursiveCharacterSplit"
DEFAULT_SEPARATORS = ["\n\n", "\n", ".", " "]


def describe_separator(content: str) -> str:
    """
    Guess which separator level produced a chunk from what it still contains.

    This is a heuristic: a word-split chunk holding an abbreviation's period
    reports "sentence".
    """
    if "\n\n" in content:
        return "paragraph"
    if "\n" in content:
        return "line"
    if "." in content:
        return "sentence"
    return "word"


@dataclass
class RecursiveChunker:
    """
    Cascading-separator splitter with overlap and offset recovery.

    Args:
        chunk_size: Target chunk size in characters (default: 500)
        chunk_overlap: Characters carried from each chunk into the next (default: 100)
        separators: Separators to try, highest priority first

    Example:
        >>> chunker = RecursiveChunker(chunk_size=500, chunk_overlap=100)
        >>> chunks = chunker.chunk_text(document_text)
    """

    plugin_name: str = field(default="recursive", repr=False)
    chunk_size: int = 500
    chunk_overlap: int = 100
    separators: List[str] = field(default_factory=lambda: list(DEFAULT_SEPARATORS))

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.chunk_overlap >= self.chunk_size:
            logger.warning(
                f"{CHUNKING} chunk_overlap ({self.chunk_overlap}) >= chunk_size "
                f"({self.chunk_size}); neighbouring chunks will mostly duplicate each other"
            )

    @property
    def chunker_id(self) -> str:
        """
        Unique identifier for this chunker configuration.

        Format: "recursive:{chunk_size}:{chunk_overlap}"
        """
        return f"{self.plugin_name}:{self.chunk_size}:{self.chunk_overlap}"

    @property
    def body_budget(self) -> int:
        """
        Size budget for chunk bodies before overlap is prepended.

        Room is reserved for the overlap and its joining space so the final
        content stays within chunk_size. When that leaves nothing, the full
        chunk_size is used and final chunks may exceed it.
        """
        if self.chunk_overlap <= 0:
            return self.chunk_size
        reserved = self.chunk_size - self.chunk_overlap - 1
        return reserved if reserved >= 1 else self.chunk_size

    def chunk_text(self, text: str) -> List[Chunk]:
        """
        Chunk text using cascading separators with overlap.

        Args:
            text: Raw text to chunk

        Returns:
            List of Chunk objects (empty for blank text)
        """
        if not text or not text.strip():
            return []

        budget = self.body_budget
        if self.chunk_overlap > 0 and budget == self.chunk_size:
            logger.warning(
                f"{CHUNKING} No room to reserve {self.chunk_overlap} overlap chars in "
                f"chunk_size {self.chunk_size}; chunks may exceed chunk_size"
            )

        fragments = split_by_separators(text, budget, self.separators)
        bodies = coalesce(fragments, budget)
        assembled = apply_overlap(bodies, self.chunk_overlap)

        chunks: List[Chunk] = []
        search_from = 0

        for index, body in enumerate(assembled, start=1):
            match = locate_span(text, body.text, search_from)
            # never search behind this chunk, so starts stay non-decreasing
            search_from = max(match.start, next_search_position(match.end, self.chunk_overlap))

            chunks.append(
                Chunk(
                    id=index,
                    content=body.text,
                    start_index=match.start,
                    end_index=match.end,
                    length=len(body.text),
                    chunk_type=CHUNK_TYPE,
                    metadata={
                        "chunkSize": self.chunk_size,
                        "chunkOverlap": self.chunk_overlap,
                        "separators": list(self.separators),
                        "hasOverlap": body.has_overlap,
                        "actualSeparatorUsed": describe_separator(body.text),
                        "offsetStrategy": match.strategy,
                    },
                )
            )

        logger.debug(f"{CHUNKING} {self.chunker_id} produced {len(chunks)} chunks")
        return chunks


__all__ = ["RecursiveChunker", "describe_separator", "DEFAULT_SEPARATORS"]
