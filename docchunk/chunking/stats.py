# docchunk/chunking/stats.py
"""
Summary statistics for a chunk list (sizes and separator usage).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Sequence

from docchunk.core.chunk import Chunk


@dataclass(frozen=True)
class ChunkStats:
    count: int = 0
    total_chars: int = 0
    avg_length: float = 0.0
    min_length: int = 0
    max_length: int = 0
    separator_usage: Dict[str, int] = field(default_factory=dict)


def summarize(chunks: Sequence[Chunk]) -> ChunkStats:
    """
    Sizes over chunk lengths; separator usage counts the
    actualSeparatorUsed labels, most frequent first.
    """
    if not chunks:
        return ChunkStats()

    lengths = [c.length for c in chunks]
    usage = Counter(
        str(c.metadata["actualSeparatorUsed"])
        for c in chunks
        if "actualSeparatorUsed" in c.metadata
    )

    return ChunkStats(
        count=len(chunks),
        total_chars=sum(lengths),
        avg_length=sum(lengths) / len(lengths),
        min_length=min(lengths),
        max_length=max(lengths),
        separator_usage=dict(usage.most_common()),
    )


__all__ = ["ChunkStats", "summarize"]
