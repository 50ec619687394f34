# docchunk/chunking/base.py
"""
Base protocol for chunking plugins.

Each chunker plugin must implement:
- plugin_name: str - The plugin identifier (e.g., "recursive", "sentence")
- chunker_id: str - Unique ID including params that affect output
- chunk_text(text) -> List[Chunk]

Chunkers validate their parameters in __post_init__, so a misconfigured
chunker fails before any text is processed.

Flow: str → Chunker.chunk_text() → List[Chunk]
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from docchunk.core.chunk import Chunk


@runtime_checkable
class Chunker(Protocol):
    """
    Protocol for chunking plugins.

    The chunker_id format is: "{plugin_name}:{param1}:{param2}:..."

    Example:
        >>> chunker = RecursiveChunker(chunk_size=500, chunk_overlap=100)
        >>> chunker.chunker_id
        'recursive:500:100'
    """

    plugin_name: str

    @property
    def chunker_id(self) -> str:
        """Deterministic string ID for this chunker configuration."""
        ...

    def chunk_text(self, text: str) -> List[Chunk]:
        """
        Split text into chunks.

        Returns:
            Chunks with ids 1..n in emission order. Empty list for blank text.
        """
        ...


__all__ = ["Chunker", "Chunk"]
