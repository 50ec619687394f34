# docchunk/chunking/__init__.py
"""
Chunking subsystem.

Provides:
- Chunker protocol and the built-in chunker plugins
- The recursive pipeline stages (splitter, assembly, locator)
- ChunkingService, the public entry point
- Method registry for name-based dispatch

Usage:
    from docchunk.chunking import ChunkingService

    service = ChunkingService()
    chunks = service.chunk_by_recursive_character_split(text)
"""

from docchunk.chunking.base import Chunk, Chunker
from docchunk.chunking.plugins import (
    FixedSizeChunker,
    ParagraphChunker,
    RecursiveChunker,
    SentenceChunker,
    TokenChunker,
)
from docchunk.chunking.registry import available_methods, get_chunker, resolve_method
from docchunk.chunking.service import ChunkingService

__all__ = [
    # Protocol
    "Chunker",
    "Chunk",
    # Plugins
    "FixedSizeChunker",
    "ParagraphChunker",
    "RecursiveChunker",
    "SentenceChunker",
    "TokenChunker",
    # Registry
    "available_methods",
    "get_chunker",
    "resolve_method",
    # Service
    "ChunkingService",
]
