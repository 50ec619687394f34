"""
docchunk - structure-aware document chunking for language-model ingestion.

Splits text into bounded, overlapping chunks along paragraph, line, sentence
and word boundaries, and tracks where each chunk sits in the source text.

Quick Start:
    >>> from docchunk import ChunkingService, DocumentMetadata
    >>> service = ChunkingService()
    >>> chunks = service.chunk_by_recursive_character_split(text, chunk_size=500)
    >>> enriched = service.enrich_existing_chunks(chunks, DocumentMetadata(source="a.txt"))

Public API:
    Core Types:
        - Chunk, DocumentMetadata, EnrichedChunk

    Chunking:
        - ChunkingService: every chunking method plus enrichment
        - RecursiveChunker, FixedSizeChunker, SentenceChunker,
          ParagraphChunker, TokenChunker

    Configuration:
        - load_config, DocChunkConfig
"""

__version__ = "0.1.0"

from docchunk.chunking import (
    ChunkingService,
    FixedSizeChunker,
    ParagraphChunker,
    RecursiveChunker,
    SentenceChunker,
    TokenChunker,
)
from docchunk.config import DocChunkConfig, load_config
from docchunk.core import Chunk, DocumentMetadata
from docchunk.enrichment import ChunkEnricher, EnrichedChunk
from docchunk.exceptions import ConfigurationError, DocChunkError, DocumentReadError

__all__ = [
    "__version__",
    # Core types
    "Chunk",
    "DocumentMetadata",
    "EnrichedChunk",
    # Chunking
    "ChunkingService",
    "ChunkEnricher",
    "FixedSizeChunker",
    "ParagraphChunker",
    "RecursiveChunker",
    "SentenceChunker",
    "TokenChunker",
    # Configuration
    "DocChunkConfig",
    "load_config",
    # Exceptions
    "DocChunkError",
    "ConfigurationError",
    "DocumentReadError",
]
