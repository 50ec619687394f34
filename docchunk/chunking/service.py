# docchunk/chunking/service.py
"""
ChunkingService - the public chunking surface.

Wraps every chunker plugin behind one object, dispatches enrichment runs by
method name and attaches document provenance.

Architecture:
    ChunkingService
        ├── chunk_by_recursive_character_split → RecursiveChunker
        ├── chunk_by_fixed_size                → FixedSizeChunker
        ├── chunk_by_sentences                 → SentenceChunker
        ├── chunk_by_paragraphs                → ParagraphChunker
        ├── chunk_by_tokens                    → TokenChunker
        └── chunk_with_enrichment              → registry → ChunkEnricher

All operations are synchronous and stateless; one service can be shared
between threads.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from docchunk.chunking.plugins import (
    FixedSizeChunker,
    ParagraphChunker,
    RecursiveChunker,
    SentenceChunker,
    TokenChunker,
)
from docchunk.chunking.plugins.recursive import DEFAULT_SEPARATORS
from docchunk.chunking.registry import DEFAULT_METHOD, get_chunker
from docchunk.config.schema import DocChunkConfig
from docchunk.core.chunk import Chunk
from docchunk.core.document import DocumentMetadata
from docchunk.enrichment.enricher import ChunkEnricher, EnrichedChunk
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import CHUNKING

logger = get_logger(__name__)


class ChunkingService:
    """
    Entry point for chunking and enrichment.

    Usage:
        service = ChunkingService()
        chunks = service.chunk_by_recursive_character_split(text, chunk_size=500)
        enriched = service.chunk_with_enrichment(text, DocumentMetadata(source="a.txt"))
    """

    def __init__(
        self,
        config: Optional[DocChunkConfig] = None,
        enricher: Optional[ChunkEnricher] = None,
    ) -> None:
        """
        Args:
            config: Parameters used when dispatching by method name.
                Defaults to DocChunkConfig().
            enricher: Enricher to use (inject one with a fixed clock in tests).
        """
        self._config = config or DocChunkConfig()
        self._enricher = enricher or ChunkEnricher()

    @property
    def config(self) -> DocChunkConfig:
        return self._config

    def chunk_by_recursive_character_split(
        self,
        text: str,
        chunk_size: int = 500,
        chunk_overlap: int = 100,
        separators: Optional[Sequence[str]] = None,
    ) -> List[Chunk]:
        chunker = RecursiveChunker(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=list(separators) if separators is not None else list(DEFAULT_SEPARATORS),
        )
        return chunker.chunk_text(text)

    def chunk_by_fixed_size(self, text: str, chunk_size: int, overlap: int = 0) -> List[Chunk]:
        return FixedSizeChunker(chunk_size=chunk_size, overlap=overlap).chunk_text(text)

    def chunk_by_sentences(self, text: str, max_sentences_per_chunk: int = 3) -> List[Chunk]:
        return SentenceChunker(max_sentences_per_chunk=max_sentences_per_chunk).chunk_text(text)

    def chunk_by_paragraphs(self, text: str) -> List[Chunk]:
        return ParagraphChunker().chunk_text(text)

    def chunk_by_tokens(self, text: str, max_tokens_per_chunk: int = 100) -> List[Chunk]:
        return TokenChunker(max_tokens_per_chunk=max_tokens_per_chunk).chunk_text(text)

    def chunk_with_enrichment(
        self,
        text: str,
        metadata: DocumentMetadata,
        method: str = DEFAULT_METHOD,
    ) -> List[EnrichedChunk]:
        """
        Chunk with the named method, then enrich.

        Method names are case-insensitive; an unknown name falls back to the
        recursive splitter. Parameters come from the service config.
        """
        chunker = get_chunker(method, self._config)
        logger.debug(f"{CHUNKING} Chunking {metadata.source!r} with {chunker.chunker_id}")
        return self.enrich_existing_chunks(chunker.chunk_text(text), metadata)

    def enrich_existing_chunks(
        self, chunks: Sequence[Chunk], metadata: DocumentMetadata
    ) -> List[EnrichedChunk]:
        return self._enricher.enrich(chunks, metadata)


__all__ = ["ChunkingService"]
