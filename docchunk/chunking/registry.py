# docchunk/chunking/registry.py
"""
Chunking method registry.

Maps method names (as accepted by ChunkingService.chunk_with_enrichment and
the CLI) to chunker factories. Lookup is case-insensitive; an unknown name
resolves to the recursive splitter instead of raising.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from docchunk.chunking.base import Chunker
from docchunk.chunking.plugins import (
    FixedSizeChunker,
    ParagraphChunker,
    RecursiveChunker,
    SentenceChunker,
    TokenChunker,
)
from docchunk.config.schema import DocChunkConfig
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import CHUNKING

logger = get_logger(__name__)

DEFAULT_METHOD = "RecursiveCharacterSplit"

ChunkerFactory = Callable[[DocChunkConfig], Chunker]

_FACTORIES: Dict[str, ChunkerFactory] = {
    "RecursiveCharacterSplit": lambda cfg: RecursiveChunker(
        chunk_size=cfg.recursive.chunk_size,
        chunk_overlap=cfg.recursive.chunk_overlap,
        separators=list(cfg.recursive.separators),
    ),
    "FixedSize": lambda cfg: FixedSizeChunker(
        chunk_size=cfg.fixed_size.chunk_size,
        overlap=cfg.fixed_size.overlap,
    ),
    "Sentences": lambda cfg: SentenceChunker(
        max_sentences_per_chunk=cfg.sentences.max_sentences_per_chunk,
    ),
    "Paragraphs": lambda cfg: ParagraphChunker(),
    "Tokens": lambda cfg: TokenChunker(
        max_tokens_per_chunk=cfg.tokens.max_tokens_per_chunk,
    ),
}

_BY_KEY = {name.lower(): name for name in _FACTORIES}


def available_methods() -> List[str]:
    """List method names in their canonical spelling."""
    return list(_FACTORIES)


def resolve_method(method: str) -> str:
    """
    Canonical name for a method, case-insensitively.

    Unknown names resolve to the recursive splitter.
    """
    canonical = _BY_KEY.get(method.strip().lower())
    if canonical is None:
        logger.debug(f"{CHUNKING} Unknown chunking method {method!r}; using {DEFAULT_METHOD}")
        return DEFAULT_METHOD
    return canonical


def get_chunker(method: str, config: DocChunkConfig) -> Chunker:
    """Build the chunker for a method name from configuration."""
    return _FACTORIES[resolve_method(method)](config)


__all__ = ["available_methods", "resolve_method", "get_chunker", "DEFAULT_METHOD"]
