# docchunk/enrichment/__init__.py
"""
Enrichment of chunk lists with document provenance and position.

Usage:
    from docchunk.enrichment import ChunkEnricher
    from docchunk.core import DocumentMetadata

    enriched = ChunkEnricher().enrich(chunks, DocumentMetadata(source="a.txt", page=2))
"""

from docchunk.enrichment.enricher import ChunkEnricher, EnrichedChunk, enrich_chunks

__all__ = ["ChunkEnricher", "EnrichedChunk", "enrich_chunks"]
