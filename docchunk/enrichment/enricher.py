# docchunk/enrichment/enricher.py
"""
Chunk enrichment with document provenance.

Enrichment is a pure, order-preserving map over an existing chunk list:

    [Chunk] + DocumentMetadata → [EnrichedChunk]

Each EnrichedChunk owns a copy of its base chunk whose metadata map gains:
- enriched: True
- enrichmentTimestamp: UTC, second precision ("YYYY-MM-DDTHH:MM:SSZ")
- chunkPosition: "<1-based index>/<total>"
- source (always) and page (only when known), mirrored for flat output

The DocumentMetadata instance is shared by reference across the batch.
Input chunks are never modified.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict

from docchunk.core.chunk import Chunk, MetadataValue
from docchunk.core.document import DocumentMetadata
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import ENRICHMENT

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EnrichedChunk(BaseModel):
    """
    A chunk plus the document it came from.

    Composition, not a Chunk subclass: the base chunk is held as `chunk` and
    its fields are exposed through read-only properties, so EnrichedChunk
    satisfies the same HasSpan / HasMetadata protocols as Chunk.
    """

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    document_metadata: DocumentMetadata

    @property
    def id(self) -> int:
        return self.chunk.id

    @property
    def content(self) -> str:
        return self.chunk.content

    @property
    def start_index(self) -> int:
        return self.chunk.start_index

    @property
    def end_index(self) -> int:
        return self.chunk.end_index

    @property
    def length(self) -> int:
        return self.chunk.length

    @property
    def chunk_type(self) -> str:
        return self.chunk.chunk_type

    @property
    def metadata(self) -> Dict[str, MetadataValue]:
        return self.chunk.metadata

    def to_dict(self) -> Dict[str, object]:
        """Flat camelCase form: chunk fields plus documentMetadata."""
        data = self.chunk.model_dump(by_alias=True)
        data["documentMetadata"] = self.document_metadata.model_dump(exclude_none=True)
        return data


class ChunkEnricher:
    """
    Attaches DocumentMetadata and positional annotations to chunks.

    Args:
        clock: Returns the current time; injectable for reproducible output.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def enrich(self, chunks: Sequence[Chunk], metadata: DocumentMetadata) -> List[EnrichedChunk]:
        """
        Enrich every chunk, preserving order.

        Returns:
            One EnrichedChunk per input chunk.
        """
        timestamp = self._clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
        total = len(chunks)
        enriched: List[EnrichedChunk] = []

        for i, chunk in enumerate(chunks):
            chunk_meta: Dict[str, MetadataValue] = {
                k: list(v) if isinstance(v, list) else v for k, v in chunk.metadata.items()
            }
            chunk_meta["enriched"] = True
            chunk_meta["enrichmentTimestamp"] = timestamp
            chunk_meta["chunkPosition"] = f"{i + 1}/{total}"
            chunk_meta["source"] = metadata.source
            if metadata.page is not None:
                chunk_meta["page"] = metadata.page

            enriched.append(
                EnrichedChunk(
                    chunk=chunk.model_copy(update={"metadata": chunk_meta}),
                    document_metadata=metadata,
                )
            )

        logger.debug(f"{ENRICHMENT} Enriched {total} chunks from {metadata.source!r}")
        return enriched


def enrich_chunks(chunks: Sequence[Chunk], metadata: DocumentMetadata) -> List[EnrichedChunk]:
    """Enrich chunks using the real UTC clock."""
    return ChunkEnricher().enrich(chunks, metadata)


__all__ = ["ChunkEnricher", "EnrichedChunk", "enrich_chunks", "TIMESTAMP_FORMAT"]
