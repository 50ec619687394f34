# docchunk/io/writer.py
"""
JSON output for chunk lists.

Three document shapes:
- chunk list:   {timestamp, totalChunks, chunkingStrategy, chunks: [Chunk]}
- enriched:     chunk list + distinct sources and pages
- dictionary:   chunks as {text, metadata: {id, startIndex, ..., additionalMetadata}}
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from docchunk.core.chunk import Chunk
from docchunk.enrichment.enricher import TIMESTAMP_FORMAT, EnrichedChunk
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import IO

logger = get_logger(__name__)


def _timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).strftime(TIMESTAMP_FORMAT)


def _strategy(chunks: Sequence[Any]) -> str:
    return chunks[0].chunk_type if chunks else "Unknown"


def chunks_document(chunks: Sequence[Chunk], now: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "timestamp": _timestamp(now),
        "totalChunks": len(chunks),
        "chunkingStrategy": _strategy(chunks),
        "chunks": [c.model_dump(by_alias=True) for c in chunks],
    }


def enriched_document(
    chunks: Sequence[EnrichedChunk], now: Optional[datetime] = None
) -> Dict[str, Any]:
    sources: List[str] = []
    pages: List[int] = []
    for c in chunks:
        meta = c.document_metadata
        if meta.source and meta.source not in sources:
            sources.append(meta.source)
        if meta.page is not None and meta.page not in pages:
            pages.append(meta.page)

    return {
        "timestamp": _timestamp(now),
        "totalChunks": len(chunks),
        "chunkingStrategy": _strategy(chunks),
        "sources": sources,
        "pages": pages,
        "chunks": [c.to_dict() for c in chunks],
    }


def dictionary_document(chunks: Sequence[Chunk], now: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "timestamp": _timestamp(now),
        "totalChunks": len(chunks),
        "chunkingStrategy": _strategy(chunks),
        "chunks": [
            {
                "text": c.content,
                "metadata": {
                    "id": c.id,
                    "startIndex": c.start_index,
                    "endIndex": c.end_index,
                    "length": c.length,
                    "chunkType": c.chunk_type,
                    "additionalMetadata": dict(c.metadata),
                },
            }
            for c in chunks
        ],
    }


def save_json(document: Dict[str, Any], path: Path) -> Path:
    """Write a document as indented UTF-8 JSON, creating parent dirs."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"{IO} Wrote {document.get('totalChunks', 0)} chunks to {path}")
    return path


__all__ = ["chunks_document", "enriched_document", "dictionary_document", "save_json"]
