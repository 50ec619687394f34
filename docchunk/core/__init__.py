# docchunk/core/__init__.py
"""
Core data types shared by chunking, enrichment and persistence.
"""

from docchunk.core.chunk import Chunk, HasMetadata, HasSpan, MetadataValue
from docchunk.core.document import DocumentMetadata

__all__ = [
    "Chunk",
    "DocumentMetadata",
    "HasMetadata",
    "HasSpan",
    "MetadataValue",
]
