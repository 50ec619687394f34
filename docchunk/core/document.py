# docchunk/core/document.py
"""
DocumentMetadata - caller-supplied provenance for a document.

Attached by reference to every chunk of an enrichment batch.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class DocumentMetadata(BaseModel):
    """
    Provenance of the document a chunk list was cut from.

    Example:
        >>> DocumentMetadata(source="report.pdf", page=3)
        DocumentMetadata(source='report.pdf', page=3)
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="File identifier (usually the file name)")
    page: Optional[PositiveInt] = Field(default=None, description="1-based page number, if known")


__all__ = ["DocumentMetadata"]
