# docchunk/core/chunk.py
"""
Chunk - Core data model for docchunk.

A Chunk is an immutable span of source text produced by one chunking call:
- Sequential id (1-based, dense, in emission order)
- Text content and its length
- Inclusive start/end offsets into the source text
- Tag naming the strategy that produced it
- Open metadata map with typed values

This module provides:
- Chunk: The canonical Pydantic model
- MetadataValue: Allowed metadata value types
- HasSpan / HasMetadata: Capability protocols shared with EnrichedChunk
"""

from __future__ import annotations

from typing import Dict, List, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator
from pydantic.alias_generators import to_camel

# Order matters: StrictBool first so True/False never collapse into ints.
MetadataValue = Union[StrictBool, StrictInt, StrictStr, List[StrictStr]]


@runtime_checkable
class HasSpan(Protocol):
    """Anything that knows where it sits in the source text."""

    @property
    def start_index(self) -> int: ...

    @property
    def end_index(self) -> int: ...

    @property
    def length(self) -> int: ...


@runtime_checkable
class HasMetadata(Protocol):
    """Anything carrying a chunk-level metadata map."""

    @property
    def metadata(self) -> Dict[str, MetadataValue]: ...


class Chunk(BaseModel):
    """
    Canonical chunk model.

    Serialized field names are camelCase (startIndex, endIndex, chunkType) so
    persisted output keeps the established JSON shape; Python code uses the
    snake_case names.

    Example:
        >>> chunk = Chunk(
        ...     id=1, content="hello", start_index=0, end_index=4,
        ...     length=5, chunk_type="Paragraph",
        ... )
        >>> chunk.model_dump(by_alias=True)["startIndex"]
        0
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: int = Field(..., description="Sequential chunk id, starting at 1")
    content: str = Field(..., description="Chunk text content")
    start_index: int = Field(..., description="Inclusive start offset in the source text")
    end_index: int = Field(..., description="Inclusive end offset in the source text")
    length: int = Field(..., description="Character count of content")
    chunk_type: str = Field(..., description="Tag of the producing strategy")
    metadata: Dict[str, MetadataValue] = Field(default_factory=dict, description="Chunk metadata")

    @model_validator(mode="after")
    def _check_consistency(self) -> "Chunk":
        if self.id < 1:
            raise ValueError(f"chunk id must be >= 1, got {self.id}")
        if self.length != len(self.content):
            raise ValueError(
                f"length ({self.length}) does not match content length ({len(self.content)})"
            )
        return self


__all__ = ["Chunk", "MetadataValue", "HasSpan", "HasMetadata"]
