# docchunk/config/schema.py
"""
Pydantic schema for docchunk configuration.

One section per chunking method plus the default enrichment method.
Values here are fallbacks only; docchunk/config/defaults.yaml is the
source of truth for shipped defaults.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, field_validator


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RecursiveConfig(_Section):
    chunk_size: PositiveInt = 500
    chunk_overlap: int = 100
    separators: List[str] = Field(default_factory=lambda: ["\n\n", "\n", ".", " "])

    @field_validator("separators")
    @classmethod
    def _non_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("separators must contain at least one entry")
        return value


class FixedSizeConfig(_Section):
    chunk_size: PositiveInt = 500
    overlap: NonNegativeInt = 100


class SentencesConfig(_Section):
    max_sentences_per_chunk: PositiveInt = 3


class TokensConfig(_Section):
    max_tokens_per_chunk: PositiveInt = 100


class EnrichmentConfig(_Section):
    method: str = "RecursiveCharacterSplit"


class DocChunkConfig(_Section):
    """Complete, validated configuration."""

    recursive: RecursiveConfig = Field(default_factory=RecursiveConfig)
    fixed_size: FixedSizeConfig = Field(default_factory=FixedSizeConfig)
    sentences: SentencesConfig = Field(default_factory=SentencesConfig)
    tokens: TokensConfig = Field(default_factory=TokensConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)


__all__ = [
    "DocChunkConfig",
    "EnrichmentConfig",
    "FixedSizeConfig",
    "RecursiveConfig",
    "SentencesConfig",
    "TokensConfig",
]
