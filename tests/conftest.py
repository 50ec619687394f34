# tests/conftest.py
"""
Shared fixtures for the docchunk test suite.

All tests are pure logic or use tmp_path; none need network or services.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from docchunk.chunking.service import ChunkingService
from docchunk.enrichment.enricher import ChunkEnricher

SAMPLE_DOCUMENT = """Advanced Text Processing and Document Analysis

Introduction

Document processing and text analysis have become increasingly important in the digital age. With the exponential growth of textual data, organizations need sophisticated tools to extract meaningful insights from documents. This comprehensive guide explores various techniques and methodologies for effective document processing.

Text chunking represents a fundamental preprocessing step in natural language processing workflows. By breaking down large documents into manageable segments, we can improve the efficiency and accuracy of downstream analysis tasks.

Chunking Methodologies

Fixed-size chunking divides text into segments of predetermined length. This approach offers simplicity and predictability but may split sentences or paragraphs unnaturally. It's particularly useful when working with character or token limits imposed by machine learning models.

Semantic chunking attempts to preserve meaning by respecting natural language boundaries.
It includes sentence-based chunking, which ensures each segment contains complete thoughts.
It also includes paragraph-based chunking, which maintains the logical structure of documents.

Conclusion

Effective text chunking is essential for modern document processing workflows."""

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def fixed_enricher() -> ChunkEnricher:
    """Enricher whose timestamp is always 2024-01-02T03:04:05Z."""
    return ChunkEnricher(clock=lambda: FIXED_NOW)


@pytest.fixture
def service(fixed_enricher: ChunkEnricher) -> ChunkingService:
    return ChunkingService(enricher=fixed_enricher)
