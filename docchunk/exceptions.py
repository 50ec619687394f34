# docchunk/exceptions.py
"""
Exception hierarchy for docchunk.

All library errors inherit from DocChunkError so callers can catch them with a
single handler. Chunking itself raises only ConfigurationError, and only before
any text is processed.
"""

from __future__ import annotations


class DocChunkError(Exception):
    """Base class for all docchunk exceptions."""

    pass


class ConfigurationError(DocChunkError, ValueError):
    """
    Invalid chunker parameters or an unreadable/invalid config file.

    Also a ValueError, so parameter validation reads naturally at call sites:

        >>> try:
        ...     RecursiveChunker(chunk_size=0)
        ... except ValueError as e:
        ...     print(e)
        chunk_size must be >= 1, got 0
    """

    pass


class DocumentReadError(DocChunkError):
    """A source document could not be read or its format is unsupported."""

    pass


__all__ = ["DocChunkError", "ConfigurationError", "DocumentReadError"]
