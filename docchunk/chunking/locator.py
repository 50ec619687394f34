# docchunk/chunking/locator.py
"""
Offset recovery for assembled chunk bodies.

Assembled bodies are not always verbatim substrings of the source: the
coalescer joins fragments with a single space and overlap text is prepended.
Location therefore degrades through three tiers:

1. exact:       case-insensitive search for the whole trimmed body
2. prefix:      case-insensitive search for its first three words
                (any whitespace between them)
3. approximate: the search position itself

The span length is always the trimmed body length, clamped to the source.
Only tiers 1 and 2 are authoritative; locate never raises.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Tuple

from docchunk.logging.logger import get_logger
from docchunk.logging.tags import CHUNKING

logger = get_logger(__name__)

EXACT = "exact"
PREFIX = "prefix"
APPROXIMATE = "approximate"

PREFIX_WORDS = 3


class OffsetMatch(NamedTuple):
    start: int
    end: int
    strategy: str


def _find(pattern: str, haystack: str, start: int) -> Optional[int]:
    match = re.compile(pattern, re.IGNORECASE).search(haystack, start)
    return match.start() if match else None


def locate_span(original_text: str, chunk_body: str, search_from: int) -> OffsetMatch:
    """
    Recover the inclusive span of chunk_body inside original_text.

    Args:
        original_text: The full source text.
        chunk_body: Assembled chunk content.
        search_from: Where to start scanning (clamped into the text).

    Returns:
        OffsetMatch with start, end and the tier that produced it.
    """
    last = max(len(original_text) - 1, 0)
    search_from = max(0, min(search_from, last))

    needle = chunk_body.strip()
    if not needle:
        return OffsetMatch(search_from, search_from, APPROXIMATE)

    start = _find(re.escape(needle), original_text, search_from)
    strategy = EXACT

    if start is None:
        words = needle.split()[:PREFIX_WORDS]
        start = _find(r"\s+".join(re.escape(w) for w in words), original_text, search_from)
        strategy = PREFIX

    if start is None:
        logger.debug(
            f"{CHUNKING} Could not locate chunk starting {needle[:30]!r}; "
            f"falling back to position {search_from}"
        )
        start = search_from
        strategy = APPROXIMATE

    end = max(start, min(start + len(needle) - 1, last))
    return OffsetMatch(start, end, strategy)


def locate(original_text: str, chunk_body: str, search_from: int) -> Tuple[int, int]:
    """Best-effort (start, end) of chunk_body in original_text."""
    match = locate_span(original_text, chunk_body, search_from)
    return match.start, match.end


def next_search_position(previous_end: int, overlap: int) -> int:
    """Where the next lookup starts, so overlapped text is still findable."""
    return max(0, previous_end - max(overlap, 0) + 1)


__all__ = [
    "OffsetMatch",
    "locate",
    "locate_span",
    "next_search_position",
    "EXACT",
    "PREFIX",
    "APPROXIMATE",
]
