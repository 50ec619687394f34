# docchunk/chunking/splitter.py
"""
Separator cascade splitter.

Splits text on a priority-ordered list of separators:
1. Try paragraphs (\n\n)
2. Fragments still too big are split on lines (\n)
3. Then on sentences (.)
4. Then on words ( )
5. Last resort: fixed-length character slices

Each pass only touches fragments that are still over budget, and re-joins
neighbouring parts with the separator that split them, up to the budget.
"""

from __future__ import annotations

from typing import List, Sequence

from docchunk.exceptions import ConfigurationError


def hard_split(text: str, chunk_size: int) -> List[str]:
    """
    Last resort: split by character count.

    Slices are exactly chunk_size long except the final remainder.
    Whitespace-only slices are dropped.
    """
    pieces = []
    for i in range(0, len(text), chunk_size):
        piece = text[i : i + chunk_size]
        if piece.strip():
            pieces.append(piece)
    return pieces


def _split_fragment(fragment: str, separator: str, chunk_size: int, final_pass: bool) -> List[str]:
    """
    Split one oversized fragment on a separator and greedily re-join the parts.

    A single part that is itself over budget is flushed on its own. In the
    final pass it is sliced by characters; before that it is left for the
    next separator.
    """
    if separator == "":
        return hard_split(fragment, chunk_size)

    if separator not in fragment:
        return [fragment]

    result: List[str] = []
    current = ""

    for part in fragment.split(separator):
        candidate = part if not current else current + separator + part

        if len(candidate) <= chunk_size:
            current = candidate
            continue

        if current.strip():
            result.append(current)

        if len(part) > chunk_size:
            if final_pass:
                result.extend(hard_split(part, chunk_size))
            else:
                result.append(part)
            current = ""
        else:
            current = part

    if current.strip():
        result.append(current)

    return result


def split_by_separators(text: str, chunk_size: int, separators: Sequence[str]) -> List[str]:
    """
    Cascade-split text into fragments no longer than chunk_size.

    Args:
        text: Source text.
        chunk_size: Maximum fragment length in characters.
        separators: Separators in priority order (highest first). "" means
            "slice by characters".

    Returns:
        Ordered, non-blank fragments. Empty list for empty/blank input.

    Raises:
        ConfigurationError: If chunk_size < 1.
    """
    if chunk_size < 1:
        raise ConfigurationError(f"chunk_size must be >= 1, got {chunk_size}")

    if not text or not text.strip():
        return []

    fragments = [text]
    last = len(separators) - 1

    for i, separator in enumerate(separators):
        refined: List[str] = []
        for fragment in fragments:
            if len(fragment) <= chunk_size:
                refined.append(fragment)
            else:
                refined.extend(_split_fragment(fragment, separator, chunk_size, i == last))
        fragments = [f for f in refined if f.strip()]

    # Anything still oversized (separator never occurred, or no separators given)
    result: List[str] = []
    for fragment in fragments:
        if len(fragment) > chunk_size:
            result.extend(hard_split(fragment, chunk_size))
        else:
            result.append(fragment)
    return result


__all__ = ["split_by_separators", "hard_split"]
