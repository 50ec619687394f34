# docchunk/chunking/assembly.py
"""
Fragment coalescing and overlap assembly.

Two immutable passes over the splitter output:

    fragments --coalesce()--> bodies --apply_overlap()--> assembled bodies

coalesce() merges neighbouring fragments up to the size budget with a neutral
single-space joiner. apply_overlap() then prepends the tail of each assembled
body to the next one, left to right, building a new list.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence


class AssembledBody(NamedTuple):
    """A chunk body after overlap assembly."""

    text: str
    has_overlap: bool


def coalesce(fragments: Sequence[str], chunk_size: int) -> List[str]:
    """
    Greedily join consecutive fragments with a single space.

    Fragments are stripped first; blank ones are skipped. The accumulator is
    flushed whenever the next fragment would push it past chunk_size.
    """
    bodies: List[str] = []
    current = ""

    for fragment in fragments:
        piece = fragment.strip()
        if not piece:
            continue

        candidate = piece if not current else f"{current} {piece}"
        if len(candidate) <= chunk_size:
            current = candidate
        else:
            if current:
                bodies.append(current)
            current = piece

    if current:
        bodies.append(current)

    return bodies


def apply_overlap(bodies: Sequence[str], overlap: int) -> List[AssembledBody]:
    """
    Prepend the trailing `overlap` characters of each body to the next one.

    The tail is taken from the already-assembled previous body, so overlap
    composes left to right. A body no longer than `overlap` passes nothing on.
    Every body but the first is flagged has_overlap when overlap > 0.
    """
    if overlap <= 0:
        return [AssembledBody(body, False) for body in bodies]

    assembled: List[AssembledBody] = []
    carry = ""

    for i, body in enumerate(bodies):
        text = f"{carry} {body}" if carry else body
        assembled.append(AssembledBody(text, i > 0))
        carry = text[-overlap:] if len(text) > overlap else ""

    return assembled


__all__ = ["AssembledBody", "coalesce", "apply_overlap"]
