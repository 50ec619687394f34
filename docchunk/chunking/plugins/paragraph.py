# docchunk/chunking/plugins/paragraph.py
"""
Paragraph chunker: one chunk per blank-line separated paragraph.

Chunker ID format: "paragraph"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from docchunk.core.chunk import Chunk

CHUNK_TYPE = "Paragraph"

# Two or more line breaks, allowing whitespace-only lines in between
BLANK_LINES = re.compile(r"(?:\r?\n[ \t]*){2,}")


@dataclass
class ParagraphChunker:
    """Emits each trimmed paragraph as a chunk, with its exact span."""

    plugin_name: str = field(default="paragraph", repr=False)

    @property
    def chunker_id(self) -> str:
        return self.plugin_name

    def chunk_text(self, text: str) -> List[Chunk]:
        if not text or not text.strip():
            return []

        chunks: List[Chunk] = []
        cursor = 0

        for raw in BLANK_LINES.split(text):
            paragraph = raw.strip()
            if not paragraph:
                continue

            start = text.find(paragraph, cursor)
            end = start + len(paragraph) - 1
            cursor = end + 1

            chunks.append(
                Chunk(
                    id=len(chunks) + 1,
                    content=paragraph,
                    start_index=start,
                    end_index=end,
                    length=len(paragraph),
                    chunk_type=CHUNK_TYPE,
                    metadata={"wordCount": len(paragraph.split())},
                )
            )

        return chunks


__all__ = ["ParagraphChunker"]
