# docchunk/chunking/plugins/__init__.py
from docchunk.chunking.plugins.fixed_size import FixedSizeChunker
from docchunk.chunking.plugins.paragraph import ParagraphChunker
from docchunk.chunking.plugins.recursive import RecursiveChunker
from docchunk.chunking.plugins.sentence import SentenceChunker
from docchunk.chunking.plugins.token import TokenChunker

__all__ = [
    "FixedSizeChunker",
    "ParagraphChunker",
    "RecursiveChunker",
    "SentenceChunker",
    "TokenChunker",
]
