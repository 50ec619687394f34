# docchunk/io/__init__.py
from docchunk.io.reader import read_document
from docchunk.io.writer import chunks_document, dictionary_document, enriched_document, save_json

__all__ = [
    "chunks_document",
    "dictionary_document",
    "enriched_document",
    "read_document",
    "save_json",
]
