# docchunk/config/__init__.py
from docchunk.config.loader import deep_merge, load_config
from docchunk.config.schema import DocChunkConfig

__all__ = ["DocChunkConfig", "deep_merge", "load_config"]
