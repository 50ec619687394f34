# docchunk/logging/tags.py
"""
Subsystem tags prefixed to log messages so output stays searchable.
"""

CHUNKING = "[CHUNKING]"
ENRICHMENT = "[ENRICHMENT]"
CONFIG = "[CONFIG]"
IO = "[IO]"
CLI = "[CLI]"
