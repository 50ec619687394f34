# docchunk/cli/__init__.py
from docchunk.cli.cli import app

__all__ = ["app"]
