# docchunk/cli/cli.py
"""
docchunk CLI - Main application.

Commands:
    docchunk chunk      Chunk a document, preview stats, optionally enrich and save
    docchunk methods    List chunking methods
    docchunk version    Show version

Commands import their implementation lazily when invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="docchunk",
    help="docchunk - structure-aware document chunking.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("chunk")
def chunk(
    source: Path = typer.Argument(..., help="Text or markdown file to chunk."),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Chunking method (default from config)."
    ),
    size: Optional[int] = typer.Option(
        None, "--size", "-s", help="Chunk size in characters (recursive/fixed-size)."
    ),
    overlap: Optional[int] = typer.Option(
        None, "--overlap", "-o", help="Overlap in characters (recursive/fixed-size)."
    ),
    doc_source: Optional[str] = typer.Option(
        None, "--source", help="Enrich chunks with this source identifier."
    ),
    page: Optional[int] = typer.Option(None, "--page", help="Page number for enrichment."),
    output: Optional[Path] = typer.Option(None, "--output", help="Write chunks as JSON."),
    output_format: str = typer.Option(
        "chunks", "--format", "-f", help="JSON shape for --output: chunks or dictionary."
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config overrides."),
    stats_only: bool = typer.Option(False, "--stats", help="Only show statistics."),
    limit: int = typer.Option(5, "--limit", "-n", help="Number of chunks to preview."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Chunk a document and preview the result."""
    from docchunk.cli.commands import chunk as mod

    mod.command(
        source=source,
        method=method,
        size=size,
        overlap=overlap,
        doc_source=doc_source,
        page=page,
        output=output,
        output_format=output_format,
        config=config,
        stats_only=stats_only,
        limit=limit,
        verbose=verbose,
    )


@app.command("methods")
def methods() -> None:
    """List available chunking methods."""
    from docchunk.chunking.registry import DEFAULT_METHOD, available_methods

    typer.echo("Available chunking methods:")
    for name in available_methods():
        marker = " (default)" if name == DEFAULT_METHOD else ""
        typer.echo(f"  • {name}{marker}")


@app.command("version")
def version() -> None:
    """Show docchunk version."""
    from docchunk import __version__

    typer.echo(f"docchunk version {__version__}")


if __name__ == "__main__":
    app()
