# docchunk/cli/commands/chunk.py
"""
Chunk command: chunk a document and preview how it was split.

Usage:
    docchunk chunk ./doc.txt                        # Preview with config defaults
    docchunk chunk ./doc.txt --size 300 -o 50       # Custom size and overlap
    docchunk chunk ./doc.md --method paragraphs     # Another method
    docchunk chunk ./doc.txt --source doc.txt --page 2 --output chunks.json
    docchunk chunk ./doc.pdf --output chunks.json --format dictionary
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from docchunk.chunking.registry import get_chunker, resolve_method
from docchunk.chunking.stats import summarize
from docchunk.config.loader import load_config
from docchunk.config.schema import DocChunkConfig
from docchunk.core.chunk import Chunk
from docchunk.core.document import DocumentMetadata
from docchunk.enrichment.enricher import ChunkEnricher, EnrichedChunk
from docchunk.exceptions import DocChunkError
from docchunk.io.reader import read_document
from docchunk.io.writer import (
    chunks_document,
    dictionary_document,
    enriched_document,
    save_json,
)
from docchunk.logging.logger import configure_logging, get_logger
from docchunk.logging.tags import CLI

logger = get_logger(__name__)
console = Console()

PREVIEW_CHARS = 300
OUTPUT_FORMATS = ("chunks", "dictionary")


def _apply_overrides(
    config: DocChunkConfig, method: str, size: Optional[int], overlap: Optional[int]
) -> DocChunkConfig:
    """Fold --size/--overlap into the config section of the chosen method."""
    if method == "RecursiveCharacterSplit":
        section = config.recursive.model_copy(
            update={
                k: v
                for k, v in (("chunk_size", size), ("chunk_overlap", overlap))
                if v is not None
            }
        )
        return config.model_copy(update={"recursive": section})
    if method == "FixedSize":
        section = config.fixed_size.model_copy(
            update={k: v for k, v in (("chunk_size", size), ("overlap", overlap)) if v is not None}
        )
        return config.model_copy(update={"fixed_size": section})
    return config


def _print_stats(chunks: Sequence[Chunk], text_len: int, title: str) -> None:
    stats = summarize(chunks)

    console.print(Panel.fit(f"[bold]Chunking Preview[/bold]\n[dim]{title}[/dim]", border_style="blue"))

    table = Table(title="Summary", show_header=False, box=None)
    table.add_column("Property", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Document characters", f"{text_len:,}")
    table.add_row("Total chunks", str(stats.count))
    table.add_row("Avg chunk size", f"{stats.avg_length:,.0f} chars")
    table.add_row("Min chunk size", f"{stats.min_length:,} chars" if stats.count else "N/A")
    table.add_row("Max chunk size", f"{stats.max_length:,} chars" if stats.count else "N/A")
    console.print(table)

    if stats.separator_usage:
        usage = Table(title="Separator Usage")
        usage.add_column("Separator", style="cyan")
        usage.add_column("Chunks", justify="right")
        for label, count in stats.separator_usage.items():
            usage.add_row(label, str(count))
        console.print(usage)


def _print_previews(chunks: Sequence[Union[Chunk, EnrichedChunk]], limit: int) -> None:
    shown = min(limit, len(chunks))
    console.print(f"\n[bold]Chunk Previews[/bold] (showing {shown} of {len(chunks)}):")

    for chunk in chunks[:shown]:
        preview = chunk.content
        if len(preview) > PREVIEW_CHARS:
            preview = preview[:PREVIEW_CHARS] + "..."
        preview = preview.replace("\n", " ").strip()

        console.print()
        console.print(
            f"[dim]#{chunk.id}[/dim] "
            f"[cyan]{chunk.start_index}-{chunk.end_index}[/cyan] "
            f"[dim]({chunk.length:,} chars)[/dim]"
        )
        console.print(f"  [dim]{preview}[/dim]")


def command(
    source: Path,
    method: Optional[str] = None,
    size: Optional[int] = None,
    overlap: Optional[int] = None,
    doc_source: Optional[str] = None,
    page: Optional[int] = None,
    output: Optional[Path] = None,
    output_format: str = "chunks",
    config: Optional[Path] = None,
    stats_only: bool = False,
    limit: int = 5,
    verbose: bool = False,
) -> None:
    """Chunk one document; see module docstring for usage."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    output_format = output_format.strip().lower()
    if output_format not in OUTPUT_FORMATS:
        console.print(
            f"[red]Error:[/red] Unknown format '{output_format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(1)

    if not source.exists():
        console.print(f"[red]Error:[/red] {source} does not exist")
        raise typer.Exit(1)

    try:
        cfg = load_config(config)
        chosen = resolve_method(method or cfg.enrichment.method)
        cfg = _apply_overrides(cfg, chosen, size, overlap)

        text = read_document(source)
        chunker = get_chunker(chosen, cfg)
        chunks: List[Chunk] = chunker.chunk_text(text)

        enriched: Optional[List[EnrichedChunk]] = None
        if doc_source is not None or page is not None:
            metadata = DocumentMetadata(source=doc_source or source.name, page=page)
            enriched = ChunkEnricher().enrich(chunks, metadata)
    except DocChunkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        # pydantic rejects bad --page values
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger.debug(f"{CLI} {chunker.chunker_id} produced {len(chunks)} chunks for {source}")

    _print_stats(chunks, len(text), f"Method: {chosen} | {chunker.chunker_id}")

    if not stats_only:
        _print_previews(enriched if enriched is not None else chunks, limit)

    if output is not None:
        if output_format == "dictionary":
            base = [e.chunk for e in enriched] if enriched is not None else chunks
            document = dictionary_document(base)
        elif enriched is not None:
            document = enriched_document(enriched)
        else:
            document = chunks_document(chunks)
        save_json(document, output)
        console.print(f"\n[green]Saved[/green] {len(chunks)} chunks to {output}")
