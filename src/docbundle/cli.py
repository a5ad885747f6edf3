"""Command line interface for docbundle."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docbundle.build.builder import DocumentationBuilder
from docbundle.config import DEFAULT_OUTPUT, DEFAULT_TITLE, AppConfig
from docbundle.errors import DocBundleError


console = Console()
app = typer.Typer(help="docbundle - bundle project markdown docs into one HTML page")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_plan(builder: DocumentationBuilder) -> None:
    files = builder.discover()
    if not files:
        console.print("[yellow]No documentation files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category")
    table.add_column("Document")
    for doc in files:
        table.add_row(builder.classifier.classify(doc.path), doc.path)
    console.print(table)


@app.command()
def build(
    root: Optional[Path] = typer.Option(
        None, "--root", envvar="DOCBUNDLE_ROOT", help="Directory to search (defaults to cwd)"
    ),
    output: Path = typer.Option(
        DEFAULT_OUTPUT, "--output", "-o", envvar="DOCBUNDLE_OUTPUT", help="Output HTML path, relative to root"
    ),
    title: str = typer.Option(DEFAULT_TITLE, help="Page title"),
    workers: Optional[int] = typer.Option(None, help="Maximum rendering threads"),
    include_hidden: bool = typer.Option(False, "--include-hidden", help="Also search dot-directories"),
    dry_run: bool = typer.Option(False, "--dry-run", help="List documents and categories without writing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Collect markdown documentation into a single HTML page."""
    _setup_logging(verbose)
    config = AppConfig(
        root_dir=root,
        output_path=output,
        title=title,
        max_workers=workers,
        include_hidden=include_hidden,
    )
    builder = DocumentationBuilder(config)

    try:
        if dry_run:
            config.validate()
            _print_plan(builder)
            return
        console.print(f"Building documentation from [bold]{config.root_dir}[/bold]...")
        result = builder.build()
    except DocBundleError as exc:
        console.print(f"[red]Error generating documentation:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(
        f"Documents: {result.document_count}, categories: {len(result.categories)}"
    )
    console.print(f"Documentation generated successfully at [bold]{result.output_path}[/bold]")
