"""Convert command — single source or batch file."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.table import Table

from markdowndown.core.config import load_config
from markdowndown.core.converters import convert_source
from markdowndown.core.errors import MarkdownError
from markdowndown.core.models import AppConfig, BatchReport
from markdowndown.core.paths import is_local_file_path, normalize_file_path

console = Console(stderr=True)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _output_filename(source: str) -> str:
    """Derive a markdown filename from a URL or path."""
    if is_local_file_path(source):
        return Path(normalize_file_path(source)).stem + ".md"
    parts = urlsplit(source)
    slug = _UNSAFE_FILENAME_CHARS.sub("-", f"{parts.hostname or ''}{parts.path}")
    return (slug.strip("-.") or "index") + ".md"


def _unique_output_filenames(sources: list[str]) -> list[str]:
    """Filenames for *sources*, suffixing ``-2``, ``-3``... on collisions."""
    used: set[str] = set()
    names = []
    for source in sources:
        name = _output_filename(source)
        stem = name[: -len(".md")]
        counter = 1
        while name in used:
            counter += 1
            name = f"{stem}-{counter}.md"
        used.add(name)
        names.append(name)
    return names


def _load_effective_config(config_path: str | None, no_frontmatter: bool) -> AppConfig:
    cfg = load_config(config_path)
    if no_frontmatter:
        cfg.output.include_frontmatter = False
    return cfg


def _render_batch(report: BatchReport) -> None:
    table = Table(title="Batch conversion")
    table.add_column("Source")
    table.add_column("Status")
    for result in report.results:
        table.add_row(result.source, "[green]ok[/green]")
    for source, error in report.errors.items():
        table.add_row(source, f"[red]{error}[/red]")
    console.print(table)


def _run_batch(
    file: str,
    cfg: AppConfig,
    output_dir: str | None,
    concurrency: int,
    json_output: bool,
) -> None:
    from markdowndown.core.batch import parse_url_file, run_batch_convert

    try:
        sources = parse_url_file(file)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] File not found: {file}")
        raise SystemExit(1)

    if not sources:
        console.print("[yellow]Warning:[/yellow] No sources found in file.")
        return

    with console.status(f"Converting {len(sources)} sources..."):
        report = asyncio.run(run_batch_convert(sources, cfg, concurrency=concurrency))

    if output_dir:
        target = Path(output_dir)
        target.mkdir(parents=True, exist_ok=True)
        names = _unique_output_filenames([r.source for r in report.results])
        for result, name in zip(report.results, names):
            (target / name).write_text(result.markdown, encoding="utf-8")

    if json_output:
        typer.echo(report.model_dump_json(indent=2))
    else:
        _render_batch(report)

    if report.errors:
        raise SystemExit(1)


def register(app: typer.Typer) -> None:
    """Register the convert command onto the Typer app."""

    @app.command()
    def convert(
        source: str = typer.Argument(None, help="URL or local file path to convert"),
        output: str = typer.Option(
            None, "--output", "-o", help="Write markdown to this file instead of stdout"
        ),
        file: str = typer.Option(
            None, "--file", "-F",
            help="Path to .txt or .csv file with sources (one per line)",
        ),
        output_dir: str = typer.Option(
            None, "--output-dir", help="Directory to write batch results into"
        ),
        no_frontmatter: bool = typer.Option(
            False, "--no-frontmatter", help="Do not prepend YAML frontmatter"
        ),
        config_path: str = typer.Option(
            None, "--config", "-c", help="Path to a .markdowndown.yml config file"
        ),
        concurrency: int = typer.Option(
            3, "--concurrency", help="Max concurrent conversions in batch mode (default: 3)"
        ),
        json_output: bool = typer.Option(
            False, "--json", help="Output the conversion result as JSON"
        ),
    ) -> None:
        """Convert a URL or local file to clean markdown."""
        try:
            cfg = _load_effective_config(config_path, no_frontmatter)
        except MarkdownError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1)

        if file:
            _run_batch(file, cfg, output_dir, concurrency, json_output)
            return

        if not source:
            console.print(
                "[red]Error:[/red] Provide a source argument or use --file for batch mode."
            )
            raise SystemExit(1)

        try:
            result = asyncio.run(convert_source(source, cfg))
        except MarkdownError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1)

        if json_output:
            typer.echo(result.model_dump_json(indent=2))
        elif output:
            Path(output).write_text(result.markdown, encoding="utf-8")
            console.print(f"[green]Wrote[/green] {output}")
        else:
            typer.echo(result.markdown)
