"""Detect command — show how a source would be routed."""

from __future__ import annotations

import typer
from rich.console import Console

from markdowndown.core.detection import detect_url_type
from markdowndown.core.errors import InvalidUrlError
from markdowndown.core.paths import is_local_file_path

console = Console(stderr=True)


def register(app: typer.Typer) -> None:
    """Register the detect command onto the Typer app."""

    @app.command()
    def detect(
        source: str = typer.Argument(help="URL or local file path to classify"),
    ) -> None:
        """Print the source type: local_file, html, google_docs, office365 or github_issue."""
        if is_local_file_path(source):
            typer.echo("local_file")
            return
        try:
            typer.echo(detect_url_type(source).value)
        except InvalidUrlError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1)
