"""Typer entry point for the ``markdowndown`` command."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from markdowndown.cli import convert, detect

app = typer.Typer(
    name="markdowndown",
    help="Convert web pages and local files to clean markdown.",
    no_args_is_help=True,
)


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging on stderr"
    ),
) -> None:
    """Convert web pages and local files to clean markdown."""
    configure_logging(verbose)


convert.register(app)
detect.register(app)


if __name__ == "__main__":
    app()
