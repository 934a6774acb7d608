"""YAML frontmatter generation and manipulation."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import yaml

from markdowndown.core.errors import InvalidUrlError, ParseError
from markdowndown.core.models import Frontmatter
from markdowndown.core.paths import is_local_file_path

DELIMITER = "---\n"
_CLOSING = "\n---\n"


def build_frontmatter(
    source_url: str,
    exporter: str | None = None,
    download_date: datetime | None = None,
    extra_fields: dict[str, str] | None = None,
) -> str:
    """Render a ``---`` delimited YAML frontmatter block.

    ``source_url``, ``exporter`` and ``date_downloaded`` always come first,
    followed by *extra_fields* in insertion order.
    """
    if not (
        source_url.startswith(("http://", "https://")) or is_local_file_path(source_url)
    ):
        raise InvalidUrlError(source_url, "frontmatter source must be a URL or local path")

    frontmatter = Frontmatter(
        source_url=source_url,
        exporter=exporter or "markdowndown",
        date_downloaded=download_date or datetime.now(timezone.utc),
    )
    data: dict[str, Any] = frontmatter.model_dump(mode="json")
    for key, value in (extra_fields or {}).items():
        data[key] = value

    try:
        body = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise ParseError(
            f"Failed to serialize frontmatter for {source_url} "
            f"({len(extra_fields or {})} additional fields): {exc}"
        ) from exc

    return f"{DELIMITER}{body}{DELIMITER}"


def combine_frontmatter_and_content(frontmatter: str, content: str) -> str:
    return f"{frontmatter}\n{content}"


def extract_frontmatter(markdown: str) -> dict[str, Any] | None:
    """Parse the leading frontmatter block, or return None if there is none."""
    if not markdown.startswith(DELIMITER):
        return None
    end = markdown.find(_CLOSING, len(DELIMITER))
    if end == -1:
        return None

    try:
        data = yaml.safe_load(markdown[len(DELIMITER):end])
    except yaml.YAMLError:
        return None
    return data if isinstance(data, dict) else None


def strip_frontmatter(markdown: str) -> str:
    """Return *markdown* without its leading frontmatter block."""
    if not markdown.startswith(DELIMITER):
        return markdown
    end = markdown.find(_CLOSING, len(DELIMITER))
    if end == -1:
        return markdown

    remaining = markdown[end + len(_CLOSING):]
    return remaining[1:] if remaining.startswith("\n") else remaining
