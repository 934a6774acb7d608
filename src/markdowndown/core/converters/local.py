"""Local file converter — reads markdown straight from the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from markdowndown.core.errors import ContentError
from markdowndown.core.paths import normalize_file_path

logger = logging.getLogger(__name__)


class LocalFileConverter:
    """Reads local paths and ``file://`` URLs."""

    name = "Local File"

    def convert(self, source: str) -> str:
        path = Path(normalize_file_path(source.strip()))
        logger.debug("Reading local file %s", path)

        if not path.exists():
            raise ContentError(f"File does not exist: {path}")
        if not path.is_file():
            raise ContentError(f"Path is not a file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentError(f"Could not read {path}: {exc}") from exc

        if not content.strip():
            raise ContentError(f"File content is empty: {path}")

        logger.info("Read %d chars from %s", len(content), path)
        return content
