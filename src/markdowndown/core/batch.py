"""Batch conversion of many sources with bounded concurrency."""

from __future__ import annotations

import asyncio
import csv
import logging
from collections.abc import Callable
from pathlib import Path

import httpx

from markdowndown.core.converters import convert_source
from markdowndown.core.models import AppConfig, BatchReport, ConversionResult

logger = logging.getLogger(__name__)


def parse_url_file(path: str) -> list[str]:
    """Read sources from a .txt (one per line) or .csv (first column) file.

    Blank lines and ``#`` comments are skipped, as is a ``url`` CSV header.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")

    if file_path.suffix.lower() == ".csv":
        rows = csv.reader(text.splitlines())
        candidates = [row[0] for row in rows if row]
        if candidates and candidates[0].strip().lower() == "url":
            candidates = candidates[1:]
    else:
        candidates = text.splitlines()

    sources = []
    for line in candidates:
        line = line.strip()
        if line and not line.startswith("#"):
            sources.append(line)
    return sources


async def run_batch_convert(
    sources: list[str],
    config: AppConfig | None = None,
    *,
    concurrency: int = 3,
    client: httpx.AsyncClient | None = None,
    progress_callback: Callable[[str], None] | None = None,
) -> BatchReport:
    """Convert every source once, collecting failures instead of stopping."""
    cfg = config or AppConfig()
    unique_sources = list(dict.fromkeys(sources))
    if len(unique_sources) < len(sources):
        logger.info("Skipping %d duplicate sources", len(sources) - len(unique_sources))
    sources = unique_sources
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def _convert_one(source: str) -> ConversionResult:
        async with semaphore:
            if progress_callback:
                progress_callback(f"Converting {source}")
            return await convert_source(source, cfg, client=client)

    outcomes = await asyncio.gather(
        *(_convert_one(source) for source in sources),
        return_exceptions=True,
    )

    report = BatchReport()
    for source, outcome in zip(sources, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning("Failed to convert %s: %s", source, outcome)
            report.errors[source] = str(outcome)
        else:
            report.results.append(outcome)
    return report
