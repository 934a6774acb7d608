"""Source routing — picks the converter for a URL or local path."""

from __future__ import annotations

import logging

import httpx

from markdowndown.core.converters.html import HtmlConverter
from markdowndown.core.converters.local import LocalFileConverter
from markdowndown.core.detection import detect_url_type, normalize_url
from markdowndown.core.errors import UnsupportedSourceError
from markdowndown.core.models import AppConfig, ConversionResult, UrlType
from markdowndown.core.paths import is_local_file_path

logger = logging.getLogger(__name__)

__all__ = [
    "HtmlConverter",
    "LocalFileConverter",
    "convert_source",
]


async def convert_source(
    source: str,
    config: AppConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> ConversionResult:
    """Convert a URL or local path to markdown.

    Raises:
        UnsupportedSourceError: For detected URL types without a converter.
        MarkdownError: Any other failure from validation, fetching or reading.
    """
    cfg = config or AppConfig()
    source = source.strip()

    if is_local_file_path(source):
        markdown = LocalFileConverter().convert(source)
        return ConversionResult(source=source, markdown=markdown)

    url = normalize_url(source)
    url_type = detect_url_type(url)
    logger.debug("Detected %s as %s", url, url_type.value)

    if url_type != UrlType.html:
        raise UnsupportedSourceError(
            f"No converter available for {url_type.value} URLs: {url}"
        )

    converter = HtmlConverter(cfg.html, cfg.output, cfg.http, client=client)
    markdown = await converter.convert(url)
    return ConversionResult(source=source, url_type=url_type, markdown=markdown)
