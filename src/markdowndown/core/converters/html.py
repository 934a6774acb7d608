"""HTML page converter — fetches a page and runs the markdown pipeline."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx
from bs4 import BeautifulSoup

from markdowndown._version import __version__
from markdowndown.core.client import fetch_text
from markdowndown.core.errors import ParseError
from markdowndown.core.frontmatter import build_frontmatter, combine_frontmatter_and_content
from markdowndown.core.markdown_engine import convert_html_to_markdown
from markdowndown.core.markdown_engine.config import HtmlConverterConfig
from markdowndown.core.models import HttpConfig, OutputConfig

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_PLACEHOLDER = "<!-- Empty HTML document -->"
_ACCEPT_HTML = {"Accept": "text/html,application/xhtml+xml"}


class HtmlConverter:
    """Converts HTML pages to markdown, optionally with frontmatter."""

    name = "HTML"

    def __init__(
        self,
        config: HtmlConverterConfig | None = None,
        output_config: OutputConfig | None = None,
        http_config: HttpConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or HtmlConverterConfig()
        self.output_config = output_config or OutputConfig()
        self.http_config = http_config or HttpConfig()
        self.client = client

    def convert_html(self, html: str) -> str:
        """Convert an HTML string to clean markdown.

        Raises:
            ParseError: If *html* is empty or whitespace-only.
        """
        if not html.strip():
            raise ParseError(
                "HTML content cannot be empty "
                f"(received {len(html)} characters of whitespace/empty content)"
            )
        return convert_html_to_markdown(html, self.config)

    @staticmethod
    def extract_title(html: str) -> str | None:
        """Return the stripped ``<title>`` text, or None if there is no closed title."""
        if "</title>" not in html.lower():
            return None
        soup = BeautifulSoup(html, "html.parser")
        if soup.title is None:
            return None
        title = soup.title.get_text().strip()
        return title or None

    async def convert(self, url: str) -> str:
        """Fetch *url* and return its markdown, with frontmatter if enabled."""
        logger.info("Converting HTML page %s", url)
        html = await fetch_text(
            url, self.http_config, headers=_ACCEPT_HTML, client=self.client
        )

        markdown = self.convert_html(html)
        if not markdown.strip():
            logger.debug("No content left after conversion of %s", url)
            markdown = EMPTY_DOCUMENT_PLACEHOLDER

        if not self.output_config.include_frontmatter:
            return markdown

        now = datetime.now(timezone.utc)
        fields = {
            "converted_at": now.isoformat(),
            "conversion_type": "html",
            "url": url,
        }
        title = self.extract_title(html)
        if title:
            fields["title"] = title
        fields.update(self.output_config.custom_frontmatter_fields)

        frontmatter = build_frontmatter(
            url,
            exporter=f"markdowndown-html-{__version__}",
            download_date=now,
            extra_fields=fields,
        )
        return combine_frontmatter_and_content(frontmatter, markdown)
