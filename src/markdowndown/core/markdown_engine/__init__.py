"""HTML to markdown pipeline: sanitize, convert, postprocess."""

from __future__ import annotations

from bs4 import BeautifulSoup
from markdownify import markdownify

from markdowndown.core.markdown_engine.config import HtmlConverterConfig
from markdowndown.core.markdown_engine.postprocessor import postprocess_markdown
from markdowndown.core.markdown_engine.sanitizer import sanitize_html

__all__ = [
    "HtmlConverterConfig",
    "convert_html_to_markdown",
    "html_to_raw_markdown",
    "postprocess_markdown",
    "sanitize_html",
]


def html_to_raw_markdown(html: str, config: HtmlConverterConfig | None = None) -> str:
    """Convert sanitized HTML to markdown without any cleanup passes.

    Only the ``<body>`` is converted when the document has one.
    """
    cfg = config or HtmlConverterConfig()
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    return markdownify(
        str(root),
        heading_style="ATX",
        bullets="-",
        strip=["img"],
        wrap=True,
        wrap_width=cfg.max_line_width,
    )


def convert_html_to_markdown(
    html: str, config: HtmlConverterConfig | None = None
) -> str:
    """Run the full pipeline over *html* and return clean markdown."""
    if not html:
        return ""

    cfg = config or HtmlConverterConfig()
    cleaned_html = sanitize_html(html, cfg)
    markdown = html_to_raw_markdown(cleaned_html, cfg)
    return postprocess_markdown(markdown, cfg)
