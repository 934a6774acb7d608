"""Pydantic models shared across converters, config and the CLI."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from markdowndown._version import __version__
from markdowndown.core.markdown_engine.config import HtmlConverterConfig


class UrlType(str, Enum):
    """Kind of source a URL points at."""

    html = "html"
    google_docs = "google_docs"
    office365 = "office365"
    github_issue = "github_issue"


class Frontmatter(BaseModel):
    """Metadata block prepended to converted documents."""

    source_url: str = Field(description="URL or path the document came from")
    exporter: str = Field(default="markdowndown", description="Tool that produced the file")
    date_downloaded: datetime = Field(description="When the source was fetched (UTC)")


class HttpConfig(BaseModel):
    """Settings for fetching remote documents."""

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field(
        default=f"markdowndown/{__version__}", description="User-Agent header value"
    )
    max_retries: int = Field(default=3, ge=0, description="Retries for transient failures")
    retry_delay: float = Field(
        default=1.0, ge=0, description="Base delay between retries in seconds"
    )
    max_redirects: int = Field(default=10, ge=0, description="Redirects followed per request")


class OutputConfig(BaseModel):
    """Settings for the shape of converted output."""

    include_frontmatter: bool = Field(
        default=True, description="Prepend YAML frontmatter to HTML conversions"
    )
    custom_frontmatter_fields: dict[str, str] = Field(
        default_factory=dict, description="Extra key/value pairs added to frontmatter"
    )


class AppConfig(BaseModel):
    """Top-level configuration, usually loaded from ``.markdowndown.yml``."""

    html: HtmlConverterConfig = Field(default_factory=HtmlConverterConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConversionResult(BaseModel):
    """A single converted source."""

    source: str
    url_type: UrlType | None = Field(
        default=None, description="Detected URL type, None for local files"
    )
    markdown: str


class BatchReport(BaseModel):
    """Outcome of converting many sources."""

    results: list[ConversionResult] = Field(default_factory=list)
    errors: dict[str, str] = Field(
        default_factory=dict, description="Source -> error message for failures"
    )
