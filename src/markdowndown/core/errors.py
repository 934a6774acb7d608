"""Exception types raised outside the pure conversion pipeline."""

from __future__ import annotations


class MarkdownError(Exception):
    """Base class for all markdowndown errors."""


class NetworkError(MarkdownError):
    """A fetch failed at the transport layer or with an error status."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        timed_out: bool = False,
        retryable: bool | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.timed_out = timed_out
        self._retryable = retryable

    @property
    def is_retryable(self) -> bool:
        """Timeouts, connection failures, 429 and 5xx are worth retrying."""
        if self._retryable is not None:
            return self._retryable
        if self.status_code is None:
            return True
        return self.status_code == 429 or self.status_code >= 500


class ParseError(MarkdownError):
    """Content could not be turned into markdown."""


class InvalidUrlError(MarkdownError):
    """The given string is not a usable http(s) URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"Invalid URL: {url}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.url = url


class ContentError(MarkdownError):
    """A local source is missing, unreadable, or empty."""


class ConfigError(MarkdownError):
    """The configuration file could not be loaded."""


class UnsupportedSourceError(MarkdownError):
    """The source was recognized but no converter handles its type."""
