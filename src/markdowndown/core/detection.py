"""URL validation, type detection and tracking-parameter cleanup."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from markdowndown.core.errors import InvalidUrlError
from markdowndown.core.models import UrlType

TRACKING_PARAMS = frozenset({
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "ref",
    "source",
    "campaign",
    "medium",
    "term",
    "gclid",
    "fbclid",
    "msclkid",
    "_ga",
    "_gid",
    "mc_cid",
    "mc_eid",
})

# (domain pattern, path prefix, type); "*." matches the domain and any subdomain
_PATTERNS: tuple[tuple[str, str | None, UrlType], ...] = (
    ("docs.google.com", "/document/", UrlType.google_docs),
    ("drive.google.com", "/file/", UrlType.google_docs),
    ("*.sharepoint.com", None, UrlType.office365),
    ("onedrive.live.com", None, UrlType.office365),
    ("1drv.ms", None, UrlType.office365),
    ("*.office.com", None, UrlType.office365),
)


def validate_url(url: str) -> str:
    """Return the trimmed URL, raising if it is not an http(s) URL with a host."""
    trimmed = url.strip()
    if not trimmed.startswith(("http://", "https://")):
        raise InvalidUrlError(url, "must start with http:// or https://")
    try:
        parts = urlsplit(trimmed)
    except ValueError as exc:
        raise InvalidUrlError(url, str(exc)) from exc
    if not parts.hostname:
        raise InvalidUrlError(url, "missing host")
    return trimmed


def detect_url_type(url: str) -> UrlType:
    """Classify an http(s) URL; anything unrecognized is plain HTML."""
    parts = urlsplit(validate_url(url))
    host = (parts.hostname or "").lower()

    if _is_github_issue(host, parts.path):
        return UrlType.github_issue

    for domain, path_prefix, url_type in _PATTERNS:
        if not _matches_domain(host, domain):
            continue
        if path_prefix is None or parts.path.startswith(path_prefix):
            return url_type

    return UrlType.html


def normalize_url(url: str) -> str:
    """Strip tracking query parameters, keeping the rest in order."""
    parts = urlsplit(validate_url(url))
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in TRACKING_PARAMS
    ]
    return urlunsplit(parts._replace(query=urlencode(query)))


def _matches_domain(host: str, pattern: str) -> bool:
    if pattern.startswith("*."):
        base = pattern[2:]
        return host == base or host.endswith("." + base)
    return host == pattern


def _is_github_issue(host: str, path: str) -> bool:
    segments = [s for s in path.split("/") if s]
    if host == "github.com":
        return (
            len(segments) >= 4
            and segments[2] in ("issues", "pull")
            and segments[3].isdigit()
        )
    if host == "api.github.com":
        return (
            len(segments) >= 5
            and segments[0] == "repos"
            and segments[3] in ("issues", "pulls")
            and segments[4].isdigit()
        )
    return False
