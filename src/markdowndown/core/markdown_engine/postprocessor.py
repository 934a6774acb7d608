"""Markdown postprocessor — whitespace, blank-line, link and heading cleanup.

Each pass is an independent text rewrite. ``postprocess_markdown`` applies
them in a fixed order and trims the result.
"""

from __future__ import annotations

from markdowndown.core.markdown_engine.config import HtmlConverterConfig

_HORIZONTAL_WHITESPACE = frozenset(" \t")
_LINE_BREAKS = frozenset("\r\n")
_HTTP_SCHEMES = ("http://", "https://")
_MAX_HEADING_LEVEL = 6


def postprocess_markdown(
    markdown: str, config: HtmlConverterConfig | None = None
) -> str:
    """Clean up raw converted markdown.

    Order: normalize whitespace, collapse blank lines, clean malformed links,
    fix heading hierarchy, trim the whole document.
    """
    cfg = config or HtmlConverterConfig()

    cleaned = normalize_whitespace(markdown)
    cleaned = collapse_blank_lines(cleaned, cfg.max_blank_lines)
    cleaned = clean_malformed_links(cleaned)
    cleaned = fix_heading_hierarchy(cleaned)
    return cleaned.strip()


def normalize_whitespace(markdown: str) -> str:
    """Collapse runs of spaces and tabs into one space.

    Line breaks pass through untouched and end the current run.
    """
    out: list[str] = []
    in_whitespace = False

    for ch in markdown:
        if ch in _HORIZONTAL_WHITESPACE:
            if not in_whitespace:
                out.append(" ")
                in_whitespace = True
        elif ch in _LINE_BREAKS:
            out.append(ch)
            in_whitespace = False
        else:
            out.append(ch)
            in_whitespace = False

    return "".join(out)


def collapse_blank_lines(markdown: str, max_blank_lines: int = 2) -> str:
    """Truncate every run of blank lines to at most *max_blank_lines*."""
    result: list[str] = []
    consecutive_blanks = 0

    for line in markdown.split("\n"):
        if line.strip():
            consecutive_blanks = 0
            result.append(line)
            continue
        consecutive_blanks += 1
        if consecutive_blanks <= max_blank_lines:
            result.append(line)

    return "\n".join(result)


def clean_malformed_links(markdown: str) -> str:
    """Drop empty-text links to non-http targets and links with no URL."""
    cleaned = _remove_empty_text_links(markdown)
    return _remove_empty_url_links(cleaned)


def _remove_empty_text_links(markdown: str) -> str:
    """Remove ``[](target)`` spans whose target is not an http(s) URL.

    Scanning stops at the first empty-text link that points at http(s);
    later occurrences are left as they are.
    """
    cleaned = markdown
    while True:
        start = cleaned.find("[](")
        if start == -1:
            break
        url_start = start + 3
        end = cleaned.find(")", url_start)
        if end == -1:
            break
        if cleaned[url_start:end].startswith(_HTTP_SCHEMES):
            break
        cleaned = cleaned[:start] + cleaned[_consume_trailing_space(cleaned, end + 1):]
    return cleaned


def _remove_empty_url_links(markdown: str) -> str:
    """Remove ``[text]()`` spans whose URL is empty or blank."""
    cleaned = markdown
    cursor = 0
    while True:
        start = cleaned.find("](", cursor)
        if start == -1:
            break
        url_start = start + 2
        end = cleaned.find(")", url_start)
        if end == -1:
            break

        open_bracket = cleaned.rfind("[", cursor, start)
        if open_bracket == -1 or cleaned[url_start:end].strip():
            cursor = end + 1
            continue

        cleaned = cleaned[:open_bracket] + cleaned[_consume_trailing_space(cleaned, end + 1):]
        cursor = open_bracket
    return cleaned


def _consume_trailing_space(text: str, index: int) -> int:
    if text[index:index + 1] == " ":
        return index + 1
    return index


def fix_heading_hierarchy(markdown: str) -> str:
    """Rewrite heading levels so depth never grows by more than one step.

    The first heading becomes H1 and its raw level is the reference. A
    heading at or above the reference starts a new H1 section, a deeper one
    nests exactly one level below the previous heading, and one between the
    two is placed relative to the reference.
    """
    result: list[str] = []
    current_level = 0
    reference_level: int | None = None

    for line in markdown.split("\n"):
        trimmed = line.strip()
        hashes = len(trimmed) - len(trimmed.lstrip("#"))
        if not 1 <= hashes <= _MAX_HEADING_LEVEL:
            result.append(line)
            continue

        if reference_level is None:
            reference_level = hashes
            level = 1
        elif hashes <= reference_level:
            level = 1
        elif hashes > current_level:
            level = current_level + 1
        else:
            level = hashes - reference_level + 1

        current_level = level
        heading_text = trimmed[hashes:].lstrip()
        result.append(f"{'#' * level} {heading_text}")

    return "\n".join(result)
