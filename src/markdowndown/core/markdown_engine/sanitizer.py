"""HTML sanitizer that strips unwanted elements before markdown conversion.

Removal works on the raw markup text rather than a parsed tree, so everything
outside a removed element comes back byte-for-byte. Unterminated elements are
left alone by the tag-based passes.
"""

from __future__ import annotations

import logging
import re

from markdowndown.core.markdown_engine.config import HtmlConverterConfig

logger = logging.getLogger(__name__)

NAVIGATION_CLASSES = ("nav", "navigation")
SIDEBAR_CLASSES = ("sidebar", "side-bar")
AD_CLASSES = ("ad", "ads", "advertisement")

_OPENING_TAG_NAME = re.compile(r"<([A-Za-z][\w:-]*)")
_TAG_OPEN = re.compile(r"<(\w+)")
_CLASS_ATTRIBUTE = re.compile(r"""class\s*=\s*["']([^"']*)["']""", re.IGNORECASE)


def sanitize_html(
    html: str, config: HtmlConverterConfig | None = None
) -> str:
    """Strip unwanted elements from HTML, leaving the main content.

    Passes run in a fixed order (scripts/styles, navigation, sidebars, ads),
    each one over the output of the previous pass.
    """
    if not html:
        return ""

    cfg = config or HtmlConverterConfig()
    cleaned = html

    if cfg.remove_scripts_styles:
        cleaned = remove_scripts_and_styles(cleaned)
    if cfg.remove_navigation:
        cleaned = remove_navigation_elements(cleaned)
    if cfg.remove_sidebars:
        cleaned = remove_sidebar_elements(cleaned)
    if cfg.remove_ads:
        cleaned = remove_advertisement_elements(cleaned)

    return cleaned


def remove_scripts_and_styles(html: str) -> str:
    """Remove ``<script>`` and ``<style>`` elements with their content."""
    result = remove_elements_by_tag(html, "script")
    return remove_elements_by_tag(result, "style")


def remove_navigation_elements(html: str) -> str:
    """Remove ``<nav>`` elements and elements carrying a nav class."""
    result = remove_elements_by_tag(html, "nav")
    for class_name in NAVIGATION_CLASSES:
        result = remove_elements_by_class(result, class_name)
    return result


def remove_sidebar_elements(html: str) -> str:
    """Remove ``<aside>`` elements and elements carrying a sidebar class."""
    result = remove_elements_by_tag(html, "aside")
    for class_name in SIDEBAR_CLASSES:
        result = remove_elements_by_class(result, class_name)
    return result


def remove_advertisement_elements(html: str) -> str:
    """Remove elements carrying an advertisement class."""
    result = html
    for class_name in AD_CLASSES:
        result = remove_elements_by_class(result, class_name)
    return result


class _MarkupScanner:
    """Forward searches over one document that remember their misses.

    Once a closing tag is known to be absent after some offset, later lookups
    past that offset return at once, so a removal pass reads the document a
    bounded number of times no matter how many elements are left unclosed.
    """

    def __init__(self, html: str) -> None:
        self.html = html
        self._gt_from = -1
        self._gt = -1
        self._closing_patterns: dict[str, re.Pattern[str]] = {}
        self._missing_from: dict[str, int] = {}

    def tag_end(self, start: int) -> int:
        """Index of the first ``>`` at or after *start*, or -1."""
        if 0 <= self._gt_from <= start and (self._gt == -1 or self._gt >= start):
            return self._gt
        self._gt_from = start
        self._gt = self.html.find(">", start)
        return self._gt

    def closing_tag(self, tag_name: str, start: int) -> re.Match[str] | None:
        """First ``</tag>`` (any case, optional trailing space) at or after *start*."""
        key = tag_name.lower()
        missing_from = self._missing_from.get(key)
        if missing_from is not None and start >= missing_from:
            return None

        pattern = self._closing_patterns.get(key)
        if pattern is None:
            pattern = re.compile(rf"</{re.escape(key)}\s*>", re.IGNORECASE)
            self._closing_patterns[key] = pattern

        match = pattern.search(self.html, start)
        if match is None:
            self._missing_from[key] = (
                start if missing_from is None else min(start, missing_from)
            )
        return match


def remove_elements_by_tag(html: str, tag_name: str) -> str:
    """Remove every ``<tag ...>...</tag>`` and ``<tag .../>`` occurrence.

    Matching is case-insensitive and non-greedy. An opening tag ending in
    ``/>`` is removed on its own and never swallows content up to a later
    closing tag. Opening tags with no closing tag after them are kept.
    """
    try:
        opener = re.compile(rf"<{re.escape(tag_name)}(?=\s|/?>)", re.IGNORECASE)
    except re.error as exc:
        logger.debug("Skipping <%s> removal, pattern failed to compile: %s", tag_name, exc)
        return html

    scanner = _MarkupScanner(html)
    pieces: list[str] = []
    cursor = 0
    pos = 0

    while True:
        match = opener.search(html, pos)
        if match is None:
            break
        start = match.start()
        end = scanner.tag_end(match.end())
        if end == -1:
            break

        if end > match.end() and html[end - 1] == "/":
            remove_end = end + 1
        else:
            closing = scanner.closing_tag(tag_name, end + 1)
            if closing is None:
                pos = start + 1
                continue
            remove_end = closing.end()

        pieces.append(html[cursor:start])
        cursor = pos = remove_end

    pieces.append(html[cursor:])
    return "".join(pieces)


def remove_elements_by_class(html: str, class_name: str) -> str:
    """Remove elements of any tag whose class attribute holds *class_name*.

    The class must appear as a whole word (``site-nav`` matches ``nav``,
    ``navbar`` does not). Each matching element is cut through the first
    closing tag of the same name. When nothing is removed, a literal
    ``class="<name>"`` scan handles the leftovers.
    """
    try:
        token = re.compile(rf"\b{re.escape(class_name)}\b", re.IGNORECASE)
    except re.error as exc:
        logger.debug("Class pattern for %r failed to compile: %s", class_name, exc)
        return _remove_elements_by_class_fallback(html, class_name)

    scanner = _MarkupScanner(html)
    pieces: list[str] = []
    cursor = 0
    pos = 0
    removed = 0

    while True:
        match = _TAG_OPEN.search(html, pos)
        if match is None:
            break
        start = match.start()
        end = scanner.tag_end(match.end())
        if end == -1:
            break

        attributes = html[match.end():end]
        if not any(
            token.search(attr.group(1)) for attr in _CLASS_ATTRIBUTE.finditer(attributes)
        ):
            pos = end + 1
            continue

        closing = scanner.closing_tag(match.group(1), end + 1)
        if closing is None:
            pos = start + 1
            continue

        pieces.append(html[cursor:start])
        cursor = pos = closing.end()
        removed += 1

    if removed == 0:
        return _remove_elements_by_class_fallback(html, class_name)
    pieces.append(html[cursor:])
    return "".join(pieces)


def _remove_elements_by_class_fallback(html: str, class_name: str) -> str:
    """Excise elements holding the literal ``class="<name>"`` attribute.

    Walks back to the ``<`` opening the tag, reads the tag name and cuts
    through the first matching closing tag. Without a closing tag only the
    opening tag is removed.
    """
    needle = f'class="{class_name}"'
    scanner = _MarkupScanner(html)
    pieces: list[str] = []
    cursor = 0
    search_from = 0
    scanned_to = 0
    last_lt = -1

    while True:
        class_pos = html.find(needle, search_from)
        if class_pos == -1:
            break
        skip_to = class_pos + len(needle)

        tag_start = html.rfind("<", max(cursor, scanned_to), class_pos)
        if tag_start == -1 and last_lt >= cursor:
            tag_start = last_lt
        scanned_to = class_pos
        last_lt = tag_start
        if tag_start == -1:
            search_from = skip_to
            continue

        tag_end = scanner.tag_end(tag_start)
        if tag_end == -1:
            break
        if tag_end < class_pos:
            # attribute text outside of any tag
            search_from = skip_to
            continue

        open_end = tag_end + 1
        match = _OPENING_TAG_NAME.match(html, tag_start, open_end)
        if match is None:
            search_from = skip_to
            continue

        closing = scanner.closing_tag(match.group(1), open_end)
        pieces.append(html[cursor:tag_start])
        cursor = search_from = open_end if closing is None else closing.end()

    pieces.append(html[cursor:])
    return "".join(pieces)
