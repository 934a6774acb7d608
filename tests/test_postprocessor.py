"""Tests for the markdown postprocessor passes."""

from __future__ import annotations

import pytest

from markdowndown.core.markdown_engine.config import HtmlConverterConfig
from markdowndown.core.markdown_engine.postprocessor import (
    clean_malformed_links,
    collapse_blank_lines,
    fix_heading_hierarchy,
    normalize_whitespace,
    postprocess_markdown,
)


class TestNormalizeWhitespace:
    """Tests for horizontal whitespace collapsing."""

    def test_collapses_spaces_and_tabs(self) -> None:
        text = "This  has   multiple\t\tspaces\nAnd\ttabs"
        assert normalize_whitespace(text) == "This has multiple spaces\nAnd tabs"

    def test_mixed_run_becomes_single_space(self) -> None:
        assert normalize_whitespace("a \t \t b") == "a b"

    def test_line_break_resets_run(self) -> None:
        assert normalize_whitespace("end  \n  start") == "end \n start"

    def test_carriage_returns_preserved(self) -> None:
        assert normalize_whitespace("a  \r\nb") == "a \r\nb"

    def test_consecutive_line_breaks_untouched(self) -> None:
        assert normalize_whitespace("a\n\n\nb") == "a\n\n\nb"

    def test_empty_string(self) -> None:
        assert normalize_whitespace("") == ""


class TestCollapseBlankLines:
    """Tests for blank-line run truncation."""

    def test_default_limit(self) -> None:
        text = "Line 1\n\n\n\nLine 2\n\nLine 3"
        assert collapse_blank_lines(text, 2) == "Line 1\n\n\nLine 2\n\nLine 3"

    def test_zero_removes_all_blank_lines(self) -> None:
        assert collapse_blank_lines("a\n\nb\n\n\nc", 0) == "a\nb\nc"

    def test_runs_within_limit_preserved(self) -> None:
        text = "a\n\nb"
        assert collapse_blank_lines(text, 1) == text

    def test_whitespace_only_lines_count_as_blank(self) -> None:
        text = "a\n  \n\t\n \nb"
        assert collapse_blank_lines(text, 2) == "a\n  \n\t\nb"

    def test_trailing_blank_lines_truncated(self) -> None:
        assert collapse_blank_lines("a\n\n\n\n", 1) == "a\n"


class TestCleanMalformedLinks:
    """Tests for empty-text and empty-URL link removal."""

    def test_removes_both_kinds(self) -> None:
        text = "Text [](broken) more text [good text]() end"
        assert clean_malformed_links(text) == "Text more text end"

    def test_keeps_well_formed_link(self) -> None:
        text = "See [docs](https://example.com) now"
        assert clean_malformed_links(text) == text

    def test_keeps_empty_text_http_link(self) -> None:
        text = "[](https://example.com) text"
        assert clean_malformed_links(text) == text

    def test_scan_stops_at_first_empty_text_http_link(self) -> None:
        text = "[](https://a.com) then [](broken)"
        assert clean_malformed_links(text) == text

    def test_removes_repeated_empty_text_links(self) -> None:
        assert clean_malformed_links("[](a) [](b) end") == "end"

    def test_removes_link_without_trailing_space(self) -> None:
        assert clean_malformed_links("before [](x)") == "before "

    def test_whitespace_only_url_removed(self) -> None:
        assert clean_malformed_links("[text]( ) after") == "after"

    def test_valid_link_before_empty_url_link(self) -> None:
        text = "[keep](https://x.com) [drop]() tail"
        assert clean_malformed_links(text) == "[keep](https://x.com) tail"

    def test_multiple_empty_url_links(self) -> None:
        assert clean_malformed_links("[a]() [b]() c") == "c"

    def test_empty_url_link_never_reaches_into_previous_link(self) -> None:
        text = "[good](https://x.com)]() end"
        assert clean_malformed_links(text) == text

    @pytest.mark.parametrize("text", ["[](no close", "[text](no close", "plain ] ( text"])
    def test_unterminated_links_left_alone(self, text: str) -> None:
        assert clean_malformed_links(text) == text


class TestFixHeadingHierarchy:
    """Tests for heading level normalization."""

    def test_skipped_levels_clamped(self) -> None:
        text = "### First heading\n##### Skipped level\n## Another"
        assert fix_heading_hierarchy(text) == "# First heading\n## Skipped level\n# Another"

    def test_going_back_up_relative_to_reference(self) -> None:
        text = "# A\n### B\n#### C\n## D"
        assert fix_heading_hierarchy(text) == "# A\n## B\n### C\n## D"

    def test_shallower_than_reference_resets_to_h1(self) -> None:
        assert fix_heading_hierarchy("## A\n# B") == "# A\n# B"

    def test_non_heading_lines_untouched(self) -> None:
        text = "intro\n## Title\n  body text  \n- item"
        assert fix_heading_hierarchy(text) == "intro\n# Title\n  body text  \n- item"

    def test_seven_hashes_is_not_a_heading(self) -> None:
        text = "# A\n####### not a heading"
        assert fix_heading_hierarchy(text) == text

    def test_indented_heading_rewritten(self) -> None:
        assert fix_heading_hierarchy("   ## Title") == "# Title"

    def test_heading_text_preserved(self) -> None:
        text = "### Title with  #hash inside"
        assert fix_heading_hierarchy(text) == "# Title with  #hash inside"

    def test_hash_without_space_gets_separator(self) -> None:
        assert fix_heading_hierarchy("#tag") == "# tag"

    def test_no_headings(self) -> None:
        assert fix_heading_hierarchy("just text") == "just text"


class TestPostprocessPipeline:
    """Tests for the full ordered pipeline."""

    def test_all_passes_applied_in_order(self) -> None:
        text = "  \n\n# Title  \n\n\n\n\nText  [](x)  here\n\n"
        assert postprocess_markdown(text) == "# Title\n\n\nText here"

    def test_uses_config_blank_line_limit(self) -> None:
        config = HtmlConverterConfig(max_blank_lines=0)
        assert postprocess_markdown("a\n\n\nb", config) == "a\nb"

    def test_result_is_trimmed(self) -> None:
        assert postprocess_markdown("\n\n  text  \n\n") == "text"

    def test_empty_input(self) -> None:
        assert postprocess_markdown("") == ""
