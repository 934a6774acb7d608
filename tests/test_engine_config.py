"""Tests for the markdown engine configuration model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from markdowndown.core.markdown_engine.config import HtmlConverterConfig


class TestDefaults:
    """Tests for documented default values."""

    def test_default_values(self) -> None:
        config = HtmlConverterConfig()
        assert config.max_line_width == 120
        assert config.remove_scripts_styles is True
        assert config.remove_navigation is True
        assert config.remove_sidebars is True
        assert config.remove_ads is True
        assert config.max_blank_lines == 2

    def test_fields_independently_settable(self) -> None:
        config = HtmlConverterConfig(
            max_line_width=80, remove_navigation=False, max_blank_lines=3
        )
        assert config.max_line_width == 80
        assert config.remove_navigation is False
        assert config.remove_scripts_styles is True
        assert config.max_blank_lines == 3


class TestImmutability:
    """Tests for the frozen model."""

    def test_assignment_rejected(self) -> None:
        config = HtmlConverterConfig()
        with pytest.raises(ValidationError):
            config.max_blank_lines = 5

    def test_model_copy_creates_variant(self) -> None:
        base = HtmlConverterConfig()
        variant = base.model_copy(update={"remove_ads": False})
        assert variant.remove_ads is False
        assert base.remove_ads is True

    def test_equal_configs_compare_equal(self) -> None:
        assert HtmlConverterConfig() == HtmlConverterConfig()


class TestValidation:
    """Tests for field constraints."""

    def test_negative_blank_lines_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HtmlConverterConfig(max_blank_lines=-1)

    def test_zero_blank_lines_allowed(self) -> None:
        assert HtmlConverterConfig(max_blank_lines=0).max_blank_lines == 0

    def test_zero_line_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HtmlConverterConfig(max_line_width=0)
