"""
Tests for the rules file loader.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from stylekit.components.breakpoints import DEFAULT_BREAKPOINTS
from stylekit.domain import ConfigurationError, px
from stylekit.rules import StyleRules, load_rules, parse_rules

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestLoadRules:
    """Loading rules files from disk."""

    def test_fixture_file(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)
        assert rules.breakpoints["tablet"] == "768px"
        assert rules.images.default_type == "jpg"
        assert rules.images.retina is False
        assert rules.grid.gutter == "16px"
        assert rules.output.style == "compressed"
        assert rules.output.indent == 2

    def test_project_rules_file(self) -> None:
        rules = load_rules(PROJECT_ROOT / "stylekit_rules.yaml")
        assert rules.breakpoint_table()["desktop"] == px(1024)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_markdown_wrapped(self, write_rules) -> None:
        path = write_rules(
            "# Site rules\n\n"
            "```yaml\n"
            "breakpoints:\n  small: 600px\n  big: 900px\n"
            "grid:\n  small: small\n  large: big\n"
            "```\n\n"
            "Trailing notes.\n",
            name="rules.md",
        )
        rules = load_rules(path)
        assert rules.breakpoints == {"small": "600px", "big": "900px"}


class TestDefaults:
    """Every section is optional."""

    def test_empty_document(self) -> None:
        rules = parse_rules("")
        assert rules.breakpoints == DEFAULT_BREAKPOINTS
        assert rules.grid.small == "tablet"
        assert rules.images.retina is True
        assert rules.output.style == "expanded"

    def test_model_defaults_match_empty_document(self) -> None:
        assert StyleRules() == parse_rules("")


class TestValidation:
    """Invalid rules are rejected with ConfigurationError."""

    def test_bare_numbers_are_pixels(self) -> None:
        rules = parse_rules(
            "breakpoints:\n  tablet: 768\n  desktop: 1024\n"
        )
        assert rules.breakpoints["tablet"] == "768px"
        assert rules.breakpoint_table()["desktop"] == px(1024)

    def test_invalid_size(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid size"):
            parse_rules("breakpoints:\n  tablet: big\n  desktop: 1024px\n")

    def test_invalid_gutter(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_rules("grid:\n  gutter: wide\n")

    def test_grid_breakpoint_must_exist(self) -> None:
        with pytest.raises(ConfigurationError, match="Grid breakpoint 'tablet'"):
            parse_rules("breakpoints:\n  mobile: 480px\n  desktop: 1024px\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            parse_rules("breakpoints: [")

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            parse_rules("- tablet\n- desktop\n")

    def test_unknown_output_style(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_rules("output:\n  style: nested\n")

    def test_indent_range(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_rules("output:\n  indent: 20\n")
