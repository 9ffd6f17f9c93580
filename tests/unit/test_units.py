"""
Tests for CSS lengths.
"""

from __future__ import annotations

import pytest

from stylekit.domain.units import Size, css_value, format_number, is_zero, px


class TestSizeParse:
    """Parsing size text."""

    def test_pixels(self) -> None:
        assert Size.parse("768px") == Size(768, "px")

    def test_em(self) -> None:
        assert Size.parse("48em") == Size(48, "em")

    def test_percent(self) -> None:
        assert Size.parse("100%") == Size(100, "%")

    def test_unitless_zero(self) -> None:
        assert Size.parse("0") == Size(0, "")

    def test_leading_dot(self) -> None:
        assert Size.parse(".5rem") == Size(0.5, "rem")

    def test_negative(self) -> None:
        assert Size.parse("-10px") == Size(-10, "px")

    def test_unit_is_lowercased(self) -> None:
        assert Size.parse("12PX").unit == "px"

    def test_name_is_not_a_size(self) -> None:
        with pytest.raises(ValueError, match="Invalid size"):
            Size.parse("tablet")

    @pytest.mark.parametrize("text", ["768px", "47.5em", "0", "33.3333333333%"])
    def test_formatted_size_parses_back(self, text: str) -> None:
        size = Size.parse(text)
        assert Size.parse(str(size)) == size


class TestSizeFormat:
    """Formatting sizes as CSS text."""

    def test_whole_number_has_no_decimals(self) -> None:
        assert str(Size(767.0, "px")) == "767px"

    def test_fraction_trims_trailing_zeros(self) -> None:
        assert str(Size(0.5, "rem")) == "0.5rem"

    def test_repeating_fraction_is_rounded(self) -> None:
        assert str(Size(100, "%") / 3) == "33.3333333333%"

    def test_format_number(self) -> None:
        assert format_number(2.0) == "2"
        assert format_number(1.25) == "1.25"


class TestSizeArithmetic:
    """Arithmetic used by the helpers."""

    def test_subtract_one_keeps_unit(self) -> None:
        assert Size.parse("768px") - 1 == Size(767, "px")
        assert Size.parse("48em") - 1 == Size(47, "em")

    def test_subtract_same_unit(self) -> None:
        assert px(20) - px(5) == px(15)

    def test_add_unitless(self) -> None:
        assert px(20) + 1 == px(21)

    def test_incompatible_units(self) -> None:
        with pytest.raises(ValueError, match="Incompatible units"):
            Size(1, "px") - Size(1, "em")

    def test_divide(self) -> None:
        assert Size(100, "%") / 4 == Size(25, "%")


class TestSizeOf:
    """Coercion of size-like arguments."""

    def test_size_passes_through(self) -> None:
        size = px(10)
        assert Size.of(size) is size

    def test_number_becomes_unitless(self) -> None:
        assert Size.of(400) == Size(400, "")

    def test_text_is_parsed(self) -> None:
        assert Size.of("20px") == px(20)

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            Size.of(True)


class TestHelpers:
    """css_value and is_zero."""

    def test_css_value(self) -> None:
        assert css_value(px(20)) == "20px"
        assert css_value(0) == "0"
        assert css_value("auto") == "auto"

    def test_is_zero(self) -> None:
        assert is_zero("0")
        assert is_zero("0px")
        assert is_zero(0)
        assert not is_zero("20px")
        assert not is_zero("auto")
