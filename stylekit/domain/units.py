"""
CSS lengths: a number paired with a unit.

Sizes are parsed from text ("768px", "48em", "100%", "0"), support the small
amount of arithmetic the helpers need, and format back without trailing
zeros.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SIZE_PATTERN = re.compile(r"^\s*(-?(?:\d+(?:\.\d*)?|\.\d+))\s*(%|[a-zA-Z]+)?\s*$")

# Matches the precision Sass uses when printing numbers.
PRECISION = 10


def format_number(value: float) -> str:
    """Format a number the way it appears in CSS ("767", "33.3333333333")."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class Size:
    """A numeric CSS value with a unit ("" for unitless numbers)."""

    value: float
    unit: str = ""

    @classmethod
    def parse(cls, text: str) -> Size:
        """
        Parse size text.

        Raises:
            ValueError: If the text is not a number with an optional unit.
        """
        match = SIZE_PATTERN.match(text)
        if not match:
            raise ValueError(f"Invalid size: {text!r}")
        return cls(float(match.group(1)), (match.group(2) or "").lower())

    @classmethod
    def of(cls, value: Size | str | int | float) -> Size:
        """Coerce a size, size text or bare number into a Size."""
        if isinstance(value, Size):
            return value
        if isinstance(value, bool):
            raise TypeError(f"Expected a size, got {value!r}")
        if isinstance(value, (int, float)):
            return cls(float(value))
        return cls.parse(value)

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def _operand(self, other: Size | int | float) -> float:
        if isinstance(other, Size):
            if other.unit and self.unit and other.unit != self.unit:
                raise ValueError(f"Incompatible units: {self} and {other}")
            return other.value
        return float(other)

    def __add__(self, other: Size | int | float) -> Size:
        return Size(self.value + self._operand(other), self.unit)

    def __sub__(self, other: Size | int | float) -> Size:
        return Size(self.value - self._operand(other), self.unit)

    def __truediv__(self, divisor: int | float) -> Size:
        return Size(self.value / divisor, self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


def px(value: int | float) -> Size:
    """Shorthand for a pixel size."""
    return Size(float(value), "px")


def css_value(value: Size | str | int | float) -> str:
    """Render a size-like argument as CSS text, passing other text through."""
    if isinstance(value, Size):
        return str(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def is_zero(value: Size | str | int | float) -> bool:
    """True when a size-like argument is zero in any unit."""
    try:
        return Size.of(value).is_zero
    except (TypeError, ValueError):
        return False
