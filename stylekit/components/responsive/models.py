"""
Responsive component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from stylekit.domain.units import Size


@dataclass(frozen=True)
class WidthRange:
    """
    Viewport width range, half-open on the upper end: [minimum, maximum).

    The upper bound is emitted as `max-width: maximum - 1` so that a
    `max-width` range and a `min-width` range on the same breakpoint never
    match the same viewport width.
    """

    minimum: Size | None = None
    maximum: Size | None = None

    def condition(self) -> str:
        """Media condition text for this range."""
        parts = []
        if self.minimum is not None:
            parts.append(f"(min-width: {self.minimum})")
        if self.maximum is not None:
            parts.append(f"(max-width: {self.maximum - 1})")
        if not parts:
            raise ValueError("Width range has no bounds")
        return " and ".join(parts)

    def contains(self, width: Size | int | float) -> bool:
        """
        True when a viewport of this width matches the emitted condition.

        Raises:
            ValueError: If the width and a bound use different units
        """
        size = Size.of(width)
        if self.minimum is not None and (size - self.minimum).value < 0:
            return False
        if self.maximum is not None and (size - (self.maximum - 1)).value > 0:
            return False
        return True

    def intersect(self, other: WidthRange) -> WidthRange:
        """
        Range matched by both ranges.

        Raises:
            ValueError: If the bounds being compared use different units
        """
        return WidthRange(
            minimum=_tighter(self.minimum, other.minimum, larger=True),
            maximum=_tighter(self.maximum, other.maximum, larger=False),
        )


def _tighter(a: Size | None, b: Size | None, larger: bool) -> Size | None:
    if a is None:
        return b
    if b is None:
        return a
    difference = (a - b).value
    if larger:
        return a if difference >= 0 else b
    return a if difference <= 0 else b
