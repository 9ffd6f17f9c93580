"""
Responsive component - media queries over breakpoint ranges.

Each helper resolves its breakpoint references through a breakpoint table
and wraps the caller's content in a width media block.

Invariants:
- Ranges are half-open on the upper end
- between_widths(a, b) is the intersection of min_width(a) and max_width(b)
"""

from __future__ import annotations

from collections.abc import Mapping

from stylekit.components.breakpoints import BreakpointRef, resolve
from stylekit.domain.nodes import Content, Media, build
from stylekit.domain.units import Size

from .models import WidthRange


def width_range(
    minimum: BreakpointRef | None = None,
    maximum: BreakpointRef | None = None,
    *,
    table: Mapping[str, Size | str] | None = None,
) -> WidthRange:
    """Resolve breakpoint references into a WidthRange."""
    return WidthRange(
        minimum=resolve(minimum, table) if minimum is not None else None,
        maximum=resolve(maximum, table) if maximum is not None else None,
    )


def media_for(range_: WidthRange, content: Content = None) -> Media:
    """Wrap content in the media block for a width range."""
    return Media(range_.condition(), build(content))


def min_width(
    breakpoint: BreakpointRef,
    content: Content = None,
    *,
    table: Mapping[str, Size | str] | None = None,
) -> Media:
    """Content applies when the viewport is at least the breakpoint wide."""
    return media_for(width_range(minimum=breakpoint, table=table), content)


def max_width(
    breakpoint: BreakpointRef,
    content: Content = None,
    *,
    table: Mapping[str, Size | str] | None = None,
) -> Media:
    """Content applies when the viewport is narrower than the breakpoint."""
    return media_for(width_range(maximum=breakpoint, table=table), content)


def between_widths(
    minimum: BreakpointRef,
    maximum: BreakpointRef,
    content: Content = None,
    *,
    table: Mapping[str, Size | str] | None = None,
) -> Media:
    """Content applies from the first breakpoint up to, not including, the second."""
    return media_for(width_range(minimum, maximum, table=table), content)
