"""
Flexgrid component - flexbox column layouts.

`flex_columns` lays a container's children out in rows of N equal columns
separated by a gutter. `flex_column_grid` switches between two and three
columns across breakpoint ranges.
"""

from __future__ import annotations

from collections.abc import Mapping

from stylekit.components.breakpoints import BreakpointRef
from stylekit.components.responsive import between_widths, min_width
from stylekit.domain.nodes import Block, Node, decls
from stylekit.domain.units import Size, css_value, is_zero

SizeLike = Size | str | int | float

DEFAULT_SMALL = "tablet"
DEFAULT_LARGE = "desktop"


def column_width(columns: int, gutter: SizeLike = "0") -> str:
    """Width of one column: an equal share of the row less the gutter."""
    share = Size(100.0, "%") / columns
    if is_zero(gutter):
        return str(share)
    return f"calc({share} - {css_value(gutter)})"


def flex_columns(
    child: str,
    columns: int,
    gutter: SizeLike = "0",
    row_spacing: SizeLike = "0",
) -> tuple[Node, ...]:
    """
    Flex-wrap column layout for the children matching `child`.

    Args:
        child: Selector of the column items, relative to the container
        columns: Items per row
        gutter: Horizontal space between items in a row
        row_spacing: Vertical space between rows

    Raises:
        ValueError: If columns is less than 1
    """
    if columns < 1:
        raise ValueError(f"Column count must be at least 1, got {columns}")

    item = f"& > {child}"

    block = Block()
    block.rule("&", decls(display="flex", flex_wrap="wrap"))
    block.rule(item, decls(width=column_width(columns, gutter), margin_top=row_spacing))
    block.rule(f"{item} + {child}", decls(margin_left=gutter))
    # Row starts
    block.rule(f"{item}:nth-child({columns}n + 1)", decls(margin_left="0"))
    # First row
    for index in range(1, columns + 1):
        block.rule(f"{item}:nth-child({index})", decls(margin_top="0"))
    return block.nodes


def flex_column_grid(
    child: str,
    gutter: SizeLike = "0",
    row_spacing: SizeLike = "0",
    small: BreakpointRef = DEFAULT_SMALL,
    large: BreakpointRef = DEFAULT_LARGE,
    *,
    table: Mapping[str, Size | str] | None = None,
) -> tuple[Node, ...]:
    """Two columns between `small` and `large`, three columns from `large` up."""
    return (
        between_widths(
            small, large, flex_columns(child, 2, gutter, row_spacing), table=table
        ),
        min_width(large, flex_columns(child, 3, gutter, row_spacing), table=table),
    )
