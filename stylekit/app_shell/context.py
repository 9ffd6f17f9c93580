from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from stylekit.components.breakpoints import BreakpointRef, BreakpointTable
from stylekit.components.flexgrid import flex_column_grid
from stylekit.components.images import background_image, image_replacement
from stylekit.components.responsive import (
    WidthRange,
    between_widths,
    max_width,
    min_width,
    width_range,
)
from stylekit.domain.nodes import Content, Media, Node
from stylekit.domain.render import Stylesheet
from stylekit.domain.units import Size
from stylekit.rules.loader import load_rules
from stylekit.rules.models import StyleRules

SizeLike = Size | str | int | float


@dataclass
class StyleContext:
    """
    Style helpers bound to a loaded rules file.

    Breakpoint lookups use the configured table, and image and grid helpers
    take their defaults from the rules.
    """

    rules: StyleRules
    table: BreakpointTable

    @classmethod
    def create(cls, rules: StyleRules | None = None) -> StyleContext:
        if rules is None:
            rules = StyleRules()
        return cls(rules=rules, table=rules.breakpoint_table())

    @classmethod
    def from_file(cls, path: Path) -> StyleContext:
        return cls.create(load_rules(path))

    # --- Breakpoints ---

    def resolve(self, value: BreakpointRef) -> Size:
        return self.table.resolve(value)

    def width_range(
        self,
        minimum: BreakpointRef | None = None,
        maximum: BreakpointRef | None = None,
    ) -> WidthRange:
        return width_range(minimum, maximum, table=self.table)

    def min_width(self, breakpoint: BreakpointRef, content: Content = None) -> Media:
        return min_width(breakpoint, content, table=self.table)

    def max_width(self, breakpoint: BreakpointRef, content: Content = None) -> Media:
        return max_width(breakpoint, content, table=self.table)

    def between_widths(
        self,
        minimum: BreakpointRef,
        maximum: BreakpointRef,
        content: Content = None,
    ) -> Media:
        return between_widths(minimum, maximum, content, table=self.table)

    # --- Images ---

    def background_image(
        self,
        url: str,
        type: str | None = None,
        retina: bool | None = None,
        content: Content = None,
    ) -> tuple[Node, ...]:
        images = self.rules.images
        return background_image(
            url,
            type=type or images.default_type,
            retina=images.retina if retina is None else retina,
            content=content,
        )

    def image_replacement(
        self,
        url: str,
        bg_width: SizeLike,
        bg_height: SizeLike,
        type: str | None = None,
        retina: bool | None = None,
        width: SizeLike | None = None,
        height: SizeLike | None = None,
        content: Content = None,
    ) -> tuple[Node, ...]:
        images = self.rules.images
        return image_replacement(
            url,
            bg_width,
            bg_height,
            type=type or images.default_type,
            retina=images.retina if retina is None else retina,
            width=width,
            height=height,
            content=content,
        )

    # --- Grid ---

    def flex_column_grid(
        self,
        child: str,
        gutter: SizeLike | None = None,
        row_spacing: SizeLike | None = None,
    ) -> tuple[Node, ...]:
        grid = self.rules.grid
        return flex_column_grid(
            child,
            gutter=grid.gutter if gutter is None else gutter,
            row_spacing=grid.row_spacing if row_spacing is None else row_spacing,
            small=grid.small,
            large=grid.large,
            table=self.table,
        )

    # --- Output ---

    def stylesheet(self) -> Stylesheet:
        output = self.rules.output
        return Stylesheet(style=output.style, indent=output.indent)
