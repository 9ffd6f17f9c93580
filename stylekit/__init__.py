"""
stylekit - stylesheet helpers that expand into plain CSS.

Breakpoint media queries, retina background images, image replacement,
flexbox column grids and a handful of small layout helpers, plus the
renderer that flattens them into CSS text.
"""

from stylekit.components.breakpoints import (
    DEFAULT_TABLE,
    BreakpointName,
    BreakpointTable,
    resolve,
)
from stylekit.components.flexgrid import flex_column_grid, flex_columns
from stylekit.components.helpers import (
    circle,
    external_link_selector,
    external_links,
    sticky_footer,
    unstyled_list,
)
from stylekit.components.images import background_image, image_replacement
from stylekit.components.responsive import (
    WidthRange,
    between_widths,
    max_width,
    min_width,
)
from stylekit.domain import (
    Block,
    ConfigurationError,
    Declaration,
    Media,
    Rule,
    Size,
    StyleError,
    Stylesheet,
    px,
    render,
)

__version__ = "0.1.0"

__all__ = [
    # Breakpoints
    "DEFAULT_TABLE",
    "BreakpointName",
    "BreakpointTable",
    "resolve",
    # Responsive
    "WidthRange",
    "between_widths",
    "max_width",
    "min_width",
    # Images
    "background_image",
    "image_replacement",
    # Grid
    "flex_column_grid",
    "flex_columns",
    # Helpers
    "circle",
    "external_link_selector",
    "external_links",
    "sticky_footer",
    "unstyled_list",
    # Domain
    "Block",
    "ConfigurationError",
    "Declaration",
    "Media",
    "Rule",
    "Size",
    "StyleError",
    "Stylesheet",
    "px",
    "render",
]
