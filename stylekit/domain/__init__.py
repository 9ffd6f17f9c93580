"""
Domain layer: CSS node model, lengths and the renderer.

No I/O apart from `Stylesheet.write`.
"""

from stylekit.domain.errors import ConfigurationError, StyleError
from stylekit.domain.nodes import (
    Block,
    Content,
    Declaration,
    Media,
    Node,
    Rule,
    apply_content,
    build,
    decls,
)
from stylekit.domain.render import (
    FlatRule,
    OutputStyle,
    Stylesheet,
    flatten,
    merge_media,
    render,
    resolve_selector,
    split_list,
)
from stylekit.domain.units import Size, css_value, format_number, is_zero, px

__all__ = [
    # Errors
    "ConfigurationError",
    "StyleError",
    # Nodes
    "Block",
    "Content",
    "Declaration",
    "Media",
    "Node",
    "Rule",
    "apply_content",
    "build",
    "decls",
    # Rendering
    "FlatRule",
    "OutputStyle",
    "Stylesheet",
    "flatten",
    "merge_media",
    "render",
    "resolve_selector",
    "split_list",
    # Units
    "Size",
    "css_value",
    "format_number",
    "is_zero",
    "px",
]
