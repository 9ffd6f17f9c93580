"""
Flexgrid component - flexbox column helpers.
"""

from .component import (
    DEFAULT_LARGE,
    DEFAULT_SMALL,
    column_width,
    flex_column_grid,
    flex_columns,
)

__all__ = [
    "DEFAULT_LARGE",
    "DEFAULT_SMALL",
    "column_width",
    "flex_column_grid",
    "flex_columns",
]
