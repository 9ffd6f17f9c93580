"""
Responsive component - breakpoint media queries.
"""

from .component import between_widths, max_width, media_for, min_width, width_range
from .models import WidthRange

__all__ = [
    "WidthRange",
    "between_widths",
    "max_width",
    "media_for",
    "min_width",
    "width_range",
]
