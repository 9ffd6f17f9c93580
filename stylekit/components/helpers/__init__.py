"""
Helpers component - sticky footer, lists, circles and external links.
"""

from .component import (
    circle,
    external_link_selector,
    external_links,
    sticky_footer,
    unstyled_list,
)

__all__ = [
    "circle",
    "external_link_selector",
    "external_links",
    "sticky_footer",
    "unstyled_list",
]
