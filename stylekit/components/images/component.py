"""
Images component - background images with retina variants and image
replacement.

Raster images are expected next to their density variants:
`logo@1x.png`, `logo@2x.png`, `logo@3x.png`. Without retina only
`logo.png` is referenced.
"""

from __future__ import annotations

from stylekit.domain.nodes import Block, Content, Media, Node, decls
from stylekit.domain.units import Size, css_value

from .models import (
    DEFAULT_IMAGE_TYPE,
    DENSITY_2X,
    DENSITY_3X,
    DENSITY_HIGH,
    NONE_URL,
    VECTOR_TYPES,
)

SizeLike = Size | str | int | float


def image_url(path: str) -> str:
    return f'url("{path}")'


def background_image(
    url: str,
    type: str = DEFAULT_IMAGE_TYPE,
    retina: bool = True,
    content: Content = None,
) -> tuple[Node, ...]:
    """
    Background image declarations, with density variants when retina is on.

    Args:
        url: Image path without extension, or "none"
        type: File extension ("png", "jpg", "svg", ...)
        retina: Emit @2x/@3x variants for high-density displays
        content: Extra declarations appended after the fixed output

    Returns:
        Nodes to place inside a rule
    """
    block = Block()

    if url == NONE_URL:
        block.decl("background-image", NONE_URL)
        if retina:
            block.add(Media(DENSITY_HIGH, decls(background_image=NONE_URL)))
    elif type in VECTOR_TYPES:
        block.decl("background-image", image_url(f"{url}.{type}"))
    else:
        base = f"{url}@1x.{type}" if retina else f"{url}.{type}"
        block.decl("background-image", image_url(base))
        if retina:
            block.add(
                Media(DENSITY_2X, decls(background_image=image_url(f"{url}@2x.{type}"))),
                Media(DENSITY_3X, decls(background_image=image_url(f"{url}@3x.{type}"))),
            )

    block.decl("background-repeat", "no-repeat")
    block.extend(content)
    return block.nodes


def image_replacement(
    url: str,
    bg_width: SizeLike,
    bg_height: SizeLike,
    type: str = DEFAULT_IMAGE_TYPE,
    retina: bool = True,
    width: SizeLike | None = None,
    height: SizeLike | None = None,
    content: Content = None,
) -> tuple[Node, ...]:
    """
    Replace an element's text with a background image.

    The element box defaults to the background dimensions.
    """
    background_size = f"{css_value(bg_width)} {css_value(bg_height)}"

    block = Block()
    block.extend(
        background_image(
            url,
            type=type,
            retina=retina,
            content=lambda b: b.decl("background-size", background_size),
        )
    )
    block.decl("display", "block")
    block.decl("text-indent", "-9999px")
    block.decl("overflow", "hidden")
    block.decl("width", bg_width if width is None else width)
    block.decl("height", bg_height if height is None else height)
    block.extend(content)
    return block.nodes

