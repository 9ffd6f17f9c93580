"""
Helpers component - small single-purpose style emitters.
"""

from __future__ import annotations

from stylekit.domain.nodes import Block, Content, Node, Rule, build, decls
from stylekit.domain.units import Size

SizeLike = Size | str | int | float


def sticky_footer(
    container: str = "body",
    main: str = "main",
    fixed: str = "header, footer",
) -> tuple[Node, ...]:
    """
    Top-level rules keeping the footer at the bottom of short pages.

    The container fills the viewport as a flex column; fixed parts keep
    their natural height and the main region takes the remaining space.
    The document root must be 100% high for this to work.
    """
    block = Block()
    block.rule("html", decls(height="100%"))
    block.rule(
        container,
        decls(display="flex", flex_direction="column", min_height="100%"),
    )
    block.rule(fixed, decls(flex="none"))
    block.rule(main, decls(flex="1 0 auto"))
    return block.nodes


def unstyled_list() -> tuple[Node, ...]:
    """Remove list markers and indentation."""
    return decls(list_style="none", margin="0", padding="0")


def circle(diameter: SizeLike) -> tuple[Node, ...]:
    """A square box with fully rounded corners."""
    return decls(width=diameter, height=diameter, border_radius=diameter)


def external_link_selector(domain: str, base: str = "&") -> str:
    """
    Selector for links leaving `domain`.

    Matches references containing "//" that do not contain the domain.
    """
    return f'{base}[href*="//"]:not([href*="{domain}"])'


def external_links(domain: str, content: Content = None, base: str = "&") -> Rule:
    """Scope content to links leaving `domain`."""
    return Rule(external_link_selector(domain, base), build(content))
