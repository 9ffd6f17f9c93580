"""
CSS node model.

Helpers expand into trees of three node types:

- Declaration: a `property: value` pair
- Rule: a selector with nested nodes (`&` refers to the parent selector)
- Media: a media condition with nested nodes

Trees are immutable. `Block` is the mutable builder handed to content
callbacks so callers can append their own declarations after a helper's
fixed output.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Union

from stylekit.domain.units import Size, css_value


@dataclass(frozen=True)
class Declaration:
    """A single `property: value` declaration."""

    property: str
    value: str
    important: bool = False

    def text(self, compressed: bool = False) -> str:
        sep = ":" if compressed else ": "
        suffix = " !important" if self.important else ""
        if compressed:
            suffix = suffix.replace(" ", "")
        return f"{self.property}{sep}{self.value}{suffix}"


@dataclass(frozen=True)
class Rule:
    """A selector scoping nested nodes."""

    selector: str
    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Media:
    """A media condition scoping nested nodes."""

    condition: str
    nodes: tuple[Node, ...] = ()


Node = Union[Declaration, Rule, Media]


class Block:
    """Ordered, appendable sequence of nodes."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: list[Node] = list(nodes)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    def decl(
        self,
        property: str,
        value: Size | str | int | float,
        important: bool = False,
    ) -> Block:
        """Append a declaration."""
        self._nodes.append(Declaration(property, css_value(value), important))
        return self

    def rule(self, selector: str, content: Content = None) -> Block:
        """Append a nested rule built from content."""
        self._nodes.append(Rule(selector, build(content)))
        return self

    def media(self, condition: str, content: Content = None) -> Block:
        """Append a media block built from content."""
        self._nodes.append(Media(condition, build(content)))
        return self

    def add(self, *nodes: Node) -> Block:
        for node in nodes:
            if not isinstance(node, (Declaration, Rule, Media)):
                raise TypeError(f"Expected a Declaration, Rule or Media, got {node!r}")
        self._nodes.extend(nodes)
        return self

    def extend(self, content: Content) -> Block:
        """Append content (callback, node or iterable of nodes)."""
        apply_content(self, content)
        return self

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Block({self._nodes!r})"


Content = Union[Callable[[Block], object], Iterable[Node], Node, None]
"""Trailing content: a callback receiving a Block, or nodes to append."""


def apply_content(block: Block, content: Content) -> None:
    """Append content to a block."""
    if content is None:
        return
    if isinstance(content, (Declaration, Rule, Media)):
        block.add(content)
    elif callable(content):
        content(block)
    elif isinstance(content, str):
        raise TypeError(f"Content must be nodes or a callback, got string {content!r}")
    else:
        block.add(*content)


def build(content: Content) -> tuple[Node, ...]:
    """Expand content into an immutable node tuple."""
    block = Block()
    apply_content(block, content)
    return block.nodes


def decls(**declarations: Size | str | int | float) -> tuple[Declaration, ...]:
    """
    Build declarations from keyword arguments.

    Underscores become hyphens: `decls(margin_top="0")` is `margin-top: 0`.
    """
    return tuple(
        Declaration(name.replace("_", "-"), css_value(value))
        for name, value in declarations.items()
    )
