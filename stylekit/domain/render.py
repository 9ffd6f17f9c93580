"""
Flatten nested node trees into plain CSS text.

Nesting follows the preprocessor conventions the helpers were written for:

- `&` in a nested selector is replaced by the parent selector, otherwise
  the nested selector becomes a descendant of the parent
- selector lists and media condition lists combine as cartesian products
- media blocks inside rules bubble up to the top level and wrap the rule
- a rule's own declarations are hoisted into a single block emitted ahead
  of its nested rules and media blocks
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from stylekit.domain.errors import StyleError
from stylekit.domain.nodes import Block, Content, Declaration, Media, Node, Rule

logger = logging.getLogger(__name__)

OutputStyle = Literal["expanded", "compressed"]

OUTPUT_STYLES: tuple[OutputStyle, ...] = ("expanded", "compressed")


@dataclass(frozen=True)
class FlatRule:
    """A rule with all nesting resolved."""

    media: str | None
    selector: str
    declarations: tuple[Declaration, ...]


# --- Selector and condition lists ---


def split_list(text: str) -> list[str]:
    """
    Split a comma-separated selector or media list.

    Commas inside brackets, parentheses and quotes do not split.
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None

    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = None
            continue
        if ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    parts.append("".join(current).strip())
    return [p for p in parts if p]


def resolve_selector(parent: str | None, child: str) -> str:
    """Resolve a nested selector against its parent."""
    children = split_list(child)

    if parent is None:
        if any("&" in c for c in children):
            raise StyleError(f"Selector '{child}' uses '&' outside of a rule")
        return ", ".join(children)

    resolved = []
    for p in split_list(parent):
        for c in children:
            resolved.append(c.replace("&", p) if "&" in c else f"{p} {c}")
    return ", ".join(resolved)


def merge_media(outer: str | None, inner: str) -> str:
    """Combine a nested media condition with its enclosing one."""
    if outer is None:
        return ", ".join(split_list(inner))
    return ", ".join(f"{a} and {b}" for a in split_list(outer) for b in split_list(inner))


# --- Flattening ---


def flatten(
    nodes: Iterable[Node],
    selector: str | None = None,
    media: str | None = None,
) -> list[FlatRule]:
    """
    Resolve nesting into a list of flat rules in output order.

    Raises:
        StyleError: If declarations have no enclosing selector, or a node
            is not a Declaration, Rule or Media.
    """
    out: list[FlatRule] = []
    _walk(tuple(nodes), selector, media, out)
    return out


def _walk(
    nodes: tuple[Node, ...],
    selector: str | None,
    media: str | None,
    out: list[FlatRule],
) -> None:
    declarations = tuple(n for n in nodes if isinstance(n, Declaration))
    if declarations:
        if selector is None:
            raise StyleError(
                f"Declaration '{declarations[0].property}' has no enclosing selector"
            )
        out.append(FlatRule(media, selector, declarations))

    for node in nodes:
        if isinstance(node, Rule):
            _walk(node.nodes, resolve_selector(selector, node.selector), media, out)
        elif isinstance(node, Media):
            _walk(node.nodes, selector, merge_media(media, node.condition), out)
        elif not isinstance(node, Declaration):
            raise StyleError(f"Unknown node {node!r}")


# --- Rendering ---


def _group_by_media(rules: list[FlatRule]) -> list[tuple[str | None, list[FlatRule]]]:
    groups: list[tuple[str | None, list[FlatRule]]] = []
    for rule in rules:
        if rule.media is not None and groups and groups[-1][0] == rule.media:
            groups[-1][1].append(rule)
        else:
            groups.append((rule.media, [rule]))
    return groups


def _expanded_rule(rule: FlatRule, indent: int, level: int) -> str:
    pad = " " * (indent * level)
    inner = " " * (indent * (level + 1))
    selector = f",\n{pad}".join(split_list(rule.selector))
    lines = [f"{pad}{selector} {{"]
    lines.extend(f"{inner}{d.text()};" for d in rule.declarations)
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _compressed_rule(rule: FlatRule) -> str:
    selector = ",".join(split_list(rule.selector))
    body = ";".join(d.text(compressed=True) for d in rule.declarations)
    return f"{selector}{{{body}}}"


def render(
    nodes: Iterable[Node],
    style: OutputStyle = "expanded",
    indent: int = 2,
) -> str:
    """
    Render a node tree as CSS text.

    Consecutive rules under the same media condition share one @media block.
    """
    if style not in OUTPUT_STYLES:
        raise ValueError(f"Unknown output style '{style}'. Expected one of {OUTPUT_STYLES}")

    chunks: list[str] = []
    for media, rules in _group_by_media(flatten(nodes)):
        if style == "compressed":
            body = "".join(_compressed_rule(r) for r in rules)
            chunks.append(body if media is None else f"@media {media}{{{body}}}")
            continue

        if media is None:
            chunks.extend(_expanded_rule(r, indent, 0) for r in rules)
        else:
            body = "\n".join(_expanded_rule(r, indent, 1) for r in rules)
            chunks.append(f"@media {media} {{\n{body}\n}}")

    if style == "compressed":
        return "".join(chunks)
    return "\n\n".join(chunks) + "\n" if chunks else ""


class Stylesheet:
    """Top-level collection of nodes rendered into one CSS file."""

    def __init__(self, style: OutputStyle = "expanded", indent: int = 2) -> None:
        self.style = style
        self.indent = indent
        self._block = Block()

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._block.nodes

    def rule(self, selector: str, content: Content = None) -> Stylesheet:
        self._block.rule(selector, content)
        return self

    def media(self, condition: str, content: Content = None) -> Stylesheet:
        self._block.media(condition, content)
        return self

    def add(self, *nodes: Node) -> Stylesheet:
        self._block.add(*nodes)
        return self

    def render(self, style: OutputStyle | None = None) -> str:
        return render(self.nodes, style=style or self.style, indent=self.indent)

    def write(self, path: Path) -> Path:
        """Render to a file, creating parent directories. Returns the path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render())
        logger.info("Wrote stylesheet to %s", path)
        return path
