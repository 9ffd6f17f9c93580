"""
Breakpoints component - named breakpoint table and resolver.

Invariants:
- Sizes resolve to themselves
- Names resolve to exactly the configured size
- Unknown names are a fatal configuration error
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from stylekit.domain.errors import ConfigurationError
from stylekit.domain.units import Size

from .models import DEFAULT_BREAKPOINTS, BreakpointName, BreakpointRef


class BreakpointTable(Mapping[str, Size]):
    """Read-only mapping of breakpoint names to sizes."""

    def __init__(self, breakpoints: Mapping[str, Size | str | int | float]) -> None:
        table: dict[str, Size] = {}
        for name, value in breakpoints.items():
            try:
                table[name] = Size.of(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid size for breakpoint '{name}': {value!r}"
                ) from e
        self._table = MappingProxyType(table)

    def __getitem__(self, name: str) -> Size:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v}" for k, v in self._table.items())
        return f"BreakpointTable({items})"

    def names(self) -> list[str]:
        """Breakpoint names in ascending size order."""
        return sorted(self._table, key=lambda n: (self._table[n].unit, self._table[n].value))

    def resolve(self, value: BreakpointRef) -> Size:
        return resolve(value, self)


DEFAULT_TABLE = BreakpointTable(DEFAULT_BREAKPOINTS)


def resolve(
    value: BreakpointRef,
    table: Mapping[str, Size | str] | None = None,
) -> Size:
    """
    Resolve a breakpoint reference to a size.

    Args:
        value: A Size or bare number (returned unchanged) or a breakpoint name
        table: Breakpoint table; the default table when omitted

    Returns:
        The resolved size

    Raises:
        ConfigurationError: If the name is not in the table
        TypeError: If the value is neither a size nor a name
    """
    if table is None:
        table = DEFAULT_TABLE

    if isinstance(value, Size):
        return value

    # bool is an int subclass but never a meaningful size
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Size(float(value))

    if isinstance(value, BreakpointName):
        value = value.name

    if isinstance(value, str):
        if value not in table:
            raise ConfigurationError(f"no such breakpoint: '{value}'")
        try:
            return Size.of(table[value])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid size for breakpoint '{value}': {table[value]!r}"
            ) from e

    raise TypeError(
        f"Breakpoint must be a size or a breakpoint name, got {type(value).__name__}"
    )
