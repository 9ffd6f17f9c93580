"""
Breakpoints component models.

A breakpoint reference is either a size, used as-is, or the name of an
entry in a breakpoint table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from stylekit.domain.units import Size


@dataclass(frozen=True)
class BreakpointName:
    """Explicit reference to a named breakpoint."""

    name: str

    def __str__(self) -> str:
        return self.name


BreakpointRef = Union[Size, BreakpointName, str, int, float]
"""A size, a bare number, or a breakpoint name (plain str or BreakpointName)."""


# --- Defaults ---

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "mobile": "480px",
    "tablet": "768px",
    "desktop": "1024px",
    "wide": "1280px",
}
"""Breakpoints used when the consuming project does not configure its own."""
