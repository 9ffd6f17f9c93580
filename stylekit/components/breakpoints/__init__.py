"""
Breakpoints component - named breakpoint lookup.
"""

from .component import DEFAULT_TABLE, BreakpointTable, resolve
from .models import DEFAULT_BREAKPOINTS, BreakpointName, BreakpointRef

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_TABLE",
    "BreakpointName",
    "BreakpointRef",
    "BreakpointTable",
    "resolve",
]
