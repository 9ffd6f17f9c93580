"""
Error types shared across stylekit.

Configuration problems are fatal at build time: callers are expected to let
them propagate and abort the build rather than emit a partial stylesheet.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when breakpoint or rules configuration is missing or invalid."""


class StyleError(ValueError):
    """Raised when a node tree cannot be flattened into plain CSS."""
