"""
Images component constants.
"""

from __future__ import annotations

NONE_URL = "none"
"""Sentinel url that clears the background image."""

VECTOR_TYPES = frozenset({"svg"})
"""Image types with no density variants."""

DEFAULT_IMAGE_TYPE = "png"

# ═══════════════════════════════════════════════════════════════════════════
# HIGH-DENSITY DISPLAY CONDITIONS
# ═══════════════════════════════════════════════════════════════════════════

DENSITY_2X = "(-webkit-min-device-pixel-ratio: 2), (min-resolution: 192dpi)"
DENSITY_3X = "(-webkit-min-device-pixel-ratio: 3), (min-resolution: 288dpi)"
DENSITY_HIGH = f"{DENSITY_2X}, {DENSITY_3X}"
"""Matches both 2x and 3x displays."""
