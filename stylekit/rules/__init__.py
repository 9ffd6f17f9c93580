"""
Rules: the YAML configuration consumed by the style helpers.
"""

from stylekit.rules.loader import (
    DEFAULT_RULES_PATH,
    default_rules_path,
    find_project_root,
    load_rules,
    parse_rules,
)
from stylekit.rules.models import GridRules, ImageRules, OutputRules, StyleRules

__all__ = [
    "DEFAULT_RULES_PATH",
    "GridRules",
    "ImageRules",
    "OutputRules",
    "StyleRules",
    "default_rules_path",
    "find_project_root",
    "load_rules",
    "parse_rules",
]
