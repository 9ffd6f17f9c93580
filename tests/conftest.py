from pathlib import Path

import pytest

from stylekit.components.breakpoints import BreakpointTable

RULES_YAML = """\
breakpoints:
  mobile: 480px
  tablet: 768px
  desktop: 1024px

images:
  default_type: jpg
  retina: false

grid:
  small: mobile
  large: tablet
  gutter: 16px
  row_spacing: 24px

output:
  style: compressed
"""


@pytest.fixture
def table() -> BreakpointTable:
    return BreakpointTable({"mobile": "480px", "tablet": "768px", "desktop": "1024px"})


@pytest.fixture
def write_rules(tmp_path):
    """Write rules text to a temporary file and return its path."""

    def _write(content: str, name: str = "stylekit_rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def rules_path(write_rules) -> Path:
    return write_rules(RULES_YAML)
