import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from stylekit.domain.errors import ConfigurationError
from stylekit.rules.models import StyleRules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "stylekit_rules.yaml"


def find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for marker files."""
    current = (start or Path.cwd()).resolve()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def default_rules_path() -> Path:
    return find_project_root() / DEFAULT_RULES_PATH


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block, or the whole content if there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def parse_rules(content: str) -> StyleRules:
    """
    Validate rules from YAML text.
    Raises ConfigurationError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Rules file must contain a mapping at the top level")

    try:
        return StyleRules.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> StyleRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ConfigurationError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    rules = parse_rules(path.read_text())
    logger.info("Loaded %d breakpoints from %s", len(rules.breakpoints), path)
    return rules
