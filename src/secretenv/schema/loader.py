"""Read schema rules from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from secretenv.errors import ConfigNotFoundError, SchemaParseError
from secretenv.schema.types import SchemaRule, to_rules

__all__ = ["load_schema"]

logger = logging.getLogger(__name__)


def _read(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"Invalid JSON in {path}: {e}", cause=e) from e
    if suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SchemaParseError(f"Invalid YAML in {path}: {e}", cause=e) from e
    raise SchemaParseError(f"Unsupported schema format: {path.suffix or path.name}")


def load_schema(path: str | Path) -> list[SchemaRule]:
    """Load schema rules from a YAML or JSON file.

    The document root is either a list of rules or a mapping with a
    ``rules`` list.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        SchemaParseError: If the file or any rule in it is malformed.
    """
    schema_path = Path(path).resolve()
    if not schema_path.is_file():
        raise ConfigNotFoundError(config_path=str(schema_path))

    data = _read(schema_path)
    if isinstance(data, dict):
        if "rules" not in data:
            raise SchemaParseError(f"Schema mapping in {schema_path} missing required 'rules' key")
        data = data["rules"]

    if not isinstance(data, list):
        raise SchemaParseError(
            f"Schema in {schema_path} must be a list of rules, got {type(data).__name__}"
        )

    rules = to_rules(data)
    logger.debug(f"Loaded {len(rules)} schema rules from {schema_path}")
    return rules
