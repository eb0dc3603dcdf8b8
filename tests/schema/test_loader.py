"""Tests for load_schema."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from secretenv.errors import ConfigNotFoundError, SchemaParseError
from secretenv.schema.loader import load_schema
from secretenv.schema.types import SchemaRule


class TestLoadSchema:
    def test_yaml_list(self, write_env: Callable[..., Path]) -> None:
        path = write_env(
            """\
            - name: PORT
              type: integer
              required: true
              min: 1
              max: 65535
            - name: LOG_LEVEL
              type: string
              lowercase: true
            """,
            name="env.schema.yaml",
        )
        rules = load_schema(path)
        assert rules == [
            SchemaRule(name="PORT", type="integer", required=True, min=1, max=65535),
            SchemaRule(name="LOG_LEVEL", type="string", lowercase=True),
        ]

    def test_yaml_mapping_with_rules(self, write_env: Callable[..., Path]) -> None:
        path = write_env(
            """\
            rules:
              - name: DEBUG
                type: boolean
            """,
            name="env.schema.yml",
        )
        assert load_schema(path) == [SchemaRule(name="DEBUG", type="boolean")]

    def test_json(self, write_env: Callable[..., Path]) -> None:
        path = write_env('[{"name": "T", "type": "time", "required": true}]', name="schema.json")
        assert load_schema(path) == [SchemaRule(name="T", type="time", required=True)]

    def test_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            load_schema(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_env: Callable[..., Path]) -> None:
        path = write_env("rules: [unclosed", name="bad.yaml")
        with pytest.raises(SchemaParseError, match="Invalid YAML"):
            load_schema(path)

    def test_invalid_json(self, write_env: Callable[..., Path]) -> None:
        path = write_env("[{", name="bad.json")
        with pytest.raises(SchemaParseError, match="Invalid JSON"):
            load_schema(path)

    def test_mapping_without_rules(self, write_env: Callable[..., Path]) -> None:
        path = write_env("other: 1\n", name="schema.yaml")
        with pytest.raises(SchemaParseError, match="'rules'"):
            load_schema(path)

    def test_wrong_root_type(self, write_env: Callable[..., Path]) -> None:
        path = write_env("just text\n", name="schema.yaml")
        with pytest.raises(SchemaParseError, match="must be a list"):
            load_schema(path)

    def test_empty_file(self, write_env: Callable[..., Path]) -> None:
        path = write_env("", name="schema.yaml")
        with pytest.raises(SchemaParseError):
            load_schema(path)

    def test_unsupported_format(self, write_env: Callable[..., Path]) -> None:
        path = write_env("[]", name="schema.toml")
        with pytest.raises(SchemaParseError, match="Unsupported"):
            load_schema(path)

    def test_invalid_rule(self, write_env: Callable[..., Path]) -> None:
        path = write_env("- type: string\n", name="schema.yaml")
        with pytest.raises(SchemaParseError, match="Rule 0"):
            load_schema(path)
