"""Infer a starter schema from sample values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import yaml

from secretenv.schema.types import EnvType, SchemaRule
from secretenv.schema.validator import is_number, parse_iso_date

__all__ = ["create_schema_template", "infer_type", "dump_schema"]

_TIME_LIKE_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def infer_type(value: Any) -> EnvType:
    """Guess the schema type of a single value, defaulting to string."""
    if isinstance(value, bool):
        return EnvType.BOOLEAN
    if is_number(value):
        if isinstance(value, int) or value.is_integer():
            return EnvType.INTEGER
        return EnvType.FLOAT
    if isinstance(value, str):
        if _TIME_LIKE_RE.fullmatch(value):
            return EnvType.TIME
        if parse_iso_date(value) is not None:
            return EnvType.DATE
        return EnvType.STRING
    if isinstance(value, (list, tuple)):
        return EnvType.ARRAY
    if isinstance(value, Mapping):
        return EnvType.OBJECT
    return EnvType.STRING


def create_schema_template(values: Mapping[str, Any]) -> list[SchemaRule]:
    """Build one non-required rule per key of values, in key order.

    Example::

        >>> [r.type for r in create_schema_template({"port": 3000, "at": "14:00"})]
        ['integer', 'time']

    Raises:
        TypeError: If values is not a mapping.
    """
    if not isinstance(values, Mapping):
        raise TypeError("Expected a mapping as input")
    return [
        SchemaRule(name=key, type=infer_type(value).value, required=False)
        for key, value in values.items()
    ]


def dump_schema(rules: Iterable[SchemaRule]) -> str:
    """Render rules as a YAML schema document, omitting default fields."""
    data: dict[str, list[dict[str, Any]]] = {"rules": []}
    for rule in rules:
        entry = rule.model_dump(exclude_defaults=True)
        entry["required"] = rule.required
        data["rules"].append(entry)
    return yaml.safe_dump(data, sort_keys=False)
