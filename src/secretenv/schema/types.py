"""Type tags and schema rule definitions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from secretenv.errors import SchemaParseError

__all__ = [
    "EnvType",
    "ENV_TYPES",
    "SchemaRule",
    "RuleLike",
    "to_rules",
]


class EnvType(str, Enum):
    """Value types a schema rule can require."""

    ARRAY = "array"
    BOOLEAN = "boolean"
    DATE = "date"
    FLOAT = "float"
    INTEGER = "integer"
    OBJECT = "object"
    STRING = "string"
    TIME = "time"


ENV_TYPES: tuple[str, ...] = tuple(t.value for t in EnvType)


class SchemaRule(BaseModel):
    """A declarative constraint on one named key.

    ``type`` is kept as plain text so that an unrecognized tag is reported
    by the validator as an error on this rule instead of failing the whole
    schema. ``min``/``max`` bound numbers for numeric types and length for
    strings.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: str
    required: bool = False
    min: Union[int, float, None] = None
    max: Union[int, float, None] = None
    lowercase: bool = False
    uppercase: bool = False


RuleLike = Union[SchemaRule, Mapping[str, Any]]


def to_rules(schema: Iterable[RuleLike] | None) -> list[SchemaRule]:
    """Normalize a schema given as rules or plain mappings into SchemaRule objects."""
    if schema is None:
        return []
    rules: list[SchemaRule] = []
    for i, raw in enumerate(schema):
        if isinstance(raw, SchemaRule):
            rules.append(raw)
            continue
        if not isinstance(raw, Mapping):
            raise SchemaParseError(
                f"Rule {i} must be a mapping, got {type(raw).__name__}"
            )
        try:
            rules.append(SchemaRule.model_validate(dict(raw)))
        except ValidationError as e:
            raise SchemaParseError(f"Rule {i} is invalid: {e}", cause=e) from e
    return rules
