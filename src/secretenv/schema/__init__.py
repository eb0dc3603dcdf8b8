"""secretenv schema system -- public API.

Example usage::

    from secretenv.schema import SchemaRule, load_schema, validate_all
"""

from __future__ import annotations

from secretenv.schema.loader import load_schema
from secretenv.schema.template import create_schema_template, dump_schema, infer_type
from secretenv.schema.types import ENV_TYPES, EnvType, SchemaRule, to_rules
from secretenv.schema.validator import validate_all, validate_value

__all__ = [
    "EnvType",
    "ENV_TYPES",
    "SchemaRule",
    "to_rules",
    "load_schema",
    "validate_value",
    "validate_all",
    "create_schema_template",
    "infer_type",
    "dump_schema",
]
