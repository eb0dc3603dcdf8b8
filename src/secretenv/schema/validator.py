"""Rule validator and the schema validation pass.

Violations are returned as human-readable messages, never raised.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from secretenv.schema.types import EnvType, RuleLike, SchemaRule, to_rules

__all__ = ["validate_value", "validate_all", "is_number", "parse_iso_date", "match_time"]

_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})")


def is_number(value: Any) -> bool:
    """True for ints and floats; bools are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_iso_date(value: Any) -> datetime | None:
    """Interpret value as a calendar date or datetime, or return None."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def match_time(value: Any) -> tuple[int, int] | None:
    """Split exact ``HH:MM`` text into (hour, minute) without range checks."""
    if not isinstance(value, str):
        return None
    m = _TIME_RE.fullmatch(value)
    if m is None:
        return None
    return int(m.group(1)), int(m.group(2))


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _check_bounds(key: str, value: Any, rule: SchemaRule, errors: list[str]) -> None:
    if not is_number(value):
        return
    if rule.min is not None and value < rule.min:
        errors.append(f'"{key}" must be >= {rule.min}')
    if rule.max is not None and value > rule.max:
        errors.append(f'"{key}" must be <= {rule.max}')


def validate_value(key: str, value: Any, rule: SchemaRule) -> list[str]:
    """Validate one value against one schema rule.

    Args:
        key: Name used in error messages.
        value: The resolved value, or None when the key is absent.
        rule: The rule to apply.

    Returns:
        Error messages in check order; empty when the value is valid.
    """
    if _is_absent(value):
        if rule.required:
            return [f'Missing required value for "{key}"']
        return []

    errors: list[str] = []
    rule_type = rule.type

    if rule_type == EnvType.INTEGER:
        whole = isinstance(value, int) or (isinstance(value, float) and value.is_integer())
        if not is_number(value) or not whole:
            errors.append(f'"{key}" must be an integer')
        _check_bounds(key, value, rule, errors)

    elif rule_type == EnvType.FLOAT:
        if not is_number(value):
            errors.append(f'"{key}" must be a float')
        _check_bounds(key, value, rule, errors)

    elif rule_type == EnvType.BOOLEAN:
        if not isinstance(value, bool):
            errors.append(f'"{key}" must be a boolean')

    elif rule_type == EnvType.STRING:
        if not isinstance(value, str):
            errors.append(f'"{key}" must be a string')
        else:
            if rule.lowercase and value != value.lower():
                errors.append(f'"{key}" must be lowercase')
            if rule.uppercase and value != value.upper():
                errors.append(f'"{key}" must be uppercase')
            if rule.min is not None and len(value) < rule.min:
                errors.append(f'"{key}" must be at least {rule.min} characters')
            if rule.max is not None and len(value) > rule.max:
                errors.append(f'"{key}" must be at most {rule.max} characters')

    elif rule_type == EnvType.DATE:
        if parse_iso_date(value) is None:
            errors.append(f'"{key}" must be a valid date')

    elif rule_type == EnvType.TIME:
        parts = match_time(value)
        if parts is None:
            errors.append(f'"{key}" must be in HH:mm format')
        else:
            hour, minute = parts
            if hour > 23 or minute > 59:
                errors.append(f'"{key}" has invalid hour or minute')

    elif rule_type == EnvType.ARRAY:
        if not isinstance(value, (list, tuple)):
            errors.append(f'"{key}" must be an array')

    elif rule_type == EnvType.OBJECT:
        if not isinstance(value, Mapping):
            errors.append(f'"{key}" must be an object')

    else:
        errors.append(f'Unknown type "{rule_type}" for "{key}"')

    return errors


def validate_all(values: Mapping[str, Any], schema: Iterable[RuleLike] | None) -> list[str]:
    """Apply every schema rule, in declaration order, and collect all errors.

    Keys that no rule names are not checked.
    """
    errors: list[str] = []
    for rule in to_rules(schema):
        errors.extend(validate_value(rule.name, values.get(rule.name), rule))
    return errors
