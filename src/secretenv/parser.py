"""Line parser for ``KEY=VALUE`` env files.

Raw values are typed at parse time: JSON-like text (starting with ``{`` or
``[``) is handed to :func:`json.loads`, everything else goes through
:func:`coerce_primitive`. Dates and times stay strings until a schema rule
or a typed getter interprets them.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

__all__ = ["is_structured", "coerce_primitive", "parse_env"]

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|-?[0-9]+[eE][-+]?[0-9]+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def is_structured(text: str) -> bool:
    """Return True when text looks like a JSON object or array."""
    stripped = text.strip()
    return stripped.startswith("{") or stripped.startswith("[")


def coerce_primitive(text: str) -> Any:
    """Convert a bare string into an int, float or bool, else return it unchanged."""
    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # digit count above sys.get_int_max_str_digits()
            return text
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return text


def _parse_value(text: str) -> Any:
    if is_structured(text):
        try:
            return json.loads(text)
        except (ValueError, RecursionError):
            logger.debug("Value looks like JSON but does not parse, treating as primitive")
    return coerce_primitive(text)


def parse_env(text: str) -> dict[str, Any]:
    """Parse env file content into a mapping of key to typed value.

    Blank lines and lines starting with ``#`` are skipped, as are lines
    whose key is empty. Only the first ``=`` separates key from value.
    A repeated key keeps its first position but takes the last value.
    """
    values: dict[str, Any] = {}
    for line in _LINE_SPLIT_RE.split(text):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        name, _, rest = trimmed.partition("=")
        key = name.strip()
        if not key:
            continue

        values[key] = _parse_value(rest.strip())
    return values
