"""Read-only configuration object with typed accessors."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator, Mapping
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any

from secretenv.schema.validator import is_number, match_time, parse_iso_date

__all__ = ["Config"]

_INT_PREFIX_RE = re.compile(r"\s*([-+]?[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(r"\s*([-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)")


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        m = _INT_PREFIX_RE.match(value)
        if m is None:
            return None
        try:
            return int(m.group(1))
        except ValueError:
            # digit count above sys.get_int_max_str_digits()
            return None
    return None


def _parse_float(value: Any) -> float | None:
    if is_number(value):
        return float(value)
    if isinstance(value, str):
        m = _FLOAT_PREFIX_RE.match(value)
        if m is None:
            return None
        try:
            return float(m.group(1))
        except ValueError:
            return None
    return None


class Config(Mapping[str, Any]):
    """Immutable mapping of resolved env values plus validation results.

    Iteration, ``len`` and ``in`` cover the loaded keys only; ``errors`` and
    ``has_errors`` are attributes. Every typed getter returns ``fallback``
    instead of raising when the stored value is missing or has the wrong
    shape.

    Thread safety:
        Instances never change after construction and can be shared freely.
    """

    __slots__ = ("_data", "_errors")

    def __init__(self, values: Mapping[str, Any] | None = None, errors: Iterable[str] = ()) -> None:
        object.__setattr__(self, "_data", MappingProxyType(dict(values or {})))
        object.__setattr__(self, "_errors", tuple(errors))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Config is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Config is immutable")

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Config({dict(self._data)!r}, errors={len(self._errors)})"

    @property
    def errors(self) -> tuple[str, ...]:
        """Schema validation messages, in schema order."""
        return self._errors

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow plain-dict copy of the values."""
        return dict(self._data)

    def get(self, key: str, fallback: Any = None) -> Any:
        """Return the value for key, or fallback when it is absent or None."""
        value = self._data.get(key)
        return fallback if value is None else value

    def get_path(self, path: str, fallback: Any = None) -> Any:
        """Get a value by dot-path, descending into object values."""
        parts = path.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return fallback
        return fallback if current is None else current

    def get_string(self, key: str, fallback: Any = None) -> Any:
        value = self._data.get(key)
        return value if isinstance(value, str) else fallback

    def get_integer(self, key: str, fallback: Any = None) -> Any:
        """Return the value as an int.

        Strings are parsed from their leading digits (``"42px"`` gives 42)
        and floats are truncated.
        """
        parsed = _parse_int(self._data.get(key))
        return fallback if parsed is None else parsed

    def get_float(self, key: str, fallback: Any = None) -> Any:
        """Return the value as a float, parsing the leading number of strings."""
        parsed = _parse_float(self._data.get(key))
        return fallback if parsed is None or math.isnan(parsed) else parsed

    def get_boolean(self, key: str, fallback: Any = None) -> Any:
        """Return a bool for a stored bool or a ``"true"``/``"false"`` string."""
        value = self._data.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        return fallback

    def get_date(self, key: str, fallback: Any = None) -> Any:
        """Return the value as a datetime, parsing ISO-8601 strings."""
        parsed = parse_iso_date(self._data.get(key))
        return fallback if parsed is None else parsed

    def get_time(self, key: str, fallback: Any = None) -> Any:
        """Return ``HH:MM`` text as a datetime on today's date."""
        parts = match_time(self._data.get(key))
        if parts is None:
            return fallback
        hour, minute = parts
        if hour > 23 or minute > 59:
            return fallback
        return datetime.combine(date.today(), time(hour, minute))

    def get_array(self, key: str, fallback: Any = None) -> Any:
        value = self._data.get(key)
        return value if isinstance(value, (list, tuple)) else fallback

    def get_object(self, key: str, fallback: Any = None) -> Any:
        value = self._data.get(key)
        return value if isinstance(value, Mapping) else fallback
