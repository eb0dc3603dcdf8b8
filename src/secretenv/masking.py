"""Masking of sensitive values for display or logging."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["mask_keys", "REDACTED_VALUE"]

REDACTED_VALUE = "***REDACTED***"


def mask_keys(
    values: Mapping[str, Any], keys: Iterable[str], mask: str = REDACTED_VALUE
) -> dict[str, Any]:
    """Return a copy of values with the listed keys masked.

    Keys that are missing or hold None are left alone. The input mapping,
    which may be a Config, is never modified.
    """
    masked = copy.deepcopy(dict(values))
    for key in keys:
        if masked.get(key) is not None:
            masked[key] = mask
    return masked
