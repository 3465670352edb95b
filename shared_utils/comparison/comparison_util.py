"""
shared_utils/comparison/comparison_util.py

Order-insensitive equality checks for JSON-like values, used to decide
whether a stored prompt or version actually changed.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence


def _check_keys(value: Any) -> None:
    """JSON objects only have string keys; refuse anything json.dumps would coerce."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, not {type(key).__name__}: {key!r}")
            _check_keys(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_keys(item)


def sorted_arrays_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """
    Compare two string sequences for equality, ignoring order.

    Duplicates count: ``["a", "a", "b"]`` does not equal ``["a", "b", "b"]``.
    The inputs are not modified.
    """
    if len(a) != len(b):
        return False
    return sorted(a) == sorted(b)


def canonicalize(value: Any) -> str:
    """
    Return the canonical JSON form of a value: object keys sorted at every
    level, array order kept.

    Raises:
        TypeError: If the value is not JSON-serializable or has a non-str key.
    """
    _check_keys(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def deep_equal(a: Optional[Any], b: Optional[Any]) -> bool:
    """
    Order-insensitive deep equality for JSON-serializable values.

    Key order never matters; array order always does. Two Nones are equal,
    None and a value are not.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return canonicalize(a) == canonicalize(b)
