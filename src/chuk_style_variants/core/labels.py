"""
Variant value labels.

Variant records are keyed by strings, while callers pass booleans,
integers and strings interchangeably. Labels give every value one
canonical string form so ``True`` finds ``"true"`` and ``2`` finds ``"2"``.
"""

from __future__ import annotations

from typing import Any


def to_label(value: Any) -> str | None:
    """
    Coerce a variant value to its record label.

    Args:
        value: Variant value (bool, int, float, str, ...)

    Returns:
        Canonical label, or None for a missing value
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def loose_equals(first: Any, second: Any) -> bool:
    """Compare two variant values by identity or by label."""
    return first is second or to_label(first) == to_label(second)
