"""
Class name flattening.

Turns arbitrarily nested class values into a single space-joined string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

# str | sequence of ClassValue | {class_name: truthy} | falsy scalar
ClassValue: TypeAlias = Any


def cn(*values: ClassValue) -> str:
    """
    Construct a class name string from class values.

    Strings are kept, lists and tuples are flattened, mappings contribute
    every key whose value is truthy. Falsy values and other scalars
    (``True``, numbers) contribute nothing.

    Nested sequences are appended to the end of the work list rather
    than expanded in place, so ``cn("a", ["b"], {"c": True})`` yields
    ``"a c b"``.

    Args:
        *values: Class values to flatten

    Returns:
        Space-joined class names in first-seen order
    """
    stack = list(values)
    parts: list[str] = []

    # Walk the work list iteratively to avoid recursion limits
    index = 0
    while index < len(stack):
        item = stack[index]
        index += 1

        if not item:
            continue

        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, (list, tuple)):
            stack.extend(item)
        elif isinstance(item, Mapping):
            parts.extend(str(key) for key, enabled in item.items() if enabled)

    return " ".join(parts)
