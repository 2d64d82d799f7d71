"""
Core primitives for class name handling.

This module provides:
- cn: Flatten nested class values into a class string
- to_label / loose_equals: Canonical variant value labels
"""

from chuk_style_variants.core.classnames import ClassValue, cn
from chuk_style_variants.core.labels import loose_equals, to_label

__all__ = [
    "ClassValue",
    "cn",
    "loose_equals",
    "to_label",
]
