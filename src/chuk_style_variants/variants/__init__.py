"""
Variant engine - compiles variant configs into class name generators.

Generators resolve props into class strings: presets and defaults fill
in missing values, compound rules add classes for value combinations,
and results are memoized in a bounded FIFO cache.
"""

from chuk_style_variants.variants.cache import FIFOCache
from chuk_style_variants.variants.generator import VariantGenerator, sv
from chuk_style_variants.variants.matcher import CompoundRule, condition_matches
from chuk_style_variants.variants.normalizer import (
    ClassPayload,
    NormalizedVariant,
    VariantKind,
    normalize_variants,
)

__all__ = [
    "ClassPayload",
    "CompoundRule",
    "FIFOCache",
    "NormalizedVariant",
    "VariantGenerator",
    "VariantKind",
    "condition_matches",
    "normalize_variants",
    "sv",
]
