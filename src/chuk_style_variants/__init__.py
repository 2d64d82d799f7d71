"""
CHUK Style Variants - variant-driven class name generation.

Describe a component's base style, variant axes, slots, compound rules
and presets once; resolve concrete props into class strings at call time.
"""

from chuk_style_variants.core import ClassValue, cn
from chuk_style_variants.errors import (
    StyleVariantError,
    VariantConfigError,
    VariantResolutionError,
)
from chuk_style_variants.library import ComponentLoader
from chuk_style_variants.models import ComponentDefinition, ComponentMetadata, SVConfig
from chuk_style_variants.variants import VariantGenerator, sv

__version__ = "0.1.0"

__all__ = [
    "ClassValue",
    "ComponentDefinition",
    "ComponentLoader",
    "ComponentMetadata",
    "SVConfig",
    "StyleVariantError",
    "VariantConfigError",
    "VariantGenerator",
    "VariantResolutionError",
    "cn",
    "sv",
]
