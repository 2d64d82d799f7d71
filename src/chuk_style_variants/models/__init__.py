"""
Pydantic models for the style variant system.

This module provides:
- VariantOptions: Serializable variant options
- SVConfig: Runtime generator configuration
- ComponentDefinition: Stored, named component
- ComponentMetadata: Listing summary of a component
"""

from chuk_style_variants.models.component import ComponentDefinition, ComponentMetadata
from chuk_style_variants.models.config import SVConfig, VariantOptions

__all__ = [
    "ComponentDefinition",
    "ComponentMetadata",
    "SVConfig",
    "VariantOptions",
]
