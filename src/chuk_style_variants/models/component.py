"""
Component models - stored variant definitions.

A component is a named, serializable variant config plus its base
classes. Components live in YAML files and are built into generators
on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_style_variants.constants import BASE_SLOT, ErrorMessages, SchemaVersion
from chuk_style_variants.models.config import SVConfig, VariantOptions


class ComponentDefinition(VariantOptions):
    """
    A stored component definition.

    Function-valued defaults cannot be serialized, so stored components
    only carry static defaults.
    """

    # Metadata
    schema_version: SchemaVersion = Field("component/v1", alias="schema")
    name: str = Field(..., description="Component name")
    description: str = Field("", description="Component description")

    # Base classes applied to the base slot
    base: Any = Field(default="", description="Base class value")

    @field_validator("default_variants")
    @classmethod
    def _check_static_defaults(cls, defaults: dict[str, Any]) -> dict[str, Any]:
        """Stored defaults must survive a YAML round trip."""
        for variant, value in defaults.items():
            if callable(value):
                raise ValueError(ErrorMessages.STORED_CALLABLE_DEFAULT.format(variant=variant))
        return defaults

    def to_config(self, post_process: Callable[[str], str | None] | None = None) -> SVConfig:
        """
        Convert to a runtime config.

        Args:
            post_process: Optional transform for resolved class strings

        Returns:
            Config ready to pass to ``sv``
        """
        data = {name: getattr(self, name) for name in VariantOptions.model_fields}
        data["post_process"] = post_process
        return SVConfig.model_validate(data)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "base": self.base,
        }
        if self.slots:
            data["slots"] = dict(self.slots)
        if self.variants:
            data["variants"] = dict(self.variants)
        if self.compound_variants:
            data["compoundVariants"] = list(self.compound_variants)
        if self.compound_slots:
            data["compoundSlots"] = list(self.compound_slots)
        if self.default_variants:
            data["defaultVariants"] = dict(self.default_variants)
        if self.required_variants:
            data["requiredVariants"] = list(self.required_variants)
        if self.presets:
            data["presets"] = dict(self.presets)
        data["cacheSize"] = self.cache_size
        return data


class ComponentMetadata(BaseModel):
    """Lightweight metadata for listing components."""

    name: str
    description: str
    variant_keys: list[str]
    slot_keys: list[str]
    preset_names: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_component(cls, component: ComponentDefinition) -> ComponentMetadata:
        """Create metadata from a component definition."""
        return cls(
            name=component.name,
            description=component.description,
            variant_keys=list(component.variants),
            slot_keys=[BASE_SLOT, *component.slot_names],
            preset_names=list(component.presets),
        )
