"""
Config models - the declarative description of a component's variants.

Configs are plain data: a base style, variant axes, slots, compound
rules, defaults, required variants and presets. Option names accept both
snake_case and the camelCase spelling used in serialized configs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_style_variants.constants import (
    BASE_SLOT,
    COMPOUND_NON_CONDITION_KEYS,
    DEFAULT_CACHE_SIZE,
    RESERVED_PROPS,
    ErrorMessages,
)


class VariantOptions(BaseModel):
    """
    Variant options shared by runtime configs and stored components.

    Everything here is serializable; callables are limited to
    function-valued defaults.
    """

    variants: dict[str, Any] = Field(
        default_factory=dict,
        description="Variant name -> {label: classes} record or boolean shorthand",
    )
    slots: dict[str, Any] = Field(
        default_factory=dict,
        description="Slot name -> classes (optional 'base' entry extends the base)",
    )
    compound_variants: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="compoundVariants",
        description="Conditions plus a class/className payload",
    )
    compound_slots: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="compoundSlots",
        description="Conditions plus a class/className payload and target slots",
    )
    default_variants: dict[str, Any] = Field(
        default_factory=dict,
        alias="defaultVariants",
        description="Variant name -> static value or callable(props)",
    )
    required_variants: list[str] = Field(
        default_factory=list,
        alias="requiredVariants",
        description="Variants that must be resolved on every call",
    )
    presets: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Preset name -> bundle of variant values",
    )
    cache_size: int = Field(
        default=DEFAULT_CACHE_SIZE,
        ge=0,
        alias="cacheSize",
        description="Maximum memoized results (0 disables storage)",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "forbid",
        "arbitrary_types_allowed": True,
    }

    @field_validator("compound_slots")
    @classmethod
    def _check_compound_slot_targets(cls, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Compound slots must name their target slots explicitly."""
        for row in rows:
            targets = row.get("slots")
            if not isinstance(targets, (list, tuple)) or not all(
                isinstance(target, str) for target in targets
            ):
                raise ValueError("Compound slots require a 'slots' list of slot names")
        return rows

    @model_validator(mode="after")
    def _check_names(self) -> VariantOptions:
        """Names may not shadow reserved props; compounds only test declared variants."""
        for name in self.slots:
            if name in RESERVED_PROPS:
                raise ValueError(ErrorMessages.RESERVED_NAME.format(name=name, kind="slot"))
        for name in self.variants:
            if name in RESERVED_PROPS:
                raise ValueError(ErrorMessages.RESERVED_NAME.format(name=name, kind="variant"))
        for row in [*self.compound_variants, *self.compound_slots]:
            for key in row:
                if key not in COMPOUND_NON_CONDITION_KEYS and key not in self.variants:
                    raise ValueError(ErrorMessages.COMPOUND_UNKNOWN_VARIANT.format(key=key))
        return self

    @property
    def slot_names(self) -> list[str]:
        """Named slots in declaration order, excluding 'base'."""
        return [name for name in self.slots if name != BASE_SLOT]


class SVConfig(VariantOptions):
    """
    Runtime configuration for a variant generator.

    Adds the post-process hook, an opaque ``str -> str`` transform applied
    to every resolved slot string (e.g. class conflict resolution).
    """

    post_process: Callable[[str], str | None] | None = Field(
        default=None,
        alias="postProcess",
        description="Transform applied to each resolved class string",
    )

    @classmethod
    def from_options(
        cls,
        config: SVConfig | dict[str, Any] | None = None,
        **options: Any,
    ) -> SVConfig:
        """
        Build a config from a model, a mapping and/or keyword options.

        Keyword options override entries in ``config``.

        Args:
            config: Existing config model or mapping (snake or camel case)
            **options: Individual config options

        Returns:
            Validated config
        """
        if isinstance(config, SVConfig):
            if not options:
                return config
            data: dict[str, Any] = {name: getattr(config, name) for name in cls.model_fields}
        else:
            data = dict(config or {})
        data.update(options)
        return cls.model_validate(data)
