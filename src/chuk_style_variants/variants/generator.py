"""
Variant generator - resolves props into class strings.

``sv`` compiles a base class value and a variant config into a
``VariantGenerator``: a callable that merges caller props with presets
and defaults, evaluates compound rules, and assembles the class string
for the base slot and every named slot.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Any

from chuk_style_variants.constants import (
    BASE_SLOT,
    CLASS_NAME_PROP,
    CLASS_PROP,
    KEYWORD_ALIASES,
    PRESET_PROP,
    ErrorMessages,
)
from chuk_style_variants.core import ClassValue, cn, to_label
from chuk_style_variants.errors import VariantConfigError, VariantResolutionError
from chuk_style_variants.models.config import SVConfig
from chuk_style_variants.variants.cache import FIFOCache
from chuk_style_variants.variants.matcher import (
    compile_compound_slots,
    compile_compound_variants,
)
from chuk_style_variants.variants.normalizer import make_payload, normalize_variants

logger = logging.getLogger(__name__)

ResolvedClasses = str | dict[str, str]


class VariantGenerator:
    """
    Callable that resolves variant props into class names.

    Returns a single class string when no named slots are configured,
    otherwise a mapping of slot name to class string with 'base' first.
    Results are memoized per resolved variant values unless the caller
    passes extra classes.
    """

    def __init__(self, base: ClassValue, config: SVConfig):
        """
        Compile a generator.

        Args:
            base: Base class value
            config: Validated variant config

        Raises:
            VariantConfigError: If required variants are inconsistent
        """
        self.config = config
        self._slot_names = config.slot_names
        self._variants = normalize_variants(config.variants, self._slot_names)

        for variant in config.required_variants:
            if variant not in self._variants:
                raise VariantConfigError(ErrorMessages.REQUIRED_NOT_DEFINED.format(variant=variant))
            if variant in config.default_variants:
                raise VariantConfigError(ErrorMessages.REQUIRED_HAS_DEFAULT.format(variant=variant))

        self._base_classes = cn(base, config.slots.get(BASE_SLOT))
        self._compound_variants = compile_compound_variants(
            config.compound_variants, self._slot_names
        )
        self._compound_slots = compile_compound_slots(config.compound_slots)
        self._cache = FIFOCache(config.cache_size)

        logger.debug(
            "Built variant generator: %d variants, %d slots, cache size %d",
            len(self._variants),
            len(self._slot_names),
            config.cache_size,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def variants(self) -> dict[str, dict[str, ClassValue]]:
        """Normalized variant records keyed by string label."""
        return {name: dict(variant.record) for name, variant in self._variants.items()}

    @property
    def variant_keys(self) -> list[str]:
        """Variant names in declaration order."""
        return list(self._variants)

    @property
    def slots(self) -> dict[str, ClassValue]:
        """The slots config as declared."""
        return self.config.slots

    @property
    def slot_keys(self) -> list[str]:
        """Slot names, 'base' first."""
        return [BASE_SLOT, *self._slot_names]

    @property
    def default_variants(self) -> dict[str, Any]:
        return self.config.default_variants

    @property
    def required_variants(self) -> list[str]:
        return self.config.required_variants

    @property
    def presets(self) -> dict[str, dict[str, Any]]:
        return self.config.presets

    @property
    def cache_size(self) -> int:
        """Configured cache capacity."""
        return self.config.cache_size

    def clear_cache(self) -> None:
        """Drop every memoized result."""
        self._cache.clear()

    def get_cache_size(self) -> int:
        """Number of memoized results."""
        return len(self._cache)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def __call__(self, props: Mapping[str, Any] | None = None, /, **kwargs: Any) -> ResolvedClasses:
        """
        Resolve props into class names.

        Args:
            props: Variant values plus optional 'class'/'className'/'preset'
            **kwargs: Same as ``props``; ``class_`` and ``class_name`` are
                accepted for 'class' and 'className'

        Returns:
            Class string, or slot name -> class string when slots exist

        Raises:
            VariantResolutionError: On an unknown preset, an unknown variant
                value or a missing required variant
        """
        explicit = self._collect_props(props, kwargs)
        layered = self._apply_preset(explicit)
        merged = {**self._resolve_defaults(layered), **layered}

        class_prop = merged.get(CLASS_PROP)
        if class_prop is None:
            class_prop = merged.get(CLASS_NAME_PROP)

        cache_key = self._cache_key(merged, class_prop)
        if cache_key is not None and cache_key in self._cache:
            return self._cache.get(cache_key)

        for variant in self.config.required_variants:
            if merged.get(variant) is None:
                raise VariantResolutionError(ErrorMessages.MISSING_REQUIRED.format(variant=variant))

        slot_classes: dict[str, list[ClassValue]] = {BASE_SLOT: [self._base_classes]}
        for slot in self._slot_names:
            slot_classes[slot] = [self.config.slots[slot]]

        for name, variant in self._variants.items():
            value = merged.get(name)
            if value is None:
                continue

            payload = variant.payload_for(value)
            if payload is None:
                raise VariantResolutionError(
                    ErrorMessages.INVALID_VALUE.format(value=to_label(value), variant=name)
                )
            if not payload.is_empty:
                payload.apply(slot_classes)

        for rule in self._compound_variants:
            if rule.matches(merged):
                rule.apply(slot_classes)

        for rule in self._compound_slots:
            if rule.matches(merged):
                rule.apply(slot_classes)

        # Caller classes always come last
        if class_prop:
            make_payload(class_prop, self._slot_names).apply(slot_classes)

        resolved = {slot: self._post_process(cn(classes)) for slot, classes in slot_classes.items()}
        result: ResolvedClasses = resolved if self._slot_names else resolved[BASE_SLOT]

        if cache_key is not None:
            self._cache.put(cache_key, result)
        return result

    def _collect_props(
        self,
        props: Mapping[str, Any] | None,
        kwargs: dict[str, Any],
    ) -> dict[str, Any]:
        """Merge positional and keyword props, dropping unset values."""
        collected: dict[str, Any] = dict(props or {})
        for key, value in kwargs.items():
            collected[KEYWORD_ALIASES.get(key, key)] = value
        return {key: value for key, value in collected.items() if value is not None}

    def _apply_preset(self, explicit: dict[str, Any]) -> dict[str, Any]:
        """Layer the selected preset's values under the explicit props."""
        preset_name = explicit.get(PRESET_PROP)
        if preset_name is None:
            return explicit

        preset = self.config.presets.get(preset_name)
        if preset is None:
            raise VariantResolutionError(ErrorMessages.INVALID_PRESET.format(preset=preset_name))

        bundle = {key: value for key, value in preset.items() if value is not None}
        return {**bundle, **explicit}

    def _resolve_defaults(self, supplied: dict[str, Any]) -> dict[str, Any]:
        """
        Resolve defaults for variants not already supplied.

        Function defaults see a read-only view of the supplied props.
        """
        view = MappingProxyType(supplied)
        resolved: dict[str, Any] = {}
        for key, default in self.config.default_variants.items():
            if key in supplied:
                continue
            value = default(view) if callable(default) else default
            if value is not None:
                resolved[key] = value
        return resolved

    def _cache_key(self, merged: Mapping[str, Any], class_prop: Any) -> Hashable | None:
        """Key results by resolved variant labels; caller classes are never cached."""
        if class_prop:
            return None
        return tuple(to_label(merged.get(name)) for name in self._variants)

    def _post_process(self, class_name: str) -> str:
        if self.config.post_process is None:
            return class_name
        processed = self.config.post_process(class_name)
        return class_name if processed is None else processed


def sv(
    base: ClassValue,
    config: SVConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> str | VariantGenerator:
    """
    Create a variant generator, or flatten ``base`` when unconfigured.

    Args:
        base: Base class value
        config: Config model or mapping (snake_case or camelCase keys)
        **options: Config options (variants, slots, compound_variants,
            compound_slots, default_variants, required_variants, presets,
            cache_size, post_process)

    Returns:
        ``cn(base)`` when no config is given, otherwise a generator

    Raises:
        VariantConfigError: If required variants are inconsistent
        pydantic.ValidationError: If the config is malformed
    """
    if config is None and not options:
        return cn(base)

    return VariantGenerator(base, SVConfig.from_options(config, **options))
