"""
Variant normalization - one canonical record shape for every variant form.

Variants can be declared four ways:
- a bare class value ("boolean shorthand": applied when true)
- a slot-object keyed by slot names (boolean shorthand across slots)
- an explicit ``{"true": ..., "false": ...}`` record
- a regular ``{label: classes}`` record

Each is canonicalized into a label -> payload record and tagged with its
kind once, when the generator is built.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_style_variants.constants import BASE_SLOT, BOOLEAN_LABELS, FALSE_LABEL, TRUE_LABEL
from chuk_style_variants.core import ClassValue, to_label


class VariantKind(str, Enum):
    """How a variant was declared."""

    SHORTHAND = "shorthand"
    SLOT_SHORTHAND = "slot_shorthand"
    BOOLEAN = "boolean"
    REGULAR = "regular"


@dataclass(frozen=True)
class ClassPayload:
    """
    Classes contributed by a variant value or compound rule.

    ``targets`` is set when the payload is a slot-object; its entries are
    distributed per slot. Otherwise ``value`` goes to the base slot.
    """

    value: ClassValue
    targets: tuple[tuple[str, ClassValue], ...] | None = None

    @property
    def is_empty(self) -> bool:
        """True if applying this payload adds nothing."""
        if self.targets is not None:
            return not self.targets
        return not self.value

    def apply(self, slot_classes: dict[str, list[ClassValue]]) -> None:
        """Append this payload to the per-slot class lists."""
        if self.targets is None:
            slot_classes[BASE_SLOT].append(self.value)
            return
        for slot, classes in self.targets:
            if slot in slot_classes:
                slot_classes[slot].append(classes)


@dataclass(frozen=True)
class NormalizedVariant:
    """A variant in canonical form."""

    name: str
    kind: VariantKind
    record: dict[str, ClassValue]
    payloads: dict[str, ClassPayload]

    def payload_for(self, value: Any) -> ClassPayload | None:
        """Look up the payload for a variant value, None if unknown."""
        return self.payloads.get(to_label(value))  # type: ignore[arg-type]


def is_slot_object(value: Any, slot_names: Collection[str]) -> bool:
    """Check if a value is a mapping keyed only by 'base' and slot names."""
    if not isinstance(value, Mapping):
        return False
    return all(key == BASE_SLOT or key in slot_names for key in value)


def make_payload(value: ClassValue, slot_names: Collection[str]) -> ClassPayload:
    """
    Decide how a class value is targeted.

    Args:
        value: Class value or slot-object
        slot_names: Declared slot names (excluding 'base')

    Returns:
        Payload with per-slot targets when ``value`` is a slot-object
    """
    if is_slot_object(value, slot_names):
        return ClassPayload(value=value, targets=tuple(value.items()))
    return ClassPayload(value=value)


def classify_variant(definition: Any, slot_names: Collection[str]) -> VariantKind:
    """
    Decide which form a variant definition uses.

    Args:
        definition: Raw variant definition
        slot_names: Declared slot names (excluding 'base')

    Returns:
        The variant kind
    """
    if not isinstance(definition, Mapping):
        return VariantKind.SHORTHAND

    labels = [to_label(key) for key in definition]
    if slot_names and labels and all(
        label == BASE_SLOT or label in slot_names for label in labels
    ):
        return VariantKind.SLOT_SHORTHAND
    if all(label in BOOLEAN_LABELS for label in labels):
        return VariantKind.BOOLEAN
    return VariantKind.REGULAR


def normalize_variant(name: str, definition: Any, slot_names: Collection[str]) -> NormalizedVariant:
    """
    Canonicalize one variant definition.

    Args:
        name: Variant name
        definition: Raw variant definition
        slot_names: Declared slot names (excluding 'base')

    Returns:
        Normalized variant with precomputed payloads
    """
    kind = classify_variant(definition, slot_names)

    if kind in (VariantKind.SHORTHAND, VariantKind.SLOT_SHORTHAND):
        record: dict[str, ClassValue] = {FALSE_LABEL: "", TRUE_LABEL: definition}
    elif kind == VariantKind.BOOLEAN:
        record = {TRUE_LABEL: "", FALSE_LABEL: ""}
        record.update({to_label(key): value for key, value in definition.items()})  # type: ignore[misc]
    else:
        record = {to_label(key): value for key, value in definition.items()}  # type: ignore[misc]

    payloads = {label: make_payload(value, slot_names) for label, value in record.items()}
    return NormalizedVariant(name=name, kind=kind, record=record, payloads=payloads)


def normalize_variants(
    variants: Mapping[str, Any],
    slot_names: Collection[str],
) -> dict[str, NormalizedVariant]:
    """Canonicalize every variant, preserving declaration order."""
    return {
        name: normalize_variant(name, definition, slot_names)
        for name, definition in variants.items()
    }
