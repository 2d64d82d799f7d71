"""
Compound rule matching.

A compound rule adds classes when several variant values co-occur.
Conditions compare loosely so numeric and string labels can mix.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any

from chuk_style_variants.constants import CLASS_NAME_PROP, CLASS_PROP, COMPOUND_NON_CONDITION_KEYS
from chuk_style_variants.core import loose_equals
from chuk_style_variants.variants.normalizer import ClassPayload, make_payload


def condition_matches(expected: Any, actual: Any) -> bool:
    """
    Check a single condition against a prop value.

    Args:
        expected: Condition value, or a list/tuple of accepted values
        actual: Resolved prop value (None when unset)

    Returns:
        True if the prop satisfies the condition
    """
    if isinstance(expected, (list, tuple)):
        return any(loose_equals(option, actual) for option in expected)
    return loose_equals(expected, actual)


@dataclass(frozen=True)
class CompoundRule:
    """A compiled compound variant or compound slot row."""

    conditions: tuple[tuple[str, Any], ...]
    payload: ClassPayload
    # Explicit target slots for compound slots; None infers from payload
    slots: tuple[str, ...] | None = None

    def matches(self, props: Mapping[str, Any]) -> bool:
        """Check every condition; an empty condition set always matches."""
        return all(condition_matches(expected, props.get(key)) for key, expected in self.conditions)

    def apply(self, slot_classes: dict[str, list[Any]]) -> None:
        """Append this rule's classes to the per-slot class lists."""
        if self.slots is None:
            self.payload.apply(slot_classes)
            return
        for slot in self.slots:
            if slot in slot_classes:
                slot_classes[slot].append(self.payload.value)


def _row_class(row: Mapping[str, Any]) -> Any:
    """Pick the payload of a compound row, 'class' before 'className'."""
    value = row.get(CLASS_PROP)
    return row.get(CLASS_NAME_PROP) if value is None else value


def _row_conditions(row: Mapping[str, Any]) -> tuple[tuple[str, Any], ...]:
    return tuple(
        (key, value) for key, value in row.items() if key not in COMPOUND_NON_CONDITION_KEYS
    )


def compile_compound_variants(
    rows: list[dict[str, Any]],
    slot_names: Collection[str],
) -> list[CompoundRule]:
    """Compile compound variant rows; payload targeting follows its shape."""
    return [
        CompoundRule(
            conditions=_row_conditions(row),
            payload=make_payload(_row_class(row), slot_names),
        )
        for row in rows
    ]


def compile_compound_slots(rows: list[dict[str, Any]]) -> list[CompoundRule]:
    """Compile compound slot rows; payload goes to the listed slots only."""
    return [
        CompoundRule(
            conditions=_row_conditions(row),
            payload=ClassPayload(value=_row_class(row)),
            slots=tuple(row["slots"]),
        )
        for row in rows
    ]
