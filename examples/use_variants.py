#!/usr/bin/env python3
"""
Example: Using the Variant System.

This demonstrates how variant generators turn a declarative component
description into class strings: variants, slots, compound rules,
presets, and components stored as YAML.

Usage:
    python examples/use_variants.py
"""

import tempfile
from pathlib import Path

from chuk_style_variants import ComponentLoader, VariantResolutionError, cn, sv


def main() -> None:
    """Demonstrate the variant system."""
    print("CHUK Style Variants Demo")
    print("=" * 40)
    print()

    # Flatten arbitrary class values
    print("cn():")
    print(f"  {cn('flex', ['items-center', 'gap-2'], {'p-4': True, 'hidden': False})!r}")
    print()

    # A single-string generator
    button = sv(
        "rounded-lg font-medium",
        variants={
            "size": {"sm": "text-sm px-2", "lg": "text-lg px-4"},
            "intent": {"primary": "bg-blue-500", "danger": "bg-red-500"},
            "disabled": "opacity-50",
        },
        compound_variants=[{"size": "lg", "intent": "primary", "class": "uppercase"}],
        default_variants={"size": "sm", "intent": "primary"},
        presets={"cta": {"size": "lg", "intent": "primary"}},
    )

    print("Button:")
    print(f"  default:        {button()!r}")
    print(f"  danger:         {button(intent='danger')!r}")
    print(f"  cta preset:     {button(preset='cta')!r}")
    print(f"  disabled + cls: {button(disabled=True, class_='mt-4')!r}")
    print(f"  cached results: {button.get_cache_size()}")

    try:
        button(size="xl")
    except VariantResolutionError as e:
        print(f"  invalid size:   {e}")
    print()

    # A multi-slot generator
    card = sv(
        "rounded-lg border",
        slots={"header": "font-bold", "body": "py-4"},
        variants={"size": {"sm": {"base": "p-2", "header": "text-sm"}, "lg": {"base": "p-6"}}},
        compound_slots=[{"slots": ["header", "body"], "size": "lg", "class": "px-6"}],
    )

    print("Card:")
    for slot, classes in card(size="lg").items():
        print(f"  {slot}: {classes!r}")
    print()

    # Components stored as YAML
    with tempfile.TemporaryDirectory() as tmp:
        loader = ComponentLoader(project_path=Path(tmp))

        print("Available components:")
        for meta in loader.list_components():
            print(f"  {meta.name}: {meta.description}")
            print(f"    Variants: {', '.join(meta.variant_keys)}")
            print(f"    Slots: {', '.join(meta.slot_keys)}")
            print(f"    Presets: {', '.join(meta.preset_names) or '-'}")
        print()

        stored_card = loader.build("card")
        print("Stored card (hero preset):")
        for slot, classes in stored_card(preset="hero").items():
            print(f"  {slot}: {classes!r}")


if __name__ == "__main__":
    main()
