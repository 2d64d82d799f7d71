"""
Exceptions raised by the variant engine.

Configuration problems surface when a generator is built; resolution
problems surface per call and never touch the generator's cache.
"""


class StyleVariantError(ValueError):
    """Base class for variant engine errors."""


class VariantConfigError(StyleVariantError):
    """A generator configuration is inconsistent."""


class VariantResolutionError(StyleVariantError):
    """Props passed to a generator cannot be resolved."""
