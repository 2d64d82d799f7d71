"""
Constants for the style variant system.

No magic strings - reserved prop names and error templates live here.
"""

from typing import Literal

# Default number of resolved results memoized per generator
DEFAULT_CACHE_SIZE = 256

# The implicit slot every generator resolves
BASE_SLOT = "base"

# Props that carry caller classes rather than variant values
CLASS_PROP = "class"
CLASS_NAME_PROP = "className"

# Prop selecting a named preset bundle
PRESET_PROP = "preset"

# Keys that never reach variant lookup
RESERVED_PROPS: frozenset[str] = frozenset({CLASS_PROP, CLASS_NAME_PROP, PRESET_PROP})

# Keys on compound rows that are payload, not conditions
COMPOUND_NON_CONDITION_KEYS: frozenset[str] = frozenset({CLASS_PROP, CLASS_NAME_PROP, "slots"})

# Pythonic keyword spellings for the reserved class props
KEYWORD_ALIASES: dict[str, str] = {
    "class_": CLASS_PROP,
    "class_name": CLASS_NAME_PROP,
}

# Labels of a boolean variant record
TRUE_LABEL = "true"
FALSE_LABEL = "false"
BOOLEAN_LABELS: frozenset[str] = frozenset({TRUE_LABEL, FALSE_LABEL})

# Schema versions - frozen for v1
SchemaVersion = Literal["component/v1"]


class ErrorMessages:
    """Standardized error messages."""

    REQUIRED_NOT_DEFINED = 'Required variant "{variant}" is not defined in variants'
    REQUIRED_HAS_DEFAULT = 'Required variant "{variant}" cannot have a default value'
    MISSING_REQUIRED = 'Missing required variant: "{variant}"'
    INVALID_VALUE = 'Invalid value "{value}" for variant "{variant}"'
    INVALID_PRESET = 'Invalid preset "{preset}"'
    RESERVED_NAME = '"{name}" is reserved and cannot be used as a {kind} name'
    COMPONENT_NOT_FOUND = "Component '{name}' not found."
    COMPONENT_NAME_MISMATCH = "Component name '{name}' does not match file name '{file}'"
    COMPOUND_UNKNOWN_VARIANT = 'Compound condition "{key}" is not a declared variant'
    STORED_CALLABLE_DEFAULT = 'Default for variant "{variant}" must be a static value in a stored component'
