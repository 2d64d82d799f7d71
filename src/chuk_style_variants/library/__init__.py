"""
Component library - stored variant definitions.

Components are YAML files describing a base style and its variant
config. The built-in library ships with the package; project
components override library components of the same name.
"""

from chuk_style_variants.library.loader import ComponentLoader

__all__ = [
    "ComponentLoader",
]
