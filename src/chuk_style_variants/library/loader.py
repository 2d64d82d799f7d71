"""
Component loader - discovers and loads stored component definitions.

Components can come from:
1. Built-in library (shipped with package)
2. Project components (user's project/components directory)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from chuk_style_variants.constants import ErrorMessages
from chuk_style_variants.models.component import ComponentDefinition, ComponentMetadata
from chuk_style_variants.variants.generator import VariantGenerator

logger = logging.getLogger(__name__)


class ComponentLoader:
    """
    Discovers and loads component definitions.

    Components are loaded from YAML files in the library and project
    directories. Project components override library components with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the component loader.

        Args:
            library_path: Path to built-in component library
            project_path: Path to project components directory
        """
        self.library_path = library_path or (Path(__file__).parent / "components")
        self.project_path = project_path
        self._cache: dict[str, ComponentDefinition] = {}

    def list_components(self) -> list[ComponentMetadata]:
        """
        List all available components.

        Returns components from both library and project, with project
        components taking precedence.
        """
        components: dict[str, ComponentMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                component = self._load_component_file(path)
                if component:
                    components[component.name] = ComponentMetadata.from_component(component)

        return sorted(components.values(), key=lambda m: m.name)

    def get_component(self, name: str) -> ComponentDefinition | None:
        """
        Get a component by name.

        Project components take precedence over library components.

        Args:
            name: Component name

        Returns:
            Component definition if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                component = self._load_component_file(path)
                if component:
                    self._cache[name] = component
                    return component

        return None

    def build(
        self,
        name: str,
        post_process: Callable[[str], str | None] | None = None,
    ) -> VariantGenerator:
        """
        Build a generator for a stored component.

        Args:
            name: Component name
            post_process: Optional transform for resolved class strings

        Returns:
            Variant generator for the component

        Raises:
            KeyError: If the component does not exist
        """
        component = self.get_component(name)
        if component is None:
            raise KeyError(ErrorMessages.COMPONENT_NOT_FOUND.format(name=name))
        return VariantGenerator(component.base, component.to_config(post_process))

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library component to the project for customization.

        The library file is copied verbatim so its comments survive.

        Args:
            name: Component name

        Returns:
            Path to copied file, or None if not in the library
        """
        source = self.library_path / f"{name}.yaml"
        if not source.exists():
            return None
        return self._write_project_file(name, source.read_text(), overwrite=False)

    def save_component(self, component: ComponentDefinition) -> Path:
        """
        Write a component definition to the project directory.

        The YAML is rendered before the target file is opened, so a
        component that cannot be serialized leaves any stored copy intact.

        Args:
            component: Component to store

        Returns:
            Path to the written file
        """
        text = yaml.safe_dump(component.to_yaml_dict(), sort_keys=False)
        return self._write_project_file(component.name, text, overwrite=True)

    def _write_project_file(self, name: str, text: str, overwrite: bool) -> Path:
        """Write a component file into the project and drop its cached copy."""
        if not self.project_path:
            raise ValueError("No project path configured")

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists() and not overwrite:
            raise ValueError(f"Component already exists in project: {name}")

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file.write_text(text)
        self._cache.pop(name, None)
        return dest_file

    def _load_component_file(self, path: Path) -> ComponentDefinition | None:
        """Load a component from a YAML file, None if unreadable."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_component(data, file_name=path.stem)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning("Skipping component file %s: %s", path, e)
            return None

    def _parse_component(self, data: dict[str, Any], file_name: str) -> ComponentDefinition:
        """Parse a component from YAML data; its name must match the file name."""
        if not isinstance(data, dict):
            raise TypeError("Component file must contain a mapping")
        component = ComponentDefinition.model_validate({"name": file_name, **data})
        if component.name != file_name:
            raise ValueError(
                ErrorMessages.COMPONENT_NAME_MISMATCH.format(name=component.name, file=file_name)
            )
        return component

    def clear_cache(self) -> None:
        """Clear the component cache."""
        self._cache.clear()
