"""Define utility functions for importing and exporting hierarchy documents as YAML (or JSON)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml


def export_yaml_data(
    data: dict[str, Any] | list[Any],
    filepath: Path,
    sort_keys: bool = True,
) -> None:
    """Output the given YAML data to the given file.

    :param data: Data to be serialized
    :param filepath: Path of the YAML file to write
    :param sort_keys: Whether to sort mapping keys in the output (default: True)
    """
    yaml_string = yaml.safe_dump(data, sort_keys=sort_keys, default_flow_style=False)

    with filepath.open("w") as file:
        file.write(yaml_string)

    if not filepath.exists():
        raise FileNotFoundError(f"Exported to YAML file '{filepath}' yet it doesn't exist")


def load_yaml_data(yaml_path: Path, required_keys: set[str] | None = None) -> Any:
    """Load data from a YAML file into Python data structures.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Set of keys required to exist in the loaded data (if None, ignored)
    :return: Dictionary mapping strings to values, or a list of dictionaries, etc.
    :raises KeyError: If a required key is missing in the loaded data
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data: Any = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if required_keys is not None:
        for key in required_keys:
            if not isinstance(yaml_data, Mapping) or key not in yaml_data:
                raise KeyError(f"Required key '{key}' was missing in data loaded from {yaml_path}")

    return yaml_data


def load_hierarchy_file(path: Path, key: str | None = None) -> Any:
    """Load a raw type hierarchy definition from a YAML or JSON file.

    The loaded value is returned as-is; judging its shape is left to the validator.

    :param path: Path to a YAML or JSON document
    :param key: Optional top-level key under which the hierarchy is nested (default: None)
    :return: The raw hierarchy definition (normally a mapping of type names to declarations)
    """
    if key is None:
        return load_yaml_data(path)

    return load_yaml_data(path, required_keys={key})[key]


def export_hierarchy_file(hierarchy_def: Mapping[Any, Any], path: Path) -> None:
    """Write a normalized type hierarchy definition to a YAML file, preserving declaration order.

    Declarations are normalized as the validator reads them: unusable fields and entries are
    dropped, empty fields are omitted, and keys become strings.

    :param hierarchy_def: Raw hierarchy mapping or a `HierarchyDefinition`
    :param path: Path of the YAML file to write
    """
    # Imported here because the hierarchy package depends on this module (via its config)
    from nominal_types.hierarchy.hierarchy_definition import HierarchyDefinition

    definition = HierarchyDefinition.from_mapping(hierarchy_def)
    export_yaml_data(definition.to_definition(), path, sort_keys=False)
