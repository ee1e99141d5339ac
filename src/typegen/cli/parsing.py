"""Input parsing utilities for CLI commands."""

import json
from pathlib import Path
from typing import Any

from typegen.core.types import ImportGenerator


def parse_type_mapping(spec: str) -> tuple[str, str]:
    """Parse a field type override.

    Format: kind=typescript_type

    Examples:
        "media=Blob" → ("media", "Blob")
        "json=Record<string, unknown>" → ("json", "Record<string, unknown>")

    Args:
        spec: Override specification string

    Returns:
        (field kind, TypeScript type) pair

    Raises:
        ValueError: If spec format is invalid
    """
    kind, sep, typescript_type = spec.partition("=")
    kind = kind.strip()
    typescript_type = typescript_type.strip()
    if not sep or not kind or not typescript_type:
        raise ValueError(f"Invalid type mapping: '{spec}'. Expected format: kind=type")
    return kind, typescript_type


def parse_type_map(specs: list[str] | None) -> dict[str, str]:
    """Parse repeated ``kind=type`` overrides into a field type map."""
    return dict(parse_type_mapping(spec) for spec in specs or [])


def import_path_generator(template: str | None) -> ImportGenerator | None:
    """Build an import path resolver from a ``{collection}`` template.

    Examples:
        "./{collection}" → lambda name: f"./{name}"

    Raises:
        ValueError: If the template has no {collection} placeholder
    """
    if not template:
        return None
    if "{collection}" not in template:
        raise ValueError(
            f"Invalid import path template: '{template}'. "
            "It must contain a {collection} placeholder, e.g. './{collection}'"
        )

    def generate_import(collection_name: str) -> str:
        return template.format(collection=collection_name)

    return generate_import


def read_json_file(path: str) -> dict[str, Any]:
    """Read single JSON object from file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON object

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
        ValueError: If the file holds something other than an object
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open("r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data
