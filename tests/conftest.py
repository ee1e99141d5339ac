"""Shared test fixtures for typegen."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from typegen import StorageRegistry


@pytest.fixture
def make_registry() -> Callable[[dict[str, Any]], StorageRegistry]:
    """Build an initialized registry from storage-layer collection dicts."""
    return StorageRegistry.from_dict


@pytest.fixture
def notes_collections() -> dict[str, Any]:
    """A small schema: lists own notes, notes have one author, tags connect to notes."""
    return {
        "user": {
            "fields": {
                "name": {"type": "string"},
                "email": {"type": "string", "optional": True},
            },
        },
        "list": {
            "fields": {
                "title": {"type": "string"},
                "createdWhen": {"type": "datetime"},
            },
        },
        "note": {
            "fields": {
                "body": {"type": "text"},
                "pinned": {"type": "boolean"},
                "meta": {"type": "json", "optional": True},
            },
            "relationships": [
                {"childOf": "list"},
                {"singleChildOf": "user", "alias": "author", "reverseAlias": "lastNote"},
            ],
        },
        "tag": {
            "fields": {"label": {"type": "string"}},
        },
        "noteTag": {
            "fields": {},
            "relationships": [{"connects": ["note", "tag"]}],
        },
    }


@pytest.fixture
def notes_registry(notes_collections: dict[str, Any]) -> StorageRegistry:
    return StorageRegistry.from_dict(notes_collections)


@pytest.fixture
def schema_file(tmp_path: Path, notes_collections: dict[str, Any]) -> str:
    """Write the notes schema to a JSON file and return its path."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"collections": notes_collections}))
    return str(path)
