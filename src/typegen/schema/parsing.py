"""Parsing of collection definitions written in the storage layer's format.

Format (one entry per collection)::

    {
        "version": "2024-01-01",
        "pkIndex": "id",
        "fields": {"title": {"type": "string", "optional": true}},
        "relationships": [
            {"childOf": "list"},
            {"singleChildOf": "user", "alias": "owner"},
            {"connects": ["tag", "note"]}
        ]
    }
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from typegen.core.types import (
    ChildOfRelationship,
    CollectionDefinition,
    ConnectsRelationship,
    FieldDefinition,
    FieldKind,
)
from typegen.exceptions import SchemaDefinitionError, UnsupportedRelationshipError

DEFAULT_PK_FIELD = "id"


def pluralize(name: str) -> str:
    """Return the English plural of a collection name (``note`` -> ``notes``)."""
    if re.search(r"[^aeiou]y$", name):
        return name[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", name):
        return name + "es"
    return name + "s"


def parse_field(collection_name: str, field_name: str, raw: Any) -> FieldDefinition:
    """Parse a single ``{"type": ..., "optional": ...}`` field entry.

    Raises:
        SchemaDefinitionError: If the entry has no string ``type``
    """
    if isinstance(raw, FieldDefinition):
        return raw
    if not isinstance(raw, Mapping) or not isinstance(raw.get("type"), str):
        raise SchemaDefinitionError(
            collection_name, f"field '{field_name}' needs a string 'type', got {raw!r}"
        )
    return FieldDefinition(kind=raw["type"], optional=bool(raw.get("optional", False)))


def parse_relationship(
    collection_name: str, raw: Any
) -> ChildOfRelationship | ConnectsRelationship:
    """Parse one relationship entry declared on ``collection_name``.

    ``childOf`` gets a plural reverse alias, ``singleChildOf`` a singular
    one, unless ``reverseAlias`` is given.

    Raises:
        UnsupportedRelationshipError: If the entry is none of
            childOf, singleChildOf or connects
        SchemaDefinitionError: If a connects entry is not a pair
    """
    if isinstance(raw, ChildOfRelationship | ConnectsRelationship):
        return raw
    if not isinstance(raw, Mapping):
        raise UnsupportedRelationshipError(collection_name)

    if "childOf" in raw or "singleChildOf" in raw:
        single = "singleChildOf" in raw
        target = raw["singleChildOf"] if single else raw["childOf"]
        alias = raw.get("alias") or target
        default_reverse_alias = collection_name if single else pluralize(collection_name)
        return ChildOfRelationship(
            alias=alias,
            reverse_alias=raw.get("reverseAlias") or default_reverse_alias,
            single=single,
            source_collection=collection_name,
            target_collection=target,
            field_name=raw.get("fieldName") or alias,
        )

    if "connects" in raw:
        pair = raw["connects"]
        if not isinstance(pair, list | tuple) or len(pair) != 2:
            raise SchemaDefinitionError(
                collection_name, f"'connects' must name exactly two collections, got {pair!r}"
            )
        aliases = raw.get("aliases") or pair
        return ConnectsRelationship(
            connects=(pair[0], pair[1]),
            aliases=(aliases[0], aliases[1]),
            source_collection=collection_name,
        )

    raise UnsupportedRelationshipError(collection_name)


def parse_collection(name: str, raw: Mapping[str, Any]) -> CollectionDefinition:
    """Build a CollectionDefinition from its storage-layer dict.

    A collection without ``pkIndex`` gets an auto-generated ``id`` field.
    """
    if not isinstance(raw, Mapping):
        raise SchemaDefinitionError(name, f"expected an object, got {type(raw).__name__}")

    raw_fields = raw.get("fields") or {}
    if not isinstance(raw_fields, Mapping):
        raise SchemaDefinitionError(name, "'fields' must be an object")
    fields = {
        field_name: parse_field(name, field_name, field)
        for field_name, field in raw_fields.items()
    }

    pk_index = raw.get("pkIndex")
    if pk_index is None:
        pk_index = DEFAULT_PK_FIELD
        if DEFAULT_PK_FIELD not in fields:
            fields = {DEFAULT_PK_FIELD: FieldDefinition(kind=FieldKind.AUTO_PK), **fields}

    relationships = [parse_relationship(name, rel) for rel in raw.get("relationships") or []]

    version = raw.get("version")
    try:
        return CollectionDefinition(
            name=name,
            pk_index=pk_index,
            fields=fields,
            relationships=relationships,
            version=str(version) if version is not None else None,
            description=raw.get("description"),
        )
    except ValidationError as e:
        raise SchemaDefinitionError(name, str(e)) from e
