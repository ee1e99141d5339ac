"""Mapping of storage field kinds to TypeScript types."""

from __future__ import annotations

from collections.abc import Mapping

from typegen.core.types import CollectionDefinition, FieldKind, PkStrategy
from typegen.exceptions import MissingPrimaryKeyError, UnresolvedTypeError

DEFAULT_FIELD_TYPE_MAP: dict[str, str] = {
    FieldKind.STRING: "string",
    FieldKind.TEXT: "string",
    FieldKind.JSON: "any",
    FieldKind.DATETIME: "Date",
    FieldKind.TIMESTAMP: "number",
    FieldKind.BOOLEAN: "boolean",
    FieldKind.FLOAT: "number",
    FieldKind.INT: "number",
}


def merge_type_map(field_type_map: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default type map with caller overrides applied on top."""
    return {**DEFAULT_FIELD_TYPE_MAP, **(field_type_map or {})}


def resolve_pk_type(
    auto_pk_type: PkStrategy | str, field_type_map: Mapping[str, str] | None = None
) -> str:
    """Resolve the TypeScript type of an auto-generated primary key.

    ``string`` and ``int`` go through the type map; ``generic`` is the union
    of both (``number | string`` with the defaults).
    """
    type_map = merge_type_map(field_type_map)
    strategy = PkStrategy(auto_pk_type)
    if strategy is PkStrategy.GENERIC:
        return f"{type_map[FieldKind.INT]} | {type_map[FieldKind.STRING]}"
    return type_map[strategy.value]


def resolve_field_type(
    kind: str,
    *,
    collection_name: str,
    field_name: str,
    auto_pk_type: PkStrategy | str,
    field_type_map: Mapping[str, str] | None = None,
) -> str:
    """Resolve the TypeScript type of a field.

    Args:
        kind: Storage field kind
        collection_name: Collection owning the field (for error messages)
        field_name: Field name (for error messages)
        auto_pk_type: Representation of auto-generated primary keys
        field_type_map: Overrides for the default type map

    Returns:
        TypeScript type expression

    Raises:
        UnresolvedTypeError: If the kind is in neither the overrides nor the defaults
    """
    if kind == FieldKind.AUTO_PK:
        return resolve_pk_type(auto_pk_type, field_type_map)

    type_map = merge_type_map(field_type_map)
    typescript_type = type_map.get(kind)
    if not typescript_type:
        raise UnresolvedTypeError(kind, collection_name, field_name)
    return typescript_type


def resolve_collection_pk_type(
    collection: CollectionDefinition,
    *,
    auto_pk_type: PkStrategy | str,
    field_type_map: Mapping[str, str] | None = None,
) -> str:
    """Resolve the TypeScript type of a collection's primary key.

    Auto-generated keys follow ``auto_pk_type``; a key field declared with
    another kind keeps that kind's type.

    Raises:
        MissingPrimaryKeyError: If the primary key is not a single field name
        UnresolvedTypeError: If the key field's kind has no TypeScript type
    """
    pk_index = collection.pk_index
    if not isinstance(pk_index, str) or not pk_index:
        raise MissingPrimaryKeyError(collection.name, pk_index)

    pk_field = collection.fields.get(pk_index)
    if pk_field is None or pk_field.kind == FieldKind.AUTO_PK:
        return resolve_pk_type(auto_pk_type, field_type_map)
    return resolve_field_type(
        pk_field.kind,
        collection_name=collection.name,
        field_name=pk_index,
        auto_pk_type=auto_pk_type,
        field_type_map=field_type_map,
    )
