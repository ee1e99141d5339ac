"""Field declaration lines."""

from __future__ import annotations

from typegen.core.types import CollectionDefinition, FieldDefinition, FieldKind, GenerationOptions
from typegen.generation.typemap import resolve_field_type


def generate_field(
    field_name: str,
    field: FieldDefinition,
    collection: CollectionDefinition,
    options: GenerationOptions,
) -> str | None:
    """Render one field as ``name[?] : type``.

    Returns None for fields that don't belong in the field block: foreign
    keys (covered by relationships), the primary key (own segment) and
    kinds listed in ``options.skip_types``.
    """
    if field.kind == FieldKind.FOREIGN_KEY:
        return None
    if isinstance(collection.pk_index, str) and field_name == collection.pk_index:
        return None
    if field.kind in options.skip_types:
        return None

    optional = "?" if field.optional else ""
    typescript_type = resolve_field_type(
        field.kind,
        collection_name=collection.name,
        field_name=field_name,
        auto_pk_type=options.auto_pk_type,
        field_type_map=options.field_type_map,
    )
    return f"{field_name}{optional} : {typescript_type}"
