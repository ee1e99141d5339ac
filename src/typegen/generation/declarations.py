"""Assembly of one ``export type`` declaration per collection.

A declaration is an intersection of segments::

    export type Note<WithPk extends boolean = true, Relationships extends 'list' | null = null> =
        ( WithPk extends true ? { id : number } : {} ) &
        {
            title : string
        } &
        {
            list : 'list' extends Relationships ? List : number
        }

Type parameters let the use site pick whether the primary key is present
and which relationships are expanded to full types. Without parameters the
declaration describes a record without expanded relationships.
"""

from __future__ import annotations

from typegen.core.types import CollectionDefinition, GenerationOptions
from typegen.generation.context import GenerationContext
from typegen.generation.fields import generate_field
from typegen.generation.formatting import in_indented_block, indent, upper_first
from typegen.generation.relationships import (
    RELATIONSHIPS_PARAMETER,
    REVERSE_RELATIONSHIPS_PARAMETER,
    PkTypeResolver,
    RelationshipField,
    generate_relationship,
    generate_reverse_relationship,
)
from typegen.generation.typemap import resolve_collection_pk_type

WITH_PK_PARAMETER = "WithPk"
NONE_SENTINEL = "null"


def generate_declaration(
    collection: CollectionDefinition,
    options: GenerationOptions,
    context: GenerationContext,
    pk_type_of: PkTypeResolver | None = None,
) -> str:
    """Generate the type declaration for one collection.

    Collections referenced through relationships are recorded on ``context``
    so the caller can import the ones outside the batch. ``pk_type_of`` maps
    a related collection to its primary key type; without it the primary key
    strategy is used.

    Raises:
        MissingPrimaryKeyError: If the primary key is not a single field name
        UnresolvedTypeError: If a field kind has no TypeScript type
        UnsupportedRelationshipError: If a relationship is of an unknown variant
    """
    pk_segment = generate_pk_segment(collection, options)

    field_lines = [
        line
        for field_name, field in collection.fields.items()
        if (line := generate_field(field_name, field, collection, options)) is not None
    ]

    relationship_fields = []
    for relationship in collection.relationships:
        rel_field = generate_relationship(relationship, collection, options, context, pk_type_of)
        if rel_field is not None:
            relationship_fields.append(rel_field)
    reverse_relationship_fields = [
        rel_field
        for alias, relationship in collection.reverse_relationships_by_alias.items()
        if (rel_field := generate_reverse_relationship(alias, relationship, collection, context))
        is not None
    ]
    for rel_field in [*relationship_fields, *reverse_relationship_fields]:
        context.reference(rel_field.referenced_collection)

    segments = [pk_segment]
    if fields_block := in_indented_block(field_lines):
        segments.append(fields_block)
    if relationships_block := in_indented_block([f.declaration for f in relationship_fields]):
        segments.append(relationships_block)
    segments.extend(f.declaration for f in reverse_relationship_fields)

    parameters = generate_type_parameters(
        collection, options, relationship_fields, reverse_relationship_fields
    )
    header = f"export type {upper_first(collection.name)}{parameters} ="
    body = " &\n".join(segments)
    return f"{header}\n{indent(body)}"


def generate_pk_segment(collection: CollectionDefinition, options: GenerationOptions) -> str:
    """Render the primary key segment, gated behind ``WithPk`` if requested."""
    pk_type = resolve_collection_pk_type(
        collection, auto_pk_type=options.auto_pk_type, field_type_map=options.field_type_map
    )
    segment = f"{{ {collection.pk_index} : {pk_type} }}"
    if options.optional_pk:
        return f"( {WITH_PK_PARAMETER} extends true ? {segment} : {{}} )"
    return segment


def generate_type_parameters(
    collection: CollectionDefinition,
    options: GenerationOptions,
    relationship_fields: list[RelationshipField],
    reverse_relationship_fields: list[RelationshipField],
) -> str:
    """Render the ``<...>`` clause of a declaration, or an empty string.

    ``Relationships`` is declared whenever the collection has relationships
    in either direction; ``ReverseRelationships`` only when some reverse
    relationship produced a field.
    """
    parameters = []
    if options.optional_pk:
        parameters.append(f"{WITH_PK_PARAMETER} extends boolean = true")

    if collection.has_relationships:
        aliases = [f"'{f.alias}'" for f in relationship_fields] + [NONE_SENTINEL]
        parameters.append(
            f"{RELATIONSHIPS_PARAMETER} extends {' | '.join(aliases)} = {NONE_SENTINEL}"
        )
        if reverse_relationship_fields:
            reverse_aliases = [f"'{f.alias}'" for f in reverse_relationship_fields]
            reverse_aliases.append(NONE_SENTINEL)
            parameters.append(
                f"{REVERSE_RELATIONSHIPS_PARAMETER} extends {' | '.join(reverse_aliases)}"
                f" = {NONE_SENTINEL}"
            )

    if not parameters:
        return ""
    return f"<{', '.join(parameters)}>"
