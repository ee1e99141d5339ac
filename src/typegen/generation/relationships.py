"""Relationship fields, forward and reverse.

Only child-of relationships produce fields. Connects (many-to-many)
relationships are not supported yet: they are reported as a warning on the
generation context and left out of the declaration.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from typegen.core.types import (
    ChildOfRelationship,
    CollectionDefinition,
    ConnectsRelationship,
    GenerationOptions,
    Relationship,
)
from typegen.exceptions import UnsupportedRelationshipError
from typegen.generation.context import GenerationContext
from typegen.generation.formatting import upper_first
from typegen.generation.typemap import resolve_pk_type

RELATIONSHIPS_PARAMETER = "Relationships"
REVERSE_RELATIONSHIPS_PARAMETER = "ReverseRelationships"

PkTypeResolver = Callable[[str], str]
"""Maps a collection name to the TypeScript type of its primary key."""


@dataclass(frozen=True)
class RelationshipField:
    """A rendered relationship field."""

    alias: str
    referenced_collection: str
    declaration: str


def generate_relationship(
    relationship: Relationship | object,
    collection: CollectionDefinition,
    options: GenerationOptions,
    context: GenerationContext,
    pk_type_of: PkTypeResolver | None = None,
) -> RelationshipField | None:
    """Render a forward relationship of ``collection``.

    The field holds the target type when its alias is selected through the
    ``Relationships`` type parameter, and the target's raw primary key
    otherwise. ``pk_type_of`` resolves that key type; without it the primary
    key strategy is used.

    Raises:
        UnsupportedRelationshipError: For anything but child-of and connects
    """
    if isinstance(relationship, ChildOfRelationship):
        alias = relationship.alias
        target = upper_first(relationship.target_collection)
        if pk_type_of is not None:
            pk_type = pk_type_of(relationship.target_collection)
        else:
            pk_type = resolve_pk_type(options.auto_pk_type, options.field_type_map)
        condition = f"'{alias}' extends {RELATIONSHIPS_PARAMETER}"
        return RelationshipField(
            alias=alias,
            referenced_collection=relationship.target_collection,
            declaration=f"{alias} : {condition} ? {target} : {pk_type}",
        )
    elif isinstance(relationship, ConnectsRelationship):
        context.warn(
            f"Warning: 'connects' relationships are not supported yet, "
            f"skipping one in collection {collection.name}"
        )
        return None
    else:
        raise UnsupportedRelationshipError(collection.name)


def generate_reverse_relationship(
    alias: str,
    relationship: Relationship | object,
    collection: CollectionDefinition,
    context: GenerationContext,
) -> RelationshipField | None:
    """Render a reverse relationship exposed on ``collection`` under ``alias``.

    The result is an intersection segment that adds ``alias`` only when it is
    selected through the ``ReverseRelationships`` type parameter.

    Raises:
        UnsupportedRelationshipError: For anything but child-of and connects
    """
    if isinstance(relationship, ChildOfRelationship):
        source = upper_first(relationship.source_collection)
        suffix = " | null" if relationship.single else "[]"
        condition = f"'{alias}' extends {REVERSE_RELATIONSHIPS_PARAMETER}"
        return RelationshipField(
            alias=alias,
            referenced_collection=relationship.source_collection,
            declaration=f"( {condition} ? {{ {alias} : {source}{suffix} }} : {{}} )",
        )
    elif isinstance(relationship, ConnectsRelationship):
        left, right = relationship.connects
        context.warn(
            f"Warning: 'connects' reverse relationships are not supported yet, "
            f"skipping one in collection {collection.name} ({left} <-> {right})"
        )
        return None
    else:
        raise UnsupportedRelationshipError(collection.name, reverse=True)
