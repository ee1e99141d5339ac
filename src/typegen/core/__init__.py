"""Core components for typegen."""

from typegen.core.types import (
    ChildOfRelationship,
    CollectionDefinition,
    ConnectsRelationship,
    FieldDefinition,
    FieldKind,
    GenerationOptions,
    GenerationResult,
    ImportGenerator,
    PkStrategy,
    Relationship,
)

__all__ = [
    "FieldKind",
    "PkStrategy",
    "FieldDefinition",
    "ChildOfRelationship",
    "ConnectsRelationship",
    "Relationship",
    "CollectionDefinition",
    "GenerationOptions",
    "GenerationResult",
    "ImportGenerator",
]
