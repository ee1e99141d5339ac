"""typegen - TypeScript type declarations from storage collection schemas.

Keeps hand-written TypeScript types in sync with the collections registered
in a storage registry.

Example:
    from typegen import StorageRegistry, generate_typescript_interfaces

    registry = StorageRegistry.from_dict({
        "list": {"fields": {"title": {"type": "string"}}},
        "note": {
            "fields": {"body": {"type": "text"}},
            "relationships": [{"childOf": "list"}],
        },
    })

    source = generate_typescript_interfaces(
        registry,
        collections=["note"],
        auto_pk_type="int",
        generate_import=lambda name: f"./{name}",
    )
"""

from typegen.core.types import (
    ChildOfRelationship,
    CollectionDefinition,
    ConnectsRelationship,
    FieldDefinition,
    FieldKind,
    GenerationOptions,
    GenerationResult,
    PkStrategy,
)
from typegen.exceptions import (
    MissingPrimaryKeyError,
    RegistryNotInitializedError,
    SchemaDefinitionError,
    TypegenError,
    UnknownCollectionError,
    UnresolvedTypeError,
    UnsupportedRelationshipError,
)
from typegen.generation import (
    DEFAULT_FIELD_TYPE_MAP,
    generate_typescript,
    generate_typescript_interfaces,
)
from typegen.schema import StorageRegistry

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "generate_typescript",
    "generate_typescript_interfaces",
    "DEFAULT_FIELD_TYPE_MAP",
    "StorageRegistry",
    # Types
    "FieldKind",
    "PkStrategy",
    "FieldDefinition",
    "ChildOfRelationship",
    "ConnectsRelationship",
    "CollectionDefinition",
    "GenerationOptions",
    "GenerationResult",
    # Exceptions
    "TypegenError",
    "UnknownCollectionError",
    "UnresolvedTypeError",
    "UnsupportedRelationshipError",
    "MissingPrimaryKeyError",
    "SchemaDefinitionError",
    "RegistryNotInitializedError",
]
