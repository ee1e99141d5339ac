"""Custom exceptions for typegen.

Error messages say what went wrong AND how to fix it, and carry a context
dict so the CLI can render them as JSON.
"""

from __future__ import annotations

from typing import Any


class TypegenError(Exception):
    """Base exception for all typegen errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class UnknownCollectionError(TypegenError):
    """Collection is not registered."""

    def __init__(
        self, collection_name: str, available_collections: list[str] | None = None
    ) -> None:
        available = available_collections or []
        if available:
            message = (
                f"Collection '{collection_name}' not found. "
                f"Available collections: {', '.join(available)}"
            )
        else:
            message = f"Collection '{collection_name}' not found. No collections registered."

        super().__init__(
            message,
            {"collection_name": collection_name, "available_collections": available},
        )
        self.collection_name = collection_name
        self.available_collections = available


class UnresolvedTypeError(TypegenError):
    """Field kind has no TypeScript type in the type maps."""

    def __init__(self, field_kind: str, collection_name: str, field_name: str) -> None:
        message = (
            f"Could not translate type '{field_kind}' of field "
            f"'{collection_name}.{field_name}' to TypeScript type. "
            f"Please use the 'field_type_map' option for custom fields."
        )
        super().__init__(
            message,
            {
                "field_kind": field_kind,
                "collection_name": collection_name,
                "field_name": field_name,
            },
        )
        self.field_kind = field_kind
        self.collection_name = collection_name
        self.field_name = field_name


class UnsupportedRelationshipError(TypegenError):
    """Relationship is neither child-of nor connects."""

    def __init__(self, collection_name: str, reverse: bool = False) -> None:
        kind = "reverse relationship" if reverse else "relationship"
        message = (
            f"Unsupported {kind} type detected in collection '{collection_name}'. "
            f"Supported relationships: childOf, singleChildOf, connects"
        )
        super().__init__(message, {"collection_name": collection_name, "reverse": reverse})
        self.collection_name = collection_name
        self.reverse = reverse


class MissingPrimaryKeyError(TypegenError):
    """Collection primary key is not a single field name."""

    def __init__(self, collection_name: str, pk_index: Any) -> None:
        message = (
            f"Unsupported pkIndex {pk_index!r} found in collection '{collection_name}'. "
            f"Only a single field name can be used as primary key."
        )
        super().__init__(message, {"collection_name": collection_name, "pk_index": pk_index})
        self.collection_name = collection_name
        self.pk_index = pk_index


class SchemaDefinitionError(TypegenError):
    """Collection definition handed to the registry is malformed."""

    def __init__(self, collection_name: str, reason: str) -> None:
        message = f"Invalid definition for collection '{collection_name}': {reason}"
        super().__init__(message, {"collection_name": collection_name, "reason": reason})
        self.collection_name = collection_name
        self.reason = reason


class RegistryNotInitializedError(TypegenError):
    """Registry was queried before finish_initialization() ran."""

    def __init__(self) -> None:
        super().__init__(
            "Storage registry is not initialized. "
            "Call finish_initialization() after registering collections."
        )
