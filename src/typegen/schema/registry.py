"""Storage registry holding the collection definitions to generate types for."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typegen.core.types import ChildOfRelationship, CollectionDefinition, ConnectsRelationship
from typegen.exceptions import (
    RegistryNotInitializedError,
    SchemaDefinitionError,
    UnknownCollectionError,
)
from typegen.schema.parsing import parse_collection, pluralize

logger = logging.getLogger(__name__)


class StorageRegistry:
    """Registry of collection definitions.

    Collections are registered first, then ``finish_initialization()``
    validates them and derives the reverse relationships on the collections
    they point at. Lookups are only allowed after initialization.

    Example:
        registry = StorageRegistry()
        registry.register_collections({
            "list": {"fields": {"title": {"type": "string"}}},
            "note": {"fields": {}, "relationships": [{"childOf": "list"}]},
        })
        registry.finish_initialization()
        registry.get_collection("list").reverse_relationships_by_alias  # {"notes": ...}
    """

    def __init__(self) -> None:
        self._collections: dict[str, CollectionDefinition] = {}
        self._initialized = False

    @classmethod
    def from_dict(cls, collections: Mapping[str, Any]) -> StorageRegistry:
        """Create, populate and initialize a registry in one call."""
        registry = cls()
        registry.register_collections(collections)
        registry.finish_initialization()
        return registry

    @property
    def collections(self) -> dict[str, CollectionDefinition]:
        """Registered collections by name, in registration order."""
        return dict(self._collections)

    @property
    def initialized(self) -> bool:
        return self._initialized

    def register_collection(
        self, name: str, definition: CollectionDefinition | Mapping[str, Any]
    ) -> CollectionDefinition:
        """Register one collection.

        Args:
            name: Collection name
            definition: CollectionDefinition or a dict in the storage layer's format

        Returns:
            The registered definition
        """
        if isinstance(definition, CollectionDefinition):
            collection = definition.model_copy(update={"name": name}, deep=True)
        else:
            collection = parse_collection(name, definition)

        self._collections[name] = collection
        self._initialized = False
        logger.debug(f"Registered collection '{name}' with {len(collection.fields)} fields")
        return collection

    def register_collections(self, collections: Mapping[str, Any]) -> None:
        """Register several collections, keeping the mapping's order."""
        for name, definition in collections.items():
            self.register_collection(name, definition)

    def finish_initialization(self) -> None:
        """Validate relationships and build the reverse relationship maps.

        Raises:
            SchemaDefinitionError: If an alias is used twice within a collection
            UnknownCollectionError: If a relationship points at an unregistered collection
        """
        for collection in self._collections.values():
            collection.reverse_relationships_by_alias = {}

        for collection in self._collections.values():
            self._check_aliases(collection)
            for relationship in collection.relationships:
                if isinstance(relationship, ChildOfRelationship):
                    target = self._lookup(relationship.target_collection)
                    self._add_reverse(target, relationship.reverse_alias, relationship)
                elif isinstance(relationship, ConnectsRelationship):
                    left, right = relationship.connects
                    self._add_reverse(self._lookup(left), pluralize(right), relationship)
                    self._add_reverse(self._lookup(right), pluralize(left), relationship)

        self._initialized = True
        logger.info(f"Storage registry initialized with {len(self._collections)} collections")

    def get_collection(self, name: str) -> CollectionDefinition:
        """Get a collection definition by name.

        Raises:
            RegistryNotInitializedError: If finish_initialization() has not run
            UnknownCollectionError: If no collection has this name
        """
        if not self._initialized:
            raise RegistryNotInitializedError()
        return self._lookup(name)

    def list_collections(self) -> list[str]:
        """List registered collection names in registration order."""
        return list(self._collections)

    def describe(self) -> dict[str, Any]:
        """Describe all collections as a JSON-serializable dict."""
        collections = {}
        for name, collection in self._collections.items():
            collections[name] = {
                "pk_index": collection.pk_index,
                "fields": {
                    field_name: field.model_dump(by_alias=True)
                    for field_name, field in collection.fields.items()
                },
                "relationships": [rel.model_dump() for rel in collection.relationships],
                "reverse_relationships": sorted(collection.reverse_relationships_by_alias),
            }
        return {"collections": collections, "total_collections": len(collections)}

    def _lookup(self, name: str) -> CollectionDefinition:
        collection = self._collections.get(name)
        if collection is None:
            raise UnknownCollectionError(name, self.list_collections())
        return collection

    def _check_aliases(self, collection: CollectionDefinition) -> None:
        seen: set[str] = set()
        for relationship in collection.relationships:
            if isinstance(relationship, ChildOfRelationship):
                aliases = [relationship.alias]
            else:
                aliases = list(relationship.aliases)
            for alias in aliases:
                if alias in seen:
                    raise SchemaDefinitionError(
                        collection.name, f"relationship alias '{alias}' is used more than once"
                    )
                seen.add(alias)

    def _add_reverse(
        self,
        collection: CollectionDefinition,
        alias: str,
        relationship: ChildOfRelationship | ConnectsRelationship,
    ) -> None:
        if alias in collection.reverse_relationships_by_alias:
            raise SchemaDefinitionError(
                collection.name, f"reverse relationship alias '{alias}' is used more than once"
            )
        collection.reverse_relationships_by_alias[alias] = relationship
