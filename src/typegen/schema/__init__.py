"""Schema registry for typegen."""

from typegen.schema.parsing import parse_collection, pluralize
from typegen.schema.registry import StorageRegistry

__all__ = ["StorageRegistry", "parse_collection", "pluralize"]
