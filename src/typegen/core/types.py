"""Core types and specifications for typegen.

Collection definitions mirror the storage layer's schema registry. All
models are pydantic so they can be built from plain dicts and dumped back
to JSON for the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(StrEnum):
    """Field kinds known to the storage layer.

    Collections may also use custom kinds (e.g. ``media``); those need an
    entry in ``GenerationOptions.field_type_map`` or ``skip_types``.
    """

    STRING = "string"
    TEXT = "text"
    JSON = "json"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    FLOAT = "float"
    INT = "int"
    AUTO_PK = "auto-pk"
    FOREIGN_KEY = "foreign-key"

    @classmethod
    def values(cls) -> list[str]:
        """Return all known field kind values."""
        return [k.value for k in cls]


class PkStrategy(StrEnum):
    """How auto-generated primary keys are represented."""

    STRING = "string"
    INT = "int"
    GENERIC = "generic"  # number | string

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid primary key strategies."""
        return [s.value for s in cls]


class FieldDefinition(BaseModel):
    """A single field of a collection."""

    kind: str = Field(..., alias="type", description="Storage field kind")
    optional: bool = Field(default=False, description="Whether the field may be absent")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ChildOfRelationship(BaseModel):
    """Source collection holds a reference to one record of the target collection."""

    kind: Literal["child-of"] = "child-of"
    alias: str = Field(..., description="Field name on the source collection")
    reverse_alias: str = Field(..., min_length=1, description="Field name on the target")
    single: bool = Field(default=False, description="Target holds at most one source record")
    source_collection: str
    target_collection: str
    field_name: str | None = None


class ConnectsRelationship(BaseModel):
    """Many-to-many relationship declared on a junction collection."""

    kind: Literal["connects"] = "connects"
    connects: tuple[str, str]
    aliases: tuple[str, str]
    source_collection: str


Relationship = Annotated[
    ChildOfRelationship | ConnectsRelationship, Field(discriminator="kind")
]


class CollectionDefinition(BaseModel):
    """A registered collection."""

    name: str = Field(..., min_length=1)
    pk_index: str | list[str] | None = Field(default=None, description="Primary key field(s)")
    fields: dict[str, FieldDefinition] = Field(default_factory=dict)
    relationships: list[Relationship] = Field(default_factory=list)
    reverse_relationships_by_alias: dict[str, Relationship] = Field(
        default_factory=dict, description="Filled in by the registry"
    )
    version: str | None = None
    description: str | None = None

    @property
    def has_relationships(self) -> bool:
        return bool(self.relationships or self.reverse_relationships_by_alias)


ImportGenerator = Callable[[str], str]
"""Maps a collection name to the module path its type is imported from."""


class GenerationOptions(BaseModel):
    """Options for one generation run."""

    collections: list[str] = Field(..., description="Collections to generate, in output order")
    auto_pk_type: PkStrategy = Field(default=PkStrategy.INT)
    field_type_map: dict[str, str] = Field(
        default_factory=dict, description="Overrides merged over the default type map"
    )
    generate_import: ImportGenerator | None = Field(
        default=None, description="Import path resolver for collections outside the batch"
    )
    skip_types: list[str] = Field(default_factory=list, description="Field kinds to leave out")
    optional_pk: bool = Field(
        default=True, description="Gate the primary key behind the WithPk type parameter"
    )

    model_config = ConfigDict(frozen=True)


class GenerationResult(BaseModel):
    """Output of one generation run."""

    source: str
    declarations: list[str] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
