"""Tests for the generation entry points and import collection."""

import textwrap

import pytest

from typegen import generate_typescript, generate_typescript_interfaces
from typegen.core.types import GenerationOptions
from typegen.exceptions import (
    MissingPrimaryKeyError,
    UnknownCollectionError,
    UnresolvedTypeError,
)
from typegen.generation.context import GenerationContext
from typegen.generation.imports import generate_imports


def expected(text: str) -> str:
    return textwrap.dedent(text).strip("\n") + "\n"


def import_from_sibling(collection_name: str) -> str:
    return f"./{collection_name}"


@pytest.fixture
def foo_bar_collections():
    return {
        "fooSomething": {"fields": {"spam": {"type": "string"}}},
        "bar": {
            "fields": {"eggs": {"type": "string"}},
            "relationships": [{"childOf": "fooSomething"}],
        },
    }


class TestGenerateTypescriptInterfaces:
    """Tests for generate_typescript_interfaces."""

    def test_multiple_collections(self, make_registry):
        registry = make_registry(
            {
                "foo": {"fields": {"spam": {"type": "string"}}},
                "bar": {"fields": {"eggs": {"type": "string"}}},
            }
        )
        source = generate_typescript_interfaces(
            registry, collections=["foo", "bar"], optional_pk=False
        )
        assert source == expected(
            """
            export type Foo =
                { id : number } &
                {
                    spam : string
                }

            export type Bar =
                { id : number } &
                {
                    eggs : string
                }
            """
        )

    def test_request_order_is_kept(self, make_registry):
        registry = make_registry(
            {
                "foo": {"fields": {"spam": {"type": "string"}}},
                "bar": {"fields": {"eggs": {"type": "string"}}},
            }
        )
        source = generate_typescript_interfaces(registry, collections=["bar", "foo"])
        assert source.index("export type Bar") < source.index("export type Foo")

    def test_generic_pk(self, make_registry):
        registry = make_registry({"test": {"fields": {"fieldString": {"type": "string"}}}})
        source = generate_typescript_interfaces(
            registry, collections=["test"], auto_pk_type="generic", optional_pk=False
        )
        assert "{ id : number | string } &" in source

    def test_optional_fields(self, make_registry):
        registry = make_registry(
            {"test": {"fields": {"fieldString": {"type": "string", "optional": True}}}}
        )
        source = generate_typescript_interfaces(registry, collections=["test"])
        assert "fieldString? : string" in source

    def test_skip_types(self, make_registry):
        registry = make_registry(
            {
                "test": {
                    "fields": {
                        "fieldString": {"type": "string"},
                        "fieldMedia": {"type": "media"},
                    }
                }
            }
        )
        source = generate_typescript_interfaces(
            registry, collections=["test"], skip_types=["media"], optional_pk=False
        )
        assert source == expected(
            """
            export type Test =
                { id : number } &
                {
                    fieldString : string
                }
            """
        )

    def test_field_type_map(self, make_registry):
        registry = make_registry({"test": {"fields": {"fieldMedia": {"type": "media"}}}})
        source = generate_typescript_interfaces(
            registry, collections=["test"], field_type_map={"media": "Blob"}
        )
        assert "fieldMedia : Blob" in source

    def test_ends_with_one_newline(self, notes_registry):
        source = generate_typescript_interfaces(notes_registry, collections=["note", "list"])
        assert source.endswith(")\n")
        assert not source.endswith("\n\n")

    def test_ends_with_one_newline_after_block(self, notes_registry):
        source = generate_typescript_interfaces(notes_registry, collections=["list", "note"])
        assert source.endswith("}\n")
        assert not source.endswith("\n\n")

    def test_unexpanded_relationship_uses_target_pk_type(self, make_registry):
        registry = make_registry(
            {
                "page": {"fields": {"url": {"type": "string"}}, "pkIndex": "url"},
                "visit": {
                    "fields": {"at": {"type": "timestamp"}},
                    "relationships": [{"childOf": "page"}],
                },
            }
        )
        source = generate_typescript_interfaces(
            registry, collections=["visit"], auto_pk_type="int"
        )
        assert "{ id : number }" in source
        assert "page : 'page' extends Relationships ? Page : string" in source

    def test_unexpanded_relationship_to_auto_pk_follows_strategy(self, make_registry):
        registry = make_registry(
            {
                "page": {"fields": {"url": {"type": "string"}}, "pkIndex": "url"},
                "visit": {
                    "fields": {},
                    "relationships": [{"childOf": "page"}],
                },
                "hit": {
                    "fields": {},
                    "relationships": [{"childOf": "visit"}],
                },
            }
        )
        source = generate_typescript_interfaces(
            registry, collections=["hit"], auto_pk_type="generic"
        )
        assert "visit : 'visit' extends Relationships ? Visit : number | string" in source

    def test_idempotent(self, notes_registry):
        kwargs = {
            "collections": ["note", "list", "tag"],
            "generate_import": import_from_sibling,
        }
        first = generate_typescript_interfaces(notes_registry, **kwargs)
        second = generate_typescript_interfaces(notes_registry, **kwargs)
        assert first == second


class TestImports:
    """Tests for imports of collections outside the batch."""

    def test_import_for_collection_in_other_file(self, make_registry, foo_bar_collections):
        registry = make_registry(foo_bar_collections)
        source = generate_typescript_interfaces(
            registry, collections=["bar"], generate_import=import_from_sibling
        )
        assert source == expected(
            """
            import { FooSomething } from './fooSomething'

            export type Bar<WithPk extends boolean = true, Relationships extends 'fooSomething' | null = null> =
                ( WithPk extends true ? { id : number } : {} ) &
                {
                    eggs : string
                } &
                {
                    fooSomething : 'fooSomething' extends Relationships ? FooSomething : number
                }
            """  # noqa: E501
        )

    def test_no_import_within_batch(self, make_registry, foo_bar_collections):
        registry = make_registry(foo_bar_collections)
        source = generate_typescript_interfaces(
            registry,
            collections=["fooSomething", "bar"],
            generate_import=import_from_sibling,
            optional_pk=False,
        )
        assert source == expected(
            """
            export type FooSomething<Relationships extends null = null, ReverseRelationships extends 'bars' | null = null> =
                { id : number } &
                {
                    spam : string
                } &
                ( 'bars' extends ReverseRelationships ? { bars : Bar[] } : {} )

            export type Bar<Relationships extends 'fooSomething' | null = null> =
                { id : number } &
                {
                    eggs : string
                } &
                {
                    fooSomething : 'fooSomething' extends Relationships ? FooSomething : number
                }
            """  # noqa: E501
        )

    def test_no_import_without_resolver(self, make_registry, foo_bar_collections):
        registry = make_registry(foo_bar_collections)
        source = generate_typescript_interfaces(registry, collections=["bar"])
        assert "import" not in source
        assert source.startswith("export type Bar<")

    def test_imports_in_first_referenced_order(self, notes_registry):
        result = generate_typescript(
            notes_registry,
            GenerationOptions(collections=["note"], generate_import=import_from_sibling),
        )
        assert result.imports == [
            "import { List } from './list'",
            "import { User } from './user'",
        ]
        assert result.source.startswith(
            "import { List } from './list'\nimport { User } from './user'\n\nexport type Note<"
        )

    def test_reverse_reference_is_imported(self, notes_registry):
        result = generate_typescript(
            notes_registry,
            GenerationOptions(collections=["list"], generate_import=import_from_sibling),
        )
        assert result.imports == ["import { Note } from './note'"]

    def test_generate_imports_skips_batch_members(self):
        context = GenerationContext()
        for name in ["user", "list", "user", "tag"]:
            context.reference(name)
        options = GenerationOptions(
            collections=["list"], generate_import=lambda name: f"@app/{name}/types"
        )
        assert generate_imports(context, options) == [
            "import { User } from '@app/user/types'",
            "import { Tag } from '@app/tag/types'",
        ]

    def test_generate_imports_without_references(self):
        options = GenerationOptions(collections=["list"], generate_import=import_from_sibling)
        assert generate_imports(GenerationContext(), options) == []


class TestGenerateTypescript:
    """Tests for generate_typescript results and errors."""

    def test_result_parts(self, notes_registry):
        result = generate_typescript(
            notes_registry, GenerationOptions(collections=["note", "tag", "noteTag"])
        )
        assert len(result.declarations) == 3
        assert result.imports == []
        assert result.source == "\n\n".join(result.declarations) + "\n"

    def test_connects_warnings(self, notes_registry):
        result = generate_typescript(
            notes_registry, GenerationOptions(collections=["note", "tag", "noteTag"])
        )
        assert result.warnings == [
            "Warning: 'connects' reverse relationships are not supported yet, "
            "skipping one in collection note (note <-> tag)",
            "Warning: 'connects' reverse relationships are not supported yet, "
            "skipping one in collection tag (note <-> tag)",
            "Warning: 'connects' relationships are not supported yet, "
            "skipping one in collection noteTag",
        ]

    def test_context_is_not_shared_between_runs(self, notes_registry):
        first = generate_typescript(notes_registry, GenerationOptions(collections=["tag"]))
        second = generate_typescript(notes_registry, GenerationOptions(collections=["tag"]))
        assert len(first.warnings) == len(second.warnings) == 1

    def test_unknown_collection(self, notes_registry):
        with pytest.raises(UnknownCollectionError) as exc_info:
            generate_typescript_interfaces(notes_registry, collections=["note", "missing"])
        assert exc_info.value.collection_name == "missing"

    def test_unresolved_type_aborts_batch(self, make_registry):
        registry = make_registry(
            {
                "ok": {"fields": {"name": {"type": "string"}}},
                "broken": {"fields": {"picture": {"type": "media"}}},
            }
        )
        with pytest.raises(UnresolvedTypeError) as exc_info:
            generate_typescript_interfaces(registry, collections=["ok", "broken"])
        assert "broken.picture" in str(exc_info.value)

    def test_compound_primary_key(self, make_registry):
        registry = make_registry(
            {"visit": {"pkIndex": ["url", "time"], "fields": {"url": {"type": "string"}}}}
        )
        with pytest.raises(MissingPrimaryKeyError):
            generate_typescript_interfaces(registry, collections=["visit"])
