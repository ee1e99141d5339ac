"""Generation entry points."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from typegen.core.types import GenerationOptions, GenerationResult, ImportGenerator, PkStrategy
from typegen.generation.context import GenerationContext
from typegen.generation.declarations import generate_declaration
from typegen.generation.imports import generate_imports
from typegen.generation.typemap import resolve_collection_pk_type

if TYPE_CHECKING:
    from typegen.schema.registry import StorageRegistry

logger = logging.getLogger(__name__)


def generate_typescript(registry: StorageRegistry, options: GenerationOptions) -> GenerationResult:
    """Generate TypeScript declarations for the requested collections.

    Args:
        registry: Initialized storage registry
        options: Generation options

    Returns:
        GenerationResult with the full source, the individual declarations,
        the import statements and any warnings

    Raises:
        UnknownCollectionError: If a requested collection is not registered
    """
    context = GenerationContext()

    def pk_type_of(name: str) -> str:
        return resolve_collection_pk_type(
            registry.get_collection(name),
            auto_pk_type=options.auto_pk_type,
            field_type_map=options.field_type_map,
        )

    declarations = []
    for collection_name in options.collections:
        collection = registry.get_collection(collection_name)
        declarations.append(generate_declaration(collection, options, context, pk_type_of))
        logger.debug(f"Generated declaration for collection '{collection_name}'")

    imports = generate_imports(context, options)

    parts = ["\n".join(imports)] if imports else []
    parts.append("\n\n".join(declarations) + "\n")
    source = "\n\n".join(parts)

    logger.info(
        f"Generated {len(declarations)} declarations with {len(imports)} imports "
        f"({len(context.warnings)} warnings)"
    )
    return GenerationResult(
        source=source,
        declarations=declarations,
        imports=imports,
        warnings=list(context.warnings),
    )


def generate_typescript_interfaces(
    registry: StorageRegistry,
    *,
    collections: list[str],
    auto_pk_type: PkStrategy | str = PkStrategy.INT,
    field_type_map: Mapping[str, str] | None = None,
    generate_import: ImportGenerator | None = None,
    skip_types: list[str] | None = None,
    optional_pk: bool = True,
) -> str:
    """Generate TypeScript declarations and return the source text.

    Example:
        source = generate_typescript_interfaces(
            registry,
            collections=["note"],
            auto_pk_type="int",
            generate_import=lambda name: f"./{name}",
        )
    """
    options = GenerationOptions(
        collections=collections,
        auto_pk_type=auto_pk_type,
        field_type_map=dict(field_type_map or {}),
        generate_import=generate_import,
        skip_types=skip_types or [],
        optional_pk=optional_pk,
    )
    return generate_typescript(registry, options).source
