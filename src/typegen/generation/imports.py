"""Import statements for collections generated in other files."""

from __future__ import annotations

from typegen.core.types import GenerationOptions
from typegen.generation.context import GenerationContext
from typegen.generation.formatting import upper_first


def generate_imports(context: GenerationContext, options: GenerationOptions) -> list[str]:
    """Render one import per referenced collection outside the current batch.

    Imports follow the order in which collections were first referenced.
    Nothing is imported when ``options.generate_import`` is not set.
    """
    if not context.referenced_collections or options.generate_import is None:
        return []

    imports = []
    for collection_name in context.referenced_collections:
        if collection_name in options.collections:
            continue
        path = options.generate_import(collection_name)
        imports.append(f"import {{ {upper_first(collection_name)} }} from '{path}'")
    return imports
