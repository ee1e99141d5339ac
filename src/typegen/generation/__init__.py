"""TypeScript declaration generation.

Steps, per collection in the batch:
    1. Field lines (fields.py), resolved through the type map (typemap.py)
    2. Relationship fields, forward and reverse (relationships.py)
    3. One intersection-style declaration (declarations.py)
Afterwards imports are rendered for referenced collections outside the
batch (imports.py). generator.py drives the whole run.
"""

from typegen.generation.context import GenerationContext
from typegen.generation.declarations import generate_declaration
from typegen.generation.generator import generate_typescript, generate_typescript_interfaces
from typegen.generation.imports import generate_imports
from typegen.generation.typemap import (
    DEFAULT_FIELD_TYPE_MAP,
    resolve_collection_pk_type,
    resolve_field_type,
    resolve_pk_type,
)

__all__ = [
    "DEFAULT_FIELD_TYPE_MAP",
    "GenerationContext",
    "generate_declaration",
    "generate_imports",
    "generate_typescript",
    "generate_typescript_interfaces",
    "resolve_collection_pk_type",
    "resolve_field_type",
    "resolve_pk_type",
]
