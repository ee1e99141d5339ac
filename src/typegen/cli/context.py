"""CLI context management for the schema registry and shared state."""

import logging
import os
from dataclasses import dataclass, field

from rich.console import Console
from rich.logging import RichHandler

from typegen.cli.parsing import read_json_file
from typegen.schema.registry import StorageRegistry

DEFAULT_SCHEMA_PATH = "./schema.json"


def get_schema_path(path: str | None) -> str:
    """Resolve schema file path from CLI arg, environment variable, or default.

    Priority:
    1. Explicit path argument
    2. TYPEGEN_SCHEMA environment variable
    3. Default: ./schema.json
    """
    if path:
        return path
    if env_path := os.getenv("TYPEGEN_SCHEMA"):
        return env_path
    return DEFAULT_SCHEMA_PATH


def configure_logging(verbosity: int) -> None:
    """Send library logs to stderr through Rich.

    0 shows warnings, 1 adds info, 2 or more adds debug output.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


@dataclass
class CLIContext:
    """Shared context for CLI commands.

    Loads the schema registry lazily and keeps output preferences.
    """

    schema_path: str
    json_output: bool
    _registry: StorageRegistry | None = field(default=None, init=False, repr=False)

    def get_registry(self) -> StorageRegistry:
        """Get or load the schema registry (lazy initialization).

        The schema file is a JSON object mapping collection names to their
        definitions, optionally nested under a top-level "collections" key.

        Returns:
            Initialized StorageRegistry
        """
        if self._registry is None:
            data = read_json_file(self.schema_path)
            collections = data.get("collections", data)
            self._registry = StorageRegistry.from_dict(collections)
        return self._registry
