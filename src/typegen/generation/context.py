"""State shared by the steps of one generation run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """Collects referenced collections and warnings during one run.

    Created by the batch driver for each call and passed explicitly to
    every step; never reused across runs.
    """

    referenced_collections: dict[str, None] = field(default_factory=dict)
    """Collections referenced by relationships, in first-seen order."""

    warnings: list[str] = field(default_factory=list)

    def reference(self, collection_name: str) -> None:
        """Record that a declaration refers to another collection's type."""
        self.referenced_collections.setdefault(collection_name, None)

    def warn(self, message: str) -> None:
        """Record a non-fatal problem and log it."""
        self.warnings.append(message)
        logger.warning(message)
