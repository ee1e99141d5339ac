"""Text helpers for assembling TypeScript source."""

from __future__ import annotations

INDENT = "    "


def upper_first(name: str) -> str:
    """Type identifier for a collection (``userProfile`` -> ``UserProfile``)."""
    return name[:1].upper() + name[1:]


def indent(text: str) -> str:
    return "\n".join(INDENT + line for line in text.split("\n"))


def in_indented_block(lines: list[str]) -> str | None:
    """Wrap lines in an indented ``{ ... }`` block, or None if there are none."""
    if not lines:
        return None
    return "{\n" + indent("\n".join(lines)) + "\n}"
