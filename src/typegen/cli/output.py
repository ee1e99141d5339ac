"""Output formatting for CLI commands."""

import json
import sys
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from typegen.core.types import CollectionDefinition, GenerationResult
from typegen.exceptions import TypegenError

console = Console()
err_console = Console(stderr=True)


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_table(
        self,
        title: str,
        data: list[dict[str, Any]],
        columns: list[str],
    ) -> None:
        """Print data as Rich table or JSON array.

        Args:
            title: Table title
            data: List of row dictionaries
            columns: Column names to display
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            for col in columns:
                table.add_column(col)
            for row in data:
                table.add_row(*[str(row.get(col, "")) for col in columns])
            console.print(table)

    def print_collection_info(self, collection: CollectionDefinition) -> None:
        """Print a collection with its fields and relationships.

        Args:
            collection: Collection to display
        """
        if self.json_mode:
            print(json.dumps(collection.model_dump(by_alias=True), default=str, indent=2))
            return

        console.print(f"\n[bold]Collection:[/bold] {collection.name}")
        console.print(f"Primary key: {collection.pk_index}")
        if collection.version:
            console.print(f"Version: {collection.version}")
        if collection.description:
            console.print(f"Description: {collection.description}")

        if collection.fields:
            console.print(f"\n[bold]Fields ({len(collection.fields)}):[/bold]")
            fields_table = Table(show_header=True, header_style="bold cyan")
            fields_table.add_column("Name")
            fields_table.add_column("Kind")
            fields_table.add_column("Optional")
            for name, field in collection.fields.items():
                fields_table.add_row(name, field.kind, "✓" if field.optional else "")
            console.print(fields_table)

        relationships = [
            (rel.kind, "forward", rel) for rel in collection.relationships
        ] + [
            (rel.kind, f"reverse ({alias})", rel)
            for alias, rel in collection.reverse_relationships_by_alias.items()
        ]
        if relationships:
            console.print(f"\n[bold]Relationships ({len(relationships)}):[/bold]")
            rel_table = Table(show_header=True, header_style="bold cyan")
            rel_table.add_column("Kind")
            rel_table.add_column("Direction")
            rel_table.add_column("Collections")
            for kind, direction, rel in relationships:
                if kind == "child-of":
                    pair = f"{rel.source_collection} -> {rel.target_collection}"
                else:
                    pair = f"{rel.connects[0]} <-> {rel.connects[1]}"
                rel_table.add_row(kind, direction, pair)
            console.print(rel_table)

    def print_generation_result(self, result: GenerationResult) -> None:
        """Print generated source. Warnings reach stderr through logging.

        Args:
            result: Generation result to display
        """
        if self.json_mode:
            print(json.dumps({"success": True, **result.to_dict()}, indent=2))
            return

        sys.stdout.write(result.source)

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Print success message.

        Args:
            message: Success message
            details: Optional details to display
        """
        if self.json_mode:
            output = {"success": True, "message": message}
            if details:
                output.update(details)
            print(json.dumps(output, default=str, indent=2))
        else:
            err_console.print(f"✓ {message}", style="green")
            if details:
                for key, value in details.items():
                    err_console.print(f"  {key}: {value}", style="dim")

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, TypegenError):
                print(json.dumps(error.to_dict(), default=str, indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            # For TypegenError, include context if available
            if isinstance(error, TypegenError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            err_console.print(panel)

    def print_data(self, data: Any) -> None:
        """Print generic data (dict, list, etc.).

        Args:
            data: Data to print
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            console.print(data)
