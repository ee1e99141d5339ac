"""Schema inspection commands."""

from typing import Annotated

import typer

from typegen.cli.context import CLIContext
from typegen.cli.output import OutputFormatter

# Create schema subcommand group
app = typer.Typer(help="Inspect the collection schema")


@app.command("list")
def schema_list(ctx: typer.Context) -> None:
    """List all collections in the schema file."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        registry = cli_ctx.get_registry()
        names = registry.list_collections()

        if cli_ctx.json_output:
            formatter.print_data(names)
        else:
            table_data = []
            for name in names:
                collection = registry.get_collection(name)
                table_data.append(
                    {
                        "Name": name,
                        "Primary key": collection.pk_index,
                        "Fields": len(collection.fields),
                        "Relationships": len(collection.relationships),
                        "Reverse": len(collection.reverse_relationships_by_alias),
                    }
                )

            formatter.print_table(
                f"Collections ({len(names)} total)",
                table_data,
                ["Name", "Primary key", "Fields", "Relationships", "Reverse"],
            )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("describe")
def schema_describe(
    ctx: typer.Context,
    collection_name: Annotated[str, typer.Argument(help="Collection name")],
) -> None:
    """Show detailed collection information."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        registry = cli_ctx.get_registry()
        formatter.print_collection_info(registry.get_collection(collection_name))
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
