"""typegen CLI - Main entry point."""

from typing import Annotated

import typer

import typegen
from typegen.cli.context import CLIContext, configure_logging, get_schema_path

# Create main Typer app
app = typer.Typer(
    name="typegen",
    help="typegen CLI - TypeScript types from storage collection schemas",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    schema: Annotated[
        str | None,
        typer.Option(
            "--schema",
            "-s",
            envvar="TYPEGEN_SCHEMA",
            help="Schema file (JSON object of collection definitions)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Log more details to stderr (repeat for debug output)",
        ),
    ] = 0,
) -> None:
    """Initialize CLI context with global options."""
    configure_logging(verbose)
    ctx.obj = CLIContext(
        schema_path=get_schema_path(schema),
        json_output=json_output,
    )


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"typegen v{typegen.__version__}")


# Register commands
from typegen.cli.commands import generate, schema  # noqa: E402

app.add_typer(schema.app, name="schema")
app.command(name="generate")(generate.generate_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
