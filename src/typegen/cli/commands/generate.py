"""TypeScript generation command."""

from pathlib import Path
from typing import Annotated

import typer

from typegen.cli.context import CLIContext
from typegen.cli.output import OutputFormatter
from typegen.cli.parsing import import_path_generator, parse_type_map
from typegen.core.types import GenerationOptions, PkStrategy
from typegen.generation.generator import generate_typescript


def generate_command(
    ctx: typer.Context,
    collections: Annotated[
        list[str] | None,
        typer.Argument(help="Collections to generate (default: all, in schema order)"),
    ] = None,
    pk_type: Annotated[
        PkStrategy,
        typer.Option(
            "--pk-type",
            "-p",
            envvar="TYPEGEN_PK_TYPE",
            help="Representation of auto-generated primary keys",
        ),
    ] = PkStrategy.INT,
    type_map: Annotated[
        list[str] | None,
        typer.Option(
            "--type-map",
            "-t",
            help="Field type override: kind=type. Can be repeated.",
        ),
    ] = None,
    skip_types: Annotated[
        list[str] | None,
        typer.Option("--skip-type", help="Field kind to leave out. Can be repeated."),
    ] = None,
    import_path: Annotated[
        str | None,
        typer.Option(
            "--import-path",
            "-i",
            help="Import path template for collections outside the batch, e.g. './{collection}'",
        ),
    ] = None,
    fixed_pk: Annotated[
        bool,
        typer.Option("--fixed-pk", help="Always include the primary key (no WithPk parameter)"),
    ] = False,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Write the source to this file instead of stdout"),
    ] = None,
) -> None:
    """Generate TypeScript type declarations for collections.

    Examples:

        # All collections to stdout
        typegen -s schema.json generate

        # One collection per file, importing the others
        typegen generate note --import-path "./{collection}" -o types/note.ts
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        registry = cli_ctx.get_registry()
        options = GenerationOptions(
            collections=collections or registry.list_collections(),
            auto_pk_type=pk_type,
            field_type_map=parse_type_map(type_map),
            generate_import=import_path_generator(import_path),
            skip_types=skip_types or [],
            optional_pk=not fixed_pk,
        )
        result = generate_typescript(registry, options)

        if output:
            Path(output).write_text(result.source)
            formatter.print_success(
                f"Generated {len(result.declarations)} declarations",
                {"output": output, "imports": len(result.imports), "warnings": result.warnings},
            )
        else:
            formatter.print_generation_result(result)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
