from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from pinegrow_razor.config import load_config
from pinegrow_razor.core.convert import run_conversion
from pinegrow_razor.files.local import LocalProjectFiles

console = Console()


def convert(
    source: Annotated[Path, typer.Argument(help="Directory searched for pinegrow.json projects.")] = Path("."),
    output: Annotated[Path | None, typer.Option(help="Root for generated templates (defaults to SOURCE).")] = None,
    component_dir: Annotated[str | None, typer.Option(help="Directory for component templates.")] = None,
    page_dir: Annotated[str | None, typer.Option(help="Directory for page templates.")] = None,
    layout: Annotated[str | None, typer.Option(help="Layout named in the @layout directive of pages.")] = None,
    partials_as_components: Annotated[
        bool, typer.Option("--partials-as-components", help="Emit HTML fragments as components.")
    ] = False,
    carry_defaults: Annotated[
        bool, typer.Option("--carry-defaults", help="Pass editable defaults to component reference tags.")
    ] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="List generated files without writing them.")] = False,
) -> None:
    """Convert every Pinegrow project below SOURCE into Razor templates."""
    if not source.is_dir():
        console.print(f"[red]{source} is not a directory.[/red]")
        raise typer.Exit(1)

    config = load_config(
        component_directory=component_dir,
        page_directory=page_dir,
        layout=layout,
        treat_partials_as_components=partials_as_components or None,
        carry_defaults=carry_defaults or None,
    )
    files = LocalProjectFiles(source, output)

    try:
        report = run_conversion(files, config, write=not dry_run)
    except OSError as exc:
        console.print(f"[red]Conversion failed:[/red] {exc}")
        raise typer.Exit(1) from exc

    table = Table(show_lines=False)
    table.add_column("output")
    table.add_column("bytes", justify="right")
    for artifact in report.artifacts:
        table.add_row(artifact.path, str(len(artifact.content)))
    console.print(table)

    verb = "Would write" if dry_run else "Wrote"
    console.print(
        f"[green]{verb}[/green] {len(report.artifacts)} file(s) from {len(report.converted)} document(s), "
        f"skipped {len(report.skipped)}"
    )
