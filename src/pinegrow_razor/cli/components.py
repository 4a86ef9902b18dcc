from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from pinegrow_razor.config import load_config
from pinegrow_razor.core.documents import convert_document
from pinegrow_razor.core.markup import MarkupError

console = Console()


def components(
    file: Annotated[Path, typer.Argument(help="Pinegrow HTML document to inspect.")],
    show: Annotated[str | None, typer.Option(help="Print the generated template of this component.")] = None,
) -> None:
    """List the components defined in a document and their inferred parameters."""
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {file}:[/red] {exc}")
        raise typer.Exit(1) from exc

    config = load_config()
    try:
        result = convert_document(text, file.name, config)
    except MarkupError as exc:
        console.print(f"[red]Cannot parse {file}:[/red] {exc}")
        raise typer.Exit(1) from exc

    if show is not None:
        for definition in result.components:
            if definition.template_name == show:
                console.print(definition.render(), markup=False, highlight=False, soft_wrap=True)
                return
        console.print(f"[red]No component named {show}.[/red]")
        raise typer.Exit(1)

    table = Table(show_lines=False)
    table.add_column("component")
    table.add_column("output")
    table.add_column("parameters")
    for definition in result.components:
        summary = definition.summary(config)
        table.add_row(summary.name, summary.path, ", ".join(summary.parameters))
    console.print(table)
    console.print(f"({len(result.components)} components, {result.kind.value})")
