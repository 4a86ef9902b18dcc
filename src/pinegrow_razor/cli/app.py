import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pinegrow_razor.cli.components import components
from pinegrow_razor.cli.convert import convert

app = typer.Typer(
    name="pinegrow-razor",
    help="Pinegrow to Razor converter: turn Pinegrow HTML projects into Blazor components.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every binding and skipped file.")] = False,
) -> None:
    """Pinegrow to Razor converter."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("convert")(convert)
app.command("components")(components)


def main() -> None:
    app()
