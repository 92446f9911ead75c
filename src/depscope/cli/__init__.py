"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="depscope",
    help="depscope - Multi-Language Source Dependency Graph Engine",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]depscope[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Extract, resolve and analyze source-file dependencies."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .resolve import resolve as _resolve  # noqa: F401, E402


def main() -> None:
    app()


__all__ = ["app", "main"]
