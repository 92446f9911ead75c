"""Resolve command: show how one specifier resolves from one file."""

from pathlib import Path

import typer

from ..logging_config import setup_logging
from ..resolution.resolver import ModuleResolver
from . import app
from ._common import console


@app.command()
def resolve(
    file: Path = typer.Argument(
        ...,
        help="Source file the specifier appears in",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    specifier: str = typer.Argument(..., help="Raw import specifier, e.g. ./util or lodash"),
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        help="Repository root",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    resolve_bare: bool = typer.Option(
        False,
        "--resolve-bare",
        help="Also resolve bare specifiers",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Resolve a single import specifier and print the outcome.

    Prints one line: in_repo:<path>, best_effort:<path> or external:<token>.
    """
    setup_logging(verbose=verbose)

    resolver = ModuleResolver(root, resolve_bare=resolve_bare)
    source = resolver.source_file(file.absolute())
    outcome = resolver.resolve(source, specifier)

    style = {"in_repo": "green", "best_effort": "yellow", "external": "dim"}[outcome.kind.value]
    console.print(f"[{style}]{outcome}[/{style}]", highlight=False)
