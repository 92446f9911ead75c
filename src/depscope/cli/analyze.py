"""Analyze command: dependency graph, cycles and coupling for a repository."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.engine import AnalysisEngine
from ..exceptions import DepscopeError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the repository root",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers",
        min=1,
        max=32,
    ),
    resolve_bare: bool = typer.Option(
        False,
        "--resolve-bare",
        help="Also resolve bare specifiers (dependency stores, tsconfig paths, source roots)",
    ),
    top: int = typer.Option(
        10,
        "--top",
        "-n",
        help="Rows to show in the coupling and external tables",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Build the dependency graph of a repository and report its structure.

    [bold cyan]Examples:[/bold cyan]

      depscope analyze /path/to/repo

      depscope analyze . --format json > deps.json

      depscope analyze . --resolve-bare --top 20
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    if fmt not in ("rich", "json"):
        console.print(f"[red]Error:[/red] Unknown format {fmt!r}. Choose from: json, rich")
        raise typer.Exit(1)

    try:
        settings = resolve_config(
            config=config,
            workers=workers,
            resolve_bare=resolve_bare,
            verbose=verbose,
            quiet=quiet,
        )
        engine = AnalysisEngine(path, settings)
        result = engine.run()

        if fmt == "json":
            get_formatter("json").render(result)
        else:
            get_formatter("rich", console=console, top=top).render(result)

    except typer.Exit:
        raise
    except DepscopeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
