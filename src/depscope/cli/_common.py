"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    resolve_bare: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build an AnalysisConfig from CLI options."""
    overrides = {}
    if workers is not None:
        overrides["workers"] = workers
    if resolve_bare:
        overrides["resolve_bare_specifiers"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
