"""Logging setup for the depscope CLI.

Library modules only create loggers under the ``depscope`` namespace; the
CLI calls ``setup_logging`` once per invocation to attach handlers.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_NAMESPACE = "depscope"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Route log records to stderr through rich, optionally also to ``log_file``.

    ``quiet`` wins over ``verbose``: ERROR only. ``verbose`` shows DEBUG
    records with their source location. Otherwise WARNING and above.
    """
    level = logging.ERROR if quiet else logging.DEBUG if verbose else logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # File paths and specifiers may contain [brackets]
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # Replaces handlers left by an earlier invocation in the same process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(_NAMESPACE)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` inside the depscope namespace (the namespace root if None)."""
    if name is None:
        return logging.getLogger(_NAMESPACE)
    if not name.startswith(_NAMESPACE):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)
