"""Filesystem probes used during resolution.

Every probe answers "not found" instead of raising: permission errors,
races and malformed paths all degrade to False / empty.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional, Union

PathLike = Union[str, Path]


def is_file(path: PathLike) -> bool:
    return os.path.isfile(path)


def is_dir(path: PathLike) -> bool:
    return os.path.isdir(path)


def list_dir(path: PathLike) -> list[str]:
    """Sorted directory entries, or [] if the directory can't be read."""
    try:
        return sorted(os.listdir(path))
    except (OSError, ValueError):
        return []


def join(base: PathLike, relative: str) -> Path:
    """Join and normalize (``..`` collapsed), like a path resolve."""
    return Path(os.path.normpath(os.path.join(base, relative)))


def walk_up(start: Path, limit: Optional[Path] = None) -> Iterator[Path]:
    """Yield ``start`` and each ancestor directory.

    With ``limit``, stops after yielding ``limit`` and never yields a
    directory outside it. Without, walks to the filesystem root.
    """
    current = start
    while True:
        if limit is not None and not current.is_relative_to(limit):
            return
        yield current
        if limit is not None and current == limit:
            return
        parent = current.parent
        if parent == current:
            return
        current = parent


def repo_relative(path: Path, root: Path) -> Optional[str]:
    """POSIX path of ``path`` relative to ``root``, or None if outside it."""
    normalized = Path(os.path.normpath(path))
    try:
        return normalized.relative_to(root).as_posix()
    except ValueError:
        return None
