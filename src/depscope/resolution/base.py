"""Shared resolution context and helpers for the ecosystem strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..scanning.models import SourceFile
from . import fs
from .manifests import ManifestCache
from .models import ResolvedDependency


@dataclass(frozen=True)
class ResolutionContext:
    """Everything a strategy may read besides the source file and specifier."""

    root: Path
    manifests: ManifestCache = field(default_factory=ManifestCache)
    resolve_bare: bool = False

    def located(self, path: Path, specifier: str) -> ResolvedDependency:
        """A confirmed file: in-repo if under the root, otherwise external."""
        rel = fs.repo_relative(path, self.root)
        if rel is None:
            return ResolvedDependency.external(specifier)
        return ResolvedDependency.in_repo(rel)

    def best_effort(self, path: Path, specifier: str) -> ResolvedDependency:
        """An unconfirmed constructed path; external if it leaves the root."""
        rel = fs.repo_relative(path, self.root)
        if rel is None:
            return ResolvedDependency.external(specifier)
        return ResolvedDependency.best_effort(rel)


Strategy = Callable[[ResolutionContext, SourceFile, str], ResolvedDependency]


def is_path_like(specifier: str) -> bool:
    """Relative (``./x``, ``../x``, ``.x``) or absolute (``/x``) specifier."""
    return specifier.startswith(".") or specifier.startswith("/")


def is_dot_relative(specifier: str) -> bool:
    """Strictly ``./`` or ``../`` relative."""
    return specifier.startswith("./") or specifier.startswith("../")


def first_source_file(directory: Path, extension: str, exclude_suffix: str = "") -> Path | None:
    """First (sorted) file in ``directory`` with ``extension``."""
    for name in fs.list_dir(directory):
        if not name.endswith(extension):
            continue
        if exclude_suffix and name.endswith(exclude_suffix):
            continue
        candidate = directory / name
        if fs.is_file(candidate):
            return candidate
    return None
