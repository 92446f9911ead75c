"""Python resolution: package markers, source roots and virtualenvs.

Absolute imports (``pkg.sub.mod``) are looked up under each candidate root:
the repository root, then for every directory from the source file up to
the root, any virtualenv ``site-packages`` found there followed by the
directory itself. Relative imports (``..mod``) climb one directory per dot
beyond the first.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext
from .models import ResolvedDependency

logger = logging.getLogger(__name__)

PACKAGE_MARKER = "__init__.py"
VENV_DIR_NAMES = ("venv", "env", ".venv", ".env", "virtualenv")


def resolve_python(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    if specifier.startswith("."):
        return _resolve_relative(ctx, source, specifier)

    parts = specifier.split(".")
    for search_root in candidate_roots(source.abs_path.parent, ctx.root):
        hit = _resolve_absolute(search_root, parts)
        if hit is not None:
            return ctx.located(hit, specifier)

    # Not a local module: standard library or third-party
    return ResolvedDependency.external(specifier)


def candidate_roots(start_dir: Path, root: Path) -> list[Path]:
    roots = [root]
    for directory in fs.walk_up(start_dir, root):
        roots.extend(_site_packages(directory))
        if directory not in roots:
            roots.append(directory)
    return roots


def _site_packages(directory: Path) -> list[Path]:
    found = []
    for venv_name in VENV_DIR_NAMES:
        lib_dir = directory / venv_name / "lib"
        if not fs.is_dir(lib_dir):
            continue
        for entry in fs.list_dir(lib_dir):
            if entry.startswith("python"):
                site_packages = lib_dir / entry / "site-packages"
                if fs.is_dir(site_packages):
                    found.append(site_packages)
    return found


def _resolve_absolute(search_root: Path, parts: list[str]) -> Optional[Path]:
    head = parts[0]
    package_dir = search_root / head
    single_file = search_root / f"{head}.py"

    if fs.is_dir(package_dir):
        init = package_dir / PACKAGE_MARKER
        if fs.is_file(init):
            if len(parts) == 1:
                return init
            return _descend(package_dir, parts[1:])
        # A bare directory is not a package; a sibling module still counts
        if fs.is_file(single_file):
            return single_file
        return None

    if len(parts) == 1 and fs.is_file(single_file):
        return single_file
    return None


def _descend(package_dir: Path, parts: list[str]) -> Optional[Path]:
    """Walk ``parts`` below a package: sub-packages, then a final module file."""
    current = package_dir
    for i, part in enumerate(parts):
        next_dir = current / part
        init = next_dir / PACKAGE_MARKER
        if fs.is_dir(next_dir) and fs.is_file(init):
            if i == len(parts) - 1:
                return init
            current = next_dir
            continue

        module_file = current / f"{part}.py"
        if fs.is_file(module_file):
            return module_file
        return None
    return None


def _resolve_relative(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    dots = len(specifier) - len(specifier.lstrip("."))
    target_dir = source.abs_path.parent
    for _ in range(dots - 1):
        target_dir = target_dir.parent

    remainder = specifier[dots:]
    if not remainder:
        init = target_dir / PACKAGE_MARKER
        if fs.is_file(init):
            return ctx.located(init, specifier)
        return ctx.best_effort(init, specifier)

    parts = remainder.split(".")
    hit = _descend(target_dir, parts)
    if hit is not None:
        return ctx.located(hit, specifier)

    logger.debug(f"Couldn't resolve Python module {specifier} from {source.path}")
    return ctx.best_effort(target_dir.joinpath(*parts[:-1], f"{parts[-1]}.py"), specifier)
