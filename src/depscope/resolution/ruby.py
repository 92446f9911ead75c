"""Ruby resolution: standard library names, project ``lib/`` directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext, first_source_file, is_path_like
from .models import ResolvedDependency

RUBY_STDLIB = (
    "json",
    "csv",
    "date",
    "time",
    "fileutils",
    "pathname",
    "yaml",
    "net/http",
    "uri",
    "openssl",
    "logger",
    "digest",
    "securerandom",
    "stringio",
    "base64",
    "tempfile",
    "set",
)

GEMFILE = "Gemfile"
GEMSPEC_SUFFIX = ".gemspec"
LIBRARY_DIR = "lib"


def is_ruby_stdlib(specifier: str) -> bool:
    return any(specifier == lib or specifier.startswith(lib + "/") for lib in RUBY_STDLIB)


def find_project_root(start_dir: Path, root: Path) -> Optional[Path]:
    """Nearest directory holding a ``Gemfile`` or a ``*.gemspec``."""
    for directory in fs.walk_up(start_dir, root):
        if fs.is_file(directory / GEMFILE):
            return directory
        if any(name.endswith(GEMSPEC_SUFFIX) for name in fs.list_dir(directory)):
            return directory
    return None


def resolve_ruby(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    if is_ruby_stdlib(specifier):
        return ResolvedDependency.external(specifier)

    if is_path_like(specifier):
        target = fs.join(source.abs_path.parent, specifier)
        for candidate in (target, Path(str(target) + ".rb")):
            if fs.is_file(candidate):
                return ctx.located(candidate, specifier)
        if target.suffix != ".rb":
            target = Path(str(target) + ".rb")
        return ctx.best_effort(target, specifier)

    project_root = find_project_root(source.abs_path.parent, ctx.root)
    if project_root is not None:
        lib_dir = project_root / LIBRARY_DIR
        if fs.is_dir(lib_dir):
            hit = _resolve_in_lib(lib_dir, specifier)
            if hit is not None:
                return ctx.located(hit, specifier)

    return ResolvedDependency.external(specifier)


def _resolve_in_lib(lib_dir: Path, specifier: str) -> Optional[Path]:
    for candidate in (
        lib_dir / f"{specifier}.rb",
        lib_dir / specifier / "index.rb",
        lib_dir / specifier,
    ):
        if fs.is_file(candidate):
            return candidate
        if fs.is_dir(candidate):
            return first_source_file(candidate, ".rb")
    return None
