"""Go resolution: standard library prefixes, ``go.mod`` module paths."""

from __future__ import annotations

from pathlib import Path

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext, first_source_file, is_dot_relative
from .models import ResolvedDependency

GO_STDLIB_PREFIXES = (
    "fmt",
    "os",
    "net",
    "http",
    "io",
    "strings",
    "strconv",
    "time",
    "encoding",
    "json",
    "context",
    "log",
    "errors",
    "sync",
    "reflect",
    "path",
    "bytes",
    "math",
    "sort",
)


def is_go_stdlib(specifier: str) -> bool:
    return any(specifier == lib or specifier.startswith(lib + "/") for lib in GO_STDLIB_PREFIXES)


def resolve_go(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    if is_go_stdlib(specifier):
        return ResolvedDependency.external(specifier)

    if is_dot_relative(specifier):
        target = fs.join(source.abs_path.parent, specifier)
        hit = _package_file(target)
        if hit is not None:
            return ctx.located(hit, specifier)
        return ctx.best_effort(target, specifier)

    module = ctx.manifests.find_go_module(source.abs_path.parent, ctx.root)
    if module is not None:
        module_root, module_name = module
        if specifier.startswith(module_name + "/"):
            target = fs.join(module_root, specifier[len(module_name) + 1 :])
            hit = _package_file(target)
            if hit is not None:
                return ctx.located(hit, specifier)

    return ResolvedDependency.external(specifier)


def _package_file(target: Path) -> Path | None:
    """The file itself, or a representative non-test ``.go`` file of a package dir."""
    if fs.is_file(target):
        return target
    if fs.is_dir(target):
        return first_source_file(target, ".go", exclude_suffix="_test.go")
    return None
