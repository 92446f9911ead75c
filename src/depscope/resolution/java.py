"""Java resolution: fully-qualified names under conventional source roots."""

from __future__ import annotations

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext
from .models import ResolvedDependency

SOURCE_ROOTS = ("src/main/java", "src")


def resolve_java(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    class_path = specifier.strip("./").replace(".", "/")
    if not class_path:
        return ResolvedDependency.external(specifier)

    for directory in fs.walk_up(source.abs_path.parent, ctx.root):
        for source_root in SOURCE_ROOTS:
            root_dir = directory / source_root
            if not fs.is_dir(root_dir):
                continue
            candidate = root_dir / f"{class_path}.java"
            if fs.is_file(candidate):
                return ctx.located(candidate, specifier)

    return ResolvedDependency.external(specifier)
