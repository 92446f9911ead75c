"""Fallback resolution for languages without a dedicated strategy."""

from __future__ import annotations

from pathlib import Path

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext, is_path_like
from .models import ResolvedDependency

FALLBACK_EXTENSIONS: tuple[str, ...] = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".json",
    ".py",
    ".rb",
    ".java",
    ".go",
    ".c",
    ".cpp",
    ".cc",
    ".h",
    ".hpp",
    ".cs",
    ".rs",
    ".php",
    ".kt",
    ".swift",
    ".scala",
)


def resolve_basic(ctx: ResolutionContext, source: SourceFile, specifier: str) -> ResolvedDependency:
    target = fs.join(source.abs_path.parent, specifier)
    hit = _probe(target)
    if hit is not None:
        return ctx.located(hit, specifier)

    if is_path_like(specifier):
        return ctx.best_effort(target, specifier)
    # Bare include/require next to the source file (e.g. #include "util.h")
    return ResolvedDependency.external(specifier)


def _probe(target: Path) -> Path | None:
    if fs.is_file(target):
        return target
    for ext in FALLBACK_EXTENSIONS:
        candidate = Path(str(target) + ext)
        if fs.is_file(candidate):
            return candidate
    return None
