"""ECMAScript-family resolution: the Node.js lookup algorithm.

Relative specifiers: exact file, file + extension, directory with a
``package.json`` (``exports["."]``, ``module``, ``main``), directory index.
Bare specifiers (only when bare resolution is enabled): walk upward looking
for ``node_modules/<name>`` and resolve inside the package.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext, is_path_like
from .models import ResolvedDependency

logger = logging.getLogger(__name__)

JS_EXTENSIONS: tuple[str, ...] = (".js", ".json", ".node", ".jsx", ".mjs", ".cjs")

DEPENDENCY_STORE = "node_modules"


def resolve_node(
    ctx: ResolutionContext,
    source: SourceFile,
    specifier: str,
    extensions: tuple[str, ...] = JS_EXTENSIONS,
) -> ResolvedDependency:
    if not is_path_like(specifier):
        return resolve_package(ctx, source, specifier, extensions)

    target = fs.join(source.abs_path.parent, specifier)
    hit = resolve_path(ctx, target, extensions)
    if hit is not None:
        return ctx.located(hit, specifier)

    logger.debug(f"Couldn't resolve module {specifier} from {source.path}")
    return ctx.best_effort(target, specifier)


def resolve_path(ctx: ResolutionContext, target: Path, extensions: tuple[str, ...]) -> Optional[Path]:
    """Resolve ``target`` as a file first, then as a directory."""
    return resolve_file(target, extensions) or resolve_directory(ctx, target, extensions)


def resolve_file(target: Path, extensions: tuple[str, ...]) -> Optional[Path]:
    if fs.is_file(target):
        return target
    for ext in extensions:
        candidate = Path(str(target) + ext)
        if fs.is_file(candidate):
            return candidate
    return None


def resolve_directory(
    ctx: ResolutionContext, directory: Path, extensions: tuple[str, ...]
) -> Optional[Path]:
    if not fs.is_dir(directory):
        return None

    manifest = ctx.manifests.package_json(directory)
    if manifest is not None:
        for entry, try_extensions in _entry_points(manifest):
            entry_path = fs.join(directory, entry)
            if fs.is_file(entry_path):
                return entry_path
            if try_extensions:
                hit = resolve_file(entry_path, extensions)
                if hit is not None:
                    return hit

    for ext in extensions:
        index = directory / f"index{ext}"
        if fs.is_file(index):
            return index
    return None


def _entry_points(manifest: dict[str, Any]) -> Iterator[tuple[str, bool]]:
    """Package entry files in priority order, flagged for extension probing."""
    exports = manifest.get("exports")
    if isinstance(exports, str):
        yield exports, False
    elif isinstance(exports, dict):
        main_export = exports.get(".")
        if isinstance(main_export, dict):
            main_export = main_export.get("default") or main_export.get("require")
        if isinstance(main_export, str):
            yield main_export, False

    module = manifest.get("module")
    if isinstance(module, str):
        yield module, False

    main = manifest.get("main")
    if isinstance(main, str):
        yield main, True


def split_package_specifier(specifier: str) -> tuple[str, str]:
    """``"@scope/name/sub/path"`` -> ``("@scope/name", "sub/path")``."""
    parts = specifier.split("/")
    if parts[0].startswith("@") and len(parts) >= 2:
        return "/".join(parts[:2]), "/".join(parts[2:])
    return parts[0], "/".join(parts[1:])


def resolve_package(
    ctx: ResolutionContext,
    source: SourceFile,
    specifier: str,
    extensions: tuple[str, ...] = JS_EXTENSIONS,
) -> ResolvedDependency:
    """Look ``specifier`` up in dependency stores from the source dir upward."""
    name, subpath = split_package_specifier(specifier)
    if not name:
        return ResolvedDependency.external(specifier)

    for directory in fs.walk_up(source.abs_path.parent):
        package_dir = directory / DEPENDENCY_STORE / name
        if not fs.is_dir(package_dir):
            continue
        if subpath:
            hit = resolve_path(ctx, fs.join(package_dir, subpath), extensions)
        else:
            hit = resolve_directory(ctx, package_dir, extensions)
        if hit is not None:
            return ctx.located(hit, specifier)

    return ResolvedDependency.external(specifier)
