"""Typed ECMAScript resolution: ``tsconfig.json`` path mapping, then Node."""

from __future__ import annotations

from ..scanning.models import SourceFile
from . import fs
from .base import ResolutionContext, is_path_like
from .models import ResolvedDependency
from .node import JS_EXTENSIONS, resolve_node, resolve_path

TS_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".d.ts") + JS_EXTENSIONS


def resolve_typescript(
    ctx: ResolutionContext, source: SourceFile, specifier: str
) -> ResolvedDependency:
    config = ctx.manifests.find_compiler_config(source.abs_path.parent, ctx.root)
    # paths and baseUrl never apply to relative or absolute names
    if config is not None and not is_path_like(specifier):
        for candidate in config.map_specifier(specifier):
            hit = resolve_path(ctx, candidate, TS_EXTENSIONS)
            if hit is not None:
                return ctx.located(hit, specifier)

        if config.base_url is not None:
            hit = resolve_path(ctx, fs.join(config.base_url, specifier), TS_EXTENSIONS)
            if hit is not None:
                return ctx.located(hit, specifier)

    return resolve_node(ctx, source, specifier, TS_EXTENSIONS)
