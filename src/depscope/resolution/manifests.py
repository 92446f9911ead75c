"""Manifest and compiler-config parsing with per-run memoization.

Many source files share one ``package.json``, ``tsconfig.json`` or
``go.mod``; each is read and parsed at most once per run. The cache is
filled idempotently (a racing double parse stores the same value), so
concurrent resolvers share it without locking.

A manifest that exists but can't be decoded is logged and treated as
absent, and that outcome is memoized too.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from ..exceptions import ManifestError
from . import fs

logger = logging.getLogger(__name__)

PACKAGE_MANIFEST = "package.json"
COMPILER_CONFIG = "tsconfig.json"
GO_MANIFEST = "go.mod"

# Strings first so comment markers inside them survive
_JSONC_TOKENS = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_GO_MODULE = re.compile(r"^\s*module\s+(\S+)", re.MULTILINE)

_MISSING = object()


def strip_jsonc(text: str) -> str:
    """Remove // and /* */ comments and trailing commas from JSON-with-comments."""

    def _keep_strings(match: re.Match) -> str:
        token = match.group(0)
        return token if token.startswith('"') else ""

    without_comments = _JSONC_TOKENS.sub(_keep_strings, text)
    return _TRAILING_COMMA.sub(r"\1", without_comments)


@dataclass(frozen=True)
class CompilerConfig:
    """The parts of a ``tsconfig.json`` that affect module resolution."""

    config_dir: Path
    base_url: Optional[Path] = None
    paths: dict[str, list[str]] = field(default_factory=dict)

    def map_specifier(self, specifier: str) -> list[Path]:
        """Candidate paths for ``specifier`` from every matching ``paths`` rule.

        ``"prefix/*"`` captures the rest of the specifier and substitutes it
        for the ``*`` of each replacement template, in declared order.
        Templates resolve against ``baseUrl`` or, without one, the config's
        own directory.
        """
        base = self.base_url or self.config_dir
        candidates: list[Path] = []
        for pattern, replacements in self.paths.items():
            captured = _match_pattern(pattern, specifier)
            if captured is None:
                continue
            for replacement in replacements:
                candidates.append(fs.join(base, replacement.replace("*", captured, 1)))
        return candidates


def _match_pattern(pattern: str, specifier: str) -> Optional[str]:
    if "*" not in pattern:
        return "" if pattern == specifier else None
    prefix, _, suffix = pattern.partition("*")
    if len(specifier) < len(prefix) + len(suffix):
        return None
    if specifier.startswith(prefix) and specifier.endswith(suffix):
        return specifier[len(prefix) : len(specifier) - len(suffix)]
    return None


class ManifestCache:
    """Memoized manifest reads keyed by absolute manifest path."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, Path], Any] = {}

    def _memoized(self, kind: str, path: Path, loader: Callable[[Path], Any]) -> Any:
        key = (kind, path)
        value = self._entries.get(key, _MISSING)
        if value is _MISSING:
            try:
                value = loader(path)
            except ManifestError as e:
                logger.warning(str(e))
                value = None
            self._entries[key] = value
        return value

    # ── package.json ───────────────────────────────────────────

    def package_json(self, package_dir: Path) -> Optional[dict[str, Any]]:
        """Parsed ``package.json`` inside ``package_dir``, or None."""
        path = package_dir / PACKAGE_MANIFEST
        if not fs.is_file(path):
            return None
        return self._memoized("package", path, _load_json_object)

    # ── tsconfig.json ──────────────────────────────────────────

    def find_compiler_config(self, start_dir: Path, root: Path) -> Optional[CompilerConfig]:
        """Nearest ``tsconfig.json`` walking up from ``start_dir`` to ``root``."""
        for directory in fs.walk_up(start_dir, root):
            path = directory / COMPILER_CONFIG
            if fs.is_file(path):
                return self._memoized("tsconfig", path, _load_compiler_config)
        return None

    # ── go.mod ─────────────────────────────────────────────────

    def find_go_module(self, start_dir: Path, root: Path) -> Optional[tuple[Path, str]]:
        """``(module_root, module_name)`` of the nearest ``go.mod``, or None."""
        for directory in fs.walk_up(start_dir, root):
            path = directory / GO_MANIFEST
            if fs.is_file(path):
                name = self._memoized("gomod", path, _load_go_module_name)
                if name is None:
                    return None
                return directory, name
        return None


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(path, f"invalid encoding: {e}")
    except OSError as e:
        raise ManifestError(path, str(e))


def _load_json_object(path: Path, jsonc: bool = False) -> dict[str, Any]:
    text = _read_text(path)
    if jsonc:
        text = strip_jsonc(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON: {e}")
    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")
    return data


def _load_compiler_config(path: Path) -> CompilerConfig:
    data = _load_json_object(path, jsonc=True)
    options = data.get("compilerOptions")
    if not isinstance(options, dict):
        options = {}

    config_dir = path.parent
    base_url = None
    if isinstance(options.get("baseUrl"), str):
        base_url = fs.join(config_dir, options["baseUrl"])

    paths: dict[str, list[str]] = {}
    raw_paths = options.get("paths")
    if isinstance(raw_paths, dict):
        for pattern, replacements in raw_paths.items():
            if isinstance(replacements, list):
                paths[pattern] = [r for r in replacements if isinstance(r, str)]

    return CompilerConfig(config_dir=config_dir, base_url=base_url, paths=paths)


def _load_go_module_name(path: Path) -> Optional[str]:
    match = _GO_MODULE.search(_read_text(path))
    if match is None:
        return None
    return match.group(1).strip('"')
