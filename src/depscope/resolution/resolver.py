"""ModuleResolver: dispatch one specifier to its ecosystem strategy.

Dispatch is purely a function of the source file's language. Unless bare
resolution is enabled, a specifier that is neither relative nor absolute is
external for every language except Python, whose absolute imports are also
looked up against local source roots.

Resolution never fails from the caller's point of view: the worst outcome
is an ``External`` or ``BestEffort`` result.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from ..logging_config import get_logger
from ..scanning.languages import Language
from ..scanning.models import SourceFile
from .base import ResolutionContext, Strategy, is_path_like
from .basic import resolve_basic
from .go import resolve_go
from .java import resolve_java
from .manifests import ManifestCache
from .models import ResolvedDependency
from .node import resolve_node
from .python import resolve_python
from .ruby import resolve_ruby
from .typescript import resolve_typescript

logger = get_logger(__name__)

STRATEGIES: dict[Language, Strategy] = {
    Language.ECMASCRIPT: resolve_node,
    Language.TYPESCRIPT: resolve_typescript,
    Language.PYTHON: resolve_python,
    Language.JAVA: resolve_java,
    Language.GO: resolve_go,
    Language.RUBY: resolve_ruby,
    Language.OTHER: resolve_basic,
}


class ModuleResolver:
    """Resolves raw specifiers for files of one repository.

    One resolver (and its manifest cache) belongs to one analysis run and
    may be shared by worker threads.
    """

    def __init__(
        self,
        root: Union[str, Path],
        manifests: Optional[ManifestCache] = None,
        resolve_bare: bool = False,
    ) -> None:
        self._ctx = ResolutionContext(
            root=Path(os.path.abspath(root)),
            manifests=manifests or ManifestCache(),
            resolve_bare=resolve_bare,
        )

    @property
    def root(self) -> Path:
        return self._ctx.root

    def source_file(self, path: Union[str, Path], text: str = "") -> SourceFile:
        """SourceFile for an absolute or repo-relative path."""
        path = Path(path)
        if not path.is_absolute():
            path = self.root / path
        return SourceFile.from_path(Path(os.path.abspath(path)), self.root, text)

    def resolve(self, source: SourceFile, specifier: str) -> ResolvedDependency:
        """Resolve one specifier found in ``source``."""
        if (
            not is_path_like(specifier)
            and source.language is not Language.PYTHON
            and not self._ctx.resolve_bare
        ):
            return ResolvedDependency.external(specifier)

        strategy = STRATEGIES[source.language]
        try:
            return strategy(self._ctx, source, specifier)
        except (OSError, ValueError) as e:
            logger.warning(f"Error resolving module {specifier} from {source.path}: {e}")
            return ResolvedDependency.external(specifier)

    def resolve_all(self, source: SourceFile, specifiers: Iterable[str]) -> frozenset[ResolvedDependency]:
        return frozenset(self.resolve(source, specifier) for specifier in specifiers)


def resolve(
    source: Union[str, Path], specifier: str, root: Union[str, Path], resolve_bare: bool = False
) -> ResolvedDependency:
    """One-shot resolution of ``specifier`` found in ``source`` under ``root``."""
    resolver = ModuleResolver(root, resolve_bare=resolve_bare)
    return resolver.resolve(resolver.source_file(source), specifier)
