"""Analysis engine: the full pipeline for one repository.

Pipeline:
  Discover files
       → Extract raw specifiers   (per file, in parallel)
       → Resolve specifiers       (per file, in parallel, shared manifest cache)
       → Merge                    (sorted by path: the snapshot point)
       → Build graph
       → Detect cycles
       → Compute coupling
       → Summary
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import AnalysisConfig
from ..exceptions import AnalysisCancelledError, InvalidPathError
from ..graph import build_dependency_graph, compute_coupling, detect_cycles
from ..graph.models import CouplingMetric, CycleGroup, DependencyGraph
from ..logging_config import get_logger
from ..resolution.manifests import ManifestCache
from ..resolution.models import ResolvedDependency
from ..resolution.resolver import ModuleResolver
from ..scanning.discovery import discover_source_files
from ..scanning.extractor import ImportExtractor
from .models import AnalysisResult, AnalysisSummary

logger = get_logger(__name__)

_PROGRESS_EVERY = 20


class AnalysisEngine:
    """Runs extraction, resolution and graph analysis over one repository.

    Per-file work is independent and runs on a thread pool; everything after
    the merge is computed from the immutable snapshot of per-file results.
    """

    def __init__(self, root: Union[str, Path], config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self.root = Path(root)
        if not self.root.is_dir():
            raise InvalidPathError(self.root, "not a directory")

        self._extractor = ImportExtractor()
        self._resolver = ModuleResolver(
            self.root,
            manifests=ManifestCache(),
            resolve_bare=self.config.resolve_bare_specifiers,
        )
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Request cancellation; files not yet started are skipped."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def run(self, files: Optional[Iterable[Union[str, Path]]] = None) -> AnalysisResult:
        """Analyze ``files`` (default: every discovered source file)."""
        if files is None:
            paths = discover_source_files(self.root, self.config)
        else:
            paths = [self._resolver.source_file(f).abs_path for f in files]

        dependencies = self._collect_dependencies(paths)

        # Snapshot point: nothing below observes partial per-file results
        if self.cancelled:
            raise AnalysisCancelledError(len(dependencies), len(paths))

        graph = build_dependency_graph(
            dependencies, include_best_effort=self.config.include_best_effort_edges
        )
        cycles = detect_cycles(graph)
        coupling = compute_coupling(graph)

        result = AnalysisResult(
            root=self._resolver.root,
            files=list(dependencies),
            dependencies=dependencies,
            graph=graph,
            cycles=cycles,
            coupling=coupling,
            summary=self._summarize(dependencies, graph, cycles, coupling),
        )
        logger.info(
            f"Analyzed {result.summary.module_count} files: "
            f"{result.summary.dependency_count} edges, {len(cycles)} cycle group(s)"
        )
        return result

    # ── Per-file work ──────────────────────────────────────────────

    def _collect_dependencies(self, paths: list[Path]) -> dict[str, frozenset[ResolvedDependency]]:
        results: dict[str, frozenset[ResolvedDependency]] = {}
        total = len(paths)
        if total == 0:
            return results

        logger.info(f"Analyzing {total} files with {self.config.effective_workers} workers")
        with ThreadPoolExecutor(max_workers=self.config.effective_workers) as executor:
            futures = {executor.submit(self._analyze_file, p): p for p in paths}
            for done, future in enumerate(as_completed(futures), start=1):
                outcome = future.result()
                if outcome is not None:
                    path, deps = outcome
                    results[path] = deps
                if done % _PROGRESS_EVERY == 0 or done == total:
                    logger.info(f"Processed {done}/{total} files")

        return dict(sorted(results.items()))

    def _analyze_file(self, abs_path: Path) -> Optional[tuple[str, frozenset[ResolvedDependency]]]:
        if self.cancelled:
            return None

        try:
            text = abs_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Cannot read {abs_path}: {e}")
            text = ""

        source = self._resolver.source_file(abs_path, text)
        resolved = frozenset(
            self._resolver.resolve(raw.source, raw.specifier)
            for raw in self._extractor.extract_dependencies(source)
        )
        return source.path, resolved

    # ── Summary ────────────────────────────────────────────────────

    @staticmethod
    def _summarize(
        dependencies: dict[str, frozenset[ResolvedDependency]],
        graph: DependencyGraph,
        cycles: list[CycleGroup],
        coupling: list[CouplingMetric],
    ) -> AnalysisSummary:
        all_deps = [d for deps in dependencies.values() for d in deps]
        count = len(coupling)
        return AnalysisSummary(
            module_count=len(graph.adjacency),
            dependency_count=graph.edge_count,
            circular_dependency_count=len(cycles),
            average_instability=(sum(m.instability for m in coupling) / count) if count else 0.0,
            max_afferent_coupling=max((m.afferent for m in coupling), default=0),
            max_efferent_coupling=max((m.efferent for m in coupling), default=0),
            external_dependency_count=sum(1 for d in all_deps if d.is_external),
            best_effort_count=sum(1 for d in all_deps if d.is_best_effort),
        )
