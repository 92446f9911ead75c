"""Dependency graph construction from per-file resolved dependencies."""

from typing import Iterable, Mapping

from ..resolution.models import ResolutionKind, ResolvedDependency
from .models import DependencyGraph


def build_dependency_graph(
    dependencies: Mapping[str, Iterable[ResolvedDependency]],
    include_best_effort: bool = True,
) -> DependencyGraph:
    """Build the graph closed over the keys of ``dependencies``.

    Keeps in-repo (and, unless disabled, best-effort) targets that are
    themselves keys; drops external targets and anything outside the
    analyzed set. Best-effort targets that name no analyzed file are
    collected in ``unresolved``. Self-dependencies are preserved.
    """
    known = set(dependencies)
    edge_kinds = {ResolutionKind.IN_REPO}
    if include_best_effort:
        edge_kinds.add(ResolutionKind.BEST_EFFORT)

    adjacency: dict[str, frozenset[str]] = {}
    unresolved: dict[str, frozenset[str]] = {}

    for path, deps in dependencies.items():
        targets: set[str] = set()
        missing: set[str] = set()
        for dep in deps:
            if dep.kind in edge_kinds and dep.value in known:
                targets.add(dep.value)
            elif dep.is_best_effort and dep.value not in known:
                missing.add(dep.value)
        adjacency[path] = frozenset(targets)
        if missing:
            unresolved[path] = frozenset(missing)

    return DependencyGraph(adjacency=adjacency, unresolved=unresolved)
