"""Result models for a full analysis run."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..graph.models import CouplingMetric, CycleGroup, DependencyGraph
from ..resolution.models import ResolvedDependency


@dataclass(frozen=True)
class AnalysisSummary:
    """Headline numbers for one repository."""

    module_count: int = 0
    dependency_count: int = 0
    circular_dependency_count: int = 0
    average_instability: float = 0.0
    max_afferent_coupling: int = 0
    max_efferent_coupling: int = 0
    external_dependency_count: int = 0
    best_effort_count: int = 0


@dataclass
class AnalysisResult:
    """Everything one run produced, keyed by repo-relative POSIX path."""

    root: Path
    files: list[str] = field(default_factory=list)
    dependencies: dict[str, frozenset[ResolvedDependency]] = field(default_factory=dict)
    graph: DependencyGraph = field(default_factory=DependencyGraph)
    cycles: list[CycleGroup] = field(default_factory=list)
    coupling: list[CouplingMetric] = field(default_factory=list)
    summary: AnalysisSummary = field(default_factory=AnalysisSummary)

    def external_packages(self) -> Counter:
        """How many files reference each external token."""
        counts: Counter = Counter()
        for deps in self.dependencies.values():
            counts.update({d.value for d in deps if d.is_external})
        return counts

    def coupling_for(self, path: str) -> CouplingMetric | None:
        for metric in self.coupling:
            if metric.path == path:
                return metric
        return None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view; every collection is sorted for stable output."""
        s = self.summary
        return {
            "root": str(self.root),
            "summary": {
                "module_count": s.module_count,
                "dependency_count": s.dependency_count,
                "circular_dependency_count": s.circular_dependency_count,
                "average_instability": round(s.average_instability, 4),
                "max_afferent_coupling": s.max_afferent_coupling,
                "max_efferent_coupling": s.max_efferent_coupling,
                "external_dependency_count": s.external_dependency_count,
                "best_effort_count": s.best_effort_count,
            },
            "dependencies": {
                path: sorted(str(d) for d in deps)
                for path, deps in sorted(self.dependencies.items())
            },
            "graph": {
                path: sorted(targets) for path, targets in sorted(self.graph.adjacency.items())
            },
            "cycles": [
                {"files": list(c.nodes), "internal_edges": c.internal_edge_count}
                for c in self.cycles
            ],
            "coupling": [
                {
                    "path": m.path,
                    "afferent": m.afferent,
                    "efferent": m.efferent,
                    "instability": round(m.instability, 4),
                }
                for m in self.coupling
            ],
            "external_packages": dict(sorted(self.external_packages().items())),
        }
