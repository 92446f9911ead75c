"""Data models for the dependency graph and its derived structures.

Levels:
  Relationships: the dependency graph edges (file -> file)
  Derived structures: cycle groups (strongly connected components)
  Measurements: per-file coupling metrics
"""

from dataclasses import dataclass, field

# ── Relationships (the dependency graph) ───────────────────────────


@dataclass(frozen=True)
class DependencyGraph:
    """Dependency graph closed over the analyzed file set.

    Edges are directed: adjacency[A] contains B means A imports/depends on B.
    Every edge target is itself a key of ``adjacency``; self-edges are kept.
    """

    adjacency: dict[str, frozenset[str]] = field(default_factory=dict)

    # Best-effort targets that named no analyzed file (reporting only)
    unresolved: dict[str, frozenset[str]] = field(default_factory=dict)

    @property
    def nodes(self) -> list[str]:
        return list(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    def successors(self, node: str) -> frozenset[str]:
        return self.adjacency.get(node, frozenset())


# ── Derived structures ─────────────────────────────────────────────


@dataclass(frozen=True)
class CycleGroup:
    """A strongly connected component with more than one node (a real cycle).

    ``nodes`` is in discovery order: the reverse of Tarjan's pop order.
    """

    nodes: tuple[str, ...]
    internal_edge_count: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        return node in self.nodes


# ── Measurements ───────────────────────────────────────────────────


@dataclass(frozen=True)
class CouplingMetric:
    """Per-file coupling.

    afferent: files depending on this one (incoming edges)
    efferent: files this one depends on (outgoing edges)
    instability: efferent / (afferent + efferent), exactly 0.0 when both are 0
    """

    path: str
    afferent: int
    efferent: int
    instability: float
