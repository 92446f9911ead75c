"""Structural analysis: dependency graph, cycles, coupling."""

from .algorithms import compute_coupling, detect_cycles, tarjan_scc
from .builder import build_dependency_graph
from .models import CouplingMetric, CycleGroup, DependencyGraph

__all__ = [
    "build_dependency_graph",
    "tarjan_scc",
    "detect_cycles",
    "compute_coupling",
    "DependencyGraph",
    "CycleGroup",
    "CouplingMetric",
]
