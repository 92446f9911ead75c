"""Tests for dependency graph construction."""

from depscope.graph.builder import build_dependency_graph
from depscope.resolution.models import ResolvedDependency as R


def test_empty_input():
    graph = build_dependency_graph({})
    assert graph.nodes == []
    assert graph.edge_count == 0


def test_in_repo_edges_kept():
    graph = build_dependency_graph(
        {
            "a.py": {R.in_repo("b.py"), R.external("os")},
            "b.py": set(),
        }
    )
    assert graph.adjacency == {"a.py": frozenset({"b.py"}), "b.py": frozenset()}
    assert graph.edge_count == 1


def test_targets_outside_analyzed_set_dropped():
    graph = build_dependency_graph(
        {"a.js": {R.in_repo("node_modules/x/index.js"), R.in_repo("b.js")}, "b.js": set()}
    )
    assert graph.successors("a.js") == frozenset({"b.js"})


def test_best_effort_edges_optional():
    deps = {"a.py": {R.best_effort("b.py")}, "b.py": set()}
    assert build_dependency_graph(deps).successors("a.py") == frozenset({"b.py"})
    assert build_dependency_graph(deps, include_best_effort=False).successors("a.py") == frozenset()


def test_unmatched_best_effort_is_reported():
    graph = build_dependency_graph({"a.js": {R.best_effort("gone"), R.external("fs")}})
    assert graph.successors("a.js") == frozenset()
    assert graph.unresolved == {"a.js": frozenset({"gone"})}


def test_self_dependency_preserved():
    graph = build_dependency_graph({"a.py": {R.in_repo("a.py")}})
    assert graph.successors("a.py") == frozenset({"a.py"})
    assert graph.edge_count == 1


def test_every_edge_target_is_a_node():
    graph = build_dependency_graph(
        {
            "a": {R.in_repo("b"), R.in_repo("zzz"), R.best_effort("c")},
            "b": {R.in_repo("a")},
            "c": {R.external("c")},
        }
    )
    for targets in graph.adjacency.values():
        assert targets <= set(graph.nodes)
