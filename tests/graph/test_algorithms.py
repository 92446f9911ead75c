"""Tests for cycle detection (Tarjan SCC) and coupling metrics."""

import pytest

from depscope.graph.algorithms import (
    build_reverse_index,
    compute_coupling,
    compute_instability,
    detect_cycles,
    tarjan_scc,
)
from depscope.graph.models import DependencyGraph


def _graph(adjacency):
    return DependencyGraph(adjacency={k: frozenset(v) for k, v in adjacency.items()})


# ── tarjan_scc ────────────────────────────────────────────────────


class TestTarjanScc:
    def test_chain_is_all_singletons(self, chain_graph):
        sccs = tarjan_scc(chain_graph)
        assert sorted(len(c) for c in sccs) == [1, 1, 1, 1]

    def test_every_node_in_exactly_one_component(self, star_graph):
        sccs = tarjan_scc(star_graph)
        members = [n for c in sccs for n in c]
        assert sorted(members) == sorted(star_graph)

    def test_two_cycles_sharing_nothing(self):
        sccs = tarjan_scc(
            {
                "a": frozenset({"b"}),
                "b": frozenset({"a", "c"}),
                "c": frozenset({"d"}),
                "d": frozenset({"c"}),
            }
        )
        assert sorted(sorted(c) for c in sccs) == [["a", "b"], ["c", "d"]]

    def test_unknown_neighbors_ignored(self):
        assert tarjan_scc({"a": frozenset({"ghost"})}) == [["a"]]

    def test_deep_chain_does_not_recurse(self):
        n = 5000
        adjacency = {f"n{i}": frozenset({f"n{i + 1}"}) for i in range(n)}
        adjacency[f"n{n}"] = frozenset({"n0"})
        sccs = tarjan_scc(adjacency)
        assert len(sccs) == 1
        assert len(sccs[0]) == n + 1


# ── detect_cycles ─────────────────────────────────────────────────


class TestDetectCycles:
    def test_mutual_dependency_is_one_group(self):
        cycles = detect_cycles(_graph({"a": {"b"}, "b": {"a"}}))
        assert len(cycles) == 1
        assert set(cycles[0].nodes) == {"a", "b"}
        assert cycles[0].internal_edge_count == 2

    def test_acyclic_graph_has_no_cycles(self, chain_graph):
        assert detect_cycles(DependencyGraph(adjacency=chain_graph)) == []

    def test_self_loop_is_not_a_cycle(self):
        assert detect_cycles(_graph({"a": {"a"}, "b": {"a"}})) == []

    def test_discovery_order(self):
        cycles = detect_cycles(_graph({"a": {"b"}, "b": {"c"}, "c": {"a"}}))
        assert cycles[0].nodes == ("a", "b", "c")

    def test_cycle_with_tail(self):
        cycles = detect_cycles(
            _graph({"entry": {"x"}, "x": {"y"}, "y": {"z"}, "z": {"x", "leaf"}, "leaf": set()})
        )
        assert len(cycles) == 1
        assert set(cycles[0].nodes) == {"x", "y", "z"}
        assert "entry" not in cycles[0]
        assert len(cycles[0]) == 3

    def test_deterministic(self):
        adjacency = {"b": {"a"}, "a": {"c", "b"}, "c": {"a"}}
        first = detect_cycles(_graph(adjacency))
        second = detect_cycles(_graph(dict(reversed(list(adjacency.items())))))
        assert [set(c.nodes) for c in first] == [set(c.nodes) for c in second]


# ── coupling ──────────────────────────────────────────────────────


class TestCoupling:
    def test_instability_formula(self):
        assert compute_instability(3, 1) == 0.25
        assert compute_instability(0, 2) == 1.0
        assert compute_instability(0, 0) == 0.0

    def test_hub_metrics(self, star_graph):
        metrics = {m.path: m for m in compute_coupling(DependencyGraph(adjacency=star_graph))}
        hub = metrics["hub"]
        assert (hub.afferent, hub.efferent) == (3, 1)
        assert hub.instability == pytest.approx(0.25)
        assert metrics["base"].instability == 0.0
        assert metrics["x"].instability == 1.0

    def test_isolated_node_is_zero_not_nan(self):
        (metric,) = compute_coupling(_graph({"lonely": set()}))
        assert (metric.afferent, metric.efferent, metric.instability) == (0, 0, 0.0)

    def test_sorted_by_instability_descending(self, star_graph):
        values = [m.instability for m in compute_coupling(DependencyGraph(adjacency=star_graph))]
        assert values == sorted(values, reverse=True)

    def test_self_loop_counts_both_ways(self):
        (metric,) = compute_coupling(_graph({"a": {"a"}}))
        assert (metric.afferent, metric.efferent) == (1, 1)
        assert metric.instability == 0.5

    def test_reverse_index_covers_every_node(self, chain_graph):
        reverse = build_reverse_index(DependencyGraph(adjacency=chain_graph))
        assert reverse == {"a": set(), "b": {"a"}, "c": {"b"}, "d": {"c"}}
