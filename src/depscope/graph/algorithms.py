"""Graph algorithms: strongly connected components and coupling metrics."""

import logging

from .models import CouplingMetric, CycleGroup, DependencyGraph

logger = logging.getLogger(__name__)


def tarjan_scc(adjacency: dict[str, frozenset[str]]) -> list[list[str]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Uses an explicit call stack to avoid Python recursion limits on deep
    dependency chains. Nodes are visited in key order and neighbors in
    sorted order, so the output is deterministic. Each component is
    returned in pop order (LIFO); neighbors that are not keys are ignored.
    """
    counter = 0
    scc_stack: list[str] = []
    on_stack: set[str] = set()
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    result: list[list[str]] = []

    def _neighbors(node: str) -> list[str]:
        return sorted(w for w in adjacency.get(node, ()) if w in adjacency)

    for root in adjacency:
        if root in index:
            continue

        # Explicit call stack: each frame is (node, neighbor_iterator)
        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        call_stack = [(root, iter(_neighbors(root)))]

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if w not in index:
                    # "Recurse" into w
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    call_stack.append((w, iter(_neighbors(w))))
                    pushed = True
                    break
                elif w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])

            if pushed:
                continue

            # All neighbors processed: "return" from v
            call_stack.pop()
            if call_stack:
                caller = call_stack[-1][0]
                lowlink[caller] = min(lowlink[caller], lowlink[v])

            if lowlink[v] == index[v]:
                component: list[str] = []
                while True:
                    w = scc_stack.pop()
                    on_stack.discard(w)
                    component.append(w)
                    if w == v:
                        break
                result.append(component)

    return result


def detect_cycles(graph: DependencyGraph) -> list[CycleGroup]:
    """Circular-dependency groups: every SCC with at least two files.

    A lone self-dependency is not reported. Members are listed in
    discovery order (reversed pop order).
    """
    cycles: list[CycleGroup] = []
    for component in tarjan_scc(graph.adjacency):
        if len(component) < 2:
            continue
        members = set(component)
        internal_edges = sum(
            1 for n in component for neighbor in graph.successors(n) if neighbor in members
        )
        cycles.append(
            CycleGroup(nodes=tuple(reversed(component)), internal_edge_count=internal_edges)
        )

    if cycles:
        logger.warning(f"Detected {len(cycles)} circular dependency group(s).")
    return cycles


def build_reverse_index(graph: DependencyGraph) -> dict[str, set[str]]:
    """Incoming edges per node; every node present, isolated ones with an empty set."""
    reverse: dict[str, set[str]] = {node: set() for node in graph.adjacency}
    for source, targets in graph.adjacency.items():
        for target in targets:
            if target in reverse:
                reverse[target].add(source)
    return reverse


def compute_instability(afferent: int, efferent: int) -> float:
    """I = Ce / (Ca + Ce); 0.0 for an isolated node."""
    total = afferent + efferent
    if total == 0:
        return 0.0
    return efferent / total


def compute_coupling(graph: DependencyGraph) -> list[CouplingMetric]:
    """Per-file coupling metrics, most unstable first."""
    reverse = build_reverse_index(graph)
    metrics = []
    for node, targets in graph.adjacency.items():
        efferent = len(targets)
        afferent = len(reverse[node])
        metrics.append(
            CouplingMetric(
                path=node,
                afferent=afferent,
                efferent=efferent,
                instability=compute_instability(afferent, efferent),
            )
        )

    metrics.sort(key=lambda m: m.instability, reverse=True)
    logger.info(f"Calculated coupling metrics for {len(metrics)} modules.")
    return metrics
