"""
Minimum spanning tree algorithms: Prim, Kruskal and Borůvka.

All three only accept undirected graphs. An empty or directed graph yields
an empty result with total weight 0 rather than an error. Self-loops never
take part. On a disconnected graph Kruskal and Borůvka return a spanning
forest, while Prim only spans the component of its start vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23 (Minimum Spanning Trees).
"""

import heapq
import itertools
from operator import itemgetter
from typing import TYPE_CHECKING, Hashable, List, Optional, Tuple

import numpy as np

from ..diagnostics import resolve_verbose
from ..logging import get_logger
from .types import Edge, MSTResult
from .unionfind import DisjointSet
from .utils import edge_list, vertex_index_map

if TYPE_CHECKING:
    from .core import WeightedGraph

logger = get_logger(__name__)


def _rejects(graph: "WeightedGraph", algorithm: str, verbose: bool) -> bool:
    """Return True (after reporting why) if the graph cannot have an MST."""
    if not graph.adj:
        graph.report("Graph is empty.", verbose)
        return True
    if graph.directed:
        graph.report(f"{algorithm} algorithm works only for undirected graphs.", verbose)
        return True
    return False


def _report_tree(graph: "WeightedGraph", label: str, result: MSTResult, verbose: bool) -> None:
    lines = [f"{label} MST edges:"]
    lines.extend(f"{u} - {v}" for u, v in result.edges)
    lines.append(f"Total weight = {result.total_weight}")
    graph.report("\n".join(lines), verbose)


def prim_mst(graph: "WeightedGraph", verbose: Optional[bool] = None) -> MSTResult:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from the smallest vertex, always taking the cheapest
    frontier edge whose far end is not yet in the tree. Among equal weights
    the edge pushed first wins.

    Args:
        graph: WeightedGraph (undirected).
        verbose: Report progress through the graph's reporter. None uses
            the process-wide default.

    Returns:
        MSTResult of (u, v) edges in the order they were added and their
        total weight. Vertices unreachable from the start are left out.

    Complexity: O(E log E) using a binary heap.

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(2, 3, 1)
        >>> G.add_edge(1, 3, 3)
        >>> prim_mst(G)
        MSTResult(edges=[(1, 2), (2, 3)], total_weight=3)
    """
    verbose = resolve_verbose(verbose)
    if _rejects(graph, "Prim's", verbose):
        return MSTResult([], 0)

    start = graph.vertices()[0]
    visited = {start}
    mst_edges: List[Edge] = []
    total_weight = 0

    # Frontier entries: (weight, push order, u, v); push order breaks ties
    # without comparing vertices.
    frontier: List[Tuple[int, int, Hashable, Hashable]] = []
    order = itertools.count()

    def push_frontier(u: Hashable) -> None:
        for v, weight in graph.adj[u]:
            if v != u and v not in visited:
                heapq.heappush(frontier, (weight, next(order), u, v))

    push_frontier(start)

    while frontier:
        weight, _, u, v = heapq.heappop(frontier)
        if v in visited:
            continue

        visited.add(v)
        total_weight += weight
        mst_edges.append((u, v))
        push_frontier(v)

    result = MSTResult(mst_edges, total_weight)
    _report_tree(graph, "Prim", result, verbose)
    return result


def kruskal_mst(graph: "WeightedGraph", verbose: Optional[bool] = None) -> MSTResult:
    """
    Kruskal's algorithm for minimum spanning forest.

    Sorts the deduplicated edges by weight (stable, so equal weights keep
    their extraction order) and adds every edge joining two different
    components.

    Args:
        graph: WeightedGraph (undirected).
        verbose: Report progress through the graph's reporter. None uses
            the process-wide default.

    Returns:
        MSTResult of (u, v) edges in the order they were accepted and their
        total weight. Disconnected graphs give one tree per component.

    Complexity: O(E log E) for sorting plus near-linear union-find work.
    """
    verbose = resolve_verbose(verbose)
    if _rejects(graph, "Kruskal's", verbose):
        return MSTResult([], 0)

    edges = edge_list(graph)
    edges.sort(key=itemgetter(2))

    index = vertex_index_map(graph.vertices())
    components = DisjointSet(len(index))

    mst_edges: List[Edge] = []
    total_weight = 0

    for u, v, weight in edges:
        if components.union(index[u], index[v]):
            mst_edges.append((u, v))
            total_weight += weight

    result = MSTResult(mst_edges, total_weight)
    _report_tree(graph, "Kruskal", result, verbose)
    return result


def boruvka_mst(graph: "WeightedGraph", verbose: Optional[bool] = None) -> MSTResult:
    """
    Borůvka's algorithm for minimum spanning forest.

    Each round finds the cheapest edge leaving every component, then merges
    along all of them at once. Stops when one component is left or a round
    merges nothing, which is how disconnected graphs end up as a forest.
    Among equal weights the edge extracted first is the cheapest.

    Args:
        graph: WeightedGraph (undirected).
        verbose: Report progress through the graph's reporter. None uses
            the process-wide default.

    Returns:
        MSTResult of (u, v) edges in the order they were merged and their
        total weight.

    Complexity: O(E log V), at most log V rounds of O(E) each.
    """
    verbose = resolve_verbose(verbose)
    if _rejects(graph, "Boruvka's", verbose):
        return MSTResult([], 0)

    edges = edge_list(graph)
    index = vertex_index_map(graph.vertices())
    n = len(index)
    components = DisjointSet(n)

    ends_u = np.array([index[u] for u, _, _ in edges], dtype=np.int64)
    ends_v = np.array([index[v] for _, v, _ in edges], dtype=np.int64)
    weights = np.array([weight for _, _, weight in edges])
    edge_ids = np.arange(len(edges), dtype=np.int64)

    mst_edges: List[Edge] = []
    total_weight = 0
    num_trees = n
    rounds = 0

    while num_trees > 1:
        rounds += 1
        roots = components.roots()
        root_u = roots[ends_u]
        root_v = roots[ends_v]
        crossing = root_u != root_v

        # A crossing edge is a candidate for the components on both ends.
        owners = np.concatenate([root_u[crossing], root_v[crossing]])
        candidates = np.tile(edge_ids[crossing], 2)

        # Lightest first, then lowest edge index; the first candidate of
        # each owner is that component's cheapest edge.
        order = np.lexsort((candidates, weights[candidates]))
        _, first = np.unique(owners[order], return_index=True)
        cheapest = candidates[order][first]

        merged = 0
        for edge_index in cheapest.tolist():
            u, v, weight = edges[edge_index]
            # An earlier merge this round may already have joined u and v.
            if components.union(index[u], index[v]):
                mst_edges.append((u, v))
                total_weight += weight
                num_trees -= 1
                merged += 1

        logger.debug("Boruvka round %d merged %d components", rounds, merged)
        if not merged:
            break

    result = MSTResult(mst_edges, total_weight)
    _report_tree(graph, "Boruvka", result, verbose)
    return result
