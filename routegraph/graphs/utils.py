"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge extraction, and path reconstruction.
"""

from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Tuple

if TYPE_CHECKING:
    from .core import WeightedGraph


def vertex_index_map(vertices: Iterable[Hashable]) -> Dict[Hashable, int]:
    """
    Assign each vertex a dense index 0..n-1 in iteration order.

    Args:
        vertices: Vertices in the order they should be numbered.

    Returns:
        Dictionary mapping vertex -> index.

    Example:
        >>> vertex_index_map([10, 20, 30])
        {10: 0, 20: 1, 30: 2}
    """
    return {vertex: idx for idx, vertex in enumerate(vertices)}


def edge_list(
    graph: "WeightedGraph", include_self_loops: bool = False
) -> List[Tuple[Hashable, Hashable, int]]:
    """
    Return the graph's edges as (u, v, weight) triples.

    Vertices are visited in ascending order and each neighbor list in
    insertion order, so the result is deterministic. For undirected graphs
    every edge appears once, as first seen from its smaller endpoint.
    Parallel edges are kept.

    Args:
        graph: WeightedGraph instance.
        include_self_loops: Whether (u, u, w) entries are included.

    Returns:
        List of (u, v, weight) tuples.
    """
    edges: List[Tuple[Hashable, Hashable, int]] = []
    seen = set()

    for u in graph.vertices():
        for v, weight in graph.adj[u]:
            if u == v:
                if include_self_loops:
                    edges.append((u, v, weight))
                continue
            if not graph.directed:
                if (v, u) in seen:
                    continue
                seen.add((u, v))
            edges.append((u, v, weight))

    return edges


def reconstruct_path(
    parent: Dict[Hashable, Hashable], start: Hashable, end: Hashable
) -> List[Hashable]:
    """
    Walk parent pointers back from end to start.

    Args:
        parent: Mapping vertex -> predecessor on the shortest path tree.
            The start vertex needs no entry.
        start: Source vertex.
        end: Target vertex, assumed reachable.

    Returns:
        List of vertices from start to end (inclusive).

    Example:
        >>> reconstruct_path({2: 1, 3: 2}, 1, 3)
        [1, 2, 3]
    """
    path = [end]
    current = end
    while current != start:
        current = parent[current]
        path.append(current)
    path.reverse()
    return path
