"""
Single-source shortest path: Dijkstra's algorithm.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
import math
from typing import TYPE_CHECKING, Dict, Hashable, List, Optional, Tuple

from ..diagnostics import resolve_verbose
from ..logging import get_logger
from .types import UNREACHABLE, PathResult
from .utils import reconstruct_path

if TYPE_CHECKING:
    from .core import WeightedGraph

logger = get_logger(__name__)


def dijkstra(
    graph: "WeightedGraph",
    start: Hashable,
    end: Hashable,
    verbose: Optional[bool] = None,
) -> PathResult:
    """
    Dijkstra's algorithm for the shortest path between two vertices.

    Edge weights must be non-negative. This is a precondition and is not
    checked; negative weights give undefined results.

    Distances accumulate as floats and the returned distance is truncated
    with int(). Directed graphs follow edge direction.

    Args:
        graph: WeightedGraph with non-negative edge weights.
        start: Source vertex.
        end: Destination vertex.
        verbose: Report the path through the graph's reporter. None uses
            the process-wide default.

    Returns:
        PathResult of the vertices from start to end (inclusive) and the
        total distance, or ([], UNREACHABLE) if end cannot be reached.

    Raises:
        KeyError: If start or end is not in the graph.

    Complexity: O(E log V) using a binary heap.

    Example:
        >>> G = WeightedGraph(directed=True)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(2, 3, 3)
        >>> G.add_edge(1, 3, 10)
        >>> dijkstra(G, 1, 3)
        PathResult(path=[1, 2, 3], distance=5)
    """
    verbose = resolve_verbose(verbose)
    if start not in graph.adj:
        raise KeyError(f"Start vertex {start!r} not in graph")
    if end not in graph.adj:
        raise KeyError(f"End vertex {end!r} not in graph")

    dist: Dict[Hashable, float] = {vertex: math.inf for vertex in graph.adj}
    parent: Dict[Hashable, Hashable] = {}
    dist[start] = 0.0

    # Heap entries: (distance, push order, vertex); push order breaks ties
    # without comparing vertices.
    order = itertools.count()
    heap: List[Tuple[float, int, Hashable]] = [(0.0, next(order), start)]

    while heap:
        d, _, u = heapq.heappop(heap)

        # Stale entry superseded by a shorter one
        if d > dist[u]:
            continue
        if u == end:
            break

        for v, weight in graph.adj[u]:
            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(heap, (new_dist, next(order), v))

    if math.isinf(dist[end]):
        graph.report(f"No path from {start} to {end}", verbose)
        logger.debug("No path from %s to %s", start, end)
        return PathResult([], UNREACHABLE)

    path = reconstruct_path(parent, start, end)
    distance = int(dist[end])

    graph.report(
        "Shortest path: "
        + " ".join(str(vertex) for vertex in path)
        + f"\nTotal distance: {distance}",
        verbose,
    )
    logger.debug("Shortest path %s -> %s: %d hops, distance %d", start, end, len(path) - 1, distance)
    return PathResult(path, distance)
