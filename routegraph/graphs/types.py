"""
Result types shared by the graph algorithms.

Both results are named tuples so callers can unpack them directly:

    >>> edges, weight = graph.mst_kruskal()
    >>> path, distance = graph.shortest_path(1, 4)
"""

from typing import Hashable, List, NamedTuple, Tuple

# Distance reported by shortest_path when the destination cannot be reached.
UNREACHABLE = -1

Edge = Tuple[Hashable, Hashable]


class MSTResult(NamedTuple):
    """Edges of a minimum spanning tree (or forest) and their total weight."""

    edges: List[Edge]
    total_weight: int


class PathResult(NamedTuple):
    """
    Vertex sequence from start to end (inclusive) and its total distance.

    An unreachable destination yields an empty path and a distance of
    UNREACHABLE.
    """

    path: List[Hashable]
    distance: int

    @property
    def reachable(self) -> bool:
        return self.distance != UNREACHABLE
