"""
Core weighted graph data structure.

WeightedGraph keeps an adjacency list mapping each vertex to an ordered list
of (neighbor, weight) pairs. Vertices are iterated in ascending order and
neighbor lists keep insertion order, which fixes how the algorithms break
ties between equal weights.

The graph is not thread-safe; callers sharing one across threads must
serialize access themselves.
"""

from types import MappingProxyType
from typing import Callable, Dict, Hashable, List, Mapping, Optional, Tuple

from ..logging import get_logger
from .mst import boruvka_mst, kruskal_mst, prim_mst
from .shortest import dijkstra
from .types import MSTResult, PathResult
from .utils import edge_list

logger = get_logger(__name__)

Reporter = Callable[[str], None]


class WeightedGraph:
    """
    Weighted graph with adjacency-list representation.

    Supports directed and undirected graphs. An undirected edge (u, v, w)
    with u != v is stored in both neighbor lists; a self-loop is stored once
    and ignored by every algorithm.

    Attributes:
        adj: Adjacency list mapping vertex -> list of (neighbor, weight) tuples.
        reporter: Callable receiving human-readable diagnostics when an
            algorithm runs verbosely.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - remove_edge: O(deg(u) + deg(v))
        - remove_vertex: O(V + E)
    """

    def __init__(self, directed: bool = False, reporter: Optional[Reporter] = None):
        """
        Initialize an empty weighted graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
                Fixed for the lifetime of the graph.
            reporter: Destination for verbose diagnostics (default: print).
        """
        self._directed = bool(directed)
        self.adj: Dict[Hashable, List[Tuple[Hashable, int]]] = {}
        self.reporter: Reporter = reporter if reporter is not None else print

    @property
    def directed(self) -> bool:
        return self._directed

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(directed={self._directed}, "
            f"vertices={len(self.adj)}, edges={len(self.edges())})"
        )

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self.adj

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """
        Add a vertex with no neighbors. Does nothing if it already exists.

        Args:
            vertex: Hashable, totally ordered vertex identifier.
        """
        if vertex not in self.adj:
            self.adj[vertex] = []

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge pointing at it.

        Removing an absent vertex is a no-op.

        Args:
            vertex: Vertex to remove.
        """
        if self.adj.pop(vertex, None) is None:
            return
        for neighbors in self.adj.values():
            neighbors[:] = [(v, w) for v, w in neighbors if v != vertex]

    def add_edge(self, u: Hashable, v: Hashable, weight: int = 1) -> None:
        """
        Add a weighted edge from u to v, creating missing endpoints.

        For undirected graphs, also adds the edge from v to u with the same
        weight unless u == v. Parallel edges are kept.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1). Dijkstra expects it to be
                non-negative.
        """
        self.add_vertex(u)
        self.add_vertex(v)

        self.adj[u].append((v, weight))

        if not self._directed and u != v:
            self.adj[v].append((u, weight))

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Remove every edge from u to v (and v to u for undirected graphs).

        Missing vertices or edges are a no-op.

        Args:
            u: Source vertex.
            v: Target vertex.
        """
        if u in self.adj:
            self.adj[u] = [(n, w) for n, w in self.adj[u] if n != v]

        if not self._directed and u != v and v in self.adj:
            self.adj[v] = [(n, w) for n, w in self.adj[v] if n != u]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def get_adjacency(self) -> Mapping[Hashable, Tuple[Tuple[Hashable, int], ...]]:
        """
        Return a read-only snapshot of the adjacency list.

        Returns:
            Mapping vertex -> tuple of (neighbor, weight) pairs, vertices in
            ascending order. Later mutations of the graph do not show up in it.
        """
        return MappingProxyType({u: tuple(self.adj[u]) for u in self.vertices()})

    def vertices(self) -> List[Hashable]:
        """
        Return list of all vertices in ascending order.

        Returns:
            Sorted list of vertices.
        """
        return sorted(self.adj)

    def edges(self) -> List[Tuple[Hashable, Hashable, int]]:
        """
        Return list of all edges with weights, self-loops included.

        For undirected graphs, each edge appears once.

        Returns:
            List of (u, v, weight) tuples.
        """
        return edge_list(self, include_self_loops=True)

    def format_adjacency(self) -> str:
        """Render one ``v -> (n, w) ...`` line per vertex."""
        lines = []
        for u in self.vertices():
            neighbors = "".join(f"({v}, {w}) " for v, w in self.adj[u])
            lines.append(f"{u} -> {neighbors}")
        return "\n".join(lines)

    def print_adjacency(self) -> None:
        """Send the adjacency listing to the reporter."""
        self.reporter(self.format_adjacency())

    def report(self, message: str, verbose: bool) -> None:
        """
        Emit a diagnostic message.

        The message is always logged at DEBUG and also handed to the
        reporter when verbose is True.
        """
        logger.debug(message)
        if verbose:
            self.reporter(message)

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def mst_prim(self, verbose: Optional[bool] = None) -> MSTResult:
        """Minimum spanning tree of the start vertex's component (Prim)."""
        return prim_mst(self, verbose)

    def mst_kruskal(self, verbose: Optional[bool] = None) -> MSTResult:
        """Minimum spanning forest (Kruskal)."""
        return kruskal_mst(self, verbose)

    def mst_boruvka(self, verbose: Optional[bool] = None) -> MSTResult:
        """Minimum spanning forest (Borůvka)."""
        return boruvka_mst(self, verbose)

    def shortest_path(
        self, start: Hashable, end: Hashable, verbose: Optional[bool] = None
    ) -> PathResult:
        """
        Shortest path from start to end (Dijkstra).

        Raises:
            KeyError: If start or end is not in the graph.
        """
        return dijkstra(self, start, end, verbose)
