"""
Weighted graph engine for routegraph.

This package provides:
- WeightedGraph, an adjacency-list graph with incremental mutation
- Minimum spanning trees (Prim, Kruskal, Borůvka)
- Shortest path (Dijkstra)
- DisjointSet, the union-find helper behind Kruskal and Borůvka

Vertices are visited in ascending order, so results are reproducible.
"""

from .core import WeightedGraph
from .mst import boruvka_mst, kruskal_mst, prim_mst
from .shortest import dijkstra
from .types import UNREACHABLE, MSTResult, PathResult
from .unionfind import DisjointSet
from .utils import edge_list, reconstruct_path, vertex_index_map

__all__ = [
    "WeightedGraph",
    "MSTResult",
    "PathResult",
    "UNREACHABLE",
    "DisjointSet",
    "prim_mst",
    "kruskal_mst",
    "boruvka_mst",
    "dijkstra",
    "vertex_index_map",
    "edge_list",
    "reconstruct_path",
]

# Example usage:
# from routegraph.graphs import WeightedGraph
#
# G = WeightedGraph(directed=True)
# G.add_edge(1, 2, 2)
# G.add_edge(2, 3, 3)
# path, distance = G.shortest_path(1, 3)  # [1, 2, 3], 5
