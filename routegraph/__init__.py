"""routegraph - a weighted graph engine for route planning."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    is_verbose_enabled,
    set_verbose_enabled,
    verbose_context,
)

# Route-planning environment
from .environment import Environment, Obstacle, Point, Route

# Graph engine
from .graphs import (
    UNREACHABLE,
    DisjointSet,
    MSTResult,
    PathResult,
    WeightedGraph,
    boruvka_mst,
    dijkstra,
    kruskal_mst,
    prim_mst,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph engine
    "WeightedGraph",
    "MSTResult",
    "PathResult",
    "UNREACHABLE",
    "DisjointSet",
    "prim_mst",
    "kruskal_mst",
    "boruvka_mst",
    "dijkstra",
    # Environment
    "Point",
    "Obstacle",
    "Route",
    "Environment",
    # Diagnostics
    "is_verbose_enabled",
    "set_verbose_enabled",
    "verbose_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
