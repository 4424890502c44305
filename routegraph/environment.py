"""
Route-planning environment built on top of the graph engine.

Points, obstacles and routes are plain state holders. Environment collects
them and asks a WeightedGraph for the best route; it does no graph work of
its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Hashable, List, Optional, Sequence

from .graphs import WeightedGraph
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Point:
    """Named location on the map."""

    name: str
    x: float
    y: float

    def info(self) -> str:
        return f"Point: {self.name}"


@dataclass(frozen=True)
class Obstacle:
    """Something in the way (mountain, storm, traffic jam) at a location."""

    description: str
    x: float
    y: float

    def info(self) -> str:
        return f"Obstacle: {self.description}"


@dataclass(frozen=True)
class Route:
    """Route between two points with its length in km."""

    start: Point
    destination: Point
    distance: float

    def describe(self) -> str:
        return (
            f"Route from {self.start.name} to {self.destination.name} "
            f"({self.distance:g} km)"
        )


@dataclass
class Environment:
    """
    Collection of routes and obstacles.

    Attributes:
        routes: Routes added so far, in insertion order.
        obstacles: Obstacles added so far, in insertion order.
        reporter: Destination for the environment's text output
            (default: print).
    """

    routes: List[Route] = field(default_factory=list)
    obstacles: List[Obstacle] = field(default_factory=list)
    reporter: Callable[[str], None] = print

    def add_route(self, route: Route) -> None:
        self.routes.append(route)

    def add_obstacle(self, obstacle: Obstacle) -> None:
        self.obstacles.append(obstacle)

    def describe(self) -> str:
        """Return a multi-line overview of routes and obstacles."""
        lines = ["Environment overview", "", "Routes:"]
        lines.extend(route.describe() for route in self.routes)
        lines.extend(["", "Obstacles:"])
        lines.extend(
            f"- {obstacle.description} at ({obstacle.x:g}, {obstacle.y:g})"
            for obstacle in self.obstacles
        )
        return "\n".join(lines)

    def show(self) -> None:
        """Send the overview to the reporter."""
        self.reporter(self.describe())

    def find_optimal_route(
        self,
        graph: WeightedGraph,
        start: Hashable,
        end: Hashable,
        traveller: str,
        verbose: Optional[bool] = True,
    ) -> List[Hashable]:
        """
        Ask the graph for the shortest path from start to end.

        Args:
            graph: Road network to search.
            start: Departure vertex.
            end: Arrival vertex.
            traveller: Name of whoever travels, used in the output only.
            verbose: Passed on to WeightedGraph.shortest_path.

        Returns:
            The vertex path, empty if end is unreachable.

        Raises:
            KeyError: If start or end is not in the graph.
        """
        self.reporter(f"Finding optimal route for {traveller}...")
        path, distance = graph.shortest_path(start, end, verbose)
        self.reporter("Optimal route: " + " ".join(str(vertex) for vertex in path))
        logger.debug("Route for %s: %s (distance %d)", traveller, path, distance)
        return path

    def move_along(self, traveller: str, route: Sequence[Hashable]) -> str:
        """Report a traveller moving along a vertex route and return the line."""
        line = f"{traveller} moves along the route: " + " ".join(str(v) for v in route)
        self.reporter(line)
        return line
