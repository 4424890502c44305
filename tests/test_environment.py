"""Tests for the route-planning environment."""

import pytest

from routegraph import Environment, Obstacle, Point, Route, WeightedGraph


@pytest.fixture
def road_network():
    """Directed road network between four towns."""
    G = WeightedGraph(directed=True)
    G.add_edge(1, 2, 2)
    G.add_edge(2, 3, 3)
    G.add_edge(1, 3, 10)
    G.add_edge(3, 4, 1)
    return G


class TestMapObjects:
    """Tests for points, obstacles and routes."""

    def test_point_info(self):
        """Test the point description."""
        assert Point("Kyiv", 1.0, 2.0).info() == "Point: Kyiv"

    def test_obstacle_info(self):
        """Test the obstacle description."""
        assert Obstacle("Storm", 0.0, 0.0).info() == "Obstacle: Storm"

    def test_route_describe(self):
        """Test the route description."""
        route = Route(Point("A", 0, 0), Point("B", 3, 4), 5.0)
        assert route.describe() == "Route from A to B (5 km)"


class TestEnvironment:
    """Tests for Environment."""

    def test_describe(self):
        """Test the overview text."""
        env = Environment()
        env.add_route(Route(Point("A", 0, 0), Point("B", 3, 4), 5.0))
        env.add_obstacle(Obstacle("Mountain", 1.5, 2))

        assert env.describe() == (
            "Environment overview\n"
            "\n"
            "Routes:\n"
            "Route from A to B (5 km)\n"
            "\n"
            "Obstacles:\n"
            "- Mountain at (1.5, 2)"
        )

    def test_show_uses_reporter(self):
        """Test that show hands the overview to the reporter."""
        messages = []
        env = Environment(reporter=messages.append)
        env.show()
        assert messages == [env.describe()]

    def test_find_optimal_route(self, road_network):
        """Test routing through the graph engine."""
        messages = []
        road_network.reporter = messages.append
        env = Environment(reporter=messages.append)

        path = env.find_optimal_route(road_network, 1, 4, "Car")

        assert path == [1, 2, 3, 4]
        assert messages == [
            "Finding optimal route for Car...",
            "Shortest path: 1 2 3 4\nTotal distance: 6",
            "Optimal route: 1 2 3 4",
        ]

    def test_find_optimal_route_unreachable(self, road_network):
        """Test that an unreachable town yields an empty route."""
        env = Environment(reporter=lambda message: None)
        road_network.add_vertex(5)

        assert env.find_optimal_route(road_network, 1, 5, "Yacht", verbose=False) == []

    def test_find_optimal_route_unknown_vertex(self, road_network):
        """Test that unknown towns propagate KeyError."""
        env = Environment(reporter=lambda message: None)
        with pytest.raises(KeyError):
            env.find_optimal_route(road_network, 1, 42, "Train", verbose=False)

    def test_move_along(self):
        """Test the movement summary."""
        messages = []
        env = Environment(reporter=messages.append)
        line = env.move_along("Helicopter", [1, 3, 4])
        assert line == "Helicopter moves along the route: 1 3 4"
        assert messages == [line]
