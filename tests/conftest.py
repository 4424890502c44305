"""Pytest configuration and shared fixtures for routegraph tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory for random connected undirected graphs
- An autouse fixture pinning the verbose default to off
"""

import os
from typing import Callable, Generator

import numpy as np
import pytest

from routegraph.diagnostics import verbose_context
from routegraph.graphs import WeightedGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def quiet_by_default() -> Generator[None, None, None]:
    """Keep ROUTEGRAPH_VERBOSE from leaking into tests that pass verbose=None."""
    with verbose_context(False):
        yield


@pytest.fixture(scope="function")
def random_connected_graph(
    rng: np.random.Generator,
) -> Callable[[int, int, int], WeightedGraph]:
    """Factory building a random connected undirected graph.

    The graph is a random spanning chain plus ``extra_edges`` random edges
    with integer weights in [1, max_weight], so equal weights are common.
    """

    def build(n: int, extra_edges: int, max_weight: int = 5) -> WeightedGraph:
        graph = WeightedGraph(directed=False)
        order = rng.permutation(n).tolist()
        for u, v in zip(order, order[1:]):
            graph.add_edge(u, v, int(rng.integers(1, max_weight + 1)))
        for _ in range(extra_edges):
            u, v = rng.integers(0, n, size=2).tolist()
            graph.add_edge(u, v, int(rng.integers(1, max_weight + 1)))
        return graph

    return build
