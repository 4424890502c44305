"""Tests for graph utility functions."""

from routegraph.graphs import WeightedGraph, edge_list, reconstruct_path, vertex_index_map


class TestVertexIndexMap:
    """Tests for vertex_index_map."""

    def test_dense_indices(self):
        """Test that indices follow iteration order."""
        assert vertex_index_map([10, 20, 30]) == {10: 0, 20: 1, 30: 2}

    def test_empty(self):
        """Test the empty case."""
        assert vertex_index_map([]) == {}


class TestEdgeList:
    """Tests for edge_list."""

    def test_self_loops_excluded_by_default(self):
        """Test that self-loops are dropped unless requested."""
        G = WeightedGraph()
        G.add_edge(1, 1, 3)
        G.add_edge(1, 2, 4)

        assert edge_list(G) == [(1, 2, 4)]
        assert edge_list(G, include_self_loops=True) == [(1, 1, 3), (1, 2, 4)]

    def test_undirected_deduplicated(self):
        """Test that each undirected edge is listed from its first endpoint."""
        G = WeightedGraph()
        G.add_edge(3, 1, 2)
        G.add_edge(2, 3, 5)

        assert edge_list(G) == [(1, 3, 2), (2, 3, 5)]

    def test_parallel_edges_kept(self):
        """Test that parallel undirected edges are both listed."""
        G = WeightedGraph()
        G.add_edge(1, 2, 5)
        G.add_edge(2, 1, 3)

        assert edge_list(G) == [(1, 2, 5), (1, 2, 3)]

    def test_directed_both_directions(self):
        """Test that directed edges in opposite directions are distinct."""
        G = WeightedGraph(directed=True)
        G.add_edge(1, 2, 5)
        G.add_edge(2, 1, 3)

        assert edge_list(G) == [(1, 2, 5), (2, 1, 3)]


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_reconstruct_simple(self):
        """Test path reconstruction."""
        assert reconstruct_path({2: 1, 3: 2}, 1, 3) == [1, 2, 3]

    def test_reconstruct_start(self):
        """Test that start == end needs no parent entry."""
        assert reconstruct_path({}, "A", "A") == ["A"]
