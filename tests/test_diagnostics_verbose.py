"""Tests for the process-wide verbose default."""

from routegraph.diagnostics import (
    is_verbose_enabled,
    resolve_verbose,
    set_verbose_enabled,
    verbose_context,
)
from routegraph.graphs import WeightedGraph


def test_verbose_off_in_tests():
    """Test that the autouse fixture pins verbose off."""
    assert is_verbose_enabled() is False


def test_set_verbose_enabled():
    """Test toggling the default."""
    set_verbose_enabled(True)
    try:
        assert is_verbose_enabled() is True
    finally:
        set_verbose_enabled(False)
    assert is_verbose_enabled() is False


def test_verbose_context_restores():
    """Test that the context manager restores the previous value."""
    with verbose_context(True):
        assert is_verbose_enabled() is True
        with verbose_context(False):
            assert is_verbose_enabled() is False
        assert is_verbose_enabled() is True
    assert is_verbose_enabled() is False


def test_resolve_verbose():
    """Test that explicit flags override the default."""
    with verbose_context(True):
        assert resolve_verbose(None) is True
        assert resolve_verbose(False) is False
    assert resolve_verbose(None) is False
    assert resolve_verbose(True) is True


def test_default_drives_algorithms():
    """Test that verbose=None follows the default."""
    messages = []
    G = WeightedGraph(reporter=messages.append)
    G.add_edge(1, 2, 4)

    G.mst_prim()
    assert messages == []

    with verbose_context(True):
        G.mst_prim()
        G.mst_prim(verbose=False)

    assert messages == ["Prim MST edges:\n1 - 2\nTotal weight = 4"]


def test_verbose_context_restores_after_error():
    """Test that the previous default comes back when the block raises."""
    try:
        with verbose_context(True):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert is_verbose_enabled() is False
