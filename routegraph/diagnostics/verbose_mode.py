"""
Default for the ``verbose`` argument of the graph algorithms.

Algorithms called with ``verbose=None`` look the flag up here. When it is
on, their progress text goes to the graph's reporter callable; the DEBUG
log receives the same text either way. The starting value comes from the
``ROUTEGRAPH_VERBOSE`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_VERBOSE_ENV_VAR = "ROUTEGRAPH_VERBOSE"
_TRUTHY = ("1", "true", "yes", "on")

_verbose_enabled: bool = os.getenv(_VERBOSE_ENV_VAR, "0").lower() in _TRUTHY


def is_verbose_enabled() -> bool:
    """Return True if reporters receive output when verbose is left as None."""
    return _verbose_enabled


def set_verbose_enabled(enabled: bool) -> None:
    """
    Change the default used by algorithms called with verbose=None.

    Parameters
    ----------
    enabled:
        Whether those calls hand their summaries to the graph's reporter.
        An explicit ``verbose=True/False`` on a call still wins.
    """
    global _verbose_enabled
    _verbose_enabled = bool(enabled)


def resolve_verbose(verbose: Optional[bool]) -> bool:
    """Return ``verbose`` if given, otherwise the process-wide default."""
    if verbose is None:
        return _verbose_enabled
    return bool(verbose)


@contextmanager
def verbose_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch reporter output on or off for the duration of a block.

    The previous default is restored on exit, even if the block raises.

    Example
    -------
    >>> graph = WeightedGraph(reporter=lines.append)
    >>> with verbose_context(True):
    ...     graph.mst_kruskal()  # tree summary lands in ``lines``
    """
    global _verbose_enabled
    prev = _verbose_enabled
    _verbose_enabled = bool(enabled)
    try:
        yield
    finally:
        _verbose_enabled = prev
