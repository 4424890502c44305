"""Diagnostics settings for routegraph."""

from .verbose_mode import (
    is_verbose_enabled,
    resolve_verbose,
    set_verbose_enabled,
    verbose_context,
)

__all__ = [
    "is_verbose_enabled",
    "set_verbose_enabled",
    "resolve_verbose",
    "verbose_context",
]
