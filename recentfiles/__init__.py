"""Public package surface for recentfiles.

Exports the session object and the pure building blocks it is made of.
``main`` is imported lazily to keep library imports lightweight.
"""

from __future__ import annotations

from .config import ConfigError, PersistentSettings, Settings, load_settings
from .display import display_labels
from .navigation import initial_row, next_row, prev_row
from .patterns import matches_ignore_pattern, should_track
from .queue import RecencyQueue
from .session import RecentFilesSession
from .store import GLOBAL_SCOPE_KEY, PersistentStore, ScopeRecord, scope_key_for


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "ConfigError",
    "GLOBAL_SCOPE_KEY",
    "PersistentSettings",
    "PersistentStore",
    "RecencyQueue",
    "RecentFilesSession",
    "ScopeRecord",
    "Settings",
    "display_labels",
    "initial_row",
    "load_settings",
    "main",
    "matches_ignore_pattern",
    "next_row",
    "prev_row",
    "scope_key_for",
    "should_track",
]
