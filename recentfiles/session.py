"""Recent-files session: the entry points an editor integration calls.

One session owns one queue, its settings and its store. Integrations
subscribe ``on_file_opened`` to their "file entered" event and drive the
picker through ``entries``/``display_labels``/``select_at``/``delete_at``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Settings
from .display import display_labels
from .patterns import should_track
from .queue import RecencyQueue
from .store import PersistentStore, scope_key_for

logger = logging.getLogger(__name__)


class RecentFilesSession:
    """Tracks visited files for one editing session."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: PersistentStore | None = None,
        project_root: Path | str | None = None,
    ) -> None:
        self.settings = Settings() if settings is None else settings
        self.store = PersistentStore.from_settings(self.settings) if store is None else store
        self.scope_key = scope_key_for(self.settings, project_root)
        self.queue = RecencyQueue(self.settings.max_history)

    def _save(self) -> None:
        if not self.settings.persistent.enabled:
            return
        self.store.save(self.scope_key, self.queue.entries())

    def load_on_startup(self) -> int:
        """Hydrate the queue from storage; returns the number of entries loaded."""
        self.queue.replace(self.store.load(self.scope_key))
        logger.debug("Loaded %d recent files for scope %s", len(self.queue), self.scope_key)
        return len(self.queue)

    def on_file_opened(self, path: str) -> bool:
        """Record a visit to ``path``; returns ``False`` when it is not tracked."""
        if not should_track(path, self.settings.ignore_patterns):
            return False
        self.queue.touch(path)
        if self.settings.persistent.save_on_change:
            self._save()
        return True

    def entries(self) -> list[str]:
        return self.queue.entries()

    def display_labels(self) -> list[str]:
        return display_labels(self.queue.entries())

    def select_at(self, row: int) -> str:
        """Return the path shown at 1-based ``row`` without changing the order."""
        if not 1 <= row <= len(self.queue):
            raise IndexError(f"row {row} out of range 1..{len(self.queue)}")
        return self.queue[row - 1]

    def delete_at(self, row: int) -> int:
        """Remove the entry at 1-based ``row`` and return how many remain."""
        remaining = self.queue.remove_at(row)
        self._save()
        return remaining

    def clear_all(self) -> None:
        self.queue.clear()
        self._save()
        logger.info("Recent-files history cleared")
