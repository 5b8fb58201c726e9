"""Bounded most-recently-used list of visited file paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .config import DEFAULT_MAX_HISTORY, validate_max_history


class RecencyQueue:
    """Deduplicated recent paths, most recent first.

    A path occurs at most once and the length never exceeds ``max_history``.
    Public row numbers are 1-based to match what the picker shows.
    """

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY, entries: Iterable[str] = ()) -> None:
        self.max_history = validate_max_history(max_history)
        self._items: list[str] = []
        self.replace(entries)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, path: object) -> bool:
        return path in self._items

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __repr__(self) -> str:
        return f"RecencyQueue(max_history={self.max_history}, entries={self._items!r})"

    def entries(self) -> list[str]:
        """Return a snapshot copy, most recent first."""
        return list(self._items)

    def touch(self, path: str) -> None:
        """Move ``path`` to the front, inserting it if new, then trim the tail."""
        try:
            self._items.remove(path)
        except ValueError:
            pass
        self._items.insert(0, path)
        del self._items[self.max_history:]

    def remove_at(self, row: int) -> int:
        """Remove the entry shown at 1-based ``row`` and return the new length."""
        if not 1 <= row <= len(self._items):
            raise IndexError(f"row {row} out of range 1..{len(self._items)}")
        del self._items[row - 1]
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def replace(self, entries: Iterable[str]) -> None:
        """Replace the contents, keeping first occurrences and at most ``max_history``."""
        items: list[str] = []
        seen: set[str] = set()
        for path in entries:
            if not path or path in seen:
                continue
            seen.add(path)
            items.append(path)
            if len(items) >= self.max_history:
                break
        self._items = items
