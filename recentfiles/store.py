"""Persistent recent-file lists stored in one shared JSON document.

Each scope (a project root, or the global list) owns one record in the
document. Saving reads the whole document, replaces only the current
scope's record, and writes everything back, so scopes never clobber each
other. Persistence is best-effort: failures are logged and never raised.
"""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from .config import APP_NAME, Settings

logger = logging.getLogger(__name__)

STORAGE_FILENAME = "mru.json"
DEFAULT_STORAGE_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / STORAGE_FILENAME
GLOBAL_SCOPE_KEY = "global"


class _UnreadableDocument(Exception):
    """Internal signal: the document exists but could not be read or decoded."""


@dataclass(frozen=True)
class ScopeRecord:
    """Stored recent-file list for one scope."""

    items: tuple[str, ...]
    last_updated: int


def scope_key_for(settings: Settings, project_root: Path | str | None = None) -> str:
    """Return the storage key for the active scope.

    The global marker is used when ``persistent.global_list`` is set;
    otherwise the project root (default: the current directory).
    """
    if settings.persistent.global_list:
        return GLOBAL_SCOPE_KEY
    root = Path.cwd() if project_root is None else Path(project_root)
    return str(root)


def _string_items(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def _coerce_timestamp(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


class PersistentStore:
    """Read/merge/write access to the shared recent-files document."""

    def __init__(self, path: Path | None = None, enabled: bool = False) -> None:
        self.path = DEFAULT_STORAGE_PATH if path is None else Path(path)
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> PersistentStore:
        return cls(path=settings.persistent.path, enabled=settings.persistent.enabled)

    def _read_document(self) -> dict[str, object]:
        """Return the decoded document, ``{}`` when it does not exist yet.

        Raises ``_UnreadableDocument`` when the file exists but cannot be read
        or does not hold a JSON object.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No recent-files storage at %s yet", self.path)
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise _UnreadableDocument(f"failed to read {self.path}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise _UnreadableDocument(f"failed to parse {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise _UnreadableDocument(f"{self.path} does not contain a JSON object")
        return data

    def _write_document(self, data: dict[str, object]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Failed to write recent-files storage %s: %s", self.path, exc)
            return False
        return True

    def load(self, scope_key: str) -> list[str]:
        """Return the stored paths for ``scope_key`` that still exist as files."""
        if not self.enabled:
            return []
        try:
            data = self._read_document()
        except _UnreadableDocument as exc:
            logger.warning("Ignoring recent-files storage: %s", exc)
            return []

        record = data.get(scope_key)
        if not isinstance(record, dict):
            return []
        items = _string_items(record.get("items"))
        existing = [item for item in items if os.path.isfile(item)]
        if len(existing) != len(items):
            logger.debug("Dropped %d missing paths from scope %s", len(items) - len(existing), scope_key)
        return existing

    def save(self, scope_key: str, entries: Sequence[str]) -> bool:
        """Store ``entries`` as the record for ``scope_key``, keeping all other scopes.

        Returns whether the document was written. A corrupt document is
        replaced by one holding only this scope's record.
        """
        if not self.enabled:
            return False
        try:
            data = self._read_document()
        except _UnreadableDocument as exc:
            logger.warning("Overwriting unreadable recent-files storage: %s", exc)
            data = {}

        data[scope_key] = {
            "items": list(entries),
            "last_updated": int(time.time()),
        }
        return self._write_document(data)

    def records(self) -> dict[str, ScopeRecord]:
        """Return every well-formed scope record in the document (empty when disabled)."""
        if not self.enabled:
            return {}
        try:
            data = self._read_document()
        except _UnreadableDocument as exc:
            logger.warning("Ignoring recent-files storage: %s", exc)
            return {}

        records: dict[str, ScopeRecord] = {}
        for key, raw_record in data.items():
            if not isinstance(raw_record, dict):
                continue
            records[key] = ScopeRecord(
                items=tuple(_string_items(raw_record.get("items"))),
                last_updated=_coerce_timestamp(raw_record.get("last_updated")),
            )
        return records

    def forget(self, scope_key: str) -> bool:
        """Remove the record for ``scope_key``; returns whether one was removed."""
        if not self.enabled:
            return False
        try:
            data = self._read_document()
        except _UnreadableDocument as exc:
            logger.warning("Cannot update recent-files storage: %s", exc)
            return False
        if scope_key not in data:
            return False
        del data[scope_key]
        return self._write_document(data)
