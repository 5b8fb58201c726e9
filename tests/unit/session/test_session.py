"""Session-level behavior: visit recording, picker actions, and persistence.

Exercises the full open -> filter -> touch -> save path and hydration on
startup against a temporary storage document.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from recentfiles.config import PersistentSettings, Settings
from recentfiles.session import RecentFilesSession
from recentfiles.store import GLOBAL_SCOPE_KEY


def _persistent_settings(storage: Path, **overrides: object) -> Settings:
    persistent = PersistentSettings(enabled=True, path=storage, **overrides)
    return Settings(max_history=5, persistent=persistent)


class SessionQueueTests(unittest.TestCase):
    def test_end_to_end_touch_evict_reorder_delete(self) -> None:
        session = RecentFilesSession(Settings(max_history=2), project_root="/proj")
        for path in ["/a", "/b", "/c"]:
            self.assertTrue(session.on_file_opened(path))
        self.assertEqual(session.entries(), ["/c", "/b"])

        session.on_file_opened("/b")
        self.assertEqual(session.entries(), ["/b", "/c"])

        self.assertEqual(session.delete_at(2), 1)
        self.assertEqual(session.entries(), ["/b"])

    def test_ignored_and_unnamed_files_are_not_recorded(self) -> None:
        settings = Settings(ignore_patterns=("*.tmp", "/build/*"))
        session = RecentFilesSession(settings, project_root="/proj")
        self.assertFalse(session.on_file_opened(""))
        self.assertFalse(session.on_file_opened("/proj/x.tmp"))
        self.assertFalse(session.on_file_opened("/build/out.o"))
        self.assertTrue(session.on_file_opened("/proj/src/build/out.o"))
        self.assertEqual(session.entries(), ["/proj/src/build/out.o"])

    def test_select_at_does_not_reorder(self) -> None:
        session = RecentFilesSession(project_root="/proj")
        session.on_file_opened("/a")
        session.on_file_opened("/b")
        self.assertEqual(session.select_at(2), "/a")
        self.assertEqual(session.entries(), ["/b", "/a"])
        with self.assertRaises(IndexError):
            session.select_at(3)
        with self.assertRaises(IndexError):
            session.select_at(0)

    def test_display_labels_follow_queue_order(self) -> None:
        session = RecentFilesSession(project_root="/proj")
        for path in ["/proj/x/util.py", "/proj/main.py", "/proj/y/util.py"]:
            session.on_file_opened(path)
        self.assertEqual(session.display_labels(), ["y/util.py", "main.py", "x/util.py"])

    def test_clear_all_empties_queue_and_logs(self) -> None:
        session = RecentFilesSession(project_root="/proj")
        session.on_file_opened("/a")
        with self.assertLogs("recentfiles.session", level="INFO") as logs:
            session.clear_all()
        self.assertEqual(session.entries(), [])
        self.assertIn("cleared", logs.output[0])


class SessionPersistenceTests(unittest.TestCase):
    def test_visits_are_saved_under_project_scope(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            storage = Path(tmp) / "mru.json"
            session = RecentFilesSession(_persistent_settings(storage), project_root="/projA")
            session.on_file_opened("/projA/a.py")
            session.on_file_opened("/projA/b.py")

            data = json.loads(storage.read_text(encoding="utf-8"))
        self.assertEqual(data["/projA"]["items"], ["/projA/b.py", "/projA/a.py"])
        self.assertIsInstance(data["/projA"]["last_updated"], int)

    def test_save_on_change_disabled_defers_visit_saves(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            storage = Path(tmp) / "mru.json"
            settings = _persistent_settings(storage, save_on_change=False)
            session = RecentFilesSession(settings, project_root="/projA")
            session.on_file_opened("/projA/a.py")
            session.on_file_opened("/projA/b.py")
            self.assertFalse(storage.exists())

            session.delete_at(1)
            data = json.loads(storage.read_text(encoding="utf-8"))
        self.assertEqual(data["/projA"]["items"], ["/projA/a.py"])

    def test_clear_all_saves_empty_list_for_active_scope_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            storage = Path(tmp) / "mru.json"
            settings = _persistent_settings(storage)
            other = RecentFilesSession(settings, project_root="/projB")
            other.on_file_opened("/projB/keep.py")

            session = RecentFilesSession(settings, project_root="/projA")
            session.on_file_opened("/projA/a.py")
            session.clear_all()

            data = json.loads(storage.read_text(encoding="utf-8"))
        self.assertEqual(data["/projA"]["items"], [])
        self.assertEqual(data["/projB"]["items"], ["/projB/keep.py"])

    def test_load_on_startup_hydrates_existing_files_within_capacity(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            files = []
            for name in ["a", "b", "c", "d", "e", "f", "g"]:
                path = root / f"{name}.txt"
                path.write_text(name, encoding="utf-8")
                files.append(str(path))
            storage = root / "mru.json"
            missing = str(root / "gone.txt")
            storage.write_text(
                json.dumps({str(root): {"items": [missing, *files], "last_updated": 1}}),
                encoding="utf-8",
            )

            session = RecentFilesSession(_persistent_settings(storage), project_root=root)
            self.assertEqual(session.load_on_startup(), 5)
        self.assertEqual(session.entries(), files[:5])

    def test_global_list_is_shared_between_projects(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            shared = root / "shared.txt"
            shared.write_text("x", encoding="utf-8")
            settings = _persistent_settings(root / "mru.json", global_list=True)

            first = RecentFilesSession(settings, project_root="/projA")
            self.assertEqual(first.scope_key, GLOBAL_SCOPE_KEY)
            first.on_file_opened(str(shared))

            second = RecentFilesSession(settings, project_root="/projB")
            second.load_on_startup()
            self.assertEqual(second.entries(), [str(shared)])

    def test_unwritable_storage_keeps_session_usable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            session = RecentFilesSession(_persistent_settings(blocker / "mru.json"), project_root="/projA")
            with self.assertLogs("recentfiles.store", level="WARNING"):
                self.assertTrue(session.on_file_opened("/projA/a.py"))
        self.assertEqual(session.entries(), ["/projA/a.py"])


if __name__ == "__main__":
    unittest.main()
