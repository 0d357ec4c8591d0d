"""Tests for config persistence and input sanitization.

Validates notes-directory precedence, theme and pane-width keys, and that
malformed config data is safely normalized on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazynotes import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        patcher = mock.patch("lazynotes.config.CONFIG_PATH", self.root / "cfg" / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_or_malformed_config_loads_empty(self) -> None:
        self.assertEqual(config.load_config(), {})
        config.CONFIG_PATH.parent.mkdir(parents=True)
        config.CONFIG_PATH.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})
        config.CONFIG_PATH.write_text("{nope", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_left_pane_percent_round_trip_and_bounds(self) -> None:
        self.assertEqual(config.load_left_pane_percent(), config.DEFAULT_LEFT_PANE_PERCENT)
        config.save_left_pane_percent(42.123)
        self.assertEqual(config.load_left_pane_percent(), 42.12)

        for bad in (0, 100, -5, True, "40"):
            config.save_config({"left_pane_percent": bad})
            self.assertEqual(config.load_left_pane_percent(), config.DEFAULT_LEFT_PANE_PERCENT)

    def test_theme_name_round_trip(self) -> None:
        self.assertIsNone(config.load_theme_name())
        config.save_theme_name("  ocean ")
        self.assertEqual(config.load_theme_name(), "ocean")
        config.save_theme_name("   ")
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_save_keeps_other_keys(self) -> None:
        config.save_theme_name("ocean")
        config.save_left_pane_percent(40)
        saved = json.loads(config.CONFIG_PATH.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"theme": "ocean", "left_pane_percent": 40.0})


class NotesDirResolutionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        patcher = mock.patch("lazynotes.config.CONFIG_PATH", self.root / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_cli_argument_wins(self) -> None:
        config.save_notes_dir(self.root / "configured")
        self.assertEqual(config.resolve_notes_dir("given", cwd=self.root), Path("given"))

    def test_configured_directory_beats_default(self) -> None:
        config.save_notes_dir(self.root / "configured")
        self.assertEqual(config.resolve_notes_dir(None, cwd=self.root), self.root / "configured")

    def test_default_is_data_under_cwd(self) -> None:
        self.assertEqual(config.resolve_notes_dir(None, cwd=self.root), self.root / "data")

    def test_blank_configured_directory_is_ignored(self) -> None:
        config.save_config({"notes_dir": "  "})
        self.assertIsNone(config.load_notes_dir())


if __name__ == "__main__":
    unittest.main()
