"""CLI argument and startup behavior tests.

Verifies how ``lazynotes.cli.main`` resolves the notes directory, enforces
the non-empty directory precondition, and renders notes without a TTY.
"""

from __future__ import annotations

import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazynotes import cli, config
from lazynotes.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.addCleanup(self._tmp.cleanup)
        config_patcher = mock.patch("lazynotes.config.CONFIG_PATH", self.root / "config.json")
        logging_patcher = mock.patch("lazynotes.cli.configure_logging")
        for patcher in (config_patcher, logging_patcher):
            patcher.start()
            self.addCleanup(patcher.stop)


class CliStartupTests(CliTestCase):
    def test_defaults_to_data_directory_under_cwd(self) -> None:
        data = self.root / "data"
        data.mkdir()
        (data / "a.txt").write_text("one\n~two\n", encoding="utf-8")

        with mock.patch("lazynotes.cli._is_interactive", return_value=True), mock.patch(
            "lazynotes.cli.TerminalController"
        ), mock.patch("lazynotes.cli.run_app") as run_app:
            cli.main([], cwd=self.root)

        run_app.assert_called_once()
        app = run_app.call_args.args[0]
        self.assertEqual(app.state.notes_dir, data)
        self.assertEqual(list(app.state.content.items), ["one", "~two"])
        self.assertIs(run_app.call_args.kwargs["theme"], DEFAULT_THEME)
        self.assertFalse(run_app.call_args.kwargs["show_markers"])

    def test_explicit_directory_and_no_color(self) -> None:
        notes = self.root / "notes"
        notes.mkdir()
        (notes / "n.txt").write_text("x\n", encoding="utf-8")

        with mock.patch("lazynotes.cli._is_interactive", return_value=True), mock.patch(
            "lazynotes.cli.TerminalController"
        ), mock.patch("lazynotes.cli.run_app") as run_app:
            cli.main([str(notes), "--no-color"], cwd=self.root)

        self.assertEqual(run_app.call_args.args[0].state.notes_dir, notes)
        self.assertIs(run_app.call_args.kwargs["theme"], PLAIN_THEME)
        self.assertTrue(run_app.call_args.kwargs["show_markers"])

    def test_theme_option_is_persisted(self) -> None:
        notes = self.root / "notes"
        notes.mkdir()
        (notes / "n.txt").write_text("x\n", encoding="utf-8")

        with mock.patch("lazynotes.cli._is_interactive", return_value=True), mock.patch(
            "lazynotes.cli.TerminalController"
        ), mock.patch("lazynotes.cli.run_app") as run_app:
            cli.main([str(notes), "--theme", "Ocean"], cwd=self.root)

        self.assertIs(run_app.call_args.kwargs["theme"], OCEAN_THEME)
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_explicit_directory_is_remembered_for_next_launch(self) -> None:
        notes = self.root / "notes"
        notes.mkdir()
        (notes / "n.txt").write_text("x\n", encoding="utf-8")
        elsewhere = self.root / "elsewhere"
        elsewhere.mkdir()

        with mock.patch("lazynotes.cli._is_interactive", return_value=True), mock.patch(
            "lazynotes.cli.TerminalController"
        ), mock.patch("lazynotes.cli.run_app") as run_app:
            cli.main([str(notes)], cwd=self.root)
            cli.main([], cwd=elsewhere)

        self.assertEqual(config.load_notes_dir(), notes)
        self.assertEqual(run_app.call_args.args[0].state.notes_dir, notes)

    def test_default_directory_is_not_persisted(self) -> None:
        data = self.root / "data"
        data.mkdir()
        (data / "a.txt").write_text("one\n", encoding="utf-8")

        with mock.patch("lazynotes.cli._is_interactive", return_value=True), mock.patch(
            "lazynotes.cli.TerminalController"
        ), mock.patch("lazynotes.cli.run_app"):
            cli.main([], cwd=self.root)

        self.assertIsNone(config.load_notes_dir())

    def test_empty_notes_directory_exits(self) -> None:
        (self.root / "data").mkdir()
        with mock.patch("lazynotes.cli.run_app") as run_app:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([], cwd=self.root)
        self.assertIn("No files in notes directory", str(ctx.exception.code))
        run_app.assert_not_called()

    def test_missing_notes_directory_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root / "missing")], cwd=self.root)
        self.assertIn("Notes directory not found", str(ctx.exception.code))

    def test_non_interactive_session_exits(self) -> None:
        data = self.root / "data"
        data.mkdir()
        (data / "a.txt").write_text("one\n", encoding="utf-8")
        with mock.patch("lazynotes.cli._is_interactive", return_value=False), mock.patch(
            "lazynotes.cli.run_app"
        ) as run_app:
            with self.assertRaises(SystemExit):
                cli.main([], cwd=self.root)
        run_app.assert_not_called()


class CliRenderTests(CliTestCase):
    def test_render_prints_styled_lines_and_skips_runtime(self) -> None:
        note = self.root / "a.txt"
        note.write_text("one\n~two\n*three\n", encoding="utf-8")

        stdout = io.StringIO()
        with mock.patch.object(sys, "stdout", stdout), mock.patch("lazynotes.cli.run_app") as run_app:
            cli.main(["--render", str(note), "--no-color"])

        run_app.assert_not_called()
        self.assertEqual(stdout.getvalue(), "one\n~two\n*three\n")

    def test_render_with_color_strips_markers(self) -> None:
        note = self.root / "a.txt"
        note.write_text("~two\n", encoding="utf-8")

        stdout = io.StringIO()
        with mock.patch.object(sys, "stdout", stdout):
            cli.main(["--render", str(note)])

        self.assertEqual(stdout.getvalue(), f"{DEFAULT_THEME.struck}two{DEFAULT_THEME.reset}\n")

    def test_render_missing_file_exits(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["--render", str(self.root / "missing.txt")])


if __name__ == "__main__":
    unittest.main()
