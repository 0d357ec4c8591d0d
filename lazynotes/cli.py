"""Command-line front door for lazynotes.

Resolves the notes directory, checks that it has a note to open, and
dispatches into the interactive terminal loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .app import NotesApp
from .errors import EmptyNotesDirectoryError
from .logs import configure_logging
from .loop import run_app
from .render import render_note_lines
from .store import read_lines
from .terminal import TerminalController
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazynotes",
        description="Browse a directory of plain-text notes and edit them line by line.",
    )
    parser.add_argument(
        "notes_dir",
        nargs="?",
        default=None,
        help="Notes directory. Defaults to the configured directory, then ./data.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors; line markers stay visible.")
    parser.add_argument("--render", metavar="FILE", help="Print the styled lines of FILE and exit.")
    parser.add_argument("--verbose", action="store_true", help="Log debug detail to the log file.")
    return parser


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def main(argv: list[str] | None = None, cwd: Path | None = None) -> None:
    """Parse CLI arguments and launch the note browser.

    ``cwd`` is primarily for tests; it anchors the default ``./data`` path.
    """
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color)
    if args.theme is not None:
        config.save_theme_name(normalize_theme_name(args.theme))

    if args.render is not None:
        render_path = Path(args.render)
        if not render_path.is_file():
            raise SystemExit(f"Note not found: {render_path}")
        sys.stdout.write(render_note_lines(read_lines(render_path), theme, show_markers=args.no_color))
        return

    notes_dir = config.resolve_notes_dir(args.notes_dir, cwd=cwd)
    if not notes_dir.is_dir():
        raise SystemExit(f"Notes directory not found: {notes_dir}")

    try:
        app = NotesApp.open(
            notes_dir,
            left_pane_percent=config.load_left_pane_percent(),
            save_left_pane_percent=config.save_left_pane_percent,
        )
    except EmptyNotesDirectoryError as exc:
        raise SystemExit(str(exc)) from exc
    except OSError as exc:
        raise SystemExit(f"Cannot open notes directory {notes_dir}: {exc.strerror or exc}") from exc

    if args.notes_dir:
        config.save_notes_dir(notes_dir.resolve())

    if not _is_interactive():
        raise SystemExit("lazynotes needs an interactive terminal (use --render for plain output).")

    logger.info("Opening notes in %s", notes_dir)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    run_app(app, terminal, sys.stdin.fileno(), theme=theme, show_markers=args.no_color)


if __name__ == "__main__":
    main()
