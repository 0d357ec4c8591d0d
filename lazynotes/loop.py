"""Main interactive event loop for the terminal UI.

Blocks for one key, applies one state transition, and redraws when the
state is dirty. All file I/O happens synchronously on this thread.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from .app import NotesApp
from .input import read_key
from .render import RenderContext, input_cursor_position, render_frame
from .state import MODE_EDITING
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme


def build_render_context(
    app: NotesApp,
    columns: int,
    lines: int,
    theme: UITheme = DEFAULT_THEME,
    show_markers: bool = False,
) -> RenderContext:
    state = app.state
    return RenderContext(
        files=state.files.items,
        files_selected=state.files.current_index(),
        lines=state.content.items,
        lines_selected=state.content.current_index(),
        focus=state.focus,
        width=columns,
        height=lines,
        left_pane_percent=state.left_pane_percent,
        current_name=state.files.current() if not state.files.is_empty else "",
        editing=state.mode == MODE_EDITING,
        edit_value=state.edit_buffer.value,
        edit_cursor=state.edit_buffer.cursor,
        status_message=state.status_message,
        show_markers=show_markers,
        theme=theme,
    )


def normalize_enter(app: NotesApp, key: str) -> str | None:
    """Collapse CR, LF and CRLF into one ``ENTER``; ``None`` means skip the key."""
    state = app.state
    if state.skip_next_lf and key == "ENTER_LF":
        state.skip_next_lf = False
        return None
    if key == "ENTER_CR":
        state.skip_next_lf = True
        return "ENTER"
    state.skip_next_lf = False
    if key == "ENTER_LF":
        return "ENTER"
    return key


def run_app(
    app: NotesApp,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme = DEFAULT_THEME,
    show_markers: bool = False,
    render: Callable[[RenderContext], None] = render_frame,
) -> None:
    """Run the interactive loop until a key handler asks to quit."""
    state = app.state
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True

            if state.dirty:
                context = build_render_context(app, term.columns, term.lines, theme, show_markers)
                render(context)
                cursor = input_cursor_position(context)
                if cursor is None:
                    terminal.hide_cursor()
                else:
                    terminal.show_cursor_at(*cursor)
                state.dirty = False

            try:
                # The timeout only exists so terminal resizes get redrawn.
                key = read_key(stdin_fd, timeout_ms=250)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            normalized = normalize_enter(app, key)
            if normalized is None:
                continue
            if app.handle_key(normalized):
                return
