"""Frame rendering for the two-pane note browser.

``build_frame`` is pure and returns one string per terminal row; only
``render_frame`` touches stdout.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, fit_ansi_line, prefix_width, sanitize_terminal_text
from .state import FOCUS_CONTENT, FOCUS_FILES
from .store import LineStyle, display_text, style_of
from .ui_theme import DEFAULT_THEME, UITheme

DIVIDER = "│"
INPUT_PROMPT = "> "
INPUT_TITLE = " Edit line "
FILES_TITLE = " Notes "
MIN_PANE_WIDTH = 8

HINTS = {
    FOCUS_FILES: "j/k move  e open  </> resize  q quit",
    FOCUS_CONTENT: "j/k move  e edit  q back",
    "editing": "Enter save  Esc cancel",
}


@dataclass(frozen=True)
class RenderContext:
    """Everything needed to draw one frame."""

    files: Sequence[str]
    files_selected: int | None
    lines: Sequence[str]
    lines_selected: int | None
    focus: str
    width: int
    height: int
    left_pane_percent: float
    current_name: str = ""
    editing: bool = False
    edit_value: str = ""
    edit_cursor: int = 0
    status_message: str = ""
    show_markers: bool = False
    theme: UITheme = DEFAULT_THEME


def pane_widths(width: int, left_pane_percent: float) -> tuple[int, int]:
    """Split ``width`` into file-list and note-pane widths around the divider."""
    usable = max(2, width - len(DIVIDER))
    left = int(round(usable * left_pane_percent / 100.0))
    min_left = min(MIN_PANE_WIDTH, usable // 2)
    left = max(min_left, min(left, usable - min_left))
    return left, usable - left


def scroll_start(selected: int | None, total: int, visible: int) -> int:
    """Return the first visible row so that ``selected`` stays on screen."""
    if visible <= 0 or selected is None or selected < visible:
        return 0
    return max(0, min(selected - visible + 1, total - visible))


def styled_line(line: str, theme: UITheme, show_markers: bool = False) -> tuple[str, str]:
    """Return ``(style_prefix, text)`` for one note line.

    Markers are stripped unless ``show_markers`` is set; with no styling
    available they are the only cue, so plain mode keeps them.
    """
    style = style_of(line)
    text = sanitize_terminal_text(display_text(line, strip_marker=not show_markers))
    if style is LineStyle.STRUCK:
        return theme.struck, text
    if style is LineStyle.EMPHASIZED:
        return theme.emphasized, text
    return "", text


def _cell(text: str, width: int, prefix: str, theme: UITheme) -> str:
    body = fit_ansi_line(text, width)
    if not prefix:
        return body
    return f"{prefix}{body}{theme.reset}"


def _list_rows(
    items: Sequence[tuple[str, str]],
    selected: int | None,
    rows: int,
    width: int,
    selection_style: str,
    theme: UITheme,
) -> list[str]:
    start = scroll_start(selected, len(items), rows)
    out: list[str] = []
    for row in range(rows):
        idx = start + row
        if idx >= len(items):
            out.append(" " * width)
            continue
        style_prefix, text = items[idx]
        if idx == selected:
            style_prefix = selection_style + style_prefix
        out.append(_cell(text, width, style_prefix, theme))
    return out


def _input_viewport(value: str, cursor: int, width: int) -> tuple[str, int]:
    """Return the visible slice of ``value`` and the cursor column inside it."""
    start = 0
    while start < cursor and prefix_width(value[start:], cursor - start) >= width:
        start += 1
    visible = value[start:]
    return visible, prefix_width(visible, cursor - start)


def _input_rows(context: RenderContext, width: int) -> list[str]:
    theme = context.theme
    title = fit_ansi_line(INPUT_TITLE + "─" * width, width)
    field_width = max(1, width - len(INPUT_PROMPT))
    visible, _ = _input_viewport(
        sanitize_terminal_text(context.edit_value), context.edit_cursor, field_width
    )
    return [
        _cell(title, width, theme.input_border, theme),
        fit_ansi_line(INPUT_PROMPT + visible, width),
    ]


def build_status_line(left_text: str, width: int, right_text: str) -> str:
    usable = max(1, width)
    right_width = display_width(right_text)
    if usable <= right_width:
        return clip_ansi_line(right_text, usable)
    left_limit = max(0, usable - right_width - 1)
    left = clip_ansi_line(left_text, left_limit)
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right_text}"


def _status_row(context: RenderContext) -> str:
    theme = context.theme
    hint = HINTS["editing"] if context.editing else HINTS.get(context.focus, "")
    if context.status_message:
        left = context.status_message
    else:
        left = context.current_name
        if context.lines_selected is not None:
            left += f"  line {context.lines_selected + 1}/{len(context.lines)}"
        else:
            left += f"  {len(context.lines)} lines"
    line = build_status_line(sanitize_terminal_text(left), context.width, hint)
    style = theme.status_message if context.status_message else theme.status
    return _cell(line, context.width, style, theme)


def build_frame(context: RenderContext) -> list[str]:
    """Build exactly ``context.height`` rows of at most ``context.width`` cells.

    Row 0 holds the pane titles, the last row the status line. While editing,
    the bottom two rows of the note pane hold the input box.
    """
    theme = context.theme
    height = max(2, context.height)
    left_width, right_width = pane_widths(context.width, context.left_pane_percent)
    body_rows = max(0, height - 2)
    files_focused = context.focus == FOCUS_FILES and not context.editing

    files_title_style = theme.pane_title_focused if files_focused else theme.pane_title
    content_title_style = theme.pane_title if files_focused else theme.pane_title_focused
    title_row = (
        _cell(FILES_TITLE, left_width, files_title_style, theme)
        + _cell(DIVIDER, 1, theme.divider, theme)
        + _cell(f" {sanitize_terminal_text(context.current_name)} ", right_width, content_title_style, theme)
    )

    file_items = [("", sanitize_terminal_text(name)) for name in context.files]
    file_selection = theme.selection_focused if files_focused else theme.selection_unfocused
    left_rows = _list_rows(file_items, context.files_selected, body_rows, left_width, file_selection, theme)

    input_rows = _input_rows(context, right_width) if context.editing and body_rows >= 3 else []
    line_rows = body_rows - len(input_rows)
    line_items = [styled_line(line, theme, context.show_markers) for line in context.lines]
    right_rows = _list_rows(
        line_items,
        context.lines_selected,
        line_rows,
        right_width,
        theme.selection_focused,
        theme,
    )
    right_rows.extend(input_rows)

    divider = _cell(DIVIDER, 1, theme.divider, theme)
    rows = [title_row]
    rows.extend(left + divider + right for left, right in zip(left_rows, right_rows))
    rows.append(_status_row(context))
    return rows


def input_cursor_position(context: RenderContext) -> tuple[int, int] | None:
    """Return the 1-based terminal (row, col) of the edit cursor, if editing."""
    height = max(2, context.height)
    if not context.editing or height - 2 < 3:
        return None
    left_width, right_width = pane_widths(context.width, context.left_pane_percent)
    field_width = max(1, right_width - len(INPUT_PROMPT))
    _, cursor_col = _input_viewport(
        sanitize_terminal_text(context.edit_value), context.edit_cursor, field_width
    )
    # Input row is the last body row, just above the status line.
    row = height - 1
    col = left_width + len(DIVIDER) + len(INPUT_PROMPT) + cursor_col + 1
    return row, col


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    out = ["\033[H\033[J", "\r\n".join(build_frame(context))]
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, "".join(out).encode("utf-8", errors="replace"))


def render_note_lines(lines: Sequence[str], theme: UITheme, show_markers: bool = False) -> str:
    """Render note lines as styled text for non-interactive output."""
    out: list[str] = []
    for line in lines:
        prefix, text = styled_line(line, theme, show_markers)
        out.append(f"{prefix}{text}{theme.reset}" if prefix else text)
        out.append("\n")
    return "".join(out)
