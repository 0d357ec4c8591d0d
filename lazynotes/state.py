from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_LEFT_PANE_PERCENT
from .edit_buffer import LineInput
from .selection import SelectionModel

FOCUS_FILES = "files"
FOCUS_CONTENT = "content"
MODE_NORMAL = "normal"
MODE_EDITING = "editing"


@dataclass
class AppState:
    notes_dir: Path
    files: SelectionModel[str]
    content: SelectionModel[str]
    focus: str = FOCUS_FILES
    mode: str = MODE_NORMAL
    edit_buffer: LineInput = field(default_factory=LineInput)
    status_message: str = ""
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT
    dirty: bool = True
    skip_next_lf: bool = False
