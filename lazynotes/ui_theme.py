"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome and selection highlights. Line
styling (strike-through, bold) is part of every colored theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    divider: str
    pane_title: str
    pane_title_focused: str
    selection_focused: str
    selection_unfocused: str
    struck: str
    emphasized: str
    input_border: str
    status: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    divider="\033[2m",
    pane_title="\033[2;38;5;250m",
    pane_title_focused="\033[1;38;5;81m",
    selection_focused="\033[48;2;52;235;174;38;5;16m",
    selection_unfocused="\033[48;2;20;20;20;38;5;250m",
    struck="\033[9m",
    emphasized="\033[1m",
    input_border="\033[38;5;229m",
    status="\033[7m",
    status_message="\033[1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    divider="\033[2;38;5;31m",
    pane_title="\033[2;38;5;110m",
    pane_title_focused="\033[1;38;5;45m",
    selection_focused="\033[48;5;31;38;5;231m",
    selection_unfocused="\033[48;5;236;38;5;153m",
    struck="\033[9;38;5;73m",
    emphasized="\033[1;38;5;117m",
    input_border="\033[38;5;39m",
    status="\033[7;38;5;45m",
    status_message="\033[1;38;5;215m",
)

# Selection falls back to reverse video so the cursor stays visible.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    divider="",
    pane_title="",
    pane_title_focused="",
    selection_focused="\033[7m",
    selection_unfocused="",
    struck="",
    emphasized="",
    input_border="",
    status="\033[7m",
    status_message="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
