"""UI theme definitions and selection helpers.

Themes are listing-only ANSI palettes. Syntax highlighting style for the file
viewer is a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    header_title: str
    header_path: str
    special_entry: str
    directory: str
    executable: str
    file: str
    marked: str
    ghost_path: str
    symlink_target: str
    status_label: str
    status_count: str
    warning: str
    delete_target: str
    prompt: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header_title="\033[1;33m",
    header_path="\033[7;34m",
    special_entry="\033[90m",
    directory="\033[1;36m",
    executable="\033[32m",
    file="\033[37m",
    marked="\033[38;5;213m",
    ghost_path="\033[3;90m",
    symlink_target="\033[36m",
    status_label="\033[1;37m",
    status_count="\033[33m",
    warning="\033[7;1;31m",
    delete_target="\033[1;31m",
    prompt="\033[1;37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    header_title="\033[1;38;5;45m",
    header_path="\033[7;38;5;31m",
    special_entry="\033[2;38;5;110m",
    directory="\033[1;38;5;45m",
    executable="\033[38;5;84m",
    file="\033[38;5;252m",
    marked="\033[38;5;215m",
    ghost_path="\033[3;38;5;110m",
    symlink_target="\033[38;5;117m",
    status_label="\033[1;38;5;153m",
    status_count="\033[38;5;229m",
    warning="\033[7;1;38;5;203m",
    delete_target="\033[1;38;5;203m",
    prompt="\033[1;38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="\033[7m",
    header_title="",
    header_path="",
    special_entry="",
    directory="",
    executable="",
    file="",
    marked="",
    ghost_path="",
    symlink_target="",
    status_label="",
    status_count="",
    warning="\033[7m",
    delete_target="",
    prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Map a configured name onto a known palette, defaulting to ``default``."""
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "resolve_theme",
]
