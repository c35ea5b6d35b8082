"""File loading, sanitization, and syntax highlighting for the viewer."""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
FALLBACK_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8 (BOM tolerated), else as latin-1."""
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Show control characters other than tab, CR and LF as ``\\xNN`` escapes."""
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = FALLBACK_STYLE
    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def colorize_source(source: str, path: Path, style: str = FALLBACK_STYLE) -> str:
    """Highlight ``source`` with the lexer guessed from ``path``'s name."""
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, _formatter_for_style(style))
