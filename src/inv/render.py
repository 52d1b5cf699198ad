"""Frame rendering into a single escape-annotated output buffer.

A frame hides the cursor, homes it, draws every viewport row, moves the
cursor to its logical position and shows it again. The whole frame is
returned as one ``bytes`` value so it can be written in one go.
"""

from __future__ import annotations

from inv.cursor import CursorPosition, ViewportSize
from inv.document import Document

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE = b"\x1b[K"
ROW_SEPARATOR = b"\r\n"
_CURSOR_POSITION_FMT = "\x1b[{};{}H"

PLACEHOLDER = b"~"


def cursor_position(cursor: CursorPosition) -> bytes:
    """Escape sequence placing the terminal cursor at *cursor* (1-indexed)."""
    return _CURSOR_POSITION_FMT.format(cursor.y + 1, cursor.x + 1).encode("ascii")


def draw_rows(
    buf: bytearray,
    document: Document,
    viewport: ViewportSize,
    placeholder: bytes = PLACEHOLDER,
) -> None:
    """Append one line per viewport row to *buf*."""
    for i in range(viewport.rows):
        if i < document.numrows:
            buf += document.rows[i].chars[: viewport.cols]
        else:
            buf += placeholder
        buf += CLEAR_LINE
        if i < viewport.rows - 1:
            buf += ROW_SEPARATOR


def render(
    document: Document,
    cursor: CursorPosition,
    viewport: ViewportSize,
    placeholder: bytes = PLACEHOLDER,
) -> bytes:
    """Compose a full frame for *document* with the cursor at *cursor*."""
    buf = bytearray()
    buf += HIDE_CURSOR
    buf += CURSOR_HOME
    draw_rows(buf, document, viewport, placeholder)
    buf += cursor_position(cursor)
    buf += SHOW_CURSOR
    return bytes(buf)
