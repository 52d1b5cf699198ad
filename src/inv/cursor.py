"""Cursor position and viewport bounds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from inv.document import Document

Direction = Literal["left", "down", "up", "right"]


@dataclass(frozen=True)
class ViewportSize:
    """Visible terminal grid, queried once at session start."""

    rows: int
    cols: int


@dataclass(frozen=True)
class CursorPosition:
    """Zero-indexed cursor coordinates: ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0

    @classmethod
    def origin(cls) -> CursorPosition:
        return cls(0, 0)


def move(
    cursor: CursorPosition,
    direction: Direction,
    viewport: ViewportSize,
    document: Document | None = None,
) -> CursorPosition:
    """Move *cursor* one cell in *direction*, clamped to *viewport*.

    Only the axis of the move changes. Moves past an edge leave the cursor on
    the edge. The document does not constrain movement.
    """
    if direction == "left":
        return replace(cursor, x=max(cursor.x - 1, 0))
    if direction == "right":
        return replace(cursor, x=min(cursor.x + 1, viewport.cols - 1))
    if direction == "up":
        return replace(cursor, y=max(cursor.y - 1, 0))
    if direction == "down":
        return replace(cursor, y=min(cursor.y + 1, viewport.rows - 1))
    return cursor
