"""Raw input bytes recognised by the input dispatcher."""

from __future__ import annotations

from inv.cursor import Direction

CARRIAGE_RETURN = b"\r"
COMMAND_PREFIX = b":"
QUIT = b"q"

NAVIGATION_KEYS: dict[bytes, Direction] = {
    b"h": "left",
    b"j": "down",
    b"k": "up",
    b"l": "right",
}


def navigation_direction(key: bytes) -> Direction | None:
    """Return the cursor direction bound to *key*, if any."""
    return NAVIGATION_KEYS.get(key)
