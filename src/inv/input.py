"""Keypress dispatch for normal mode and the colon-command sub-mode."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Literal

from inv.cursor import move
from inv.keys import CARRIAGE_RETURN, COMMAND_PREFIX, QUIT, navigation_direction

if TYPE_CHECKING:
    from inv.session import Session

logger = logging.getLogger(__name__)

Signal = Literal["continue", "terminate"]


class InputDispatcher:
    """Reads keypresses one byte at a time and applies them to a session.

    In normal mode ``h``/``j``/``k``/``l`` move the cursor and ``:`` enters
    command mode. Command mode consumes bytes until a carriage return (back
    to normal mode) or ``q`` (terminate, no carriage return needed).
    """

    def __init__(self, read_byte: Callable[[], bytes]) -> None:
        self._read_byte = read_byte
        self.pending_command = bytearray()

    def step(self, session: Session) -> Signal:
        """Handle one normal-mode keypress and return whether to keep going."""
        key = self._read_byte()

        if key == COMMAND_PREFIX:
            return self.process_command()

        direction = navigation_direction(key)
        if direction is not None:
            session.cursor = move(session.cursor, direction, session.viewport, session.document)
        return "continue"

    def process_command(self) -> Signal:
        self.pending_command.clear()
        while True:
            key = self._read_byte()
            if key == QUIT:
                self.pending_command.clear()
                return "terminate"
            if key == CARRIAGE_RETURN:
                if self.pending_command:
                    logger.debug("Ignoring command %r", bytes(self.pending_command))
                self.pending_command.clear()
                return "continue"
            # b"" is a read timeout, keep waiting
            self.pending_command += key
