"""Session driver: raw mode, document load, and the render/input loop."""

from __future__ import annotations

import logging
import os

from inv.config import Config
from inv.cursor import CursorPosition, ViewportSize
from inv.document import Document, load_first_line
from inv.input import InputDispatcher
from inv.render import render
from inv.terminal import Terminal, raw_mode

logger = logging.getLogger(__name__)


class Session:
    """State for one viewer run.

    Holds the terminal, the viewport size queried at start, the loaded
    document and the cursor. Components receive the session, or the parts
    of it they need, explicitly.
    """

    def __init__(
        self,
        terminal: Terminal,
        viewport: ViewportSize,
        document: Document | None = None,
        config: Config | None = None,
    ) -> None:
        self.terminal = terminal
        self.viewport = viewport
        self.document = document if document is not None else Document.empty()
        self.config = config if config is not None else Config()
        self.cursor = CursorPosition.origin()

    def render_frame(self) -> bytes:
        return render(self.document, self.cursor, self.viewport, self.config.placeholder)

    def refresh_screen(self) -> None:
        """Render the current state and write it as a single buffer."""
        self.terminal.write(self.render_frame())

    def run(self, dispatcher: InputDispatcher | None = None) -> None:
        """Render and dispatch until a quit command, then draw a final frame."""
        if dispatcher is None:
            dispatcher = InputDispatcher(self.terminal.read_byte)
        while True:
            self.refresh_screen()
            if dispatcher.step(self) == "terminate":
                break
        self.refresh_screen()


def run_session(
    path: str | os.PathLike,
    terminal: Terminal,
    config: Config | None = None,
) -> Session:
    """Open *path* in a viewer session on *terminal*.

    Raw mode is held for the whole session and restored on every exit path
    before any error propagates. The farewell line is written only after a
    normal quit, once the terminal is restored.
    """
    if config is None:
        config = Config()

    with raw_mode(terminal):
        viewport = terminal.get_window_size()
        logger.debug("Viewport is %dx%d", viewport.rows, viewport.cols)
        document = load_first_line(path, config.max_line_length)
        session = Session(terminal, viewport, document, config)
        session.run()

    logger.info("Session for %s ended", os.fspath(path))
    terminal.write(config.farewell)
    return session
