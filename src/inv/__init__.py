"""inv: a minimal raw-mode terminal text viewer."""

import logging

from inv.config import Config, load_config
from inv.cursor import CursorPosition, Direction, ViewportSize, move
from inv.document import MAX_LINE_LENGTH, Document, Row, load_first_line
from inv.errors import DocumentError, InvError, TerminalError
from inv.input import InputDispatcher, Signal
from inv.render import render
from inv.session import Session, run_session
from inv.terminal import ProcessTerminal, Terminal, raw_mode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Config
    "Config",
    "load_config",
    # Cursor
    "CursorPosition",
    "Direction",
    "ViewportSize",
    "move",
    # Document
    "MAX_LINE_LENGTH",
    "Document",
    "Row",
    "load_first_line",
    # Errors
    "DocumentError",
    "InvError",
    "TerminalError",
    # Input
    "InputDispatcher",
    "Signal",
    # Render
    "render",
    # Session
    "Session",
    "run_session",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    "raw_mode",
]
