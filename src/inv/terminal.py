"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol, a concrete ``ProcessTerminal`` backed by
the process's controlling terminal, and the ``raw_mode`` scope that pairs
every successful raw-mode acquisition with exactly one restore.
"""

from __future__ import annotations

import errno
import logging
import os
import signal
import sys
import termios
import threading
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Protocol

from inv.cursor import ViewportSize
from inv.errors import TerminalError

logger = logging.getLogger(__name__)

# termios attribute list indices
_IFLAG = 0
_OFLAG = 1
_LFLAG = 3
_CC = 6

_RAW_IFLAG_OFF = termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
_RAW_OFLAG_OFF = termios.OPOST
_RAW_LFLAG_OFF = termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG

_TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def get_window_size(self) -> ViewportSize: ...

    def read_byte(self) -> bytes: ...

    def write(self, data: bytes) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by file descriptors for stdin and stdout.

    Raw mode is managed through :mod:`termios` on the input descriptor. The
    original attributes are captured once by :meth:`enable_raw_mode` and
    re-applied by :meth:`disable_raw_mode`.
    """

    def __init__(
        self,
        stdin_fd: int | None = None,
        stdout: BinaryIO | None = None,
        read_timeout_ds: int = 1,
    ) -> None:
        self._stdin_fd = stdin_fd
        self._stdout = stdout
        self._read_timeout_ds = read_timeout_ds
        self._original_termios: list | None = None

    # -- properties ---------------------------------------------------------

    @property
    def stdin_fd(self) -> int:
        if self._stdin_fd is None:
            self._stdin_fd = sys.stdin.fileno()
        return self._stdin_fd

    @property
    def stdout(self) -> BinaryIO:
        if self._stdout is None:
            self._stdout = sys.stdout.buffer
        return self._stdout

    # -- raw mode -----------------------------------------------------------

    def enable_raw_mode(self) -> None:
        """Capture the current attributes and switch the terminal to raw mode."""
        try:
            fd = self.stdin_fd
            original = termios.tcgetattr(fd)
        except (termios.error, OSError, ValueError) as e:
            raise TerminalError("attr_get_failed", f"tcgetattr failed: {e}") from e

        raw = make_raw_attributes(original, self._read_timeout_ds)
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalError("attr_set_failed", f"tcsetattr failed: {e}") from e

        self._original_termios = original
        logger.debug("Raw mode enabled on fd %d", fd)

    def disable_raw_mode(self) -> None:
        """Re-apply the attributes captured by :meth:`enable_raw_mode`."""
        if self._original_termios is None:
            return
        fd = self.stdin_fd
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, self._original_termios)
        except termios.error as e:
            raise TerminalError("attr_set_failed", f"tcsetattr failed: {e}") from e
        self._original_termios = None
        logger.debug("Raw mode disabled on fd %d", fd)

    # -- size ---------------------------------------------------------------

    def get_window_size(self) -> ViewportSize:
        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (ValueError, OSError) as e:
            raise TerminalError("size_unavailable", f"terminal size query failed: {e}") from e
        if size.columns == 0 or size.lines == 0:
            raise TerminalError(
                "size_unavailable",
                f"terminal reported {size.lines}x{size.columns}",
            )
        return ViewportSize(rows=size.lines, cols=size.columns)

    # -- I/O ----------------------------------------------------------------

    def read_byte(self) -> bytes:
        """Read at most one byte; ``b""`` means the read timed out."""
        try:
            return os.read(self.stdin_fd, 1)
        except OSError as e:
            if e.errno in (errno.EAGAIN, errno.EINTR):
                return b""
            raise

    def write(self, data: bytes) -> None:
        """Write *data* to stdout as one buffer and flush it."""
        out = self.stdout
        out.write(data)
        out.flush()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_raw_attributes(attrs: list, read_timeout_ds: int = 1) -> list:
    """Return a raw-mode copy of the termios attribute list *attrs*.

    Clears echo, canonical input, signal generation, extended input
    processing, software flow control, CR-to-NL translation, break handling,
    parity checking, byte stripping and output post-processing. Reads return
    after at most *read_timeout_ds* deciseconds even with no input.
    """
    raw = list(attrs)
    raw[_CC] = list(attrs[_CC])
    raw[_IFLAG] &= ~_RAW_IFLAG_OFF
    raw[_OFLAG] &= ~_RAW_OFLAG_OFF
    raw[_LFLAG] &= ~_RAW_LFLAG_OFF
    raw[_CC][termios.VMIN] = 0
    raw[_CC][termios.VTIME] = read_timeout_ds
    return raw


def _exit_on_signal(signum: int, frame: object) -> None:
    """Turn a termination signal into ``SystemExit`` so cleanup runs."""
    raise SystemExit(128 + signum)


def _install_exit_handlers() -> dict[int, signal.Handlers]:
    """Route termination signals through :func:`_exit_on_signal`.

    Returns the previous handlers. Signal handlers can only be set from the
    main thread; elsewhere nothing is installed.
    """
    previous: dict[int, signal.Handlers] = {}
    if threading.current_thread() is not threading.main_thread():
        return previous
    for signum in _TERMINATION_SIGNALS:
        previous[signum] = signal.getsignal(signum)
        signal.signal(signum, _exit_on_signal)
    return previous


def _restore_handlers(previous: dict[int, signal.Handlers]) -> None:
    for signum, handler in previous.items():
        # None means the handler was not set from Python
        signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


@contextmanager
def raw_mode(terminal: Terminal) -> Iterator[Terminal]:
    """Hold *terminal* in raw mode for the duration of the ``with`` block.

    If enabling fails nothing is entered and nothing is restored. Once
    enabled, raw mode is disabled exactly once however the block exits,
    including SIGTERM or SIGHUP, which exit with status ``128 + signum``
    after the terminal is restored.
    """
    terminal.enable_raw_mode()
    previous_handlers: dict[int, signal.Handlers] = {}
    try:
        previous_handlers = _install_exit_handlers()
        yield terminal
    except BaseException as e:
        _restore_handlers(previous_handlers)
        try:
            terminal.disable_raw_mode()
        except TerminalError:
            # The restore failure propagates with *e* as its context
            logger.error("Terminal restore failed while handling %s", type(e).__name__, exc_info=e)
            raise
        raise
    _restore_handlers(previous_handlers)
    terminal.disable_raw_mode()
