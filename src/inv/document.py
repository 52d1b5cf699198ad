"""In-memory document rows and the first-line file loader.

The loader keeps only the first line of a file, and at most
``MAX_LINE_LENGTH`` bytes of it. Anything past that boundary is dropped.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from inv.errors import DocumentError

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 4096


@dataclass(frozen=True)
class Row:
    """One line of document text, delimiter excluded."""

    chars: bytes

    @property
    def size(self) -> int:
        return len(self.chars)


@dataclass
class Document:
    """Ordered sequence of rows."""

    rows: list[Row] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Document:
        return cls()

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def append_row(self, chars: bytes) -> Row:
        row = Row(bytes(chars))
        self.rows.append(row)
        return row


def load_first_line(path: str | os.PathLike, max_length: int = MAX_LINE_LENGTH) -> Document:
    """Load the first line of *path* into a one-row document.

    Reads up to *max_length* bytes, stopping at the first newline or EOF.

    Raises:
        DocumentError: ``open_failed`` if the file cannot be opened or read,
            ``empty_or_unreadable`` if no bytes precede the newline or EOF.
    """
    name = os.fspath(path)
    try:
        with open(name, "rb") as f:
            line = f.readline(max_length)
            truncated = False
            if len(line) == max_length and not line.endswith(b"\n"):
                truncated = f.read(1) not in (b"", b"\n")
    except OSError as e:
        raise DocumentError("open_failed", name, f"cannot open {name}: {e.strerror or e}") from e

    if line.endswith(b"\n"):
        line = line[:-1]
    if not line:
        raise DocumentError("empty_or_unreadable", name, f"no content before end of first line in {name}")

    if truncated:
        logger.debug("First line of %s truncated to %d bytes", name, max_length)

    document = Document()
    document.append_row(line)
    logger.debug("Loaded %d bytes from %s", len(line), name)
    return document
