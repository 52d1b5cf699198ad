"""Error taxonomy for inv.

Every error here is fatal to the session. Each carries a ``kind`` tag so
callers can branch on the failure without string matching.
"""

from __future__ import annotations

from typing import Literal

TerminalErrorKind = Literal["attr_get_failed", "attr_set_failed", "size_unavailable"]
DocumentErrorKind = Literal["open_failed", "empty_or_unreadable"]


class InvError(Exception):
    """Base class for inv errors."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class TerminalError(InvError):
    """Raised when terminal attributes or dimensions cannot be handled."""

    def __init__(self, kind: TerminalErrorKind, message: str) -> None:
        super().__init__(kind, message)


class DocumentError(InvError):
    """Raised when the document file cannot be loaded."""

    def __init__(self, kind: DocumentErrorKind, path: str, message: str) -> None:
        super().__init__(kind, message)
        self.path = path
