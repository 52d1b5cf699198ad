"""Tests for inv.input -- normal mode and the colon-command sub-mode."""

from __future__ import annotations

import pytest

from inv.cursor import CursorPosition, ViewportSize
from inv.document import Document
from inv.input import InputDispatcher
from inv.session import Session

from .fake_terminal import FakeTerminal, InputExhausted


def make_session(keys: bytes | list[bytes], rows: int = 24, columns: int = 80) -> Session:
    terminal = FakeTerminal(rows, columns, keys)
    return Session(terminal, ViewportSize(rows, columns), Document.empty())


def dispatcher_for(session: Session) -> InputDispatcher:
    return InputDispatcher(session.terminal.read_byte)


class TestNormalMode:
    @pytest.mark.parametrize(
        "key,expected",
        [
            (b"l", CursorPosition(2, 1)),
            (b"h", CursorPosition(0, 1)),
            (b"j", CursorPosition(1, 2)),
            (b"k", CursorPosition(1, 0)),
        ],
    )
    def test_navigation_keys(self, key, expected) -> None:
        session = make_session(key)
        session.cursor = CursorPosition(1, 1)
        assert dispatcher_for(session).step(session) == "continue"
        assert session.cursor == expected

    @pytest.mark.parametrize("key", [b"x", b"q", b"\r", b"\x1b", b"L", b""])
    def test_other_keys_are_ignored(self, key) -> None:
        session = make_session([key])
        session.cursor = CursorPosition(4, 4)
        assert dispatcher_for(session).step(session) == "continue"
        assert session.cursor == CursorPosition(4, 4)

    def test_reads_one_byte_per_step(self) -> None:
        session = make_session(b"ll")
        dispatcher_for(session).step(session)
        assert session.terminal.remaining_keys == 1

    def test_moves_clamp_at_viewport_edge(self) -> None:
        session = make_session(b"lll", rows=2, columns=2)
        dispatcher = dispatcher_for(session)
        for _ in range(3):
            dispatcher.step(session)
        assert session.cursor == CursorPosition(1, 0)


class TestCommandMode:
    def test_colon_q_terminates(self) -> None:
        session = make_session(b":q")
        assert dispatcher_for(session).step(session) == "terminate"

    def test_quit_does_not_need_carriage_return(self) -> None:
        session = make_session(b":q\r")
        assert dispatcher_for(session).step(session) == "terminate"
        assert session.terminal.remaining_keys == 1

    def test_q_after_other_bytes_terminates(self) -> None:
        session = make_session(b":wq")
        assert dispatcher_for(session).step(session) == "terminate"

    def test_unknown_command_returns_to_normal_mode(self) -> None:
        session = make_session(b":xxx\r")
        session.cursor = CursorPosition(2, 3)
        dispatcher = dispatcher_for(session)
        assert dispatcher.step(session) == "continue"
        assert session.cursor == CursorPosition(2, 3)
        assert dispatcher.pending_command == b""

    def test_empty_command_returns_to_normal_mode(self) -> None:
        session = make_session(b":\r")
        assert dispatcher_for(session).step(session) == "continue"

    def test_navigation_keys_inert_in_command_mode(self) -> None:
        session = make_session(b":hjkl\r")
        assert dispatcher_for(session).step(session) == "continue"
        assert session.cursor == CursorPosition(0, 0)

    def test_timeouts_keep_waiting(self) -> None:
        session = make_session([b":", b"", b"", b"q"])
        assert dispatcher_for(session).step(session) == "terminate"

    def test_command_mode_keeps_reading(self) -> None:
        session = make_session(b":abc")
        with pytest.raises(InputExhausted):
            dispatcher_for(session).step(session)

    def test_pending_command_tracks_typed_bytes(self) -> None:
        keys = iter([b"a", b"b"])

        def read_byte() -> bytes:
            try:
                return next(keys)
            except StopIteration:
                raise InputExhausted() from None

        dispatcher = InputDispatcher(read_byte)
        with pytest.raises(InputExhausted):
            dispatcher.process_command()
        assert dispatcher.pending_command == b"ab"


class TestScenarios:
    def test_moves_then_quit(self) -> None:
        session = make_session(b"lllj:q")
        dispatcher = dispatcher_for(session)
        signals = [dispatcher.step(session) for _ in range(5)]
        assert signals == ["continue"] * 4 + ["terminate"]
        assert session.cursor == CursorPosition(3, 1)

    def test_ignored_command_keeps_running(self) -> None:
        session = make_session(b":xxx\rl")
        dispatcher = dispatcher_for(session)
        assert dispatcher.step(session) == "continue"
        assert session.cursor == CursorPosition(0, 0)
        assert dispatcher.step(session) == "continue"
        assert session.cursor == CursorPosition(1, 0)
