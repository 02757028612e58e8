"""Tests for alltz.ui.keys module."""

from __future__ import annotations

import os
import sys

import pytest

from alltz.ui.keys import KeyReader, decode_escape


@pytest.mark.parametrize(
    ("sequence", "name"),
    [
        ("[A", "up"),
        ("[B", "down"),
        ("[C", "right"),
        ("[D", "left"),
        ("OA", "up"),
        ("[Z", "other"),
        ("", "esc"),
        ("x", "esc"),
    ],
)
def test_decode_escape(sequence: str, name: str) -> None:
    assert decode_escape(sequence) == name


@pytest.mark.skipif(os.name == "nt", reason="POSIX pipe input")
def test_posix_reader_reads_from_pipe(monkeypatch: pytest.MonkeyPatch) -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"h\x1b[Aq")

        class FakeStdin:
            def fileno(self) -> int:
                return read_fd

        monkeypatch.setattr(sys, "stdin", FakeStdin())
        reader = KeyReader()
        # not entered: no termios changes on a pipe
        assert reader.read(0.1) == "h"
        assert reader.read(0.1) == "up"
        assert reader.read(0.1) == "q"
        assert reader.read(0.01) is None
    finally:
        os.close(read_fd)
        os.close(write_fd)
