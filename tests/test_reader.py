# --------------------------------------------------------------
# File: test_reader.py
# Description: Pruebas del adaptador de entrada.
# --------------------------------------------------------------

import io
import sys

import pytest

from textcrypt.reader import open_input, read_input


def test_read_file(tmp_path):
    path = tmp_path / "in.bin"
    path.write_bytes(b"\x00\x01datos")
    assert read_input(str(path)) == b"\x00\x01datos"


def test_read_stdin_does_not_close(monkeypatch):
    """La entrada estándar se lee completa y no se cierra al terminar.

    Args:
        monkeypatch (pytest.MonkeyPatch): Sustituye `sys.stdin`.
    """
    fake = io.TextIOWrapper(io.BytesIO(b"desde stdin"))
    monkeypatch.setattr(sys, "stdin", fake)
    assert read_input("-") == b"desde stdin"
    assert not fake.buffer.closed


def test_file_is_closed(tmp_path):
    path = tmp_path / "in.bin"
    path.write_bytes(b"x")
    with open_input(str(path)) as reader:
        handle = reader
    assert handle.closed


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(str(tmp_path / "nope"))
