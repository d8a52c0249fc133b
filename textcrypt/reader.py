# --------------------------------------------------------------
# File: reader.py
# Description: Resolución de la entrada ("-" o ruta) en un flujo de bytes.
# --------------------------------------------------------------
"""Adaptador de origen de bytes para las operaciones de texto."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

STDIN = "-"


@contextmanager
def open_input(input: str) -> Iterator[BinaryIO]:
    """Abre la entrada indicada como flujo binario.

    Args:
        input (str): "-" para la entrada estándar o la ruta de un archivo.

    Returns:
        Iterator[BinaryIO]: Flujo legible; solo se cierra si es un archivo.

    """

    if input == STDIN:
        yield sys.stdin.buffer
        return
    with open(input, "rb") as handler:
        yield handler


def read_input(input: str) -> bytes:
    """Lee todos los bytes de la entrada hasta el final del flujo."""

    with open_input(input) as reader:
        return reader.read()
