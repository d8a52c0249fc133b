# --------------------------------------------------------------
# File: codec.py
# Description: Codificación Base64 sin relleno para firmas y cifrados.
# --------------------------------------------------------------
"""Conversión binario-texto usada en todo el transporte de firmas y cifrados.

Se usa Base64 (RFC 4648) sin caracteres de relleno. La decodificación es
estricta: solo acepta la representación canónica, de modo que
``encode(decode(x)) == x`` para toda entrada aceptada.
"""

from __future__ import annotations

import base64
import re
from enum import Enum

from textcrypt.errors import InvalidAlphabet, InvalidLength


class Base64Format(str, Enum):
    STANDARD = "standard"
    URLSAFE = "urlsafe"


_ALTCHARS = {
    Base64Format.STANDARD: b"+/",
    Base64Format.URLSAFE: b"-_",
}

_ALPHABET = {
    Base64Format.STANDARD: re.compile(r"[A-Za-z0-9+/]*"),
    Base64Format.URLSAFE: re.compile(r"[A-Za-z0-9_-]*"),
}


def encode(data: bytes, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Codifica bytes en Base64 sin relleno.

    Args:
        data (bytes): Datos binarios a convertir.
        fmt (Base64Format): Alfabeto estándar o URL-safe.

    Returns:
        str: Representación codificada sin caracteres `=`.

    """

    fmt = Base64Format(fmt)
    return base64.b64encode(data, altchars=_ALTCHARS[fmt]).decode("ascii").rstrip("=")


def decode(text: str, fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """Decodifica una cadena Base64 sin relleno.

    Args:
        text (str): Cadena codificada sin relleno.
        fmt (Base64Format): Alfabeto con el que se codificó.

    Returns:
        bytes: Datos originales en formato binario.

    Raises:
        InvalidAlphabet: Si aparece un carácter ajeno al alfabeto o el último
            símbolo arrastra bits sobrantes distintos de cero.
        InvalidLength: Si la longitud deja un único símbolo en el último bloque.

    """

    fmt = Base64Format(fmt)
    if not _ALPHABET[fmt].fullmatch(text):
        raise InvalidAlphabet(f"Carácter no válido para Base64 {fmt.value} sin relleno.")
    if len(text) % 4 == 1:
        raise InvalidLength(f"Longitud {len(text)} incompatible con Base64 sin relleno.")

    padded = text + "=" * (-len(text) % 4)
    data = base64.b64decode(padded, altchars=_ALTCHARS[fmt], validate=True)
    # Los bits sobrantes del último símbolo deben ser cero
    if encode(data, fmt) != text:
        raise InvalidAlphabet("Último símbolo Base64 no canónico.")
    return data
