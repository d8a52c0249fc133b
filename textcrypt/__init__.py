# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las operaciones de texto firmado y cifrado.
# --------------------------------------------------------------
"""Inicializa el paquete `textcrypt` y reexporta sus operaciones principales."""

from textcrypt.models import AlgorithmTag, KeyRole
from textcrypt.services import (
    decode_input,
    decrypt,
    encode_input,
    encrypt,
    generate_keys,
    sign,
    verify,
)

__all__ = [
    "AlgorithmTag",
    "KeyRole",
    "decode_input",
    "decrypt",
    "encode_input",
    "encrypt",
    "generate_keys",
    "sign",
    "verify",
]
