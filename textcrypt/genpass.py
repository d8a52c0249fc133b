# --------------------------------------------------------------
# File: genpass.py
# Description: Generador de contraseñas aleatorias con clases de caracteres.
# --------------------------------------------------------------
"""Generación de contraseñas aleatorias.

Los alfabetos omiten caracteres ambiguos (`I`, `O`, `l`, `0`, `1`). El
generador de claves BLAKE3/ChaCha20 usa este módulo con longitud 32 y las
cuatro clases activas.
"""

from __future__ import annotations

import re
import secrets
from random import Random
from typing import List, Optional

from textcrypt.errors import GenerationError

UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijkmnopqrstuvwxyz"
NUMBER = "23456789"
SYMBOL = "!@#$%^&*_"

LOWER = re.compile(r"[a-z]")
UPPER_RE = re.compile(r"[A-Z]")
DIGIT = re.compile(r"\d")
SYMBOL_RE = re.compile(r"[^\w\s]|_")


def class_count(password: str) -> int:
    """Cuenta los grupos de caracteres presentes en la contraseña."""

    return sum(
        [
            1 if LOWER.search(password) else 0,
            1 if UPPER_RE.search(password) else 0,
            1 if DIGIT.search(password) else 0,
            1 if SYMBOL_RE.search(password) else 0,
        ]
    )


def generate_password(
    length: int,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_symbols: bool = True,
    *,
    rng: Optional[Random] = None,
) -> str:
    """Genera una contraseña aleatoria con al menos un carácter por clase activa.

    Args:
        length (int): Longitud deseada de la contraseña.
        use_upper (bool): Incluir mayúsculas.
        use_lower (bool): Incluir minúsculas.
        use_digits (bool): Incluir dígitos.
        use_symbols (bool): Incluir símbolos.
        rng (Optional[Random]): Fuente aleatoria; por defecto `secrets.SystemRandom`.

    Returns:
        str: Contraseña ASCII de exactamente `length` caracteres.

    Raises:
        GenerationError: Si no hay clases activas o la longitud no admite una
            contraseña con todas ellas.

    """

    rng = rng or secrets.SystemRandom()
    groups = [
        chars
        for enabled, chars in (
            (use_upper, UPPER),
            (use_lower, LOWER_CHARS),
            (use_digits, NUMBER),
            (use_symbols, SYMBOL),
        )
        if enabled
    ]
    if not groups:
        raise GenerationError("Debe activarse al menos una clase de caracteres.")
    if length < len(groups):
        raise GenerationError(
            f"La longitud {length} no alcanza para {len(groups)} clases de caracteres."
        )

    pool = "".join(groups)
    password: List[str] = [rng.choice(chars) for chars in groups]
    password.extend(rng.choice(pool) for _ in range(length - len(password)))
    rng.shuffle(password)
    return "".join(password)
