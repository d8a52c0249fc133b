# --------------------------------------------------------------
# File: keys.py
# Description: Carga, generación y persistencia del material de clave.
# --------------------------------------------------------------
"""Gestión de claves por algoritmo.

Formatos persistidos:

- BLAKE3 y ChaCha20-Poly1305: texto UTF-8 con el secreto de 32 bytes; los
  espacios en blanco alrededor se ignoran al cargar.
- Ed25519: 32 bytes en bruto para la semilla (`.sk`) y para la clave
  pública (`.pk`).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from random import Random
from typing import Callable, Dict, List, Optional, Union

from textcrypt import config
from textcrypt.errors import InvalidKeyEncoding
from textcrypt.genpass import generate_password
from textcrypt.models import (
    KEY_SIZE,
    AeadKey,
    AlgorithmTag,
    Ed25519PublicKey,
    Ed25519SecretKey,
    KeyMaterial,
    KeyRole,
    MacKey,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def read_text_key(path: PathLike) -> bytes:
    """Lee una clave de texto y devuelve los bytes del contenido recortado.

    Raises:
        InvalidKeyEncoding: Si el archivo no es texto UTF-8.

    """

    with open(path, "rb") as handler:
        raw = handler.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidKeyEncoding(f"La clave de {path} no es texto UTF-8.") from exc
    return text.strip().encode("utf-8")


def read_binary_key(path: PathLike) -> bytes:
    with open(path, "rb") as handler:
        return handler.read()


def load_key(
    fmt: Union[AlgorithmTag, str], path: PathLike, role: KeyRole = KeyRole.SECRET
) -> KeyMaterial:
    """Carga la clave persistida en `path` para el algoritmo indicado.

    Args:
        fmt (AlgorithmTag | str): Algoritmo de la clave.
        path (PathLike): Archivo de clave.
        role (KeyRole): Mitad del par Ed25519; se ignora en claves simétricas.

    Returns:
        KeyMaterial: Modelo de clave validado.

    Raises:
        KeySizeMismatch: Si la clave no mide exactamente 32 bytes.
        InvalidKeyEncoding: Si los bytes no son una clave Ed25519 válida o el
            secreto de texto no es UTF-8.

    """

    fmt = AlgorithmTag.parse(fmt)
    if fmt is AlgorithmTag.MAC:
        key: KeyMaterial = MacKey.from_bytes(read_text_key(path))
    elif fmt is AlgorithmTag.AEAD:
        key = AeadKey.derive(read_text_key(path))
    elif KeyRole(role) is KeyRole.PUBLIC:
        key = Ed25519PublicKey.from_bytes(read_binary_key(path))
    else:
        key = Ed25519SecretKey.from_bytes(read_binary_key(path))
    logger.debug("Clave %s (%s) cargada desde %s", fmt.value, KeyRole(role).value, path)
    return key


def generate_keys(
    fmt: Union[AlgorithmTag, str],
    *,
    rng: Optional[Random] = None,
    randbytes: Optional[Callable[[int], bytes]] = None,
) -> List[bytes]:
    """Genera material de clave nuevo.

    Args:
        fmt (AlgorithmTag | str): Algoritmo para el que se genera la clave.
        rng (Optional[Random]): Fuente para el generador de contraseñas.
        randbytes (Optional[Callable[[int], bytes]]): Fuente de la semilla
            Ed25519; por defecto `os.urandom`.

    Returns:
        List[bytes]: `[secreto]` para BLAKE3/ChaCha20 y `[semilla, pública]`
        para Ed25519, en ese orden.

    """

    fmt = AlgorithmTag.parse(fmt)
    if fmt is AlgorithmTag.SIGNATURE:
        secret = Ed25519SecretKey.from_bytes((randbytes or os.urandom)(KEY_SIZE))
        keys = [secret.seed, secret.public_key().key]
    else:
        password = generate_password(KEY_SIZE, True, True, True, True, rng=rng)
        keys = [password.encode("utf-8")]
    logger.debug("Generadas %d claves %s", len(keys), fmt.value)
    return keys


def key_filenames(fmt: Union[AlgorithmTag, str]) -> List[str]:
    """Nombres de archivo, en el orden devuelto por `generate_keys`."""

    fmt = AlgorithmTag.parse(fmt)
    if fmt is AlgorithmTag.SIGNATURE:
        return [f"{fmt.value}.sk", f"{fmt.value}.pk"]
    return [f"{fmt.value}.txt"]


def save_keys(
    fmt: Union[AlgorithmTag, str], keys: List[bytes], output_dir: Optional[PathLike] = None
) -> Dict[str, Path]:
    """Guarda las claves generadas en el directorio indicado.

    Args:
        fmt (AlgorithmTag | str): Algoritmo de las claves.
        keys (List[bytes]): Resultado de `generate_keys`.
        output_dir (Optional[PathLike]): Directorio existente; por defecto
            `TEXTCRYPT_KEY_DIR`.

    Returns:
        Dict[str, Path]: Nombre de archivo y ruta escrita.

    """

    fmt = AlgorithmTag.parse(fmt)
    target = Path(output_dir if output_dir is not None else config.KEY_DIR)
    if not target.is_dir():
        raise NotADirectoryError(f"El directorio {target} no existe.")

    names = key_filenames(fmt)
    if len(names) != len(keys):
        raise ValueError(f"Se esperaban {len(names)} claves {fmt.value}, hay {len(keys)}.")

    written: Dict[str, Path] = {}
    for name, data in zip(names, keys):
        path = target / name
        if fmt is AlgorithmTag.SIGNATURE:
            path.write_bytes(data)
        else:
            path.write_text(data.decode("utf-8"), encoding="utf-8")
        written[name] = path
    logger.debug("Claves %s guardadas en %s", fmt.value, target)
    return written
