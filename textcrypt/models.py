# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic para el material de clave de cada algoritmo."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Union

import blake3
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from pydantic import BaseModel, ConfigDict, Field

from textcrypt.errors import InvalidKeyEncoding, KeySizeMismatch, UnsupportedAlgorithm

KEY_SIZE = 32
NONCE_SIZE = 12
MAC_SIZE = 32
SIGNATURE_SIZE = 64

Key32 = Annotated[bytes, Field(min_length=KEY_SIZE, max_length=KEY_SIZE)]
Nonce12 = Annotated[bytes, Field(min_length=NONCE_SIZE, max_length=NONCE_SIZE)]

# Curva Edwards25519: -x^2 + y^2 = 1 + d x^2 y^2 sobre GF(p)
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


class AlgorithmTag(str, Enum):
    """Algoritmos soportados. El valor es el nombre usado en archivos y entornos."""

    MAC = "blake3"
    SIGNATURE = "ed25519"
    AEAD = "chacha20poly1305"

    @classmethod
    def parse(cls, value: Union["AlgorithmTag", str]) -> "AlgorithmTag":
        """Acepta un miembro, su valor o su nombre sin distinguir mayúsculas."""

        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for tag in cls:
            if text in (tag.value, tag.name.lower()):
                return tag
        raise UnsupportedAlgorithm(f"Formato desconocido: {value!r}")


class KeyRole(str, Enum):
    """Mitad de un par asimétrico que se quiere cargar."""

    SECRET = "secret"
    PUBLIC = "public"


def _check_size(raw: bytes, expected: int, what: str = "clave") -> bytes:
    if len(raw) != expected:
        raise KeySizeMismatch(expected, len(raw), what)
    return bytes(raw)


def _is_edwards_point(raw: bytes) -> bool:
    """Comprueba que los 32 bytes descompriman a un punto de Edwards25519 (RFC 8032, 5.1.3)."""

    value = int.from_bytes(raw, "little")
    sign = value >> 255
    y = value & ((1 << 255) - 1)
    if y >= _P:
        return False
    y2 = y * y % _P
    x2 = (y2 - 1) * pow(_D * y2 + 1, _P - 2, _P) % _P
    if x2 == 0:
        return sign == 0
    # Criterio de Euler: x^2 debe ser residuo cuadrático
    return pow(x2, (_P - 1) // 2, _P) == 1


class MacKey(BaseModel):
    """Secreto compartido BLAKE3 de 32 bytes."""

    model_config = ConfigDict(frozen=True)

    key: Key32

    @classmethod
    def from_bytes(cls, raw: bytes) -> "MacKey":
        return cls(key=_check_size(raw, KEY_SIZE))


class Ed25519PublicKey(BaseModel):
    """Clave pública Ed25519 (verificador)."""

    model_config = ConfigDict(frozen=True)

    key: Key32

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Ed25519PublicKey":
        raw = _check_size(raw, KEY_SIZE)
        if not _is_edwards_point(raw):
            raise InvalidKeyEncoding("La clave pública Ed25519 no es un punto válido.")
        return cls(key=raw)

    def to_crypto(self) -> ed25519.Ed25519PublicKey:
        return ed25519.Ed25519PublicKey.from_public_bytes(self.key)


class Ed25519SecretKey(BaseModel):
    """Semilla privada Ed25519 (firmante).

    Attributes:
        seed (bytes): Los 32 bytes de la clave secreta tal como se persisten.

    """

    model_config = ConfigDict(frozen=True)

    seed: Key32

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Ed25519SecretKey":
        raw = _check_size(raw, KEY_SIZE)
        try:
            ed25519.Ed25519PrivateKey.from_private_bytes(raw)
        except ValueError as exc:
            raise InvalidKeyEncoding("La clave privada Ed25519 no es válida.") from exc
        return cls(seed=raw)

    def to_crypto(self) -> ed25519.Ed25519PrivateKey:
        return ed25519.Ed25519PrivateKey.from_private_bytes(self.seed)

    def public_key(self) -> Ed25519PublicKey:
        """Deriva la clave pública correspondiente a la semilla."""

        raw = self.to_crypto().public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return Ed25519PublicKey(key=raw)


class AeadKey(BaseModel):
    """Clave ChaCha20-Poly1305 con su nonce derivado.

    Attributes:
        key (bytes): Secreto simétrico de 256 bits.
        nonce (bytes): Primeros 12 bytes del BLAKE3 (sin clave) del secreto.

    """

    model_config = ConfigDict(frozen=True)

    key: Key32
    nonce: Nonce12

    @classmethod
    def derive(cls, raw: bytes) -> "AeadKey":
        """Valida el secreto y calcula el nonce determinista asociado.

        SECURITY: el nonce depende solo de la clave, por lo que se repite en
        cada mensaje cifrado con ella. Se conserva por compatibilidad con los
        artefactos existentes.
        """

        raw = _check_size(raw, KEY_SIZE)
        nonce = blake3.blake3(raw).digest()[:NONCE_SIZE]
        return cls(key=raw, nonce=nonce)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "AeadKey":
        return cls.derive(raw)


KeyMaterial = Union[MacKey, Ed25519SecretKey, Ed25519PublicKey, AeadKey]
