# --------------------------------------------------------------
# File: services.py
# Description: Capa de despacho de las operaciones de firma y cifrado de texto.
# --------------------------------------------------------------
"""Operaciones públicas de textcrypt.

Cada función resuelve el algoritmo, carga su clave, lee la entrada completa
y pasa el resultado por el códec Base64. No guarda estado entre llamadas ni
reintenta: cualquier error llega intacto al llamador.
"""

import logging
from random import Random
from typing import Callable, List, Optional, Union

from textcrypt import codec, config, keys
from textcrypt.codec import Base64Format
from textcrypt.crypto_mac import Blake3Mac
from textcrypt.crypto_sign import Ed25519Signer, Ed25519Verifier
from textcrypt.crypto_sym import ChaCha20Poly1305Cipher
from textcrypt.errors import AuthenticationFailed, CodecError, InvalidAlphabet, UnsupportedAlgorithm
from textcrypt.models import AlgorithmTag, KeyRole
from textcrypt.reader import read_input

logger = logging.getLogger(__name__)

Format = Union[AlgorithmTag, str, None]


def _sign_format(fmt: Format) -> AlgorithmTag:
    """Resuelve el formato de firma, usando `TEXTCRYPT_SIGN_FORMAT` si falta."""

    tag = AlgorithmTag.parse(fmt if fmt is not None else config.SIGN_FORMAT)
    if tag is AlgorithmTag.AEAD:
        raise UnsupportedAlgorithm(f"{tag.value} no firma mensajes; usa encrypt/decrypt.")
    return tag


def _read_encoded(input: str) -> str:
    raw = read_input(input)
    try:
        return raw.decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise InvalidAlphabet("La entrada codificada contiene bytes no ASCII.") from exc


def _cipher_format(fmt: Format) -> AlgorithmTag:
    tag = AlgorithmTag.parse(fmt if fmt is not None else AlgorithmTag.AEAD)
    if tag is not AlgorithmTag.AEAD:
        raise UnsupportedAlgorithm(f"{tag.value} no cifra mensajes.")
    return tag


def sign(input: str, key: str, fmt: Format = None) -> str:
    """Firma la entrada y devuelve la firma en Base64 sin relleno.

    Args:
        input (str): "-" para la entrada estándar o ruta del mensaje.
        key (str): Ruta del secreto BLAKE3 o de la semilla Ed25519.
        fmt (AlgorithmTag | str | None): `blake3` o `ed25519`.

    Returns:
        str: Etiqueta (32 bytes) o firma (64 bytes) codificada.

    """

    tag = _sign_format(fmt)
    if tag is AlgorithmTag.MAC:
        signer = Blake3Mac(keys.load_key(tag, key))
    else:
        signer = Ed25519Signer(keys.load_key(tag, key, KeyRole.SECRET))
    message = read_input(input)
    signature = signer.sign(message)
    logger.debug("Firma %s de %d bytes", tag.value, len(message))
    return codec.encode(signature)


def verify(input: str, key: str, sig: str, fmt: Format = None) -> bool:
    """Verifica una firma Base64 contra la entrada.

    Args:
        input (str): "-" para la entrada estándar o ruta del mensaje.
        key (str): Ruta del secreto BLAKE3 o de la clave pública Ed25519.
        sig (str): Firma en Base64 sin relleno.
        fmt (AlgorithmTag | str | None): `blake3` o `ed25519`.

    Returns:
        bool: True si la firma corresponde al mensaje. Nunca indica el motivo
        del rechazo.

    Raises:
        CodecError: Si `sig` no es Base64 válido.
        InvalidSignatureLength: Si una firma Ed25519 no mide 64 bytes.

    """

    tag = _sign_format(fmt)
    signature = codec.decode(sig.strip())
    message = read_input(input)
    if tag is AlgorithmTag.MAC:
        verified = Blake3Mac(keys.load_key(tag, key)).verify(message, signature)
    else:
        verifier = Ed25519Verifier(keys.load_key(tag, key, KeyRole.PUBLIC))
        verified = verifier.verify(message, signature)
    logger.debug("Verificación %s de %d bytes: %s", tag.value, len(message), verified)
    return verified


def generate_keys(
    fmt: Format = None,
    *,
    rng: Optional[Random] = None,
    randbytes: Optional[Callable[[int], bytes]] = None,
) -> List[bytes]:
    """Genera claves nuevas para cualquiera de los tres algoritmos."""

    tag = AlgorithmTag.parse(fmt if fmt is not None else config.SIGN_FORMAT)
    return keys.generate_keys(tag, rng=rng, randbytes=randbytes)


def encrypt(input: str, key: str, fmt: Format = None) -> str:
    """Cifra la entrada completa y devuelve el resultado en Base64 sin relleno."""

    tag = _cipher_format(fmt)
    cipher = ChaCha20Poly1305Cipher(keys.load_key(tag, key))
    plaintext = read_input(input)
    logger.debug("Cifrado %s de %d bytes", tag.value, len(plaintext))
    return cipher.encrypt(plaintext)


def decrypt(input: str, key: str, fmt: Format = None) -> str:
    """Descifra un mensaje producido por `encrypt`.

    Args:
        input (str): "-" o ruta del texto cifrado en Base64.
        key (str): Ruta del secreto ChaCha20-Poly1305.
        fmt (AlgorithmTag | str | None): Solo `chacha20poly1305`.

    Returns:
        str: Texto en claro.

    Raises:
        AuthenticationFailed: Si la entrada no es Base64 válido, el mensaje ha
            sido alterado o la clave no es la correcta.
        InvalidPlaintext: Si el resultado no es texto UTF-8.

    """

    tag = _cipher_format(fmt)
    cipher = ChaCha20Poly1305Cipher(keys.load_key(tag, key))
    try:
        encoded = _read_encoded(input)
    except CodecError as exc:
        raise AuthenticationFailed("El mensaje cifrado está mal formado.") from exc
    logger.debug("Descifrado %s de %d caracteres", tag.value, len(encoded))
    return cipher.decrypt(encoded)


def encode_input(input: str, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Codifica la entrada completa en Base64 sin relleno.

    Args:
        input (str): "-" para la entrada estándar o ruta del archivo.
        fmt (Base64Format): Alfabeto estándar o URL-safe.

    Returns:
        str: Texto codificado.

    """

    return codec.encode(read_input(input), fmt)


def decode_input(input: str, fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """Decodifica la entrada Base64 sin relleno, ignorando espacios alrededor.

    Args:
        input (str): "-" para la entrada estándar o ruta del texto codificado.
        fmt (Base64Format): Alfabeto con el que se codificó.

    Returns:
        bytes: Datos originales.

    Raises:
        CodecError: Si el texto no es Base64 válido.

    """

    return codec.decode(_read_encoded(input), fmt)
