# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas ChaCha20-Poly1305 para cifrado y descifrado de texto.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado para mensajes cortos."""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from textcrypt import codec
from textcrypt.errors import AuthenticationFailed, CodecError, InvalidPlaintext
from textcrypt.models import AeadKey


class ChaCha20Poly1305Cipher:
    """Cifra y descifra buffers completos con la clave y su nonce derivado.

    El resultado de `encrypt` es ciphertext || tag (16 bytes) codificado en
    Base64 sin relleno.
    """

    def __init__(self, key: AeadKey):
        self._key = key

    def encrypt(self, plaintext: bytes) -> str:
        """Cifra datos con ChaCha20-Poly1305 y los codifica para transporte.

        Args:
            plaintext (bytes): Datos en claro que se cifrarán.

        Returns:
            str: Ciphertext con etiqueta en Base64 sin relleno.

        """

        aead = ChaCha20Poly1305(self._key.key)
        return codec.encode(aead.encrypt(self._key.nonce, plaintext, None))

    def decrypt(self, encoded: str) -> str:
        """Decodifica y descifra un mensaje producido por `encrypt`.

        Args:
            encoded (str): Ciphertext en Base64 sin relleno.

        Returns:
            str: Mensaje original en claro.

        Raises:
            AuthenticationFailed: Si el texto no es Base64 válido o la etiqueta
                no coincide.
            InvalidPlaintext: Si el resultado no es UTF-8.

        """

        try:
            ciphertext = codec.decode(encoded)
        except CodecError as exc:
            raise AuthenticationFailed("El mensaje cifrado está mal formado.") from exc
        aead = ChaCha20Poly1305(self._key.key)
        try:
            plaintext = aead.decrypt(self._key.nonce, ciphertext, None)
        except InvalidTag as exc:
            raise AuthenticationFailed("No se ha podido autenticar el mensaje cifrado.") from exc

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPlaintext("El mensaje descifrado no es texto UTF-8.") from exc
