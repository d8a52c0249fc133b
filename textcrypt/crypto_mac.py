# --------------------------------------------------------------
# File: crypto_mac.py
# Description: Autenticación de mensajes con BLAKE3 en modo clave.
# --------------------------------------------------------------
"""MAC basado en BLAKE3 con secreto compartido de 256 bits."""

import hmac

import blake3

from textcrypt.models import MacKey


class Blake3Mac:
    """Firma y verifica etiquetas BLAKE3 con la misma clave simétrica."""

    def __init__(self, key: MacKey):
        self._key = key

    def sign(self, message: bytes) -> bytes:
        """Calcula la etiqueta BLAKE3 de 32 bytes del mensaje completo.

        Args:
            message (bytes): Mensaje a autenticar.

        Returns:
            bytes: Digest con clave, determinista para (clave, mensaje).

        """

        return blake3.blake3(message, key=self._key.key).digest()

    def verify(self, message: bytes, tag: bytes) -> bool:
        """Recalcula la etiqueta y la compara en tiempo constante.

        Una etiqueta de longitud distinta no es un error: simplemente no coincide.
        """

        return hmac.compare_digest(self.sign(message), tag)
