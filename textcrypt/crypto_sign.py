# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Firmas y verificaciones Ed25519 sobre claves en bruto.
# --------------------------------------------------------------
"""Abstracciones criptográficas para firma y validación Ed25519."""

from cryptography.exceptions import InvalidSignature

from textcrypt.errors import InvalidSignatureLength
from textcrypt.models import SIGNATURE_SIZE, Ed25519PublicKey, Ed25519SecretKey


class Ed25519Signer:
    """Propietario de la semilla privada; solo firma."""

    def __init__(self, key: Ed25519SecretKey):
        self._key = key.to_crypto()

    def sign(self, message: bytes) -> bytes:
        """Firma un mensaje con la clave privada Ed25519.

        Args:
            message (bytes): Mensaje que se firmará.

        Returns:
            bytes: Firma Ed25519 de 64 bytes (determinista).

        """

        return self._key.sign(message)


class Ed25519Verifier:
    """Propietario de la clave pública; solo verifica."""

    def __init__(self, key: Ed25519PublicKey):
        self._key = key.to_crypto()

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verifica una firma Ed25519 devolviendo un booleano.

        Args:
            message (bytes): Mensaje original firmado.
            signature (bytes): Firma a verificar.

        Returns:
            bool: True si la firma es válida para el mensaje.

        Raises:
            InvalidSignatureLength: Si la firma no mide 64 bytes.

        """

        if len(signature) != SIGNATURE_SIZE:
            raise InvalidSignatureLength(
                f"La firma Ed25519 debe medir {SIGNATURE_SIZE} bytes, no {len(signature)}."
            )
        try:
            self._key.verify(signature, message)
        except InvalidSignature:
            return False
        return True
