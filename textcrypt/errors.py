# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de la capa criptográfica de texto.
# --------------------------------------------------------------
"""Excepciones propias de textcrypt.

Los errores de E/S (archivo inexistente, permisos) no se envuelven: se
propagan tal cual al llamador.
"""


class TextCryptError(Exception):
    """Base común de todos los errores del paquete."""


class LoadError(TextCryptError):
    """La clave persistida no se ha podido cargar."""


class KeySizeMismatch(LoadError, ValueError):
    """La longitud de la clave no coincide con la del algoritmo."""

    def __init__(self, expected: int, actual: int, what: str = "clave"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Longitud de {what} inválida: se esperaban {expected} bytes, hay {actual}.")


class InvalidKeyEncoding(LoadError, ValueError):
    """Los bytes no representan una clave válida para el esquema."""


class CodecError(TextCryptError, ValueError):
    """Texto Base64 no decodificable."""


class InvalidAlphabet(CodecError):
    """Carácter fuera del alfabeto o último símbolo no canónico."""


class InvalidLength(CodecError):
    """Longitud incompatible con Base64 sin relleno."""


class CipherError(TextCryptError):
    """Fallo del cifrado autenticado."""


class AuthenticationFailed(CipherError):
    """La etiqueta de autenticación no coincide."""


class InvalidPlaintext(CipherError):
    """El texto descifrado no es UTF-8 válido."""


class GenerationError(TextCryptError):
    """No se ha podido generar material de clave."""


class UnsupportedAlgorithm(TextCryptError, ValueError):
    """El algoritmo no existe o no admite la operación pedida."""


class InvalidSignatureLength(TextCryptError, ValueError):
    """Firma Ed25519 con longitud distinta de 64 bytes."""
