# --------------------------------------------------------------
# File: test_codec.py
# Description: Pruebas de la codificación Base64 sin relleno.
# --------------------------------------------------------------

import os

import pytest

from textcrypt.codec import Base64Format, decode, encode
from textcrypt.errors import CodecError, InvalidAlphabet, InvalidLength


def test_encode_has_no_padding():
    assert encode(b"hello world") == "aGVsbG8gd29ybGQ"
    assert encode(b"") == ""
    assert encode(b"a") == "YQ"


def test_decode_known_values():
    assert decode("aGVsbG8gd29ybGQ") == b"hello world"
    assert decode("YQ") == b"a"
    assert decode("") == b""


def test_urlsafe_alphabet():
    """Los bytes 0xfb 0xff usan los dos símbolos que cambian entre alfabetos.

    Returns:
        None: Se comparan ambos alfabetos y su decodificación cruzada.
    """
    assert encode(b"\xfb\xff") == "+/8"
    assert encode(b"\xfb\xff", Base64Format.URLSAFE) == "-_8"
    assert decode("-_8", Base64Format.URLSAFE) == b"\xfb\xff"
    with pytest.raises(InvalidAlphabet):
        decode("-_8")
    with pytest.raises(InvalidAlphabet):
        decode("+/8", Base64Format.URLSAFE)


def test_random_bytes_survive():
    for size in range(0, 70):
        data = os.urandom(size)
        assert decode(encode(data)) == data


@pytest.mark.parametrize("text", ["ab$d", "aGVsbG8gd29ybGQ=", "YQ==", "aGVs bG8", "añb"])
def test_invalid_alphabet(text):
    with pytest.raises(InvalidAlphabet):
        decode(text)


@pytest.mark.parametrize("text", ["a", "abcde", "aGVsbG8gd"])
def test_invalid_length(text):
    """Un único símbolo en el último bloque no puede representar ningún byte.

    Args:
        text (str): Cadena con longitud congruente con 1 módulo 4.
    """
    with pytest.raises(InvalidLength):
        decode(text)


def test_non_canonical_trailing_bits():
    # "R" deja a 1 un bit que "Q" deja a 0
    with pytest.raises(InvalidAlphabet):
        decode("aGVsbG8gd29ybGR")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("***")
    assert issubclass(InvalidLength, CodecError)
