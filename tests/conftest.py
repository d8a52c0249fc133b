# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves temporales y entorno aislado.
# --------------------------------------------------------------

import importlib
import random
from pathlib import Path
from typing import Iterator, Tuple

import pytest

from textcrypt.keys import generate_keys, save_keys
from textcrypt.models import AlgorithmTag


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch) -> Iterator[None]:
    """Fija las variables TEXTCRYPT_* y recarga textcrypt.config en cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TEXTCRYPT_SIGN_FORMAT", "blake3")
    monkeypatch.setenv("TEXTCRYPT_KEY_DIR", str(tmp_path))
    monkeypatch.setenv("TEXTCRYPT_LOG_LEVEL", "WARNING")

    import textcrypt.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def message_file(tmp_path) -> Path:
    path = tmp_path / "message.txt"
    path.write_bytes(b"hello world")
    return path


@pytest.fixture
def mac_key_file(tmp_path) -> Path:
    keys = generate_keys(AlgorithmTag.MAC, rng=random.Random(7))
    return save_keys(AlgorithmTag.MAC, keys, tmp_path)["blake3.txt"]


@pytest.fixture
def aead_key_file(tmp_path) -> Path:
    keys = generate_keys(AlgorithmTag.AEAD, rng=random.Random(11))
    return save_keys(AlgorithmTag.AEAD, keys, tmp_path)["chacha20poly1305.txt"]


@pytest.fixture
def ed25519_key_files(tmp_path) -> Tuple[Path, Path]:
    """Genera un par Ed25519 y devuelve las rutas (privada, pública).

    Returns:
        Tuple[Path, Path]: Archivos `ed25519.sk` y `ed25519.pk`.
    """
    written = save_keys(AlgorithmTag.SIGNATURE, generate_keys(AlgorithmTag.SIGNATURE), tmp_path)
    return written["ed25519.sk"], written["ed25519.pk"]
