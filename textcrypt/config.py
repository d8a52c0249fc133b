import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("TEXTCRYPT_LOG_LEVEL", "WARNING").upper()
SIGN_FORMAT = os.getenv("TEXTCRYPT_SIGN_FORMAT", "blake3")
KEY_DIR = os.getenv("TEXTCRYPT_KEY_DIR", ".")


def setup_logging(level: str | None = None) -> None:
    # Solo configura el logger raíz si el anfitrión no lo ha hecho ya
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
