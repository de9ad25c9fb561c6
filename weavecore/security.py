# security.py
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from . import config


def derive_key(password: str | bytes) -> bytes:
    """
    Stretch a wallet password into a 256-bit AES key.

    PBKDF2-HMAC-SHA256 with the fixed export salt from config. The same
    password always yields the same key, which is what lets decrypt re-derive it.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    # A PBKDF2HMAC instance can only be used once
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=config.KDF_KEY_LENGTH,
        salt=config.KDF_SALT,
        iterations=config.KDF_ITERATIONS,
    )
    return kdf.derive(password)
