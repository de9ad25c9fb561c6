# vault.py
"""
Password-based encryption for wallet export.

Layout of an encrypted wallet: IV (16 bytes) || AES-256-CBC ciphertext with
PKCS#7 padding. There is no header or version byte. The key is never stored,
it is derived from the password again on decrypt.
"""
import logging
import os
from typing import Callable

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from . import config
from .errors import DecryptionFailed
from .security import derive_key

logger = logging.getLogger(__name__)

# AES block size in bits, as the padding API expects
_BLOCK_BITS = algorithms.AES.block_size


def encrypt(password: str | bytes, plaintext: bytes, randbytes: Callable[[int], bytes] = os.urandom) -> bytes:
    key = derive_key(password)
    iv = randbytes(config.IV_LENGTH)
    if len(iv) != config.IV_LENGTH:
        raise ValueError(f"Random source returned {len(iv)} bytes, expected {config.IV_LENGTH}")

    padder = padding.PKCS7(_BLOCK_BITS).padder()
    padded = padder.update(bytes(plaintext)) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    logger.debug("Encrypted %d bytes of wallet data", len(plaintext))
    return iv + ciphertext


def decrypt(password: str | bytes, data: bytes) -> bytes:
    data = bytes(data)
    if len(data) < config.IV_LENGTH:
        raise DecryptionFailed(f"Encrypted data is {len(data)} bytes, shorter than the {config.IV_LENGTH}-byte IV")

    iv, ciphertext = data[:config.IV_LENGTH], data[config.IV_LENGTH:]
    key = derive_key(password)

    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        # Wrong password shows up here as bad padding
        logger.warning("Wallet decryption failed: %s", e)
        raise DecryptionFailed("Wrong password or corrupted data") from e

    return plaintext
