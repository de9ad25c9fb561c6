# signing.py
"""
RSA-PSS signing over transaction digests.

Callers hash the transaction payload themselves (see sha256 below) and pass the
32-byte digest in. The digest is signed as-is: PSS with SHA-256 for both the
message hash and MGF1, salt length 32 unless overridden.
"""
import hashlib
import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from . import config
from .errors import SigningFailed, VerificationFailed

logger = logging.getLogger(__name__)


def sha256(data: bytes) -> bytes:
    """SHA-256 digest of a transaction payload, ready to be signed."""
    return hashlib.sha256(data).digest()


def _pss(salt_len: int) -> padding.PSS:
    return padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=salt_len)


def _backend_key(key):
    # Accept keystore wrappers as well as bare cryptography keys
    return getattr(key, "key", key)


def sign(private_key, digest: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> bytes:
    """Signs a SHA-256 digest with the wallet's private key."""
    key = _backend_key(private_key)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise SigningFailed("Signing requires a private key")

    try:
        signature = key.sign(bytes(digest), _pss(salt_len), Prehashed(hashes.SHA256()))
    except (ValueError, TypeError) as e:
        # e.g. modulus too small for digest + salt, or digest is not 32 bytes
        raise SigningFailed(f"RSA-PSS signing failed: {e}") from e

    logger.debug("Signed %d-byte digest with %d-bit key", len(digest), key.key_size)
    return signature


def verify(public_key, digest: bytes, signature: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> bool:
    """
    Check a PSS signature over a SHA-256 digest.

    Returns False for any bad signature, including a wrong length or a digest
    that is not 32 bytes. A private key verifies with its public half.
    """
    key = _backend_key(public_key)
    if isinstance(key, rsa.RSAPrivateKey):
        key = key.public_key()
    if not isinstance(key, rsa.RSAPublicKey):
        raise TypeError(f"Expected an RSA key, got {type(key).__name__}")

    try:
        key.verify(bytes(signature), bytes(digest), _pss(salt_len), Prehashed(hashes.SHA256()))
    except InvalidSignature:
        return False
    except (ValueError, TypeError) as e:
        logger.debug("Signature rejected before verification: %s", e)
        return False
    return True


def verify_or_raise(public_key, digest: bytes, signature: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> None:
    if not verify(public_key, digest, signature, salt_len=salt_len):
        raise VerificationFailed("Signature does not match digest")
