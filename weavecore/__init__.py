import logging

from . import config
from .errors import (
    DecryptionFailed,
    InvalidAmount,
    InvalidKeyComponents,
    InvalidKeyType,
    MalformedEncoding,
    SigningFailed,
    VerificationFailed,
    WeaveCryptoError,
)
from .jwk import PrivateKeyComponents, PublicKeyComponents, parse_private, parse_public
from .keystore import PrivateKeyMaterial, PublicKeyMaterial, from_components, generate_key, load_jwk
from .security import derive_key
from .signing import sha256, sign, verify, verify_or_raise
from .vault import decrypt, encrypt
from .winston import Winston

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
if config.LOG_LEVEL:
    logger.setLevel(config.LOG_LEVEL.upper())

__all__ = [
    "DecryptionFailed",
    "InvalidAmount",
    "InvalidKeyComponents",
    "InvalidKeyType",
    "MalformedEncoding",
    "PrivateKeyComponents",
    "PrivateKeyMaterial",
    "PublicKeyComponents",
    "PublicKeyMaterial",
    "SigningFailed",
    "VerificationFailed",
    "WeaveCryptoError",
    "Winston",
    "decrypt",
    "derive_key",
    "encrypt",
    "from_components",
    "generate_key",
    "load_jwk",
    "parse_private",
    "parse_public",
    "sha256",
    "sign",
    "verify",
    "verify_or_raise",
]
