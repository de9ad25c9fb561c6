# errors.py


class WeaveCryptoError(Exception):
    """Base class for every error raised by weavecore."""


class InvalidKeyType(WeaveCryptoError, ValueError):
    """The JWK document is not an RSA key."""


class MalformedEncoding(WeaveCryptoError, ValueError):
    """A field is not valid base64url, or the document is not valid JSON."""


class InvalidKeyComponents(WeaveCryptoError, ValueError):
    """Key numbers are missing, empty, or inconsistent with each other."""


class SigningFailed(WeaveCryptoError):
    """The backend refused to sign, or the key cannot sign."""


class VerificationFailed(WeaveCryptoError):
    """Raised only by verify_or_raise; verify itself returns False."""


class DecryptionFailed(WeaveCryptoError):
    """Wrong password, bad padding, or truncated ciphertext."""


class InvalidAmount(WeaveCryptoError, ValueError):
    """Not a canonical non-negative decimal amount."""
