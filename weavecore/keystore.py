# keystore.py
import hashlib
import logging
from collections.abc import Mapping

from cryptography.hazmat.primitives.asymmetric import rsa

from . import config, jwk, signing
from .b64 import encode_url, int_to_bytes
from .errors import InvalidKeyComponents
from .jwk import PrivateKeyComponents, PublicKeyComponents

logger = logging.getLogger(__name__)


class PublicKeyMaterial:
    """A wallet public key. Can verify signatures, nothing else."""

    __slots__ = ("_key",)

    def __init__(self, key: rsa.RSAPublicKey):
        self._key = key

    @property
    def key(self) -> rsa.RSAPublicKey:
        return self._key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def components(self) -> PublicKeyComponents:
        numbers = self._key.public_numbers()
        return PublicKeyComponents(n=numbers.n, e=numbers.e)

    def to_jwk(self) -> dict:
        return self.components().to_jwk()

    @property
    def owner(self) -> str:
        """The modulus as base64url, as it appears in a transaction's owner field."""
        return encode_url(int_to_bytes(self._key.public_numbers().n))

    @property
    def address(self) -> str:
        """base64url of the SHA-256 of the modulus bytes."""
        n_bytes = int_to_bytes(self._key.public_numbers().n)
        return encode_url(hashlib.sha256(n_bytes).digest())

    def verify(self, digest: bytes, signature: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> bool:
        return signing.verify(self, digest, signature, salt_len=salt_len)

    def __repr__(self) -> str:
        return f"<PublicKeyMaterial {self.key_size}-bit address={self.address}>"


class PrivateKeyMaterial:
    """A wallet private key. Signs, and verifies with its own public half."""

    __slots__ = ("_key",)

    def __init__(self, key: rsa.RSAPrivateKey):
        self._key = key

    @property
    def key(self) -> rsa.RSAPrivateKey:
        return self._key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def public(self) -> PublicKeyMaterial:
        return PublicKeyMaterial(self._key.public_key())

    def components(self) -> PrivateKeyComponents:
        numbers = self._key.private_numbers()
        return PrivateKeyComponents(
            n=numbers.public_numbers.n,
            e=numbers.public_numbers.e,
            d=numbers.d,
            p=numbers.p,
            q=numbers.q,
            dp=numbers.dmp1,
            dq=numbers.dmq1,
            qi=numbers.iqmp,
        )

    def to_jwk(self) -> dict:
        return self.components().to_jwk()

    @property
    def owner(self) -> str:
        return self.public().owner

    @property
    def address(self) -> str:
        return self.public().address

    def sign(self, digest: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> bytes:
        return signing.sign(self, digest, salt_len=salt_len)

    def verify(self, digest: bytes, signature: bytes, salt_len: int = config.PSS_SALT_LENGTH) -> bool:
        return signing.verify(self, digest, signature, salt_len=salt_len)

    def __repr__(self) -> str:
        # Never include private numbers here
        return f"<PrivateKeyMaterial {self.key_size}-bit address={self.address}>"


def _public_key(c: PublicKeyComponents) -> PublicKeyMaterial:
    if c.n <= 0 or c.e <= 0:
        raise InvalidKeyComponents("Modulus and public exponent must be positive")
    try:
        key = rsa.RSAPublicNumbers(e=c.e, n=c.n).public_key()
    except ValueError as e:
        raise InvalidKeyComponents(f"Backend rejected public key: {e}") from e
    return PublicKeyMaterial(key)


def _private_key(c: PrivateKeyComponents) -> PrivateKeyMaterial:
    n, e, d = c.n, c.e, c.d
    if n <= 0 or e <= 0 or d <= 0:
        raise InvalidKeyComponents("n, e and d must be positive")

    p, q = c.p, c.q
    if p is None and q is None:
        if c.has_crt:
            raise InvalidKeyComponents("CRT exponents supplied without the prime factors")
        # Slow path: only (n, e, d) is known
        logger.debug("Recovering prime factors from (n, e, d)")
        try:
            p, q = rsa.rsa_recover_prime_factors(n, e, d)
        except ValueError as exc:
            raise InvalidKeyComponents(f"Cannot recover prime factors: {exc}") from exc
    elif p is None or q is None:
        raise InvalidKeyComponents("Both prime factors p and q are required when either is given")
    elif p * q != n:
        raise InvalidKeyComponents("Prime factors do not multiply to the modulus")

    # Supplied CRT values are used as-is; only missing ones are derived
    dp = c.dp if c.dp is not None else rsa.rsa_crt_dmp1(d, p)
    dq = c.dq if c.dq is not None else rsa.rsa_crt_dmq1(d, q)
    qi = c.qi if c.qi is not None else rsa.rsa_crt_iqmp(p, q)
    if None in (c.dp, c.dq, c.qi):
        logger.debug("Derived missing CRT values")

    numbers = rsa.RSAPrivateNumbers(
        p=p,
        q=q,
        d=d,
        dmp1=dp,
        dmq1=dq,
        iqmp=qi,
        public_numbers=rsa.RSAPublicNumbers(e=e, n=n),
    )
    try:
        key = numbers.private_key()
    except ValueError as exc:
        logger.warning("Backend rejected private key components")
        raise InvalidKeyComponents(f"Inconsistent private key components: {exc}") from exc
    return PrivateKeyMaterial(key)


def from_components(components: PublicKeyComponents | PrivateKeyComponents) -> PublicKeyMaterial | PrivateKeyMaterial:
    """Assemble a usable key from a parsed JWK component bag."""
    if isinstance(components, PrivateKeyComponents):
        return _private_key(components)
    if isinstance(components, PublicKeyComponents):
        return _public_key(components)
    raise TypeError(f"Expected key components, got {type(components).__name__}")


def load_jwk(doc: Mapping | str | bytes) -> PublicKeyMaterial | PrivateKeyMaterial:
    """Parse a JWK (dict or JSON text) and assemble the key in one step."""
    if isinstance(doc, (str, bytes, bytearray)):
        components = jwk.loads(doc)
    else:
        components = jwk.parse(doc)
    return from_components(components)


def generate_key(key_size: int = config.RSA_KEY_SIZE, public_exponent: int = config.RSA_PUBLIC_EXPONENT) -> PrivateKeyMaterial:
    """Generate a new wallet key pair."""
    logger.info("Generating new %d-bit RSA key pair...", key_size)
    private_key_obj = rsa.generate_private_key(
        public_exponent=public_exponent,
        key_size=key_size,
    )
    return PrivateKeyMaterial(private_key_obj)
