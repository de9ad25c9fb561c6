# jwk.py
"""
RSA JSON Web Key codec.

Turns JWK documents into plain integer component bags and back. Every numeric
field is a base64url (no padding) encoding of an unsigned big-endian integer.
Nothing here knows about the signing backend; see keystore.py for that.
"""
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .b64 import decode_url, encode_int
from .errors import InvalidKeyComponents, InvalidKeyType, MalformedEncoding

logger = logging.getLogger(__name__)

KEY_TYPE = "RSA"

# Order matters: p must come before q, qi is q^-1 mod p
CRT_FIELDS = ("p", "q", "dp", "dq", "qi")


@dataclass(frozen=True)
class PublicKeyComponents:
    n: int
    e: int
    kty: str = KEY_TYPE

    def to_jwk(self) -> Dict[str, str]:
        return {"kty": self.kty, "n": encode_int(self.n), "e": encode_int(self.e)}


@dataclass(frozen=True)
class PrivateKeyComponents:
    n: int
    e: int
    d: int
    p: Optional[int] = None
    q: Optional[int] = None
    dp: Optional[int] = None
    dq: Optional[int] = None
    qi: Optional[int] = None
    kty: str = KEY_TYPE

    @property
    def has_crt(self) -> bool:
        return any(getattr(self, name) is not None for name in CRT_FIELDS)

    def public(self) -> PublicKeyComponents:
        return PublicKeyComponents(n=self.n, e=self.e)

    def to_jwk(self) -> Dict[str, str]:
        doc = {
            "kty": self.kty,
            "n": encode_int(self.n),
            "e": encode_int(self.e),
            "d": encode_int(self.d),
        }
        # Only emit the CRT values the key actually carries
        for name in CRT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                doc[name] = encode_int(value)
        return doc


def _check_kty(doc: Any) -> None:
    if not isinstance(doc, Mapping):
        raise MalformedEncoding(f"JWK must be a JSON object, got {type(doc).__name__}")
    kty = doc.get("kty")
    if kty != KEY_TYPE:
        logger.warning("Rejected JWK with key type %r", kty)
        raise InvalidKeyType(f"Unsupported key type {kty!r}, expected {KEY_TYPE!r}")


def _read_int(doc: Mapping, name: str, required: bool = True) -> Optional[int]:
    value = doc.get(name)
    if value is None:
        if required:
            raise InvalidKeyComponents(f"JWK is missing required field {name!r}")
        return None

    raw = decode_url(value)
    if not raw:
        raise InvalidKeyComponents(f"JWK field {name!r} is empty")
    return int.from_bytes(raw, "big")


def parse_public(doc: Mapping) -> PublicKeyComponents:
    """Parse an RSA public JWK ({"kty", "n", "e"}); extra members are ignored."""
    _check_kty(doc)
    return PublicKeyComponents(n=_read_int(doc, "n"), e=_read_int(doc, "e"))


def parse_private(doc: Mapping) -> PrivateKeyComponents:
    """
    Parse an RSA private JWK.

    n, e and d are required. The CRT members p, q, dp, dq and qi are optional;
    their consistency with n is checked when the key is assembled.
    """
    _check_kty(doc)
    return PrivateKeyComponents(
        n=_read_int(doc, "n"),
        e=_read_int(doc, "e"),
        d=_read_int(doc, "d"),
        **{name: _read_int(doc, name, required=False) for name in CRT_FIELDS},
    )


def parse(doc: Mapping) -> PublicKeyComponents | PrivateKeyComponents:
    """Parse a JWK dict, private if it carries "d", public otherwise."""
    _check_kty(doc)
    if "d" in doc:
        return parse_private(doc)
    return parse_public(doc)


def loads(text: str | bytes) -> PublicKeyComponents | PrivateKeyComponents:
    """Parse a JSON text JWK, private if it carries "d", public otherwise."""
    try:
        doc = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedEncoding(f"JWK is not valid JSON: {e}") from e

    return parse(doc)


def dumps(components: PublicKeyComponents | PrivateKeyComponents) -> str:
    return json.dumps(components.to_jwk(), separators=(",", ":"))
