# b64.py
import base64
import binascii
import re

from .errors import MalformedEncoding

# URL-safe alphabet (RFC 4648 section 5), padding stripped before matching
_B64URL_RE = re.compile(r"[A-Za-z0-9_\-]*")


def encode_url(data: bytes) -> str:
    """base64url without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_url(value: str | bytes) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedEncoding("base64url value is not ASCII") from e
    if not isinstance(value, str):
        raise MalformedEncoding(f"base64url value must be str or bytes, got {type(value).__name__}")

    # Padding is not part of the JWK form, but some exporters still emit it
    value = value.rstrip("=")
    if not _B64URL_RE.fullmatch(value):
        raise MalformedEncoding("Invalid base64url characters")
    if len(value) % 4 == 1:
        raise MalformedEncoding("Invalid base64url length")

    pad = "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(value + pad)
    except (binascii.Error, ValueError) as e:
        raise MalformedEncoding(f"Invalid base64url: {e}") from e


def int_to_bytes(i: int) -> bytes:
    """Unsigned big-endian bytes, at least one byte long."""
    length = (i.bit_length() + 7) // 8 or 1
    return i.to_bytes(length, "big")


def encode_int(i: int) -> str:
    return encode_url(int_to_bytes(i))


def decode_int(value: str | bytes) -> int:
    return int.from_bytes(decode_url(value), "big")
