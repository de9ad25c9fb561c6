# winston.py
from decimal import Decimal
from functools import total_ordering

from .errors import InvalidAmount


@total_ordering
class Winston:
    """
    An amount of the ledger's smallest indivisible unit.

    Backed by a Python int, so addition never overflows. Negative amounts
    cannot be represented.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        # bool is an int subclass, but True winstons is never meant
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidAmount(f"Winston value must be an int, got {type(value).__name__}")
        if value < 0:
            raise InvalidAmount(f"Winston value must be non-negative, got {value}")
        self._value = value

    @classmethod
    def decode(cls, text: str | bytes) -> "Winston":
        """Parse the canonical decimal form, e.g. a balance returned by a node."""
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError as e:
                raise InvalidAmount("Winston amount must be ASCII digits") from e
        if not isinstance(text, str):
            raise InvalidAmount(f"Winston amount must be str or bytes, got {type(text).__name__}")

        # str.isdigit() also accepts non-ASCII digits like "²", so check explicitly
        if not text or not all("0" <= ch <= "9" for ch in text):
            raise InvalidAmount(f"Not a non-negative decimal number of winstons: {text!r}")
        if len(text) > 1 and text[0] == "0":
            raise InvalidAmount(f"Leading zeros are not allowed: {text!r}")

        # Decimal converts exactly and is not bound by the int/str digit limit
        return cls(int(Decimal(text)))

    def to_string(self) -> str:
        return str(Decimal(self._value))

    def add(self, other: "Winston") -> "Winston":
        if not isinstance(other, Winston):
            raise TypeError(f"Cannot add {type(other).__name__} to Winston")
        return Winston(self._value + other._value)

    def __add__(self, other):
        if not isinstance(other, Winston):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Lets sum() start from its default 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Winston({self.to_string()})"

    def __eq__(self, other):
        if not isinstance(other, Winston):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Winston):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)
