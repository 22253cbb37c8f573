"""Integer parsing, formatting, range checks and string hashing."""

from __future__ import annotations

from itertools import takewhile

from .log import PanicError

I8_MIN = -(2**7)
I8_MAX = 2**7 - 1
I16_MIN = -(2**15)
I16_MAX = 2**15 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1
SIZE_MAX = U64_MAX

_DIGITS = frozenset("0123456789")
_HASH_SEED = 5381
_HASH_PRIME = 11931085111904720063
_HASH_MASK = U64_MAX


def _leading_digits(text: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, text))


def str_to_u64(text: str) -> int:
    """Parse the leading base-10 digits of ``text`` as an unsigned 64-bit value.

    Parsing stops at the first non-digit; no digits yields 0.
    """
    digits = _leading_digits(text)
    value = int(digits) if digits else 0
    if value > U64_MAX:
        raise PanicError("string out of range of u64")
    return value


def str_to_i64(text: str) -> int:
    """Parse an optionally '-'-prefixed base-10 integer as a signed 64-bit value."""
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]

    magnitude = str_to_u64(text)
    if sign < 0 and magnitude == I64_MAX + 1:
        return I64_MIN
    if magnitude > I64_MAX:
        raise PanicError("string out of range of i64")
    return sign * magnitude


def i64_to_str(value: int) -> str:
    """Format a signed 64-bit value in base 10."""
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError(f"{value} is out of range of i64")
    return str(value)


def u64_to_str(value: int) -> str:
    """Format an unsigned 64-bit value in base 10."""
    if not 0 <= value <= U64_MAX:
        raise OverflowError(f"{value} is out of range of u64")
    return str(value)


def i64_in_range_i16(value: int) -> bool:
    return I16_MIN <= value <= I16_MAX


def i64_in_range_i8(value: int) -> bool:
    return I8_MIN <= value <= I8_MAX


def i64_in_range_u8(value: int) -> bool:
    return 0 <= value <= U8_MAX


def nearest_power_of_two(value: int) -> int:
    """Smallest power of two, at least 8, that is >= ``value``.

    Clamps to ``SIZE_MAX - 1`` when no such 64-bit power exists.
    """
    accumulator = 8
    while accumulator < value:
        accumulator *= 2
        if accumulator > U64_MAX:
            return SIZE_MAX - 1
    return accumulator


def hash_string(text: str | bytes) -> int:
    """Non-cryptographic 64-bit hash of a string, in the style of djb2."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    result = _HASH_SEED
    for byte in data:
        result = (_HASH_PRIME * result + byte) & _HASH_MASK
    return result