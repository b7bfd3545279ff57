"""Small integer and byte manipulations: digits, byte order, bit counts."""

from __future__ import annotations

import sys
from collections.abc import Iterable

_WORD_BYTES = 4
_WORD_MASK = 0xFFFFFFFF


def append_digit(number: int, digit: int) -> int:
    """Append a decimal ``digit`` to the right of ``number``."""
    if not 0 <= digit <= 9:
        raise ValueError(f"{digit} is not a decimal digit")
    return number * 10 + digit


def digits_to_number(digits: Iterable[int]) -> int:
    """Build a number from its decimal digits, most significant first."""
    number = 0
    for digit in digits:
        number = append_digit(number, digit)
    return number


def reverse_number(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    reversed_number = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_number = reversed_number * 10 + digit
    return sign * reversed_number


def flip_bytes(value: int) -> int:
    """Reverse the order of the four bytes of an unsigned 32-bit value."""
    if not 0 <= value <= _WORD_MASK:
        raise ValueError(f"{value} is not an unsigned 32-bit value")
    return int.from_bytes(value.to_bytes(_WORD_BYTES, "little"), "big")


def _as_word(value: int) -> int:
    if not -(1 << 31) <= value <= _WORD_MASK:
        raise ValueError(f"{value} does not fit in 32 bits")
    return value & _WORD_MASK


def byte_order(value: int, order: str = sys.byteorder) -> tuple[int, ...]:
    """The bytes of a 32-bit value as laid out in memory with ``order``."""
    if order not in ("little", "big"):
        raise ValueError(f"unknown byte order {order!r}")
    return tuple(_as_word(value).to_bytes(_WORD_BYTES, order))


def host_to_network(value: int) -> int:
    """Convert a 32-bit value from host to network (big-endian) byte order."""
    big_endian = _as_word(value).to_bytes(_WORD_BYTES, "big")
    return int.from_bytes(big_endian, sys.byteorder)


def count_ones(value: int) -> int:
    """Number of set bits in a non-negative integer."""
    if value < 0:
        raise ValueError(f"{value} is negative")
    return bin(value).count("1")