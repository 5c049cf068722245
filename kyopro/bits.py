"""Bit-counting helpers for non-negative integers."""

from __future__ import annotations

import operator

__all__ = [
    "pop_count",
    "lzero_count",
    "rzero_count",
    "bit_len",
    "floor_bit",
    "ceil_bit",
]

DEFAULT_DIGITS = 64


def _non_negative(x: int) -> int:
    value = operator.index(x)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _check_width(value: int, digits: int) -> int:
    digits = operator.index(digits)
    if digits <= 0:
        raise ValueError(f"digits must be positive, got {digits}")
    if value.bit_length() > digits:
        raise ValueError(f"{value} does not fit in {digits} bits")
    return digits


def pop_count(x: int) -> int:
    """Return the number of set bits in ``x``."""
    return bin(_non_negative(x)).count("1")


def lzero_count(x: int, digits: int = DEFAULT_DIGITS) -> int:
    """Return the number of zero bits above the highest set bit in a ``digits``-bit word.

    Zero gives 0.
    """
    value = _non_negative(x)
    digits = _check_width(value, digits)
    if value == 0:
        return 0
    return digits - value.bit_length()


def rzero_count(x: int, digits: int = DEFAULT_DIGITS) -> int:
    """Return the number of trailing zero bits; zero gives ``digits``."""
    value = _non_negative(x)
    digits = _check_width(value, digits)
    if value == 0:
        return digits
    return (value & -value).bit_length() - 1


def bit_len(x: int) -> int:
    """Return the number of bits needed to represent ``x`` (0 for zero)."""
    return _non_negative(x).bit_length()


def floor_bit(x: int) -> int:
    """Return the largest ``n`` with ``1 << n <= x`` (0 for zero)."""
    return bit_len(_non_negative(x) >> 1)


def ceil_bit(x: int) -> int:
    """Return the smallest ``n`` with ``1 << n >= x``."""
    value = _non_negative(x)
    if value == 0:
        return 0
    return bit_len(value - 1)