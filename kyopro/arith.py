"""Integer division, modulo and exponentiation helpers, plus shared constants."""

from __future__ import annotations

import math
import operator
from typing import Any, TypeVar

__all__ = [
    "MOD",
    "INF",
    "INF_DIV",
    "DECIMAL_PRECISION",
    "EPS",
    "PI",
    "BINOM_MOD_MAX",
    "BASE_INT_MAX",
    "floor_div",
    "ceil_div",
    "floor_mod",
    "ceil_mod",
    "power",
]

T = TypeVar("T")

BASE_INT_MAX = (1 << 63) - 1
MOD = 998244353
INF_DIV = 3
INF = BASE_INT_MAX // INF_DIV
DECIMAL_PRECISION = 12
EPS = 1.0 / 10**DECIMAL_PRECISION
PI = math.pi
BINOM_MOD_MAX = 1000000


def floor_div(x: int, m: int) -> int:
    """Return floor(x / m)."""
    return operator.index(x) // operator.index(m)


def ceil_div(x: int, m: int) -> int:
    """Return ceil(x / m) for a positive divisor ``m``."""
    x = operator.index(x)
    m = operator.index(m)
    return floor_div(x + m - 1, m)


def floor_mod(x: int, m: int) -> int:
    """Return the remainder of ``x`` by ``m``, shifted up by ``m`` when it is negative.

    For positive ``m`` the result is in ``[0, m)``. The remainder itself
    takes the sign of ``x``, as in truncating division.
    """
    x = operator.index(x)
    m = operator.index(m)
    if m == 0:
        raise ZeroDivisionError("modulo by zero")
    r = abs(x) % abs(m)
    if x < 0:
        r = -r
    return r + m if r < 0 else r


def ceil_mod(x: int, m: int) -> int:
    """Return the amount to add to ``x`` to reach the next multiple of ``m``."""
    x = operator.index(x)
    m = operator.index(m)
    return m - floor_mod(x - 1, m) - 1


def power(a: T, n: int, init: Any = None) -> T:
    """Return ``init * a ** n`` by repeated squaring; ``init`` defaults to 1."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = 1 if init is None else init
    while n > 0:
        if n & 1:
            result *= a
        a *= a
        n >>= 1
    return result