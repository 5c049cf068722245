"""Divisors, Euler's totient, Miller-Rabin primality and Pollard's rho factorisation."""

from __future__ import annotations

import math
import operator
import random

from .bits import floor_bit, rzero_count

__all__ = [
    "divisors",
    "euler_phi",
    "is_prime",
    "pollard_rho",
    "find_factor",
    "factorize",
]

_LIMIT = 1 << 64
_BASES32 = (2, 7, 61)
_BASES64 = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
_FIND_ATTEMPTS = 100
_TRIAL_LIMIT = 100

_random = random.Random()


def _non_negative(n: int) -> int:
    value = operator.index(n)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _word(n: int) -> int:
    value = _non_negative(n)
    if value >= _LIMIT:
        raise ValueError(f"{value} does not fit in 64 bits")
    return value


def divisors(n: int) -> list[int]:
    """Return all positive divisors of ``n`` in increasing order."""
    n = _non_negative(n)
    lower: list[int] = []
    upper: list[int] = []
    i = 1
    while i * i < n:
        if n % i == 0:
            lower.append(i)
            upper.append(n // i)
        i += 1
    if i * i == n:
        lower.append(i)
    return lower + upper[::-1]


def euler_phi(n: int) -> int:
    """Return the number of integers in ``[1, n]`` coprime to ``n``."""
    n = _non_negative(n)
    if n == 0:
        return 0
    res = n
    if n % 2 == 0:
        res -= res >> 1
        while n % 2 == 0:
            n >>= 1
    i = 3
    while i * i <= n:
        if n % i == 0:
            res -= res // i
            while n % i == 0:
                n //= i
        i += 2
    if n != 1:
        res -= res // n
    return res


def _is_witness(n: int, d: int, a: int) -> bool:
    y = pow(a, d, n)
    t = d
    while y != 1 and y != n - 1 and t != n - 1:
        y = y * y % n
        t <<= 1
    return y != n - 1 and t % 2 == 0


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, deterministically for ``n < 2 ** 64``."""
    n = operator.index(n)
    if n <= 1:
        return False
    if n >= _LIMIT:
        raise ValueError(f"{n} does not fit in 64 bits")
    if n % 2 == 0:
        return n == 2
    d = (n - 1) >> rzero_count(n - 1)
    bases = _BASES32 if n < 1 << 32 else _BASES64
    for a in bases:
        if n <= a:
            return True
        if _is_witness(n, d, a):
            return False
    return True


def pollard_rho(n: int, c: int) -> int:
    """Return a divisor ``g > 1`` of ``n`` found with ``x * x + c``; it may be ``n`` itself."""
    n = _word(n)
    if n < 2:
        raise ValueError(f"expected an integer of at least 2, got {n}")
    c = operator.index(c) % n

    def f(v: int) -> int:
        return (v * v + c) % n

    x, y, z, q = 1, 2, 1, 1
    g = 1
    m = 1 << (floor_bit(n) // 5)
    r = 1
    while g == 1:
        x = y
        for _ in range(r):
            y = f(y)
        k = 0
        while k < r and g == 1:
            z = y
            for _ in range(min(m, r - k)):
                y = f(y)
                q = q * (x - y) % n
            g = math.gcd(q, n)
            k += m
        r <<= 1
    if g == n:
        while True:
            z = f(z)
            g = math.gcd((x - z) % n, n)
            if g != 1:
                break
    return g


def find_factor(n: int) -> int:
    """Return a prime factor of ``n``, or 1 if none was found."""
    n = _word(n)
    if n < 2:
        raise ValueError(f"expected an integer of at least 2, got {n}")
    if is_prime(n):
        return n
    for _ in range(_FIND_ATTEMPTS):
        m = pollard_rho(n, _random.randrange(n))
        if is_prime(m):
            return m
        n = m
    return 1


def factorize(n: int, ordered: bool = True) -> list[int]:
    """Return the prime factors of ``n`` with multiplicity, sorted unless ``ordered`` is False."""
    n = _word(n)
    res: list[int] = []
    p = 2
    while p < _TRIAL_LIMIT and p * p <= n:
        while n % p == 0:
            n //= p
            res.append(p)
        p += 1
    while n > 1:
        p = find_factor(n)
        if p == 1:
            raise RuntimeError(f"failed to find a factor of {n}")
        while True:
            n //= p
            res.append(p)
            if n % p:
                break
    if ordered:
        res.sort()
    return res