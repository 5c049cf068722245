"""Integers modulo a fixed modulus, and binomial coefficients over them."""

from __future__ import annotations

import functools
import operator
from typing import Any, Optional

from .arith import BINOM_MOD_MAX, MOD, floor_mod

__all__ = ["ModInt", "make_modint", "BinomMod"]


class ModInt:
    """Integer modulo ``mod``; subclasses made by ``make_modint`` fix other moduli."""

    __slots__ = ("value",)

    mod: int = MOD

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, ModInt):
            if type(value) is not type(self):
                raise TypeError("cannot convert between different moduli")
            self.value = value.value
            return
        self.value = floor_mod(value, self.mod)

    @classmethod
    def raw(cls, value: int) -> "ModInt":
        """Build from a value already in ``[0, mod)``."""
        value = operator.index(value)
        if not 0 <= value < cls.mod:
            raise ValueError(f"raw value {value} out of range for modulus {cls.mod}")
        obj = cls.__new__(cls)
        obj.value = value
        return obj

    @classmethod
    def get_mod(cls) -> int:
        """Return the modulus."""
        return cls.mod

    def pow(self, n: int) -> "ModInt":
        """Return ``self`` raised to the non-negative power ``n``."""
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"exponent must be non-negative, got {n}")
        return type(self).raw(pow(self.value, n, self.mod))

    def inv(self) -> "ModInt":
        """Return the multiplicative inverse; raise if there is none."""
        a, b = self.value, self.mod
        u, v = 1, 0
        while b:
            t = a // b
            a, b = b, a - t * b
            u, v = v, u - t * v
        if a != 1:
            raise ZeroDivisionError(f"{self.value} is not invertible modulo {self.mod}")
        return type(self)(u)

    def _coerce(self, other: Any) -> Optional["ModInt"]:
        if type(other) is type(self):
            return other
        if isinstance(other, ModInt):
            return None
        if isinstance(other, int):
            return type(self)(other)
        return None

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __pos__(self) -> "ModInt":
        return self

    def __neg__(self) -> "ModInt":
        return type(self).raw(self.mod - self.value if self.value else 0)

    def __add__(self, other: Any) -> "ModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        value = self.value + rhs.value
        if value >= self.mod:
            value -= self.mod
        return type(self).raw(value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        value = self.value - rhs.value
        if value < 0:
            value += self.mod
        return type(self).raw(value)

    def __rsub__(self, other: Any) -> "ModInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> "ModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return type(self).raw(self.value * rhs.value % self.mod)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "ModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inv()

    def __rtruediv__(self, other: Any) -> "ModInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inv()

    def __pow__(self, n: int) -> "ModInt":
        n = operator.index(n)
        if n < 0:
            return self.inv().pow(-n)
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __str__(self) -> str:
        return str(self.value)


@functools.lru_cache(maxsize=None)
def make_modint(mod: int) -> type:
    """Return the ModInt class for the modulus ``mod``; equal moduli give the same class."""
    mod = operator.index(mod)
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")
    if mod == MOD:
        return ModInt
    return type(f"ModInt{mod}", (ModInt,), {"__slots__": (), "mod": mod})


class BinomMod:
    """Factorial tables for binomial coefficients, permutations and combinations with repetition."""

    def __init__(self, limit: int = BINOM_MOD_MAX, mint: type = ModInt) -> None:
        limit = operator.index(limit)
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        m = mint.get_mod()
        if limit > m:
            raise ValueError(f"limit {limit} exceeds the modulus {m}")
        self.mint = mint
        self.limit = limit
        self._m = m
        fact = [1, 1]
        inv = [0, 1]
        factinv = [1, 1]
        for i in range(2, limit):
            fact.append(fact[-1] * i % m)
            inv.append((m - inv[m % i] * (m // i) % m) % m)
            factinv.append(factinv[-1] * inv[i] % m)
        self._fact = [f % m for f in fact[:limit]]
        self._factinv = [f % m for f in factinv[:limit]]

    def _check(self, n: int) -> None:
        if not 0 <= n < self.limit:
            raise IndexError(f"{n} out of range for limit {self.limit}")

    def c(self, n: int, r: int) -> ModInt:
        """Return the number of ways to choose ``r`` of ``n``."""
        n = operator.index(n)
        r = operator.index(r)
        if r < 0 or n < r:
            return self.mint(0)
        self._check(n)
        return self.mint(self._fact[n] * self._factinv[n - r] % self._m * self._factinv[r])

    def p(self, n: int, r: Optional[int] = None) -> ModInt:
        """Return ``n!``, or the number of ordered choices of ``r`` of ``n``."""
        n = operator.index(n)
        if r is None:
            self._check(n)
            return self.mint(self._fact[n])
        r = operator.index(r)
        if r < 0 or n < r:
            return self.mint(0)
        self._check(n)
        return self.mint(self._fact[n] * self._factinv[n - r])

    def h(self, n: int, r: int) -> ModInt:
        """Return the number of multisets of size ``r`` from ``n`` kinds."""
        return self.c(operator.index(n) + operator.index(r) - 1, r)