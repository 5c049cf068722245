"""Montgomery and Barrett modular reduction."""

from __future__ import annotations

import operator

__all__ = ["Montgomery", "Barrett"]


class Montgomery:
    """Montgomery reduction for an odd modulus with radix ``2 ** bits``."""

    def __init__(self, mod: int, bits: int = 64) -> None:
        bits = operator.index(bits)
        if bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        self.bits = bits
        self._mask = (1 << bits) - 1
        self.set_mod(mod)

    def set_mod(self, mod: int) -> None:
        """Switch to a new odd modulus below ``2 ** bits``."""
        mod = operator.index(mod)
        if mod <= 0 or mod % 2 == 0:
            raise ValueError(f"modulus must be a positive odd integer, got {mod}")
        if mod >> self.bits:
            raise ValueError(f"modulus {mod} does not fit in {self.bits} bits")
        self.mod = mod
        self._n2 = pow(2, 2 * self.bits, mod)
        self._r = -pow(mod, -1, 1 << self.bits) & self._mask

    def transform(self, x: int) -> int:
        """Return the Montgomery form of ``x``."""
        return self.reduce(operator.index(x) * self._n2)

    def inv_transform(self, x: int) -> int:
        """Return the ordinary value, in ``[0, mod)``, of the Montgomery form ``x``."""
        y = self.reduce(x)
        return y - self.mod if y >= self.mod else y

    def reduce(self, x: int) -> int:
        """Return ``x * 2 ** -bits`` modulo ``mod``, below ``2 * mod`` for ``x < mod * 2 ** bits``."""
        x = operator.index(x)
        if x < 0:
            raise ValueError(f"expected a non-negative integer, got {x}")
        t = ((x & self._mask) * self._r) & self._mask
        return (x + t * self.mod) >> self.bits

    def __repr__(self) -> str:
        return f"Montgomery(mod={self.mod}, bits={self.bits})"


class Barrett:
    """Barrett reduction of 64-bit values by a fixed modulus."""

    _SHIFT = 64

    def __init__(self, mod: int) -> None:
        self.set_mod(mod)

    def set_mod(self, mod: int) -> None:
        """Switch to a new modulus in ``[1, 2 ** 64)``."""
        mod = operator.index(mod)
        if not 0 < mod < 1 << self._SHIFT:
            raise ValueError(f"modulus must be in [1, 2**64), got {mod}")
        self.mod = mod
        self._m = (1 << self._SHIFT) // mod

    def reduce(self, x: int) -> int:
        """Return ``x % mod`` for ``0 <= x < 2 ** 64``."""
        x = operator.index(x)
        if not 0 <= x < 1 << self._SHIFT:
            raise ValueError(f"value must be in [0, 2**64), got {x}")
        x -= ((x * self._m) >> self._SHIFT) * self.mod
        return x if x < self.mod else x - self.mod

    def __repr__(self) -> str:
        return f"Barrett(mod={self.mod})"