"""Integers modulo a modulus chosen at run time, kept in Montgomery form."""

from __future__ import annotations

import operator
from typing import Any, Optional

from .montgomery import Montgomery

__all__ = ["DynamicModInt", "make_dynamic_modint"]


class DynamicModInt:
    """Integer modulo an odd modulus set with ``set_mod``; each subclass has its own."""

    __slots__ = ("value",)

    _montgomery: Optional[Montgomery] = None

    @classmethod
    def _mg(cls) -> Montgomery:
        mg = cls._montgomery
        if mg is None:
            raise RuntimeError("modulus has not been set")
        return mg

    @classmethod
    def set_mod(cls, mod: int) -> None:
        """Set the odd modulus for this class."""
        mod = operator.index(mod)
        cls._montgomery = Montgomery(mod, max(64, mod.bit_length() + 2))

    @classmethod
    def get_mod(cls) -> int:
        """Return the modulus."""
        return cls._mg().mod

    @classmethod
    def _from_form(cls, form: int) -> "DynamicModInt":
        obj = cls.__new__(cls)
        obj.value = form
        return obj

    def __init__(self, value: Any = 0) -> None:
        mg = self._mg()
        if isinstance(value, DynamicModInt):
            if type(value) is not type(self):
                raise TypeError("cannot convert between different moduli")
            self.value = value.value
            return
        self.value = mg.transform(operator.index(value) % mg.mod)

    @classmethod
    def raw(cls, value: int) -> "DynamicModInt":
        """Build from a value already in ``[0, mod)``."""
        mg = cls._mg()
        value = operator.index(value)
        if not 0 <= value < mg.mod:
            raise ValueError(f"raw value {value} out of range for modulus {mg.mod}")
        return cls._from_form(mg.transform(value))

    def pow(self, n: int) -> "DynamicModInt":
        """Return ``self`` raised to the non-negative power ``n``."""
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"exponent must be non-negative, got {n}")
        mg = self._mg()
        result = mg.transform(1)
        base = self.value
        while n > 0:
            if n & 1:
                result = mg.reduce(result * base)
            base = mg.reduce(base * base)
            n >>= 1
        return type(self)._from_form(result)

    def inv(self) -> "DynamicModInt":
        """Return the inverse by Fermat's little theorem; the modulus should be prime."""
        if int(self) == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.pow(self._mg().mod - 2)

    def _coerce(self, other: Any) -> Optional["DynamicModInt"]:
        if type(other) is type(self):
            return other
        if isinstance(other, DynamicModInt):
            return None
        if isinstance(other, int):
            return type(self)(other)
        return None

    def __int__(self) -> int:
        return self._mg().inv_transform(self.value)

    def __bool__(self) -> bool:
        return int(self) != 0

    def __pos__(self) -> "DynamicModInt":
        return self

    def __neg__(self) -> "DynamicModInt":
        twice = self._mg().mod << 1
        return type(self)._from_form(twice - self.value if self.value else 0)

    def __add__(self, other: Any) -> "DynamicModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        twice = self._mg().mod << 1
        value = self.value + rhs.value
        if value >= twice:
            value -= twice
        return type(self)._from_form(value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "DynamicModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        value = self.value - rhs.value
        if value < 0:
            value += self._mg().mod << 1
        return type(self)._from_form(value)

    def __rsub__(self, other: Any) -> "DynamicModInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> "DynamicModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return type(self)._from_form(self._mg().reduce(self.value * rhs.value))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "DynamicModInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inv()

    def __rtruediv__(self, other: Any) -> "DynamicModInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inv()

    def __pow__(self, n: int) -> "DynamicModInt":
        n = operator.index(n)
        if n < 0:
            return self.inv().pow(-n)
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return int(self) == int(rhs)

    def __hash__(self) -> int:
        return hash(int(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


def make_dynamic_modint(mod: int) -> type:
    """Return a new DynamicModInt class with its own modulus, initially ``mod``."""
    cls = type("DynamicModInt", (DynamicModInt,), {"__slots__": ()})
    cls.set_mod(mod)
    return cls