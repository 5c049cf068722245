"""Whitespace-separated token reader for integers, decimals, strings and nested shapes."""

from __future__ import annotations

import io
import operator
import sys
from dataclasses import dataclass
from typing import Any, Optional, TextIO, Union

from .arith import DECIMAL_PRECISION
from .dynamic_modint import DynamicModInt
from .modint import ModInt

__all__ = ["Indexed", "indexed", "idx1", "Scanner"]

_SPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Indexed:
    """Kinds whose numbers are read shifted down by ``offset`` and written shifted up."""

    args: tuple
    offset: int = 1


def indexed(offset: int, *args: Any) -> Indexed:
    """Wrap ``args`` so their numbers are shifted by ``offset``."""
    return Indexed(tuple(args), operator.index(offset))


def idx1(*args: Any) -> Indexed:
    """Wrap ``args`` so one-based numbers become zero-based and back."""
    return indexed(1, *args)


class Scanner:
    """Read values from a text stream.

    A kind given to ``read`` or to a call is one of ``int``, ``float``,
    ``str`` (a token), ``bool`` (one character, ``'0'`` is False), ``chr``
    (one character), a ModInt or DynamicModInt class, a tuple or list of
    kinds (read into a tuple or list), or an ``Indexed`` wrapper.
    """

    def __init__(
        self,
        stream: Union[TextIO, str, None] = None,
        decimal_precision: int = DECIMAL_PRECISION,
    ) -> None:
        if stream is None:
            stream = sys.stdin
        elif isinstance(stream, str):
            stream = io.StringIO(stream)
        precision = operator.index(decimal_precision)
        if precision < 0:
            raise ValueError(f"decimal precision must be non-negative, got {precision}")
        self.stream = stream
        self.decimal_precision = precision
        self._buf = ""
        self._pos = 0

    def _peek(self) -> str:
        while self._pos >= len(self._buf):
            line = self.stream.readline()
            if not line:
                return ""
            self._buf = line
            self._pos = 0
        return self._buf[self._pos]

    def _next(self) -> str:
        c = self._peek()
        if c:
            self._pos += 1
        return c

    def _take_digits(self) -> str:
        digits = []
        while self._peek() in _DIGITS:
            digits.append(self._next())
        return "".join(digits)

    def _scan_number(self) -> tuple[bool, str, str]:
        self.discard_space()
        if not self._peek():
            raise EOFError("no more input")
        negative = self._peek() == "-"
        if negative:
            self._pos += 1
        whole = self._take_digits()
        frac = ""
        if self._peek() == ".":
            self._pos += 1
            frac = self._take_digits()
        if not whole and not frac:
            raise ValueError("expected a number")
        return negative, whole, frac

    def discard_space(self) -> None:
        """Skip whitespace up to the next character."""
        while self._peek() in _SPACE:
            self._pos += 1

    def read_int(self) -> int:
        """Read an integer; any fractional part is skipped."""
        negative, whole, _ = self._scan_number()
        value = int(whole or "0")
        return -value if negative else value

    def read_float(self) -> float:
        """Read a decimal, keeping at most ``decimal_precision`` fractional digits."""
        negative, whole, frac = self._scan_number()
        frac = frac[: self.decimal_precision]
        value = float(f"{whole or '0'}.{frac or '0'}")
        return -value if negative else value

    def read_char(self) -> str:
        """Read the next non-whitespace character."""
        self.discard_space()
        c = self._next()
        if not c:
            raise EOFError("no more input")
        return c

    def read_bool(self) -> bool:
        """Read one character; ``'0'`` is False, anything else True."""
        return self.read_char() != "0"

    def read_str(self) -> str:
        """Read a whitespace-delimited token."""
        self.discard_space()
        chars = []
        while (c := self._peek()) and c not in _SPACE:
            chars.append(c)
            self._pos += 1
        if not chars:
            raise EOFError("no more input")
        return "".join(chars)

    def read_bits(self, length: int) -> int:
        """Read ``length`` characters as bits, the first being the most significant."""
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.discard_space()
        value = 0
        for _ in range(length):
            c = self._next()
            if not c:
                raise EOFError("no more input")
            value = (value << 1) | (c != "0")
        return value

    def read(self, kind: Any) -> Any:
        """Read one value of the given kind."""
        return self._read(kind, 0)

    def _read(self, kind: Any, offset: int) -> Any:
        if isinstance(kind, Indexed):
            values = tuple(self._read(k, offset + kind.offset) for k in kind.args)
            return values[0] if len(values) == 1 else values
        if isinstance(kind, tuple):
            return tuple(self._read(k, offset) for k in kind)
        if isinstance(kind, list):
            return [self._read(k, offset) for k in kind]
        if kind is bool:
            return self.read_bool()
        if kind is int:
            return self.read_int() - offset
        if kind is float:
            return self.read_float() - offset
        if kind is str:
            return self.read_str()
        if kind is chr:
            return self.read_char()
        if isinstance(kind, type) and issubclass(kind, (ModInt, DynamicModInt)):
            return kind(self.read_int() - offset)
        raise TypeError(f"cannot read values of kind {kind!r}")

    def __call__(self, *args: Any) -> Optional[Any]:
        """Read one value per kind; a single kind gives the value, several a tuple."""
        values = tuple(self.read(kind) for kind in args)
        return values[0] if len(values) == 1 else values