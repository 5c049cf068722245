"""Formatted output of numbers, strings and nested values."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Iterable, Mapping
from typing import Any, Optional, TextIO

from .arith import DECIMAL_PRECISION
from .dynamic_modint import DynamicModInt
from .modint import ModInt
from .scanner import Indexed

__all__ = ["format_number", "Printer", "yes_no"]


def _precision(decimal_precision: int) -> int:
    precision = operator.index(decimal_precision)
    if precision < 0:
        raise ValueError(f"decimal precision must be non-negative, got {precision}")
    return precision


def format_number(value: Any, decimal_precision: int = DECIMAL_PRECISION) -> str:
    """Render a number; floats get exactly ``decimal_precision`` truncated fractional digits.

    Booleans render as ``0`` or ``1``; modular integers as their value.
    Infinities and NaN render as ``inf``, ``-inf`` and ``nan``.
    """
    precision = _precision(decimal_precision)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (ModInt, DynamicModInt)):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        sign = "-" if value < 0 else ""
        magnitude = abs(value)
        whole = int(magnitude)
        frac = magnitude - whole
        digits = []
        for _ in range(precision):
            frac *= 10
            digit = int(frac)
            digits.append(str(digit % 10))
            frac -= digit
        return f"{sign}{whole}.{''.join(digits)}"
    raise TypeError(f"cannot format value of type {type(value).__name__} as a number")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, ModInt, DynamicModInt))


def _is_nested(value: Any) -> bool:
    """Whether ``value`` is a tuple or a collection, which ends the line after it."""
    if isinstance(value, Indexed) or _is_number(value):
        return False
    return isinstance(value, Iterable)


class Printer:
    """Write values to a text stream, separated and terminated as configured.

    With ``space`` values are separated by a blank, with ``line`` each call
    ends with a newline. ``debug`` adds commas, quotes around strings and
    braces around collections; ``comment`` starts each call with ``# ``.
    Elements of a collection that are themselves tuples, collections or
    strings each end a line. A stream of None means standard output at the
    time of writing.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        space: bool = True,
        line: bool = True,
        debug: bool = False,
        comment: bool = False,
        flush: bool = False,
        decimal_precision: int = DECIMAL_PRECISION,
    ) -> None:
        self.stream = stream
        self.space = space
        self.line = line
        self.debug = debug
        self.comment = comment
        self.flush = flush
        self.decimal_precision = _precision(decimal_precision)

    @property
    def _out(self) -> TextIO:
        return sys.stdout if self.stream is None else self.stream

    def write(self, text: str) -> None:
        """Write ``text`` unchanged."""
        self._out.write(text)

    def _sep(self) -> str:
        return ("," if self.debug else "") + (" " if self.space else "")

    def _end(self) -> str:
        return ("," if self.debug else "") + ("\n" if self.line else "")

    def _comment_mark(self) -> str:
        return "# " if self.comment else ""

    def _sep_after(self, element: Any) -> str:
        if _is_nested(element):
            return self._end() + self._comment_mark()
        return self._sep()

    def _emit(self, parts: list[str], value: Any, offset: int) -> None:
        if isinstance(value, Indexed):
            self._emit_items(parts, value.args, offset + value.offset)
        elif isinstance(value, bool):
            parts.append("1" if value else "0")
        elif isinstance(value, str):
            parts.append(f'"{value}"' if self.debug else value)
        elif isinstance(value, (ModInt, DynamicModInt)):
            parts.append(format_number(int(value) + offset, self.decimal_precision))
        elif isinstance(value, (int, float)):
            shifted = value + offset if offset else value
            parts.append(format_number(shifted, self.decimal_precision))
        elif isinstance(value, Mapping):
            self._emit_items(parts, list(value.items()), offset)
        elif isinstance(value, Iterable):
            self._emit_items(parts, list(value), offset)
        else:
            raise TypeError(f"cannot print value of type {type(value).__name__}")

    def _emit_items(self, parts: list[str], items: Any, offset: int) -> None:
        if self.debug:
            parts.append("{")
        for i, element in enumerate(items):
            if i:
                parts.append(self._sep_after(items[i - 1]))
            self._emit(parts, element, offset)
        if self.debug:
            parts.append("}")

    def __call__(self, *args: Any) -> None:
        """Write ``args`` separated, then the terminator."""
        parts = [self._comment_mark()]
        for i, value in enumerate(args):
            if i:
                parts.append(self._sep())
            self._emit(parts, value, 0)
        parts.append(self._end())
        out = self._out
        out.write("".join(parts))
        if self.flush:
            out.flush()


def yes_no(flag: bool, stream: Optional[TextIO] = None) -> None:
    """Write ``Yes`` or ``No`` and a newline."""
    out = sys.stdout if stream is None else stream
    out.write("Yes\n" if flag else "No\n")