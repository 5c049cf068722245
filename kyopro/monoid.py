"""Monoids used by the tree and union-find structures."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

__all__ = ["Add", "Mul", "Min", "Max", "has_inv"]


@dataclass(frozen=True)
class Add:
    """Addition, with 0 as identity and negation as inverse."""

    def id(self) -> Any:
        return 0

    def __call__(self, a: Any, b: Any) -> Any:
        return a + b

    def inv(self, a: Any) -> Any:
        return -a


@dataclass(frozen=True)
class Mul:
    """Multiplication, with 1 as identity and reciprocal as inverse."""

    def id(self) -> Any:
        return 1

    def __call__(self, a: Any, b: Any) -> Any:
        return a * b

    def inv(self, a: Any) -> Any:
        return 1 / a


@dataclass(frozen=True)
class Min:
    """Minimum; the identity is a value no element exceeds."""

    identity: Any = math.inf

    def id(self) -> Any:
        return self.identity

    def __call__(self, a: Any, b: Any) -> Any:
        return a if a < b else b


@dataclass(frozen=True)
class Max:
    """Maximum; the identity is a value no element falls below."""

    identity: Any = -math.inf

    def id(self) -> Any:
        return self.identity

    def __call__(self, a: Any, b: Any) -> Any:
        return a if a > b else b


def has_inv(op: Any) -> bool:
    """Return whether ``op`` provides an inverse."""
    return callable(getattr(op, "inv", None))