"""Binary indexed tree over a monoid."""

from __future__ import annotations

import operator
from typing import Any, Optional

from .monoid import Add, has_inv

__all__ = ["FenwickTree"]


class FenwickTree:
    """Binary indexed tree supporting point updates and prefix products."""

    def __init__(self, n: int = 0, op: Optional[Any] = None) -> None:
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.op = Add() if op is None else op
        self._tree = [self.op.id() for _ in range(n)]

    def __len__(self) -> int:
        return len(self._tree)

    def _check_index(self, p: int) -> int:
        p = operator.index(p)
        if not 0 <= p < len(self._tree):
            raise IndexError(f"index {p} out of range for size {len(self._tree)}")
        return p

    def _check_bound(self, r: int) -> int:
        r = operator.index(r)
        if not 0 <= r <= len(self._tree):
            raise IndexError(f"bound {r} out of range for size {len(self._tree)}")
        return r

    def _require_inv(self) -> None:
        if not has_inv(self.op):
            raise TypeError("operator does not have an inverse")

    def apply(self, p: int, x: Any) -> None:
        """Combine ``x`` into the element at ``p``."""
        p = self._check_index(p) + 1
        n = len(self._tree)
        while p <= n:
            self._tree[p - 1] = self.op(self._tree[p - 1], x)
            p += p & -p

    def set(self, p: int, x: Any) -> None:
        """Replace the element at ``p`` with ``x``; the operator must be invertible."""
        self._require_inv()
        self.apply(p, self.op(x, self.op.inv(self.get(p))))

    def get(self, p: int) -> Any:
        """Return the element at ``p``; the operator must be invertible."""
        self._require_inv()
        p = self._check_index(p)
        return self.op(self.prefix_prod(p + 1), self.op.inv(self.prefix_prod(p)))

    def prefix_prod(self, r: int) -> Any:
        """Return the product of the elements in ``[0, r)``."""
        r = self._check_bound(r)
        s = self.op.id()
        while r > 0:
            s = self.op(s, self._tree[r - 1])
            r -= r & -r
        return s

    def prod(self, l: int, r: int) -> Any:
        """Return the product of the elements in ``[l, r)``; the operator must be invertible."""
        self._require_inv()
        l = self._check_bound(l)
        r = self._check_bound(r)
        if l > r:
            raise IndexError(f"empty range bounds reversed: {l} > {r}")
        return self.op(self.prefix_prod(r), self.op.inv(self.prefix_prod(l)))

    def all_prod(self) -> Any:
        """Return the product of all elements."""
        return self.prefix_prod(len(self._tree))