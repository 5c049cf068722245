"""Segment tree over a monoid, with binary search on prefixes and suffixes."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, Optional

from .bits import ceil_bit
from .monoid import Add

__all__ = ["SegmentTree"]


class SegmentTree:
    """Segment tree supporting point assignment and range products."""

    def __init__(self, values: Iterable[Any] = (), op: Optional[Any] = None) -> None:
        self.op = Add() if op is None else op
        items = list(values)
        self._n = len(items)
        self._log = ceil_bit(self._n)
        self._size = 1 << self._log
        self._tree = [self.op.id() for _ in range(2 * self._size)]
        self._tree[self._size:self._size + self._n] = items
        for k in range(self._size - 1, 0, -1):
            self._update(k)

    def _update(self, k: int) -> None:
        self._tree[k] = self.op(self._tree[2 * k], self._tree[2 * k + 1])

    def __len__(self) -> int:
        return self._n

    def _check_index(self, p: int) -> int:
        p = operator.index(p)
        if not 0 <= p < self._n:
            raise IndexError(f"index {p} out of range for size {self._n}")
        return p

    def _check_bound(self, r: int) -> int:
        r = operator.index(r)
        if not 0 <= r <= self._n:
            raise IndexError(f"bound {r} out of range for size {self._n}")
        return r

    def set(self, p: int, x: Any) -> None:
        """Replace the element at ``p`` with ``x``."""
        p = self._check_index(p) + self._size
        self._tree[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> Any:
        """Return the element at ``p``."""
        return self._tree[self._check_index(p) + self._size]

    def prefix_prod(self, r: int) -> Any:
        """Return the product of the elements in ``[0, r)``."""
        return self.prod(0, r)

    def prod(self, l: int, r: int) -> Any:
        """Return the product of the elements in ``[l, r)``, in order."""
        l = self._check_bound(l)
        r = self._check_bound(r)
        if l > r:
            raise IndexError(f"range bounds reversed: {l} > {r}")
        op = self.op
        sl = op.id()
        sr = op.id()
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                sl = op(sl, self._tree[l])
                l += 1
            if r & 1:
                r -= 1
                sr = op(self._tree[r], sr)
            l >>= 1
            r >>= 1
        return op(sl, sr)

    def all_prod(self) -> Any:
        """Return the product of all elements."""
        return self._tree[1]

    def max_right(self, l: int, func: Callable[[Any], bool]) -> int:
        """Return the largest ``r`` such that ``func(prod(l, r))`` holds.

        ``func`` must hold for the identity and be monotone.
        """
        l = self._check_bound(l)
        if l == self._n:
            return self._n
        op = self.op
        tree = self._tree
        l += self._size
        s = op.id()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not func(op(s, tree[l])):
                while l < self._size:
                    l *= 2
                    if func(op(s, tree[l])):
                        s = op(s, tree[l])
                        l += 1
                return l - self._size
            s = op(s, tree[l])
            l += 1
            if (l & -l) == l:
                break
        return self._n

    def min_left(self, r: int, func: Callable[[Any], bool]) -> int:
        """Return the smallest ``l`` such that ``func(prod(l, r))`` holds.

        ``func`` must hold for the identity and be monotone.
        """
        r = self._check_bound(r)
        if r == 0:
            return 0
        op = self.op
        tree = self._tree
        r += self._size
        s = op.id()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not func(op(tree[r], s)):
                while r < self._size:
                    r = 2 * r + 1
                    if func(op(tree[r], s)):
                        s = op(tree[r], s)
                        r -= 1
                return r + 1 - self._size
            s = op(tree[r], s)
            if (r & -r) == r:
                break
        return 0