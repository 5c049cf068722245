"""Disjoint-set union structures, plain and with potential differences."""

from __future__ import annotations

import operator
from collections import defaultdict
from typing import Any, Optional

from .monoid import Add, has_inv

__all__ = ["UnionFind", "WeightedUnionFind"]


class UnionFind:
    """Disjoint-set union with path compression and union by size."""

    def __init__(self, n: int = 0) -> None:
        self._par: list[int] = [-1] * _size(n)

    def resize(self, n: int) -> None:
        """Grow or shrink to ``n`` elements; new elements are singletons."""
        n = _size(n)
        if n < len(self._par):
            del self._par[n:]
        else:
            self._par.extend([-1] * (n - len(self._par)))

    def assign(self, n: int) -> None:
        """Reset to ``n`` singleton elements."""
        self._par = [-1] * _size(n)

    def clear(self) -> None:
        """Make every element a singleton again."""
        self._par = [-1] * len(self._par)

    def __len__(self) -> int:
        return len(self._par)

    def find(self, x: int) -> int:
        """Return the representative of the group containing ``x``."""
        x = _index(x, len(self._par))
        root = x
        while self._par[root] >= 0:
            root = self._par[root]
        while x != root:
            self._par[x], x = root, self._par[x]
        return root

    def merge(self, x: int, y: int) -> bool:
        """Join the groups of ``x`` and ``y``; return False if already joined."""
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return False
        if self._par[x] > self._par[y]:
            x, y = y, x
        self._par[x] += self._par[y]
        self._par[y] = x
        return True

    def same(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same group."""
        return self.find(x) == self.find(y)

    def group_size(self, x: int) -> int:
        """Return the number of elements in the group of ``x``."""
        return -self._par[self.find(x)]

    def group_members(self, x: int) -> list[int]:
        """Return the elements in the group of ``x``, in increasing order."""
        root = self.find(x)
        return [i for i in range(len(self._par)) if self.find(i) == root]

    def roots(self) -> list[int]:
        """Return the representatives of all groups, in increasing order."""
        return [i for i, p in enumerate(self._par) if p < 0]

    def group_count(self) -> int:
        """Return the number of groups."""
        return sum(1 for p in self._par if p < 0)

    def all_group_members(self) -> dict[int, list[int]]:
        """Return a mapping from each representative to its group's elements."""
        groups: defaultdict[int, list[int]] = defaultdict(list)
        for member in range(len(self._par)):
            groups[self.find(member)].append(member)
        return dict(groups)


class WeightedUnionFind:
    """Disjoint-set union that also tracks weight differences between elements."""

    def __init__(self, n: int = 0, op: Optional[Any] = None) -> None:
        self.op = Add() if op is None else op
        n = _size(n)
        self._par: list[int] = [-1] * n
        self._diff_weight: list[Any] = [self.op.id() for _ in range(n)]

    def resize(self, n: int) -> None:
        """Grow or shrink to ``n`` elements; new elements are singletons."""
        n = _size(n)
        if n < len(self._par):
            del self._par[n:]
            del self._diff_weight[n:]
        else:
            extra = n - len(self._par)
            self._par.extend([-1] * extra)
            self._diff_weight.extend(self.op.id() for _ in range(extra))

    def assign(self, n: int) -> None:
        """Reset to ``n`` singleton elements."""
        n = _size(n)
        self._par = [-1] * n
        self._diff_weight = [self.op.id() for _ in range(n)]

    def clear(self) -> None:
        """Make every element a singleton with identity weight again."""
        self.assign(len(self._par))

    def __len__(self) -> int:
        return len(self._par)

    def find(self, x: int) -> int:
        """Return the representative of the group containing ``x``."""
        x = _index(x, len(self._par))
        path = []
        node = x
        while self._par[node] >= 0:
            path.append(node)
            node = self._par[node]
        root = node
        for node in reversed(path):
            parent = self._par[node]
            self._diff_weight[node] = self.op(self._diff_weight[node], self._diff_weight[parent])
            self._par[node] = root
        return root

    def weight(self, x: int) -> Any:
        """Return the weight of ``x`` relative to its representative."""
        self.find(x)
        return self._diff_weight[x]

    def _require_inv(self) -> None:
        if not has_inv(self.op):
            raise TypeError("operator does not have an inverse")

    def diff(self, x: int, y: int) -> Any:
        """Return the weight of ``y`` relative to ``x``."""
        self._require_inv()
        return self.op(self.weight(y), self.op.inv(self.weight(x)))

    def merge(self, x: int, y: int, w: Any) -> bool:
        """Join the groups so that the weight of ``y`` relative to ``x`` is ``w``.

        Returns False without change if they are already joined.
        """
        self._require_inv()
        op = self.op
        w = op(w, op(self.weight(x), op.inv(self.weight(y))))
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return False
        if self._par[x] > self._par[y]:
            self._par[y] += self._par[x]
            self._par[x] = y
            self._diff_weight[x] = op.inv(w)
        else:
            self._par[x] += self._par[y]
            self._par[y] = x
            self._diff_weight[y] = w
        return True

    def same(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same group."""
        return self.find(x) == self.find(y)

    def group_size(self, x: int) -> int:
        """Return the number of elements in the group of ``x``."""
        return -self._par[self.find(x)]

    def group_members(self, x: int) -> list[int]:
        """Return the elements in the group of ``x``, in increasing order."""
        root = self.find(x)
        return [i for i in range(len(self._par)) if self.find(i) == root]

    def roots(self) -> list[int]:
        """Return the representatives of all groups, in increasing order."""
        return [i for i, p in enumerate(self._par) if p < 0]

    def group_count(self) -> int:
        """Return the number of groups."""
        return sum(1 for p in self._par if p < 0)

    def all_group_members(self) -> dict[int, list[int]]:
        """Return a mapping from each representative to its group's elements."""
        groups: defaultdict[int, list[int]] = defaultdict(list)
        for member in range(len(self._par)):
            groups[self.find(member)].append(member)
        return dict(groups)


def _size(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"size must be non-negative, got {n}")
    return n


def _index(x: int, n: int) -> int:
    x = operator.index(x)
    if not 0 <= x < n:
        raise IndexError(f"element {x} out of range for size {n}")
    return x