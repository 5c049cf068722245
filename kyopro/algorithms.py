"""General algorithms: structural hashing, coordinate compression, counting, combinations."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import (
    Callable,
    Hashable,
    Iterable,
    Mapping,
    MutableSequence,
    Sized,
)
from typing import Any, Optional

__all__ = [
    "hash_value",
    "compress",
    "contains",
    "count_all",
    "next_combination",
]

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B97F4A7C15


def _mix(seed: int, h: int) -> int:
    return (seed ^ ((h + _GOLDEN + ((seed << 12) & _MASK) + (seed >> 4)) & _MASK)) & _MASK


def hash_value(a: Any) -> int:
    """Return a 64-bit hash of ``a`` that also covers tuples, sequences and strings.

    Integers hash to themselves modulo 2**64. Tuples are combined from the
    last element to the first, other sized iterables from first to last,
    both seeded with their length. Mappings are hashed as their items.
    """
    if isinstance(a, int):
        return a & _MASK
    if isinstance(a, str):
        if len(a) == 1:
            return ord(a)
        seed = len(a)
        for ch in a:
            seed = _mix(seed, ord(ch))
        return seed
    if isinstance(a, tuple):
        seed = len(a)
        for element in reversed(a):
            seed = _mix(seed, hash_value(element))
        return seed
    if isinstance(a, Mapping):
        seed = len(a)
        for item in a.items():
            seed = _mix(seed, hash_value(item))
        return seed
    if isinstance(a, Sized) and isinstance(a, Iterable):
        seed = len(a)
        for element in a:
            seed = _mix(seed, hash_value(element))
        return seed
    if isinstance(a, Hashable):
        return hash(a) & _MASK
    raise TypeError(f"cannot hash value of type {type(a).__name__}")


def compress(
    values: Iterable[Any],
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> dict[Any, int]:
    """Map each distinct value to its rank among the distinct values in sorted order."""
    distinct = sorted(dict.fromkeys(values), key=key, reverse=reverse)
    return {value: rank for rank, value in enumerate(distinct)}


def contains(container: Any, value: Any) -> bool:
    """Return whether ``value`` is a key of a mapping or an element of a collection."""
    if isinstance(container, str):
        return len(value) == 1 and value in container if isinstance(value, str) else False
    try:
        return value in container
    except TypeError:
        return any(element == value for element in container)


def count_all(values: Iterable[Any]) -> Counter:
    """Return a mapping from each value to the number of times it occurs."""
    return Counter(values)


def _rotate(seq: MutableSequence, first: int, middle: int, last: int) -> None:
    seq[first:last] = list(seq[middle:last]) + list(seq[first:middle])


def next_combination(seq: MutableSequence, k: int) -> bool:
    """Rearrange ``seq`` so its first ``k`` items form the next combination.

    Starting from a sorted sequence, repeated calls enumerate the
    ``k``-combinations in lexicographic order. Returns False once the last
    combination has been passed, leaving the sequence sorted again.
    """
    k = operator.index(k)
    n = len(seq)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}, got {k}")
    if n == 0 or k == 0 or k == n:
        return False
    src = k
    while src != 0:
        src -= 1
        if seq[src] < seq[n - 1]:
            dest = k
            while seq[src] >= seq[dest]:
                dest += 1
            seq[src], seq[dest] = seq[dest], seq[src]
            _rotate(seq, src + 1, dest + 1, n)
            _rotate(seq, k, k + (n - dest) - 1, n)
            return True
    _rotate(seq, 0, k, n)
    return False