"""Small conveniences: recursive lambdas, chmin/chmax, nested containers, grid moves."""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, MutableMapping, MutableSequence, Sequence
from typing import Any, Union

__all__ = [
    "RecLambda",
    "chmin",
    "chmax",
    "make_vec",
    "make_array",
    "BESIDE",
    "AROUND",
]

BESIDE: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))
AROUND: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
)

Container = Union[MutableSequence, MutableMapping]


class RecLambda:
    """Wrap a function that receives itself as its first argument."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func

    def __call__(self, *args: Any) -> Any:
        return self.func(self, *args)


def chmin(container: Container, key: Any, value: Any) -> bool:
    """Lower ``container[key]`` to ``value`` if larger; return whether it changed."""
    if container[key] > value:
        container[key] = value
        return True
    return False


def chmax(container: Container, key: Any, value: Any) -> bool:
    """Raise ``container[key]`` to ``value`` if smaller; return whether it changed."""
    if container[key] < value:
        container[key] = value
        return True
    return False


def _dimensions(dims: Sequence[int]) -> tuple[int, ...]:
    sizes = tuple(operator.index(d) for d in dims)
    for d in sizes:
        if d < 0:
            raise ValueError(f"dimension must be non-negative, got {d}")
    return sizes


def make_vec(dims: Sequence[int], init: Any = 0) -> Any:
    """Build nested lists of the given shape, each leaf an independent copy of ``init``."""
    sizes = _dimensions(dims)

    def build(level: int) -> Any:
        if level == len(sizes):
            return copy.deepcopy(init)
        return [build(level + 1) for _ in range(sizes[level])]

    return build(0)


def make_array(dims: Sequence[int], init: Any = 0) -> Any:
    """Build nested tuples of the given fixed shape filled with ``init``."""
    sizes = _dimensions(dims)

    def build(level: int) -> Any:
        if level == len(sizes):
            return init
        inner = build(level + 1)
        return tuple(inner for _ in range(sizes[level]))

    return build(0)