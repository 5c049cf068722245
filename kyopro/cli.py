"""Solvers for a few judge problems, built on the package's structures."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Optional, TextIO

from .fenwick import FenwickTree
from .modint import make_modint
from .primes import factorize
from .printer import Printer
from .scanner import Scanner
from .segtree import SegmentTree
from .unionfind import UnionFind, WeightedUnionFind

__all__ = [
    "run_weighted_union_find",
    "run_factorize",
    "run_many_aplusb",
    "run_point_add_range_sum",
    "run_point_set_range_composite",
    "run_unionfind",
    "main",
]

_Mint = make_modint(998244353)


def _io(inp: Optional[TextIO], out: Optional[TextIO]) -> tuple[Scanner, Printer]:
    return Scanner(sys.stdin if inp is None else inp), Printer(sys.stdout if out is None else out)


def run_weighted_union_find(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Answer relate/diff queries on weighted sets."""
    scan, println = _io(inp, out)
    n, q = scan(int, int)
    wuf = WeightedUnionFind(n)
    for _ in range(q):
        if scan(int) == 0:
            x, y, z = scan(int, int, int)
            wuf.merge(x, y, z)
        else:
            x, y = scan(int, int)
            if wuf.same(x, y):
                println(wuf.diff(x, y))
            else:
                println("?")


def run_factorize(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Print the count and list of prime factors of each number."""
    scan, println = _io(inp, out)
    q = scan(int)
    for _ in range(q):
        res = factorize(scan(int))
        println(len(res), res)


def run_many_aplusb(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Print the sum of each pair."""
    scan, println = _io(inp, out)
    t = scan(int)
    for _ in range(t):
        a, b = scan(int, int)
        println(a + b)


def run_point_add_range_sum(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Answer point-add and range-sum queries."""
    scan, println = _io(inp, out)
    n, q = scan(int, int)
    ft = FenwickTree(n)
    for i in range(n):
        ft.apply(i, scan(int))
    for _ in range(q):
        t, x, y = scan(int, int, int)
        if t == 0:
            ft.apply(x, y)
        else:
            println(ft.prod(x, y))


class _AffineCompose:
    """Composition of affine maps ``x -> a * x + b``, applying the left one first."""

    def id(self) -> tuple[Any, Any]:
        return (_Mint(1), _Mint(0))

    def __call__(self, f: tuple[Any, Any], g: tuple[Any, Any]) -> tuple[Any, Any]:
        return (f[0] * g[0], f[1] * g[0] + g[1])


def run_point_set_range_composite(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Answer point-set and range-composite queries on affine maps modulo 998244353."""
    scan, println = _io(inp, out)
    n, q = scan(int, int)
    ab = scan.read([(_Mint, _Mint)] * n)
    seg = SegmentTree(ab, _AffineCompose())
    for _ in range(q):
        if scan(int) == 0:
            p, c, d = scan(int, int, int)
            seg.set(p, (_Mint(c), _Mint(d)))
        else:
            l, r, x = scan(int, int, int)
            a, b = seg.prod(l, r)
            println(a * x + b)


def run_unionfind(inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Answer merge and same-set queries."""
    scan, println = _io(inp, out)
    n, q = scan(int, int)
    uf = UnionFind(n)
    for _ in range(q):
        t, u, v = scan(int, int, int)
        if t == 0:
            uf.merge(u, v)
        else:
            println(uf.same(u, v))


_COMMANDS: dict[str, Callable[[Optional[TextIO], Optional[TextIO]], None]] = {
    "weighted_union_find": run_weighted_union_find,
    "factorize": run_factorize,
    "many_aplusb": run_many_aplusb,
    "point_add_range_sum": run_point_add_range_sum,
    "point_set_range_composite": run_point_set_range_composite,
    "unionfind": run_unionfind,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Solve the named problem from standard input to standard output."""
    parser = argparse.ArgumentParser(prog="kyopro", description="Solve a judge problem from standard input.")
    parser.add_argument("problem", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    _COMMANDS[args.problem](sys.stdin, sys.stdout)
    return 0