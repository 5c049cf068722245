# kyopro

A small toolkit for competitive programming, built on the standard library
alone: bit helpers, integer and modular arithmetic, prime testing and
factorisation, union-find, Fenwick and segment trees, a token reader, a
formatted printer and a command that solves a handful of judge problems.

## Installation

```
pip install .
```

Install the test dependencies with `pip install ".[test]"` and run `pytest`.

## Modules

| Module | Contents |
| --- | --- |
| `kyopro.bits` | `pop_count`, `lzero_count`, `rzero_count`, `bit_len`, `floor_bit`, `ceil_bit` |
| `kyopro.arith` | `floor_div`, `ceil_div`, `floor_mod`, `ceil_mod`, `power`, and constants such as `MOD`, `INF`, `EPS`, `PI` |
| `kyopro.monoid` | `Add`, `Mul`, `Min`, `Max` and `has_inv` |
| `kyopro.utils` | `RecLambda`, `chmin`, `chmax`, `make_vec`, `make_array`, grid moves `BESIDE` and `AROUND` |
| `kyopro.algorithms` | `hash_value`, `compress`, `contains`, `count_all`, `next_combination` |
| `kyopro.fenwick` | `FenwickTree` |
| `kyopro.segtree` | `SegmentTree`, with `max_right` and `min_left` binary search |
| `kyopro.unionfind` | `UnionFind`, `WeightedUnionFind` |
| `kyopro.montgomery` | `Montgomery` and `Barrett` reduction |
| `kyopro.modint` | `ModInt`, `make_modint`, `BinomMod` |
| `kyopro.dynamic_modint` | `DynamicModInt`, `make_dynamic_modint` |
| `kyopro.primes` | `divisors`, `euler_phi`, `is_prime`, `pollard_rho`, `find_factor`, `factorize` |
| `kyopro.scanner` | `Scanner`, `Indexed`, `indexed`, `idx1` |
| `kyopro.printer` | `Printer`, `format_number`, `yes_no` |
| `kyopro.cli` | solvers for six judge problems and the `kyopro` command |

## Examples

Union-find:

```python
from kyopro.unionfind import UnionFind

uf = UnionFind(5)
uf.merge(0, 1)
uf.merge(3, 4)
print(uf.same(0, 1), uf.same(1, 3))   # True False
print(uf.group_count())                # 3
```

`WeightedUnionFind(n)` additionally keeps differences: after
`merge(x, y, w)`, `diff(x, y)` returns `w`.

Range sums with a Fenwick tree:

```python
from kyopro.fenwick import FenwickTree
from kyopro.monoid import Add

ft = FenwickTree(5, Add())
for i, v in enumerate([1, 2, 3, 4, 5]):
    ft.apply(i, v)
print(ft.prod(1, 4))   # 9
```

Segment tree over the minimum:

```python
from kyopro.monoid import Min
from kyopro.segtree import SegmentTree

seg = SegmentTree([5, 3, 8, 1, 9], Min())
print(seg.prod(0, 3))   # 3
seg.set(1, 7)
print(seg.all_prod())   # 1
```

Arithmetic modulo a prime:

```python
from kyopro.modint import make_modint

Mint = make_modint(998244353)
a = Mint(3)
print(int(a.inv() * a))      # 1
print(int(Mint(2).pow(10)))  # 1024
```

`make_dynamic_modint(mod)` gives a class whose odd modulus is chosen at run
time and can be changed with `set_mod`; values are kept in Montgomery form.

Primes:

```python
from kyopro.primes import divisors, factorize, is_prime

print(is_prime(998244353))   # True
print(factorize(360))        # [2, 2, 2, 3, 3, 5]
print(divisors(12))          # [1, 2, 3, 4, 6, 12]
```

Coordinate compression and combinations:

```python
from kyopro.algorithms import compress, next_combination

print(compress([30, 10, 20, 10]))   # {10: 0, 20: 1, 30: 2}

seq = [1, 2, 3, 4]
while True:
    print(seq[:2])
    if not next_combination(seq, 2):
        break
```

Reading and writing:

```python
import io
from kyopro.printer import Printer
from kyopro.scanner import Scanner, idx1

scan = Scanner("3 4\n1 2 3\n")
n, m = scan(int, int)            # 3, 4
values = scan.read([int] * 3)    # [1, 2, 3]

out = io.StringIO()
println = Printer(out)
println(n + m, values)           # writes "7 1 2 3\n"
```

`Scanner.read` accepts `int`, `float`, `str`, `bool`, `chr`, a ModInt or
DynamicModInt class, tuples and lists of these, and `idx1(...)`, which reads
one-based numbers as zero-based. `Printer` takes `space`, `line`, `debug`,
`comment`, `flush` and `decimal_precision` options; floats are printed with
exactly `decimal_precision` truncated digits (12 by default).

## Command line

Installing the package provides the `kyopro` command. It reads a problem's
input from standard input and writes the answers to standard output:

```
kyopro unionfind < input.txt
```

The accepted problem names are `factorize`, `many_aplusb`,
`point_add_range_sum`, `point_set_range_composite`, `unionfind` and
`weighted_union_find`; `kyopro --help` lists them. The same solvers are
available in `kyopro.cli` as `run_factorize`, `run_many_aplusb`,
`run_point_add_range_sum`, `run_point_set_range_composite`, `run_unionfind`
and `run_weighted_union_find`, each taking an input and an output text stream.

## Limits

- `is_prime`, `pollard_rho`, `find_factor` and `factorize` work on integers
  below 2**64 and raise `ValueError` beyond that.
- `Montgomery` and `DynamicModInt` need an odd modulus; `DynamicModInt.inv`
  assumes the modulus is prime.
- `FenwickTree.get`, `set` and `prod`, and `WeightedUnionFind.merge` and
  `diff`, need an operator with an inverse (`Add` or `Mul`) and raise
  `TypeError` otherwise.