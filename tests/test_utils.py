import math

import pytest

from kyopro.utils import AROUND, BESIDE, RecLambda, chmax, chmin, make_array, make_vec


def test_rec_lambda_factorial():
    fact = RecLambda(lambda self, n: 1 if n <= 1 else n * self(n - 1))
    assert fact(10) == math.factorial(10)


def test_rec_lambda_multiple_args():
    gcd = RecLambda(lambda self, a, b: a if b == 0 else self(b, a % b))
    assert gcd(84, 36) == math.gcd(84, 36)


def test_chmin_list():
    data = [5, 9]
    assert chmin(data, 0, 3) is True
    assert data[0] == 3
    assert chmin(data, 0, 4) is False
    assert data[0] == 3


def test_chmax_dict():
    data = {"best": 5}
    assert chmax(data, "best", 8) is True
    assert data["best"] == 8
    assert chmax(data, "best", 8) is False
    assert data["best"] == 8


def test_chmin_missing_key():
    with pytest.raises(KeyError):
        chmin({}, "x", 1)


def test_make_vec_shape():
    grid = make_vec((3, 4, 2), 7)
    assert len(grid) == 3
    assert all(len(row) == 4 for row in grid)
    assert all(cell == [7, 7] for row in grid for cell in row)


def test_make_vec_independent_leaves():
    grid = make_vec((2, 2), [])
    grid[0][0].append(1)
    assert grid[0][1] == []
    assert grid[1][0] == []


def test_make_vec_rows_independent():
    grid = make_vec((2, 3))
    grid[0][1] = 5
    assert grid[1] == [0, 0, 0]


def test_make_vec_no_dims():
    assert make_vec((), 42) == 42


def test_make_vec_negative():
    with pytest.raises(ValueError):
        make_vec((2, -1))


def test_make_array_shape():
    arr = make_array((2, 3), 1)
    assert arr == ((1, 1, 1), (1, 1, 1))
    with pytest.raises(TypeError):
        arr[0][0] = 2


def test_make_array_no_dims():
    assert make_array((), "x") == "x"


def test_beside_moves_mark_plus_shape():
    grid = make_vec((3, 3), 0)
    for dx, dy in BESIDE:
        grid[1 + dx][1 + dy] += 1
    assert grid == [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert [tuple(m) for m in BESIDE] == [(-1, 0), (0, -1), (1, 0), (0, 1)]


def test_around_moves_mark_ring():
    grid = make_vec((3, 3), 0)
    for dx, dy in AROUND:
        grid[1 + dx][1 + dy] += 1
    assert grid == [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert {tuple(m) for m in BESIDE} <= {tuple(m) for m in AROUND}