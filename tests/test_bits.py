import pytest

from kyopro.bits import bit_len, ceil_bit, floor_bit, lzero_count, pop_count, rzero_count

SAMPLES = [1, 2, 3, 5, 7, 8, 12, 255, 256, 1023, 1024, 123456789, (1 << 62) + 17]


@pytest.mark.parametrize("k", [0, 1, 5, 31, 63])
def test_pop_count_of_all_ones(k):
    assert pop_count((1 << k) - 1) == k


def test_pop_count_zero():
    assert pop_count(0) == 0


@pytest.mark.parametrize("a,b", [(5, 3), (255, 256), (123456789, 987654321)])
def test_pop_count_inclusion_exclusion(a, b):
    assert pop_count(a | b) + pop_count(a & b) == pop_count(a) + pop_count(b)


@pytest.mark.parametrize("x", SAMPLES)
def test_bit_len_bounds(x):
    n = bit_len(x)
    assert 1 << (n - 1) <= x < 1 << n


def test_bit_len_zero():
    assert bit_len(0) == 0


@pytest.mark.parametrize("x", SAMPLES)
def test_floor_bit_bounds(x):
    n = floor_bit(x)
    assert 1 << n <= x < 1 << (n + 1)


def test_floor_bit_zero():
    assert floor_bit(0) == 0


@pytest.mark.parametrize("x", SAMPLES)
def test_ceil_bit_bounds(x):
    n = ceil_bit(x)
    assert x <= 1 << n
    assert n == 0 or 1 << (n - 1) < x


def test_ceil_bit_of_powers(k=10):
    assert ceil_bit(1 << k) == k


@pytest.mark.parametrize("x", SAMPLES)
def test_lzero_plus_bit_len_is_width(x):
    assert lzero_count(x, 64) + bit_len(x) == 64


def test_lzero_count_zero_is_zero():
    assert lzero_count(0, 32) == 0


def test_lzero_count_too_wide():
    with pytest.raises(ValueError):
        lzero_count(1 << 40, 32)


@pytest.mark.parametrize("odd", [1, 3, 5, 12345])
@pytest.mark.parametrize("k", [0, 1, 7, 20])
def test_rzero_count_shift(odd, k):
    assert rzero_count(odd << k) == k


def test_rzero_count_zero_is_width():
    assert rzero_count(0, 32) == 32


@pytest.mark.parametrize("func", [pop_count, bit_len, floor_bit, ceil_bit, lzero_count, rzero_count])
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-4)


@pytest.mark.parametrize("func", [pop_count, bit_len, floor_bit, ceil_bit])
def test_float_rejected(func):
    with pytest.raises(TypeError):
        func(2.5)