import io
from unittest import mock

import pytest

from kyopro.dynamic_modint import make_dynamic_modint
from kyopro.modint import ModInt, make_modint
from kyopro.scanner import Indexed, Scanner, idx1, indexed


def test_reads_ints_across_lines():
    scan = Scanner(io.StringIO("3 -4\n  17\n"))
    assert scan(int, int, int) == (3, -4, 17)


def test_single_kind_returns_value():
    assert Scanner("42")(int) == 42


def test_no_kinds_returns_empty_tuple():
    assert Scanner("42")() == ()


def test_read_int_skips_fraction():
    scan = Scanner("12.75 5")
    assert scan.read_int() == 12
    assert scan.read_int() == 5


def test_read_float():
    scan = Scanner("3.25 -0.5 .5")
    assert scan.read_float() == 3.25
    assert scan.read_float() == -0.5
    assert scan.read_float() == 0.5


def test_read_float_truncates_to_precision():
    scan = Scanner("1.2399 7", decimal_precision=2)
    assert scan.read_float() == pytest.approx(1.23)
    assert scan.read_int() == 7


def test_read_str_tokens():
    scan = Scanner("hello world\nfoo")
    assert scan(str, str, str) == ("hello", "world", "foo")


def test_read_char_skips_space():
    scan = Scanner(" \n ab")
    assert scan.read_char() == "a"
    assert scan(chr) == "b"
    with pytest.raises(EOFError):
        scan.read_char()


def test_read_bool():
    scan = Scanner("0 1 x")
    assert scan(bool, bool, bool) == (False, True, True)


def test_read_bits_round_trip():
    value = Scanner("1010").read_bits(4)
    assert value == 0b1010
    assert format(value, "04b") == "1010"


def test_read_bits_eof():
    with pytest.raises(EOFError):
        Scanner("10").read_bits(3)


def test_discard_space():
    scan = Scanner(" \t\n x")
    scan.discard_space()
    assert scan.read_char() == "x"


def test_list_and_tuple_kinds():
    scan = Scanner("1 2 3\n4 a 5 b")
    assert scan([int] * 3) == [1, 2, 3]
    assert scan([(int, str)] * 2) == [(4, "a"), (5, "b")]


def test_idx1_shifts_numbers():
    assert Scanner("1 5")(idx1(int, int)) == (0, 4)
    assert Scanner("3")(idx1(int)) == 2


def test_idx1_leaves_strings():
    assert Scanner("7 ab")(idx1(int, str)) == (6, "ab")


def test_indexed_offset_and_nesting():
    assert indexed(2, int) == Indexed((int,), 2)
    assert Scanner("10")(indexed(2, int)) == 8
    assert Scanner("10")(idx1(idx1(int))) == 8


def test_read_modint():
    value = Scanner("-1")(ModInt)
    assert value == ModInt(-1)
    assert int(value) == ModInt.get_mod() - 1


def test_read_other_modulus():
    m7 = make_modint(7)
    assert Scanner("10")(m7) == m7(10)


def test_read_dynamic_modint():
    cls = make_dynamic_modint(998244353)
    assert Scanner("5")(cls) == cls(5)


def test_read_pairs_of_modints():
    pairs = Scanner("1 2 3 4")([(ModInt, ModInt)] * 2)
    assert pairs == [(ModInt(1), ModInt(2)), (ModInt(3), ModInt(4))]


def test_default_stream_is_stdin():
    with mock.patch("sys.stdin", io.StringIO("9")):
        assert Scanner()(int) == 9


def test_eof_raises():
    with pytest.raises(EOFError):
        Scanner("")(int)
    with pytest.raises(EOFError):
        Scanner("   ").read_str()


def test_invalid_numbers_raise():
    with pytest.raises(ValueError):
        Scanner("abc").read_int()
    with pytest.raises(ValueError):
        Scanner("-").read_int()


def test_unknown_kind_raises():
    with pytest.raises(TypeError):
        Scanner("1")(dict)


def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        Scanner("", decimal_precision=-1)