import pytest

from kyopro.dynamic_modint import DynamicModInt, make_dynamic_modint
from kyopro.modint import ModInt

MOD = ModInt.get_mod()
BIG_PRIME = 2**61 - 1
WIDE_MOD = 2**64 - 59


def test_unset_base_class_raises():
    with pytest.raises(RuntimeError):
        DynamicModInt(1)
    with pytest.raises(RuntimeError):
        DynamicModInt.get_mod()


@pytest.mark.parametrize("x", [-5, 0, 1, MOD, 10**18])
def test_round_trip(x):
    D = make_dynamic_modint(MOD)
    assert D.get_mod() == MOD
    assert int(D(x)) == x % MOD


def test_large_prime():
    D = make_dynamic_modint(BIG_PRIME)
    for a in (2, 3, BIG_PRIME - 1, 10**17):
        assert D(a).pow(BIG_PRIME - 1) == 1
        assert D(a) * D(a).inv() == 1
        assert int(D(a).pow(12345)) == pow(a, 12345, BIG_PRIME)


def test_wide_modulus():
    D = make_dynamic_modint(WIDE_MOD)
    for a, b in ((WIDE_MOD - 1, WIDE_MOD - 2), (2**63, 2**63 + 1)):
        assert int(D(a) * D(b)) == a * b % WIDE_MOD
        assert int(D(a) + D(b)) == (a + b) % WIDE_MOD
        assert int(D(a).pow(1000)) == pow(a, 1000, WIDE_MOD)


def test_independent_classes():
    D7 = make_dynamic_modint(7)
    D11 = make_dynamic_modint(11)
    assert D7.get_mod() == 7
    assert D11.get_mod() == 11
    assert int(D7(20)) == 20 % 7
    assert int(D11(20)) == 20 % 11
    with pytest.raises(TypeError):
        D7(1) + D11(1)
    assert (D7(1) == D11(1)) is False


def test_set_mod_changes_modulus():
    D = make_dynamic_modint(7)
    D.set_mod(13)
    assert D.get_mod() == 13
    assert int(D(20)) == 20 % 13


def test_even_modulus_rejected():
    D = make_dynamic_modint(7)
    with pytest.raises(ValueError):
        D.set_mod(10)
    with pytest.raises(ValueError):
        make_dynamic_modint(4)


def test_zero_inverse():
    D = make_dynamic_modint(MOD)
    with pytest.raises(ZeroDivisionError):
        D(0).inv()
    with pytest.raises(ZeroDivisionError):
        D(1) / D(MOD)


def test_negation():
    D = make_dynamic_modint(MOD)
    for a in (0, 1, 99, MOD - 1):
        assert D(a) + (-D(a)) == 0
        assert int(-D(a)) == (-a) % MOD


def test_raw():
    D = make_dynamic_modint(MOD)
    assert int(D.raw(5)) == 5
    with pytest.raises(ValueError):
        D.raw(MOD)


def test_eq_and_hash_with_int():
    D = make_dynamic_modint(MOD)
    assert D(MOD + 3) == 3
    assert hash(D(-1)) == hash(MOD - 1)
    assert len({D(1), D(1 + MOD)}) == 1


def test_pow_negative_exponent():
    D = make_dynamic_modint(MOD)
    with pytest.raises(ValueError):
        D(2).pow(-1)
    assert D(2) ** -1 == D(2).inv()


def test_int_on_left():
    D = make_dynamic_modint(MOD)
    assert 10 - D(3) == D(10) - D(3)
    assert 2 / D(4) * 4 == D(2)
    assert 3 * D(5) == D(5) * 3