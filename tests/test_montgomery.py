import pytest

from kyopro.montgomery import Barrett, Montgomery

MODS = [3, 998244353, 1000000007, 2**61 - 1]


@pytest.mark.parametrize("mod", MODS)
def test_round_trip(mod):
    mg = Montgomery(mod)
    for x in (0, 1, mod // 2, mod - 1):
        assert mg.inv_transform(mg.transform(x)) == x


@pytest.mark.parametrize("mod", MODS)
def test_transform_scales_by_radix(mod):
    mg = Montgomery(mod)
    for x in (1, 2, mod - 1):
        assert mg.transform(x) % mod == x * 2**64 % mod
        assert mg.transform(x) < 2 * mod


@pytest.mark.parametrize("mod", MODS)
def test_multiplication_in_montgomery_form(mod):
    mg = Montgomery(mod)
    for a, b in ((2, 3), (mod - 1, mod - 1), (mod // 3, mod // 7)):
        product = mg.reduce(mg.transform(a) * mg.transform(b))
        assert mg.inv_transform(product) == a * b % mod


@pytest.mark.parametrize("mod", MODS)
def test_reduce_invariant(mod):
    mg = Montgomery(mod)
    for x in (0, 1, mod, mod * 12345, mod * (2**64 - 1)):
        y = mg.reduce(x)
        assert y < 2 * mod
        assert y * 2**64 % mod == x % mod


def test_set_mod_switches_modulus():
    mg = Montgomery(7)
    mg.set_mod(11)
    assert mg.mod == 11
    assert [mg.inv_transform(mg.transform(x)) for x in range(11)] == list(range(11))


def test_small_radix():
    mg = Montgomery(5, bits=8)
    assert [mg.inv_transform(mg.transform(x)) for x in range(5)] == list(range(5))


@pytest.mark.parametrize("mod", [0, -3, 4, 1 << 64])
def test_invalid_modulus(mod):
    with pytest.raises(ValueError):
        Montgomery(mod)


def test_invalid_bits():
    with pytest.raises(ValueError):
        Montgomery(7, bits=0)


def test_negative_reduce_rejected():
    with pytest.raises(ValueError):
        Montgomery(7).reduce(-1)


@pytest.mark.parametrize("mod", [1, 2, 7, 998244353, 2**63 + 1, 2**64 - 1])
def test_barrett_matches_remainder(mod):
    br = Barrett(mod)
    for x in (0, 1, mod - 1, mod, 123456789123, 2**64 - 1):
        if x < 2**64:
            assert br.reduce(x) == x % mod


def test_barrett_set_mod():
    br = Barrett(7)
    br.set_mod(10)
    assert br.mod == 10
    assert br.reduce(123) == 123 % 10


@pytest.mark.parametrize("mod", [0, -1, 1 << 64])
def test_barrett_invalid_modulus(mod):
    with pytest.raises(ValueError):
        Barrett(mod)


@pytest.mark.parametrize("x", [-1, 1 << 64])
def test_barrett_value_out_of_range(x):
    with pytest.raises(ValueError):
        Barrett(7).reduce(x)