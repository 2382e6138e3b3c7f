"""Tests for the arbitrary-precision integer ring."""

import pytest

from rings import ZZ, ParseError, NotInvertibleError, power, rng


def test_add_sub_mul():
    a, b = ZZ(12), ZZ(-5)
    assert a + b == 7
    assert a - b == 17
    assert a * b == -60


def test_operators_do_not_mutate_operands():
    a, b = ZZ(3), ZZ(4)
    c = a + b
    assert a == 3 and b == 4 and c == 7


def test_in_place_primitives():
    a = ZZ(10)
    assert a.iadd(5) is a
    a.isub(ZZ(3)).imul(2)
    assert a == 24


def test_mixed_with_int():
    assert 3 + ZZ(4) == 7
    assert 10 - ZZ(4) == 6
    assert 2 * ZZ(21) == 42
    assert isinstance(3 + ZZ(4), ZZ)


def test_floor_division_and_remainder():
    assert ZZ(7) // ZZ(2) == 3
    assert ZZ(-7) // ZZ(2) == -4
    assert ZZ(-7) % ZZ(2) == 1
    assert ZZ(7) % ZZ(-2) == -1
    assert ZZ(7) // ZZ(-2) == -4


def test_divmod():
    q, r = divmod(ZZ(-17), ZZ(5))
    assert (q, r) == (-4, 3)
    assert q * 5 + r == -17


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        ZZ(5) // ZZ(0)
    with pytest.raises(ZeroDivisionError):
        ZZ(5) % 0


def test_native_floor_division():
    result = 100 // ZZ(7)
    assert result == 14
    assert type(result) is int
    assert -100 // ZZ(7) == -15


def test_power():
    assert ZZ(2) ** 100 == 1 << 100
    assert ZZ(-3) ** 3 == -27
    assert ZZ(5) ** 0 == 1


def test_negative_power_of_unit():
    assert ZZ(-1) ** -3 == -1
    assert ZZ(1) ** -5 == 1


def test_negative_power_of_non_unit():
    with pytest.raises(NotInvertibleError):
        ZZ(2) ** -1


def test_three_argument_pow():
    assert pow(ZZ(3), 4, ZZ(7)) == 81 % 7
    assert pow(ZZ(3), -1, 7) == 5
    with pytest.raises(NotInvertibleError):
        pow(ZZ(6), -1, 9)


def test_increment_decrement():
    a = ZZ(-1)
    a.increment()
    assert a == 0
    a.decrement().decrement()
    assert a == -2


def test_ordering():
    assert ZZ(1) < ZZ(2) <= ZZ(2) < 3
    assert ZZ(-5) > -6
    assert ZZ(10) >= 10
    assert sorted([ZZ(3), ZZ(-1), ZZ(2)]) == [-1, 2, 3]


def test_bit_test():
    a = ZZ(0b1011)
    assert [a[i] for i in range(5)] == [True, True, False, True, False]


def test_bit_length():
    assert ZZ(0).bit_length() == 0
    assert ZZ(1).bit_length() == 1
    assert ZZ(255).bit_length() == 8
    assert ZZ(256).bit_length() == 9
    assert ZZ(-256).bit_length() == 9


def test_shifts():
    assert ZZ(3) << 4 == 48
    assert ZZ(-7) >> 1 == -4


def test_identities():
    assert ZZ.zero() == 0
    assert ZZ.one() == 1
    assert ZZ.zero() is not ZZ.zero()
    assert ZZ(5).one() == 1


def test_identity_laws():
    rng.set_seed(11)
    for _ in range(20):
        a, b = ZZ.random(128) - ZZ.random(128), ZZ.random(64)
        assert (a + b) - b == a
        assert (a - b) + b == a
        assert a * ZZ.one() == a
        assert a + ZZ.zero() == a


def test_inverse():
    assert ZZ(1).inverse() == 1
    assert ZZ(-1).inverse() == -1
    assert ZZ(2).inverse() is None
    assert ZZ(0).inverse() is None


def test_inverse_mod():
    assert ZZ(3).inverse_mod(7) == 5
    assert ZZ(6).inverse_mod(9) is None


@pytest.mark.parametrize("value, base, expected", [
    (0, 10, "0"),
    (255, 16, "ff"),
    (-255, 16, "-ff"),
    (5, 2, "101"),
    (8, 8, "10"),
    (35, 36, "z"),
    (-1234567890123456789, 10, "-1234567890123456789"),
])
def test_to_string(value, base, expected):
    assert ZZ(value).to_string(base) == expected


def test_str_and_repr():
    assert str(ZZ(-42)) == "-42"
    assert repr(ZZ(42)) == "ZZ(42)"


def test_to_string_rejects_bad_base():
    with pytest.raises(ValueError):
        ZZ(5).to_string(1)
    with pytest.raises(ValueError):
        ZZ(5).to_string(63)


def test_parse():
    assert ZZ("123") == 123
    assert ZZ("-ff", 16) == -255
    assert ZZ("0x1f") == 31
    assert ZZ("0b101") == 5
    assert ZZ("z", 36) == 35


@pytest.mark.parametrize("text, base", [("12x", 10), ("", 10), ("2", 2), ("abc", 0)])
def test_parse_error(text, base):
    with pytest.raises(ParseError):
        ZZ(text, base)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        ZZ("not a number")


def test_rejects_float():
    with pytest.raises(TypeError):
        ZZ(1.5)


@pytest.mark.parametrize("base", [2, 10, 16, 36])
def test_string_round_trip(base):
    rng.set_seed(base)
    for _ in range(25):
        x = ZZ.random(200) - ZZ.random(200)
        assert ZZ(x.to_string(base), base) == x


def test_string_length_is_upper_bound():
    rng.set_seed(5)
    for base in (2, 3, 10, 16, 36):
        for _ in range(20):
            x = ZZ.random(150)
            digits = x.to_string(base)
            assert len(digits) <= x.string_length(base) <= len(digits) + 1
    assert ZZ(0).string_length() == 1
    assert ZZ(1 << 40).string_length(2) == 41


def test_string_length_ignores_sign():
    assert ZZ(-999).string_length(2) == ZZ(999).string_length(2)


def test_hash_matches_int():
    assert hash(ZZ(12345)) == hash(12345)
    assert {ZZ(7): "x"}[7] == "x"


def test_limb_hash():
    assert ZZ(0).limb_hash() == 0
    assert ZZ(5).limb_hash() == 5 ^ 1
    big = (3 << 64) | 9
    assert ZZ(big).limb_hash() == (3 ^ 9) ^ 2
    assert ZZ(-big).limb_hash() == ZZ(big).limb_hash()


def test_swap():
    a, b = ZZ(1), ZZ(2)
    ZZ.swap(a, b)
    assert a == 2 and b == 1


def test_conversions():
    assert int(ZZ(-9)) == -9
    assert ZZ(9).to_int() == 9
    assert list(range(ZZ(3))) == [0, 1, 2]
    assert ZZ(-7).reduce(5) == 3
    assert not ZZ(0)
    assert ZZ(3)
    assert abs(ZZ(-4)) == 4


def test_need_parentheses():
    assert ZZ(-3).need_parentheses() is False


def test_random_bits_bound():
    rng.set_seed(1)
    for bits in (0, 1, 7, 64, 300):
        for _ in range(20):
            assert ZZ.random(bits).bit_length() <= bits


def test_random_below():
    rng.set_seed(2)
    n = ZZ(1000)
    draws = [ZZ.random_below(n) for _ in range(200)]
    assert all(0 <= d < n for d in draws)
    assert len(set(draws)) > 1


def test_random_is_reproducible():
    rng.set_seed(99)
    first = [ZZ.random(64) for _ in range(5)]
    rng.set_seed(99)
    assert [ZZ.random(64) for _ in range(5)] == first


def test_not_iterable():
    with pytest.raises(TypeError):
        iter(ZZ(5))


def test_mutating_returned_identities_leaves_ring_intact():
    ZZ.one().imul(3)
    ZZ.zero().iadd(5)
    ZZ.swap(ZZ.one(), ZZ(7))
    assert ZZ.zero() == 0
    assert ZZ.one() == 1
    assert power(ZZ(2), 3) == 8


def test_explicit_base_needs_a_string():
    with pytest.raises(TypeError):
        ZZ(10, 16)
    with pytest.raises(TypeError):
        ZZ(ZZ(10), 0)
    assert ZZ("10", 16) == 16
