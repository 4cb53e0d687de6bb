import math
from fractions import Fraction

import pytest

from zipkit.linear_transform import LinearTransform, reduce_fraction


def test_identity():
    t = LinearTransform()
    for value in (-5, 0, 42):
        assert t.forward(value) == value
        assert t.reverse(value) == value


def test_zero_maps_to_zero():
    t = LinearTransform(a_zero=10, b_zero=100, a_to_b_numer=3, a_to_b_denom=7)
    assert t.forward(10) == 100
    assert t.reverse(100) == 10


@pytest.mark.parametrize("a", [-1000, -1, 0, 1, 17, 123456789])
def test_round_trip_integer_scale(a):
    t = LinearTransform(a_zero=5, b_zero=-20, a_to_b_numer=3, a_to_b_denom=1)
    assert t.reverse(t.forward(a)) == a


def test_forward_is_monotonic():
    t = LinearTransform(a_to_b_numer=2, a_to_b_denom=3)
    results = [t.forward(a) for a in range(-20, 20)]
    assert results == sorted(results)


def test_singular_forward():
    with pytest.raises(ZeroDivisionError):
        LinearTransform(a_to_b_denom=0).forward(1)


def test_singular_reverse():
    with pytest.raises(ZeroDivisionError):
        LinearTransform(a_to_b_numer=0).reverse(1)


def test_overflow():
    t = LinearTransform(a_to_b_numer=2, a_to_b_denom=1)
    with pytest.raises(OverflowError):
        t.forward(2**62)


def test_invalid_numerator():
    with pytest.raises(ValueError):
        LinearTransform(a_to_b_numer=2**31)


def test_reduce_preserves_ratio():
    for numer, denom in [(6, 4), (-10, 25), (7, 3), (100, 100)]:
        n, d = reduce_fraction(numer, denom)
        assert Fraction(n, d) == Fraction(numer, denom)
        assert math.gcd(n, d) == 1
        assert d > 0


def test_reduce_zero_numerator():
    assert reduce_fraction(0, 9) == (0, 1)


def test_reduce_zero_denominator():
    with pytest.raises(ValueError):
        reduce_fraction(3, 0)