import math

import pytest

from devshell import mathutil


def _is_pow2(n):
    return n > 0 and n & (n - 1) == 0


def test_next_pow2_of_zero_is_one():
    assert mathutil.next_pow2(0) == 1


def test_next_pow2_of_one_is_two():
    assert mathutil.next_pow2(1) == 2


@pytest.mark.parametrize("n", [2, 3, 4, 5, 7, 8, 100, 1023, 1024, 4097, 2**40 + 1])
def test_next_pow2_is_smallest_power_above(n):
    p = mathutil.next_pow2(n)
    assert _is_pow2(p)
    assert p > n
    assert p // 2 <= n


@pytest.mark.parametrize("k", range(1, 20))
def test_next_pow2_of_power_moves_up(k):
    assert mathutil.next_pow2(2**k) == 2 ** (k + 1)


@pytest.mark.parametrize("n", [1, 2, 3, 6, 9, 64, 65, 1000])
def test_prev_pow2_is_largest_power_not_above(n):
    p = mathutil.prev_pow2(n)
    assert _is_pow2(p)
    assert p <= n
    assert p * 2 > n


def test_prev_pow2_is_half_of_next():
    for n in range(0, 300):
        assert mathutil.prev_pow2(n) == mathutil.next_pow2(n) >> 1


def test_prev_pow2_of_zero():
    assert mathutil.prev_pow2(0) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        mathutil.next_pow2(-1)
    with pytest.raises(ValueError):
        mathutil.prev_pow2(-5)


@pytest.mark.parametrize("x", [0.0, 0.25, -0.5, 0.9])
def test_inverse_pairs_round_trip(x):
    assert mathutil.sin(mathutil.asin(x)) == pytest.approx(x)
    assert mathutil.cos(mathutil.acos(x)) == pytest.approx(x)
    assert mathutil.tan(mathutil.atan(x)) == pytest.approx(x)


@pytest.mark.parametrize("x", [0.0, 0.3, 1.0, -2.0, 3.0])
def test_pythagorean_identity(x):
    assert mathutil.sin(x) ** 2 + mathutil.cos(x) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("x", [0.1, -0.7, 1.2])
def test_tan_is_sin_over_cos(x):
    assert mathutil.tan(x) == pytest.approx(mathutil.sin(x) / mathutil.cos(x))


def test_asin_out_of_domain():
    with pytest.raises(ValueError):
        mathutil.asin(2.0)
    with pytest.raises(ValueError):
        mathutil.acos(-1.5)


def test_atan_is_bounded():
    for x in (-1e9, -3.0, 0.0, 5.0, 1e9):
        assert abs(mathutil.atan(x)) < math.pi / 2 + 1e-12