"""
Тесты для модуля Comparison

Проверяет:
1. Сравнение по знаку и по модулю
2. Полный порядок: антисимметричность, транзитивность, тотальность
3. Согласованность производных предикатов с compare
"""

import itertools

import pytest

from bignum import Ordering, from_int
from bignum.core.math.comparison import (
    compare,
    compare_magnitudes,
    eq,
    gt,
    gte,
    lt,
    lte,
    max_value,
    min_value,
    neq,
)

SAMPLES = [
    0,
    1,
    -1,
    999_999,
    1_000_000,
    -1_000_000,
    -999_999,
    10**18,
    -(10**18),
    10**18 + 1,
]


def _native_ordering(x: int, y: int) -> Ordering:
    if x < y:
        return Ordering.LESS_THAN
    if x > y:
        return Ordering.GREATER_THAN
    return Ordering.EQUAL


class TestCompareMagnitudes:
    """Тесты для compare_magnitudes"""

    def test_different_lengths(self) -> None:
        assert compare_magnitudes((1,), (0, 1)) is Ordering.LESS_THAN
        assert compare_magnitudes((0, 1), (999_999,)) is Ordering.GREATER_THAN

    def test_equal(self) -> None:
        assert compare_magnitudes((), ()) is Ordering.EQUAL
        assert compare_magnitudes((3, 4), (3, 4)) is Ordering.EQUAL

    def test_high_digit_dominates(self) -> None:
        assert compare_magnitudes((999_999, 1), (0, 2)) is Ordering.LESS_THAN


class TestCompare:
    """Тесты для compare"""

    def test_positive_beats_negative(self) -> None:
        assert compare(from_int(0), from_int(-(10**30))) is Ordering.GREATER_THAN
        assert compare(from_int(-1), from_int(1)) is Ordering.LESS_THAN

    def test_negative_order_inverted(self) -> None:
        assert compare(from_int(-5), from_int(-30)) is Ordering.GREATER_THAN
        assert compare(from_int(-1_000_000), from_int(-999_999)) is Ordering.LESS_THAN

    def test_matches_native_int(self) -> None:
        for x, y in itertools.product(SAMPLES, repeat=2):
            assert compare(from_int(x), from_int(y)) is _native_ordering(x, y)

    def test_antisymmetric(self) -> None:
        for x, y in itertools.product(SAMPLES, repeat=2):
            a, b = from_int(x), from_int(y)
            assert compare(a, b) is compare(b, a).reversed()

    def test_transitive(self) -> None:
        for x, y, z in itertools.product(SAMPLES, repeat=3):
            a, b, c = from_int(x), from_int(y), from_int(z)
            if lte(a, b) and lte(b, c):
                assert lte(a, c)


class TestDerivedPredicates:
    """Тесты производных предикатов"""

    @pytest.mark.parametrize("x, y", list(itertools.product([-2, 0, 3], repeat=2)))
    def test_predicates_agree(self, x: int, y: int) -> None:
        a, b = from_int(x), from_int(y)

        assert gt(a, b) == (x > y)
        assert gte(a, b) == (x >= y)
        assert lt(a, b) == (x < y)
        assert lte(a, b) == (x <= y)
        assert eq(a, b) == (x == y)
        assert neq(a, b) == (x != y)

    def test_min_max(self) -> None:
        a, b = from_int(-7), from_int(4)

        assert min_value(a, b) is a
        assert max_value(a, b) is b
        assert min_value(b, a) is a
        assert max_value(b, a) is b

    def test_min_max_ties_return_first(self) -> None:
        a, b = from_int(9), from_int(9)

        assert min_value(a, b) is a
        assert max_value(a, b) is a
