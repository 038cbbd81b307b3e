"""
Comparison — полный порядок на Integer

Все предикаты (<, <=, >, >=, ==, !=) и min/max выводятся из единственной
функции compare.
"""

from bignum.core.domain.integer import Integer
from bignum.core.domain.sign import Ordering, Sign
from bignum.core.math.normalization import pad_digits


def compare_magnitudes(a: tuple[int, ...], b: tuple[int, ...]) -> Ordering:
    """
    Сравнение модулей: дополнение нулями до равной длины,
    затем лексикографически от старшей цифры к младшей.
    """
    length = max(len(a), len(b))
    high_first_a = pad_digits(a, length)[::-1]
    high_first_b = pad_digits(b, length)[::-1]

    if high_first_a < high_first_b:
        return Ordering.LESS_THAN
    if high_first_a > high_first_b:
        return Ordering.GREATER_THAN
    return Ordering.EQUAL


def compare(a: Integer, b: Integer) -> Ordering:
    """
    Трёхзначное сравнение a и b.

    При разных знаках больше положительное число. При одинаковых —
    сравнение модулей, для NEGATIVE порядок инвертируется.

    Examples:
        >>> compare(Integer.model_validate(-5), Integer.model_validate(3))
        <Ordering.LESS_THAN: -1>
        >>> compare(Integer.model_validate(-5), Integer.model_validate(-30))
        <Ordering.GREATER_THAN: 1>
    """
    if a.sign is not b.sign:
        if a.sign is Sign.POSITIVE:
            return Ordering.GREATER_THAN
        return Ordering.LESS_THAN

    ordering = compare_magnitudes(a.digits, b.digits)

    if a.sign is Sign.NEGATIVE:
        return ordering.reversed()
    return ordering


def gt(a: Integer, b: Integer) -> bool:
    return compare(a, b) is Ordering.GREATER_THAN


def gte(a: Integer, b: Integer) -> bool:
    return compare(a, b) is not Ordering.LESS_THAN


def lt(a: Integer, b: Integer) -> bool:
    return compare(a, b) is Ordering.LESS_THAN


def lte(a: Integer, b: Integer) -> bool:
    return compare(a, b) is not Ordering.GREATER_THAN


def eq(a: Integer, b: Integer) -> bool:
    return compare(a, b) is Ordering.EQUAL


def neq(a: Integer, b: Integer) -> bool:
    return compare(a, b) is not Ordering.EQUAL


def min_value(a: Integer, b: Integer) -> Integer:
    """Меньшее из двух (a при равенстве)"""
    if gt(a, b):
        return b
    return a


def max_value(a: Integer, b: Integer) -> Integer:
    """Большее из двух (a при равенстве)"""
    if lt(a, b):
        return b
    return a
