"""
Arithmetic — сложение, отрицание, модуль, вычитание

Сложение работает по единому пути для любых знаков: отрицательный операнд
записывается как последовательность неположительных сырых цифр, суммы
по разрядам нормализуются со знаком POSITIVE. Вычитание «сводится»
к сложению внутри нормализации (ветка смены знака).
"""

from bignum.core.domain.integer import Integer
from bignum.core.domain.sign import Sign
from bignum.core.math.normalization import negate_digits, normalize, pad_digits


def to_positive_raw(value: Integer) -> list[int]:
    """
    Эквивалентная запись value со знаком POSITIVE.

    Положительный операнд используется как есть, у отрицательного
    каждая цифра умножается на -1.
    """
    if value.sign is Sign.NEGATIVE:
        return negate_digits(value.digits)
    return list(value.digits)


def add(a: Integer, b: Integer) -> Integer:
    """
    Сумма a + b.

    Examples:
        >>> str(add(Integer.model_validate(999_999), Integer.model_validate(1)))
        '1000000'
        >>> str(add(Integer.model_validate(5), Integer.model_validate(-8)))
        '-3'
    """
    raw_a = to_positive_raw(a)
    raw_b = to_positive_raw(b)

    length = max(len(raw_a), len(raw_b))
    raw_a = pad_digits(raw_a, length)
    raw_b = pad_digits(raw_b, length)

    return normalize(Sign.POSITIVE, [x + y for x, y in zip(raw_a, raw_b)])


def negate(a: Integer) -> Integer:
    """
    Отрицание -a.

    Проходит через normalize, поэтому -0 остаётся POSITIVE нулём.
    """
    return normalize(a.sign.flipped(), a.digits)


def abs_value(a: Integer) -> Integer:
    """Модуль |a| (модуль уже каноничен, нормализация не нужна)"""
    return Integer(sign=Sign.POSITIVE, digits=a.digits)


def sub(a: Integer, b: Integer) -> Integer:
    """Разность a - b = a + (-b)"""
    return add(a, negate(b))


def sign(a: Integer) -> Sign:
    """Знак числа (POSITIVE для нуля)"""
    return a.sign
