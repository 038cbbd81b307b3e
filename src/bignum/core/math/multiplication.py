"""
Multiplication — школьное умножение столбиком

Модуль множимого умножается на каждую цифру множителя (младшая первой),
частичное произведение сдвигается на позицию цифры (умножение на
BASE**position) и накапливается обычным сложением:

    a × m = Σ (a × d_i) · BASE^i

Произведение одной цифры на модуль может давать цифры >= BASE —
их раскладывает normalize.
"""

from typing import Sequence

from bignum.core.domain.integer import ONE, ZERO, Integer
from bignum.core.domain.sign import Sign
from bignum.core.math.arithmetic import add
from bignum.core.math.normalization import normalize


def multiply_by_digit(digits: Sequence[int], digit: int) -> Integer:
    """
    Произведение модуля на одну цифру (с нормализацией переносов).

    (BASE - 1) * (BASE - 1) помещается в 64-битный аккумулятор.
    """
    return normalize(Sign.POSITIVE, [d * digit for d in digits])


def shift_up(value: Integer, positions: int) -> Integer:
    """Умножение на BASE**positions (дописывание нулевых младших цифр)"""
    if value.is_zero or positions == 0:
        return value
    return Integer(sign=value.sign, digits=(0,) * positions + value.digits)


def multiply_magnitudes(
    multiplicand: Sequence[int], multiplier: Sequence[int]
) -> tuple[int, ...]:
    """
    Произведение модулей.

    Returns:
        Каноничный модуль произведения (пустой, если множитель пуст)
    """
    product = ZERO

    for position, digit in enumerate(multiplier):
        partial = multiply_by_digit(multiplicand, digit)
        product = add(product, shift_up(partial, position))

    return product.digits


def mul(a: Integer, b: Integer) -> Integer:
    """
    Произведение a × b.

    Знак POSITIVE если знаки совпадают, иначе NEGATIVE
    (для нулевого произведения normalize вернёт POSITIVE).

    Examples:
        >>> str(mul(Integer.model_validate("1000000000000"),
        ...         Integer.model_validate("1000000000000")))
        '1000000000000000000000000'
        >>> str(mul(Integer.model_validate(-3), Integer.model_validate(7)))
        '-21'
    """
    digits = multiply_magnitudes(a.digits, b.digits)
    return normalize(a.sign.combine(b.sign), digits)


def power(base: Integer, exponent: int) -> Integer:
    """
    Возведение в неотрицательную степень (square-and-multiply через mul).

    Args:
        base: Основание
        exponent: Показатель (int >= 0); 0 ** 0 == 1

    Raises:
        TypeError: Если exponent не int
        ValueError: Если exponent < 0
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")

    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = ONE
    square = base

    while exponent:
        if exponent & 1:
            result = mul(result, square)
        exponent >>= 1
        if exponent:
            square = mul(square, square)

    return result
