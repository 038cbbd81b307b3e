"""
Normalization — восстановление канонической формы

Единственная точка, через которую сырые последовательности цифр становятся
Integer. Сырые цифры (промежуточный результат арифметики) могут быть
отрицательными или >= BASE.

АЛГОРИТМ:
1. Разрешение переносов от младшей цифры к старшей:
   d + carry → (остаток по BASE, частное по BASE), частное уходит в следующий
   разряд. Для отрицательных d это заём: остаток в [0, BASE), carry < 0.
2. Итоговый carry поглощается старшими разрядами: положительный дробится
   по BASE, отрицательный записывается как есть (отрицательная старшая цифра).
3. Отбрасывание нулевых старших цифр.
4. Если старшая цифра отрицательна — величина на самом деле имеет
   противоположный знак: все цифры умножаются на -1, знак меняется,
   нормализация повторяется. Второй проход всегда завершается без смены знака.
"""

from typing import Sequence

from bignum.core.domain.integer import Integer
from bignum.core.domain.magnitude import BASE
from bignum.core.domain.sign import Sign


# =============================================================================
# РАБОТА С СЫРЫМИ ПОСЛЕДОВАТЕЛЬНОСТЯМИ
# =============================================================================


def resolve_carries(raw: Sequence[int]) -> list[int]:
    """
    Разрешение переносов и заёмов.

    Все цифры кроме, возможно, старшей оказываются в [0, BASE).
    Старшая цифра отрицательна, если итоговая величина отрицательна.

    Examples:
        >>> resolve_carries([1_000_000])
        [0, 1]
        >>> resolve_carries([-1])
        [999999, -1]
        >>> resolve_carries([5, -1])
        [5, 999999, -1]
    """
    resolved: list[int] = []
    carry = 0

    for digit in raw:
        # divmod с округлением вниз: остаток всегда в [0, BASE)
        carry, value = divmod(digit + carry, BASE)
        resolved.append(value)

    if carry < 0:
        resolved.append(carry)
        return resolved

    while carry:
        carry, value = divmod(carry, BASE)
        resolved.append(value)

    return resolved


def trim_high_zeros(digits: list[int]) -> list[int]:
    """Удаление нулевых старших цифр (in place)"""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def negate_digits(raw: Sequence[int]) -> list[int]:
    """Умножение каждой цифры на -1"""
    return [-d for d in raw]


def pad_digits(raw: Sequence[int], length: int) -> list[int]:
    """Дополнение нулями старших разрядов до длины length"""
    return list(raw) + [0] * (length - len(raw))


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(sign: Sign, raw: Sequence[int]) -> Integer:
    """
    Сырая последовательность цифр → каноничный Integer.

    Args:
        sign: Знак, относительно которого записаны сырые цифры
        raw: Цифры, младшая первой; допускаются отрицательные и >= BASE

    Returns:
        Integer в канонической форме (ноль всегда с Sign.POSITIVE)

    Examples:
        >>> str(normalize(Sign.POSITIVE, [999_999 + 1]))
        '1000000'
        >>> str(normalize(Sign.POSITIVE, [0, -5]))
        '-5000000'
        >>> str(normalize(Sign.NEGATIVE, [-7]))
        '7'
    """
    digits = trim_high_zeros(resolve_carries(raw))

    if digits and digits[-1] < 0:
        sign = sign.flipped()
        digits = trim_high_zeros(resolve_carries(negate_digits(digits)))

    if not digits:
        return Integer(sign=Sign.POSITIVE, digits=())

    return Integer(sign=sign, digits=tuple(digits))
