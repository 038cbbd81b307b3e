"""
Division — деление с остатком (restoring long division)

Деление усечением к нулю:
- знак частного POSITIVE если знаки операндов совпадают, иначе NEGATIVE
- остаток имеет знак делимого
- a == q × b + r, |r| < |b|

АЛГОРИТМ (над модулями):
    cand_l = max(0, len(|a|) - len(|b|) + 1)
    для position = cand_l .. 0, padding = BASE ** position:
        для t в [2^k, 2^(k-1), ..., 2^0]:     (2^k — наименьшая степень 2 > BASE)
            если t × |b| × padding <= остаток:
                остаток -= t × |b| × padding
                частное += t × padding

Цифра частного на каждой позиции восстанавливается по двоичным разрядам,
без машинного деления. Сложность O(позиции × log2(BASE)) пробных умножений —
это сознательный выбор простоты в ущерб скорости.
"""

import logging
from functools import lru_cache
from typing import Final

from bignum.core.domain.integer import ONE, ZERO, Integer
from bignum.core.domain.magnitude import BASE
from bignum.core.domain.sign import Sign
from bignum.core.math.arithmetic import abs_value, add, sub
from bignum.core.math.comparison import lte
from bignum.core.math.multiplication import mul, shift_up
from bignum.core.math.normalization import normalize

logger = logging.getLogger(__name__)


# =============================================================================
# ТАБЛИЦЫ ДЕЛИТЕЛЕЙ
# =============================================================================

# k = floor(log2(BASE)) + 1, т.е. 2^k — наименьшая степень двойки больше BASE
TRIAL_MULTIPLIER_EXPONENT: Final[int] = BASE.bit_length()

# Пробные множители 2^k, ..., 2^0 (по убыванию); суммы подмножеств
# покрывают все значения цифры [0, BASE)
TRIAL_MULTIPLIERS: Final[tuple[Integer, ...]] = tuple(
    normalize(Sign.POSITIVE, [2**exponent])
    for exponent in range(TRIAL_MULTIPLIER_EXPONENT, -1, -1)
)


@lru_cache(maxsize=None)
def positional_padding(position: int) -> Integer:
    """BASE ** position"""
    return shift_up(ONE, position)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление на ноль в unsafe_divmod.

    Нарушение контракта вызывающей стороны: unsafe_divmod вызывается
    только когда делитель заведомо ненулевой.
    """

    pass


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def checked_divmod(a: Integer, b: Integer) -> tuple[Integer, Integer] | None:
    """
    Частное и остаток a ÷ b.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        (quotient, remainder), либо None если b == 0

    Examples:
        >>> q, r = checked_divmod(Integer.model_validate(17), Integer.model_validate(5))
        >>> (str(q), str(r))
        ('3', '2')
        >>> q, r = checked_divmod(Integer.model_validate(-17), Integer.model_validate(5))
        >>> (str(q), str(r))
        ('-3', '-2')
        >>> checked_divmod(Integer.model_validate(1), Integer.model_validate(0)) is None
        True
    """
    if b.is_zero:
        logger.debug("Division by zero: dividend=%s", a)
        return None

    remaining = abs_value(a)
    divisor = abs_value(b)
    accumulated = ZERO

    top_position = max(0, len(a.digits) - len(b.digits) + 1)

    for position in range(top_position, -1, -1):
        padding = positional_padding(position)
        scaled_divisor = mul(divisor, padding)

        for trial in TRIAL_MULTIPLIERS:
            candidate = mul(scaled_divisor, trial)
            if lte(candidate, remaining):
                remaining = sub(remaining, candidate)
                accumulated = add(accumulated, mul(padding, trial))

    return (
        normalize(a.sign.combine(b.sign), accumulated.digits),
        normalize(a.sign, remaining.digits),
    )


def unsafe_divmod(a: Integer, b: Integer) -> tuple[Integer, Integer]:
    """
    checked_divmod для делителя, заведомо ненулевого.

    Raises:
        DivisionByZeroError: Если b == 0 (нарушение контракта)
    """
    result = checked_divmod(a, b)
    if result is None:
        raise DivisionByZeroError(f"unsafe_divmod called with zero divisor (dividend={a})")
    return result


def quotient(a: Integer, b: Integer) -> Integer:
    """Частное с усечением к нулю"""
    return unsafe_divmod(a, b)[0]


def remainder(a: Integer, b: Integer) -> Integer:
    """Остаток со знаком делимого"""
    return unsafe_divmod(a, b)[1]
