"""
Magnitude — позиционное представление модуля числа

Модуль числа хранится как tuple цифр по основанию BASE, младшая цифра первой.

КАНОНИЧЕСКАЯ ФОРМА:
1. Каждая цифра лежит в [0, BASE)
2. Старшая (последняя) цифра не равна нулю
3. Пустой tuple — это ноль

BASE — наибольшая степень 10, для которой (BASE - 1) * (BASE - 1) помещается
в знаковый 64-битный аккумулятор (и в double без потери точности).
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления цифр
BASE: Final[int] = 1_000_000

# Публичное имя основания для потребителей, работающих с границами групп цифр
MAX_DIGIT_VALUE: Final[int] = BASE

# Количество десятичных знаков в одной цифре
DIGIT_WIDTH: Final[int] = 6


# =============================================================================
# ПРОВЕРКИ КАНОНИЧЕСКОЙ ФОРМЫ
# =============================================================================


def is_canonical_digit(digit: int) -> bool:
    """Цифра в диапазоне [0, BASE)"""
    return 0 <= digit < BASE


def is_canonical_magnitude(digits: Sequence[int]) -> bool:
    """
    Проверка канонической формы модуля.

    Args:
        digits: Последовательность цифр, младшая первой

    Returns:
        True если все цифры в [0, BASE) и старшая цифра ненулевая
        (пустая последовательность канонична и означает ноль)

    Examples:
        >>> is_canonical_magnitude(())
        True
        >>> is_canonical_magnitude((5, 1))
        True
        >>> is_canonical_magnitude((5, 0))
        False
        >>> is_canonical_magnitude((1_000_000,))
        False
    """
    if not all(is_canonical_digit(d) for d in digits):
        return False

    if digits and digits[-1] == 0:
        return False

    return True
