"""
Decimal Text — десятичное текстовое представление Integer

Формат: необязательный знак '+' / '-', затем одна или более ASCII-цифр.
Группы по DIGIT_WIDTH (6) знаков нарезаются справа налево, каждая группа —
одна цифра по основанию BASE.

Вывод: '-' для отрицательных, старшая цифра без дополнения, остальные
дополнены нулями до 6 знаков; ноль — всегда "0".
"""

import logging
from typing import Final

from bignum.core.domain.integer import Integer
from bignum.core.domain.magnitude import BASE, DIGIT_WIDTH
from bignum.core.domain.sign import Sign
from bignum.core.math.normalization import normalize

logger = logging.getLogger(__name__)

DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerParseError(ValueError):
    """Строка не является десятичной записью целого числа"""

    pass


# =============================================================================
# РАЗБОР
# =============================================================================


def split_sign(text: str) -> tuple[Sign, str]:
    """Отделение необязательного ведущего знака"""
    if text[:1] == "-":
        return Sign.NEGATIVE, text[1:]
    if text[:1] == "+":
        return Sign.POSITIVE, text[1:]
    return Sign.POSITIVE, text


def chunk_decimal(body: str) -> list[int]:
    """
    Нарезка десятичных знаков на группы по DIGIT_WIDTH справа налево.

    Examples:
        >>> chunk_decimal("123456789012")
        [789012, 123456]
        >>> chunk_decimal("1000000")
        [0, 1]
    """
    return [
        int(body[max(0, end - DIGIT_WIDTH) : end])
        for end in range(len(body), 0, -DIGIT_WIDTH)
    ]


def from_string(text: str) -> Integer | None:
    """
    Разбор десятичной строки.

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        Integer, либо None если строка пуста после знака или содержит
        что-либо кроме ASCII-цифр

    Examples:
        >>> str(from_string("-000123"))
        '-123'
        >>> from_string("12a") is None
        True
        >>> from_string("-") is None
        True
    """
    sign, body = split_sign(text)

    if not body or not DECIMAL_DIGITS.issuperset(body):
        logger.debug("Rejected decimal literal: %r", text)
        return None

    # normalize убирает ведущие нули ("0000001") и знак у нуля ("-0")
    return normalize(sign, chunk_decimal(body))


def parse(text: str) -> Integer:
    """
    from_string с исключением вместо None.

    Raises:
        IntegerParseError: Если строка не является десятичным целым
    """
    value = from_string(text)
    if value is None:
        raise IntegerParseError(f"Invalid decimal integer literal: {text!r}")
    return value


def from_int(value: int) -> Integer:
    """
    Нативный int → Integer.

    Знак отделяется, модуль нормализуется как одна сырая цифра.

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"from_int expects an int, got {type(value).__name__}")

    if value < 0:
        return normalize(Sign.NEGATIVE, [-value])
    return normalize(Sign.POSITIVE, [value])


# =============================================================================
# ВЫВОД
# =============================================================================


def to_string(value: Integer) -> str:
    """
    Каноничная десятичная запись.

    Examples:
        >>> to_string(from_int(-1_000_001))
        '-1000001'
        >>> to_string(from_int(0))
        '0'
    """
    if value.is_zero:
        return "0"

    prefix = "-" if value.sign is Sign.NEGATIVE else ""
    high, lower = value.digits[-1], value.digits[-2::-1]

    return prefix + str(high) + "".join(f"{d:0{DIGIT_WIDTH}d}" for d in lower)


def to_int(value: Integer) -> int:
    """Точное преобразование в нативный int"""
    result = 0
    for digit in reversed(value.digits):
        result = result * BASE + digit

    if value.sign is Sign.NEGATIVE:
        return -result
    return result
