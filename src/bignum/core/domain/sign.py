"""
Sign и Ordering — перечисления знака и результата сравнения

Ноль всегда имеет знак POSITIVE (единственное представление нуля).
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак целого числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    def flipped(self) -> "Sign":
        """Противоположный знак"""
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.POSITIVE

    def combine(self, other: "Sign") -> "Sign":
        """
        Знак произведения/частного.

        POSITIVE если знаки совпадают, иначе NEGATIVE.
        """
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE


class Ordering(int, Enum):
    """Трёхзначный результат сравнения"""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1

    def reversed(self) -> "Ordering":
        return Ordering(-self.value)
