"""
Integer — Immutable знаковое целое произвольной точности

Пара (Sign, Magnitude) в канонической форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits канонична (см. magnitude.is_canonical_magnitude)
2. Ноль представлен единственным образом: sign=POSITIVE, digits=()
3. Модель frozen — каждая операция создаёт новый экземпляр
4. Два Integer равны тогда и только тогда, когда равны пары (sign, digits)

Арифметика, сравнение и текстовый кодек живут в bignum.core.math и
bignum.core.codec; операторы модели делегируют туда.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from bignum.core.domain.magnitude import is_canonical_magnitude
from bignum.core.domain.sign import Sign


# =============================================================================
# INTEGER MODEL
# =============================================================================


class Integer(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True). Прямой конструктор принимает только
    каноническую форму; произвольные сырые последовательности цифр проходят
    через bignum.core.math.normalization.normalize.

    model_validate также принимает int и десятичную строку:

        >>> Integer.model_validate("-123456789")
        Integer('-123456789')
        >>> Integer.model_validate(42)
        Integer('42')
    """

    sign: Sign = Field(default=Sign.POSITIVE, description="Знак (ноль всегда POSITIVE)")
    digits: tuple[int, ...] = Field(
        default=(), description="Цифры по основанию BASE, младшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def coerce_native(cls, data: Any) -> Any:
        """
        Приведение int / str к полям модели через текстовый кодек.
        """
        if isinstance(data, bool):
            raise ValueError(f"bool is not an integer value: {data!r}")

        if not isinstance(data, (int, str)):
            return data

        from bignum.core.codec.decimal_text import from_int, from_string

        if isinstance(data, int):
            value = from_int(data)
            return {"sign": value.sign, "digits": value.digits}

        value = from_string(data)
        if value is None:
            raise ValueError(f"Invalid decimal integer literal: {data!r}")
        return {"sign": value.sign, "digits": value.digits}

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "Integer":
        """Проверка канонической формы и единственности нуля"""
        if not is_canonical_magnitude(self.digits):
            raise ValueError(f"digits {self.digits!r} are not in canonical form")

        if not self.digits and self.sign is Sign.NEGATIVE:
            raise ValueError("zero must be represented with Sign.POSITIVE")

        return self

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return not self.digits

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    # -------------------------------------------------------------------------
    # Арифметические операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Integer":
        from bignum.core.math.arithmetic import add

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return add(self, operand)

    def __radd__(self, other: Any) -> "Integer":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Integer":
        from bignum.core.math.arithmetic import sub

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return sub(self, operand)

    def __rsub__(self, other: Any) -> "Integer":
        from bignum.core.math.arithmetic import sub

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return sub(operand, self)

    def __mul__(self, other: Any) -> "Integer":
        from bignum.core.math.multiplication import mul

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return mul(self, operand)

    def __rmul__(self, other: Any) -> "Integer":
        return self.__mul__(other)

    def __pow__(self, exponent: Any) -> "Integer":
        from bignum.core.math.multiplication import power

        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return power(self, exponent)

    def __neg__(self) -> "Integer":
        from bignum.core.math.arithmetic import negate

        return negate(self)

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        from bignum.core.math.arithmetic import abs_value

        return abs_value(self)

    # -------------------------------------------------------------------------
    # Сравнение (всё через compare)
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        from bignum.core.math.comparison import eq

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return eq(self, operand)

    def __ne__(self, other: Any) -> bool:
        from bignum.core.math.comparison import neq

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return neq(self, operand)

    def __lt__(self, other: Any) -> bool:
        from bignum.core.math.comparison import lt

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return lt(self, operand)

    def __le__(self, other: Any) -> bool:
        from bignum.core.math.comparison import lte

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return lte(self, operand)

    def __gt__(self, other: Any) -> bool:
        from bignum.core.math.comparison import gt

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return gt(self, operand)

    def __ge__(self, other: Any) -> bool:
        from bignum.core.math.comparison import gte

        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return gte(self, operand)

    def __hash__(self) -> int:
        # Совпадает с hash(int) для равных значений, т.к. Integer == int
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        from bignum.core.codec.decimal_text import to_int

        return to_int(self)

    def __str__(self) -> str:
        from bignum.core.codec.decimal_text import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f"Integer({str(self)!r})"


def _coerce_operand(value: Any) -> Integer | None:
    """Integer как есть, int через from_int, иначе None (NotImplemented)"""
    from bignum.core.codec.decimal_text import from_int

    if isinstance(value, Integer):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return from_int(value)
    return None


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = Integer()
ONE = Integer(digits=(1,))
MINUS_ONE = Integer(sign=Sign.NEGATIVE, digits=(1,))
