"""
bignum — arbitrary-precision signed integers

Знак плюс последовательность цифр по основанию 1_000_000, точная арифметика,
полный порядок и десятичный текстовый формат.
"""

import logging

from bignum.core.codec import (
    IntegerParseError,
    from_int,
    from_string,
    parse,
    to_int,
    to_string,
)
from bignum.core.domain import (
    BASE,
    DIGIT_WIDTH,
    MAX_DIGIT_VALUE,
    MINUS_ONE,
    ONE,
    ZERO,
    Integer,
    Ordering,
    Sign,
)
from bignum.core.math import (
    DivisionByZeroError,
    abs_value,
    add,
    checked_divmod,
    compare,
    eq,
    gt,
    gte,
    lt,
    lte,
    max_value,
    min_value,
    mul,
    negate,
    neq,
    power,
    quotient,
    remainder,
    sign,
    sub,
    unsafe_divmod,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Integer",
    "Sign",
    "Ordering",
    # Constants
    "BASE",
    "MAX_DIGIT_VALUE",
    "DIGIT_WIDTH",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    # Exceptions
    "IntegerParseError",
    "DivisionByZeroError",
    # Codec
    "from_int",
    "from_string",
    "parse",
    "to_string",
    "to_int",
    # Arithmetic
    "add",
    "sub",
    "negate",
    "abs_value",
    "sign",
    "mul",
    "power",
    "checked_divmod",
    "unsafe_divmod",
    "quotient",
    "remainder",
    # Comparison
    "compare",
    "gt",
    "gte",
    "lt",
    "lte",
    "eq",
    "neq",
    "min_value",
    "max_value",
]
