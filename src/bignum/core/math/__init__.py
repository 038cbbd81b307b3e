"""
Core math modules для bignum

Алгоритмы над последовательностями цифр: нормализация, сложение,
умножение, деление, сравнение.
"""

# Normalization
from bignum.core.math.normalization import (
    negate_digits,
    normalize,
    pad_digits,
    resolve_carries,
    trim_high_zeros,
)

# Arithmetic
from bignum.core.math.arithmetic import (
    abs_value,
    add,
    negate,
    sign,
    sub,
    to_positive_raw,
)

# Multiplication
from bignum.core.math.multiplication import (
    mul,
    multiply_by_digit,
    multiply_magnitudes,
    power,
    shift_up,
)

# Comparison
from bignum.core.math.comparison import (
    compare,
    compare_magnitudes,
    eq,
    gt,
    gte,
    lt,
    lte,
    max_value,
    min_value,
    neq,
)

# Division
from bignum.core.math.division import (
    TRIAL_MULTIPLIER_EXPONENT,
    TRIAL_MULTIPLIERS,
    DivisionByZeroError,
    checked_divmod,
    positional_padding,
    quotient,
    remainder,
    unsafe_divmod,
)

__all__ = [
    # Normalization
    "normalize",
    "resolve_carries",
    "trim_high_zeros",
    "negate_digits",
    "pad_digits",
    # Arithmetic
    "add",
    "sub",
    "negate",
    "abs_value",
    "sign",
    "to_positive_raw",
    # Multiplication
    "mul",
    "power",
    "multiply_by_digit",
    "multiply_magnitudes",
    "shift_up",
    # Comparison
    "compare",
    "compare_magnitudes",
    "gt",
    "gte",
    "lt",
    "lte",
    "eq",
    "neq",
    "min_value",
    "max_value",
    # Division — Constants
    "TRIAL_MULTIPLIER_EXPONENT",
    "TRIAL_MULTIPLIERS",
    # Division — Exceptions
    "DivisionByZeroError",
    # Division — Functions
    "checked_divmod",
    "unsafe_divmod",
    "quotient",
    "remainder",
    "positional_padding",
]
