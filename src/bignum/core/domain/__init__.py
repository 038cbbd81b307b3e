"""
Domain models and value objects.

Contains the Integer value type, its Sign, the Ordering of comparisons and
the digit base of the magnitude representation.
"""

from bignum.core.domain.integer import MINUS_ONE, ONE, ZERO, Integer
from bignum.core.domain.magnitude import (
    BASE,
    DIGIT_WIDTH,
    MAX_DIGIT_VALUE,
    is_canonical_digit,
    is_canonical_magnitude,
)
from bignum.core.domain.sign import Ordering, Sign

__all__ = [
    # Magnitude
    "BASE",
    "MAX_DIGIT_VALUE",
    "DIGIT_WIDTH",
    "is_canonical_digit",
    "is_canonical_magnitude",
    # Sign / Ordering
    "Sign",
    "Ordering",
    # Integer model
    "Integer",
    "ZERO",
    "ONE",
    "MINUS_ONE",
]
