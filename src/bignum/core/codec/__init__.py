"""
Textual codec для Integer

Десятичный разбор и вывод, конверсии из/в нативный int.
"""

from bignum.core.codec.decimal_text import (
    IntegerParseError,
    chunk_decimal,
    from_int,
    from_string,
    parse,
    split_sign,
    to_int,
    to_string,
)

__all__ = [
    # Exceptions
    "IntegerParseError",
    # Parsing
    "split_sign",
    "chunk_decimal",
    "from_string",
    "parse",
    "from_int",
    # Rendering
    "to_string",
    "to_int",
]
