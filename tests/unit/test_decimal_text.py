"""
Тесты для модуля Decimal Text

Проверяет:
1. Разбор со знаком, нарезку групп по 6 знаков справа
2. Отказ на невалидном вводе (None / IntegerParseError)
3. Каноничный вывод (нули, дополнение групп)
4. Обратимость from_string(to_string(x)) == x и to_string(from_int(n)) == str(n)
"""

import logging

import pytest

from bignum import ZERO, Integer, IntegerParseError, Sign
from bignum.core.codec.decimal_text import (
    chunk_decimal,
    from_int,
    from_string,
    parse,
    split_sign,
    to_int,
    to_string,
)

NATIVE_SAMPLES = [
    0,
    7,
    -7,
    999_999,
    1_000_000,
    -1_000_001,
    1_000_000_000_001,
    -123_456_789_012,
    2**63 - 1,
    -(2**63),
    10**50 + 3,
]


class TestParsing:
    """Тесты для from_string / parse"""

    def test_round_trip_scenario(self) -> None:
        assert to_string(from_string("123456789012")) == "123456789012"

    def test_split_sign(self) -> None:
        assert split_sign("-12") == (Sign.NEGATIVE, "12")
        assert split_sign("+12") == (Sign.POSITIVE, "12")
        assert split_sign("12") == (Sign.POSITIVE, "12")

    def test_chunking_from_right(self) -> None:
        assert chunk_decimal("1234567") == [234567, 1]
        assert chunk_decimal("000001") == [1]

    def test_explicit_plus(self) -> None:
        assert from_string("+42") == from_int(42)

    def test_leading_zeros(self) -> None:
        assert from_string("0000001") == from_int(1)
        assert from_string("000000000000") == ZERO

    def test_negative_zero_is_positive_zero(self) -> None:
        value = from_string("-0")
        assert value == ZERO
        assert value.sign is Sign.POSITIVE

    @pytest.mark.parametrize(
        "text",
        ["", "-", "+", "12a", "1 2", " 12", "--1", "+-1", "1.0", "١٢", "0x10", "1_000"],
    )
    def test_invalid_input_reported(self, text: str) -> None:
        assert from_string(text) is None

    def test_parse_raises(self) -> None:
        with pytest.raises(IntegerParseError, match="Invalid decimal integer literal"):
            parse("12a")

        with pytest.raises(ValueError):
            parse("")

    def test_parse_valid(self) -> None:
        assert parse("-1000000") == from_int(-1_000_000)

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bignum.core.codec.decimal_text"):
            from_string("abc")
        assert "Rejected decimal literal" in caplog.text


class TestFromInt:
    """Тесты для from_int"""

    def test_digits_layout(self) -> None:
        value = from_int(-1_000_000_000_005)
        assert value.sign is Sign.NEGATIVE
        assert value.digits == (5, 0, 1)

    def test_zero(self) -> None:
        assert from_int(0) == Integer()

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            from_int(1.0)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            from_int(True)


class TestRendering:
    """Тесты для to_string / to_int"""

    def test_inner_digits_zero_padded(self) -> None:
        assert to_string(Integer(digits=(5, 0, 12))) == "12000000000005"

    def test_negative_prefix(self) -> None:
        assert to_string(Integer(sign=Sign.NEGATIVE, digits=(1,))) == "-1"

    def test_zero(self) -> None:
        assert to_string(ZERO) == "0"

    @pytest.mark.parametrize("n", NATIVE_SAMPLES)
    def test_matches_native_rendering(self, n: int) -> None:
        assert to_string(from_int(n)) == str(n)

    @pytest.mark.parametrize("n", NATIVE_SAMPLES)
    def test_string_round_trip(self, n: int) -> None:
        value = from_int(n)
        assert from_string(to_string(value)) == value

    @pytest.mark.parametrize("n", NATIVE_SAMPLES)
    def test_to_int(self, n: int) -> None:
        assert to_int(from_int(n)) == n
