"""
Тесты для модуля Numeric Zero

Проверяет:
1. Определение поддерживаемых числовых типов
2. Канонический ноль (тип, знак)
3. Распознавание -0.0
"""

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from src.core.math.numeric_zero import (
    canonical_zero,
    is_negative_zero,
    is_supported_number,
    negate_number,
)


class TestIsSupportedNumber:
    """Тесты для is_supported_number"""

    @pytest.mark.parametrize(
        "value",
        [0, -3, 2**100, 1.5, -0.0, math.inf, Fraction(1, 3), Decimal("2.5"), np.int8(1), np.float32(1.0)],
    )
    def test_supported(self, value) -> None:
        assert is_supported_number(value)

    @pytest.mark.parametrize("value", [True, False, 1j, "1", None, [1], b"1"])
    def test_unsupported(self, value) -> None:
        assert not is_supported_number(value)


class TestCanonicalZero:
    """Тесты для canonical_zero"""

    def test_int(self) -> None:
        result = canonical_zero(-42)
        assert result == 0
        assert type(result) is int

    def test_float_is_positive_zero(self) -> None:
        """Канонический ноль float — всегда +0.0"""
        for value in [2.0, -2.0, -0.0, -math.inf]:
            result = canonical_zero(value)
            assert result == 0.0
            assert math.copysign(1.0, result) == 1.0

    def test_fraction_and_decimal(self) -> None:
        assert canonical_zero(Fraction(-1, 2)) == Fraction(0)
        assert type(canonical_zero(Fraction(-1, 2))) is Fraction

        zero = canonical_zero(Decimal("-7.25"))
        assert zero == 0
        assert not zero.is_signed()

    @pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64, np.float32, np.float64])
    def test_fixed_width_keeps_type(self, dtype) -> None:
        result = canonical_zero(dtype(-5))
        assert result == 0
        assert type(result) is dtype

    def test_unsupported_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported numeric type"):
            canonical_zero("0")

        with pytest.raises(TypeError, match="Unsupported numeric type"):
            canonical_zero(False)


class TestIsNegativeZero:
    """Тесты для is_negative_zero"""

    def test_float(self) -> None:
        assert is_negative_zero(-0.0)
        assert not is_negative_zero(0.0)
        assert not is_negative_zero(-1.0)

    def test_numpy_float(self) -> None:
        assert is_negative_zero(np.float64(-0.0))
        assert not is_negative_zero(np.float32(0.0))

    def test_decimal(self) -> None:
        assert is_negative_zero(Decimal("-0"))
        assert not is_negative_zero(Decimal("0"))

    def test_integers_have_no_negative_zero(self) -> None:
        assert not is_negative_zero(0)
        assert not is_negative_zero(-0)
        assert not is_negative_zero(Fraction(0))

    def test_huge_int_does_not_overflow(self) -> None:
        assert not is_negative_zero(10**400)

    def test_unsupported_is_false(self) -> None:
        assert not is_negative_zero("-0.0")


class TestNegateNumber:
    """Тесты для negate_number"""

    def test_plain_numbers(self) -> None:
        assert negate_number(3) == -3
        assert negate_number(-2.5) == 2.5
        assert negate_number(Fraction(1, 3)) == Fraction(-1, 3)
        assert type(negate_number(np.int16(4))) is np.int16

    def test_decimal_keeps_all_digits(self) -> None:
        """Точность контекста (28 знаков) не применяется"""
        v = Decimal("1.2345678901234567890123456789012345")
        result = negate_number(v)
        assert result == Decimal("-1.2345678901234567890123456789012345")
        assert negate_number(result) == v

    def test_decimal_zero_flips_sign_bit(self) -> None:
        assert is_negative_zero(negate_number(Decimal("0")))
