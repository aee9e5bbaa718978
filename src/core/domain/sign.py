"""
Sign — Знак величины: положительный, отрицательный или ровно ноль

Знак хранится отдельно от модуля величины (например, у знаковых
длительностей), поэтому не зависит от представления числа и не страдает
от неоднозначности -0.0.

Арифметика:
- Sign * число, число * Sign, число / Sign — применение знака к числу
- Sign * Sign, Sign / Sign — правила знаков вещественных чисел
- mul_assign / div_assign — "умножение с присваиванием": меняет знак
  только при NEGATIVE, ZERO не обнуляет значение

Таблица умножения (деление совпадает с умножением):

    |          | Negative | Zero | Positive |
    |----------|----------|------|----------|
    | Negative | Positive | Zero | Negative |
    | Zero     | Zero     | Zero | Zero     |
    | Positive | Negative | Zero | Positive |
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Any

from src.core.math.numeric_zero import (
    canonical_zero,
    is_supported_number,
    negate_number,
)


# =============================================================================
# ENUMS
# =============================================================================


class Sign(Enum):
    """Знак величины. Ровно один из трёх вариантов, без промежуточных состояний."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    ZERO = "Zero"

    # numpy-скаляры уступают __rmul__/__rtruediv__, тип результата сохраняется
    __array_ufunc__ = None

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def default(cls) -> "Sign":
        """
        Значение по умолчанию — ZERO (а не POSITIVE).

        Examples:
            >>> Sign.default()
            <Sign.ZERO: 'Zero'>
        """
        return cls.ZERO

    @classmethod
    def of(cls, value: Any, tol: float = 0.0) -> "Sign":
        """
        Знак числа.

        -0.0 считается нулём. Значения в пределах [-tol, tol] — тоже ноль.

        Args:
            value: Число (int, float, Fraction, Decimal, numpy-скаляр)
            tol: Абсолютная толерантность нуля (default: 0.0)

        Returns:
            POSITIVE если value > tol, NEGATIVE если value < -tol, иначе ZERO

        Raises:
            TypeError: Если value не число
            ValueError: Если value — NaN, tol < 0 или tol — NaN

        Examples:
            >>> Sign.of(-3)
            <Sign.NEGATIVE: 'Negative'>
            >>> Sign.of(-0.0)
            <Sign.ZERO: 'Zero'>
        """
        if not is_supported_number(value):
            raise TypeError(f"Cannot take the sign of {type(value).__name__}")

        # NaN не проходит сравнение и тоже отклоняется
        if not tol >= 0:
            raise ValueError(f"tol must be non-negative, got {tol}")

        if _is_nan(value):
            raise ValueError("NaN has no sign")

        if value > tol:
            return cls.POSITIVE
        if value < -tol:
            return cls.NEGATIVE
        return cls.ZERO

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def negate(self) -> "Sign":
        """
        Противоположный знак. ZERO остаётся ZERO.

        Examples:
            >>> Sign.POSITIVE.negate()
            <Sign.NEGATIVE: 'Negative'>
            >>> Sign.ZERO.negate()
            <Sign.ZERO: 'Zero'>
        """
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        return Sign.ZERO

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self is Sign.NEGATIVE

    def is_zero(self) -> bool:
        """Ровно ноль?"""
        return self is Sign.ZERO

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def apply(self, value: Any) -> Any:
        """
        Применение знака к числу.

        Args:
            value: Число поддерживаемого типа

        Returns:
            - POSITIVE: value без изменений
            - NEGATIVE: -value
            - ZERO: канонический ноль типа value (для float — +0.0)
        """
        if self is Sign.POSITIVE:
            return value
        if self is Sign.NEGATIVE:
            return negate_number(value)
        return canonical_zero(value)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Sign):
            if self is Sign.ZERO or other is Sign.ZERO:
                return Sign.ZERO
            if self is other:
                return Sign.POSITIVE
            return Sign.NEGATIVE

        if is_supported_number(other):
            return self.apply(other)

        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_supported_number(other):
            return self.apply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        # Sign / число не определено: у знака нет модуля
        if isinstance(other, Sign):
            return self * other
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        # Тип результата совпадает с типом числа: 3 / Sign.POSITIVE == 3
        if is_supported_number(other):
            return self.apply(other)
        return NotImplemented

    def __neg__(self) -> "Sign":
        return self.negate()


# =============================================================================
# УМНОЖЕНИЕ С ПРИСВАИВАНИЕМ
# =============================================================================


def mul_assign(value: Any, sign: Sign) -> Any:
    """
    Новое значение для `value *= sign`.

    Для чисел меняет знак только при NEGATIVE. В отличие от `value * sign`,
    умножение с присваиванием на ZERO НЕ обнуляет значение:

        >>> mul_assign(5, Sign.ZERO)
        5
        >>> 5 * Sign.ZERO
        0

    Для Sign результат — таблица умножения знаков.

    Args:
        value: Число или Sign
        sign: Применяемый знак

    Returns:
        Новое значение (исходное не изменяется)

    Raises:
        TypeError: Если value не число и не Sign, или sign не Sign
    """
    if not isinstance(sign, Sign):
        raise TypeError(f"Expected a Sign, got {type(sign).__name__}")

    if isinstance(value, Sign):
        return value * sign

    if not is_supported_number(value):
        raise TypeError(f"Cannot apply a sign to {type(value).__name__}")

    if sign.is_negative():
        return negate_number(value)
    return value


def div_assign(value: Any, sign: Sign) -> Any:
    """Новое значение для `value /= sign`. Совпадает с mul_assign."""
    return mul_assign(value, sign)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    try:
        return math.isnan(value)
    except (OverflowError, TypeError):
        return False
