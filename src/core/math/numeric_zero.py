"""
Numeric Zero — канонический ноль для числовых типов

Модуль предоставляет единственный допустимый способ получить "ноль того же
типа", что и исходное значение. Используется Sign при умножении на ZERO.

Поддерживаемые значения:
- int (произвольной точности)
- float
- fractions.Fraction
- decimal.Decimal
- скаляры фиксированной ширины, зарегистрированные в numbers.Integral /
  numbers.Real (например numpy int8…int64, float32, float64)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для float-типов канонический ноль всегда положительный (+0.0, не -0.0)
2. Тип результата совпадает с типом исходного значения
3. bool не считается числом
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Final

# =============================================================================
# ПОДДЕРЖИВАЕМЫЕ ТИПЫ
# =============================================================================

# numbers.Real покрывает int, float, Fraction и numpy-скаляры
SUPPORTED_NUMBER_TYPES: Final[tuple[type, ...]] = (Real, Decimal)


def is_supported_number(value: Any) -> bool:
    """
    Проверка, поддерживается ли значение знаковой арифметикой.

    Args:
        value: Проверяемое значение

    Returns:
        True для int/float/Fraction/Decimal и вещественных скаляров,
        False для bool, complex, строк и прочего

    Examples:
        >>> is_supported_number(2)
        True
        >>> is_supported_number(2.0)
        True
        >>> is_supported_number(True)
        False
        >>> is_supported_number(1j)
        False
    """
    # bool — подкласс int, но не число в смысле знака
    if isinstance(value, bool):
        return False
    return isinstance(value, SUPPORTED_NUMBER_TYPES)


# =============================================================================
# КАНОНИЧЕСКИЙ НОЛЬ
# =============================================================================


def canonical_zero(value: Any) -> Any:
    """
    Канонический ноль для типа значения.

    Возвращает type(value)(0). Для float, numpy float32/float64 и Decimal
    это положительный ноль, независимо от знака исходного значения.

    Args:
        value: Значение, тип которого определяет тип нуля

    Returns:
        Ноль того же типа

    Raises:
        TypeError: Если значение не поддерживается

    Examples:
        >>> canonical_zero(7)
        0
        >>> canonical_zero(-2.5)
        0.0
    """
    if not is_supported_number(value):
        raise TypeError(
            f"Unsupported numeric type for canonical zero: {type(value).__name__}"
        )
    return type(value)(0)


def negate_number(value: Any) -> Any:
    """
    Точная смена знака числа.

    Decimal.__neg__ округляет до точности текущего контекста (28 знаков
    по умолчанию), поэтому для Decimal используется copy_negate().

    Args:
        value: Число поддерживаемого типа

    Returns:
        -value того же типа, без потери точности

    Examples:
        >>> negate_number(3)
        -3
        >>> negate_number(Decimal("1.2345678901234567890123456789012345"))
        Decimal('-1.2345678901234567890123456789012345')
    """
    if isinstance(value, Decimal):
        return value.copy_negate()
    return -value


def is_negative_zero(value: Any) -> bool:
    """
    Проверка на отрицательный ноль (-0.0).

    Целые и рациональные типы не имеют отрицательного нуля.

    Args:
        value: Проверяемое значение

    Returns:
        True только для нулевого float-значения с установленным знаковым битом
    """
    if not is_supported_number(value):
        return False

    if isinstance(value, Decimal):
        return value.is_zero() and value.is_signed()

    try:
        as_float = float(value)
    except (OverflowError, ValueError):
        return False

    return as_float == 0.0 and math.copysign(1.0, as_float) < 0
