"""
Core math modules

Числовые примитивы, на которые опирается знаковая арифметика.
"""

# Numeric Zero
from src.core.math.numeric_zero import (
    SUPPORTED_NUMBER_TYPES,
    canonical_zero,
    is_negative_zero,
    is_supported_number,
    negate_number,
)

__all__ = [
    # Numeric Zero — Constants
    "SUPPORTED_NUMBER_TYPES",
    # Numeric Zero — Functions
    "canonical_zero",
    "is_negative_zero",
    "is_supported_number",
    "negate_number",
]
