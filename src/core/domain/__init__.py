"""
Domain models and value objects.

Contains the Sign value type and its assignment helpers.
"""

from src.core.domain.sign import Sign, div_assign, mul_assign

__all__ = [
    "Sign",
    "mul_assign",
    "div_assign",
]
