"""
Exact Arithmetic

Math interface and its decimal.Decimal default.
"""

from .base import Math
from .decimal_math import DecimalMath, DEFAULT_PRECISION

__all__ = [
    "Math",
    "DecimalMath",
    "DEFAULT_PRECISION",
]
