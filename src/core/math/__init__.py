"""
Core math modules

Целочисленные примитивы (алгоритм Евклида) и сравнение float с допуском.
"""

# Number Theory
from src.core.math.number_theory import gcd, lcm, reduce_fraction

# Float Tolerance
from src.core.math.float_tolerance import (
    DEFAULT_TOLERANCE,
    EPS_REAL_COMPARE_ABS,
    EPS_REAL_COMPARE_REL,
    ToleranceConfig,
    is_close,
    is_valid_float,
)

__all__ = [
    # Number Theory
    "gcd",
    "lcm",
    "reduce_fraction",
    # Float Tolerance — Constants
    "EPS_REAL_COMPARE_ABS",
    "EPS_REAL_COMPARE_REL",
    "DEFAULT_TOLERANCE",
    # Float Tolerance — Types
    "ToleranceConfig",
    # Float Tolerance — Functions
    "is_close",
    "is_valid_float",
]
