"""
Float Tolerance — Сравнение вещественных значений с допуском

Арифметика RealElement не гарантирует численную устойчивость, поэтому
точное равенство float после нескольких операций ненадёжно. Модуль задаёт
допуски и функции приближённого сравнения.
"""

import math
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения вещественных элементов
EPS_REAL_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность (значения около нуля)
EPS_REAL_COMPARE_ABS: Final[float] = 1e-12


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Допуски для приближённого сравнения float.

    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """

    rel_tol: float = EPS_REAL_COMPARE_REL
    abs_tol: float = EPS_REAL_COMPARE_ABS

    def __post_init__(self) -> None:
        if not is_valid_float(self.rel_tol) or self.rel_tol < 0:
            raise ValueError(f"rel_tol must be a non-negative finite float, got {self.rel_tol}")
        if not is_valid_float(self.abs_tol) or self.abs_tol < 0:
            raise ValueError(f"abs_tol must be a non-negative finite float, got {self.abs_tol}")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_close(a: float, b: float, config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Args:
        a: Первое значение
        b: Второе значение
        config: Допуски (default: DEFAULT_TOLERANCE)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
