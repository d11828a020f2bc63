"""
Scalar Ring Elements — Целые, рациональные и вещественные элементы

Каждый тип оборачивает примитивное числовое значение и реализует +, -, *
возвращая новый экземпляр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. RationalElement всегда хранится в несократимом виде: gcd(num, den) == 1
   (после конструирования и после каждой операции)
2. Знаменатель RationalElement всегда положительный
3. Нулевой знаменатель → DivisionByZero (экземпляр не создаётся)
"""

from typing import Any

from pydantic import Field, field_validator, model_validator

from src.core.math.float_tolerance import DEFAULT_TOLERANCE, ToleranceConfig, is_close
from src.core.math.number_theory import reduce_fraction
from src.rings.base import RingElement


# =============================================================================
# INTEGER
# =============================================================================


class IntegerElement(RingElement):
    """Элемент кольца целых чисел Z."""

    value: int = Field(..., strict=True, description="Целое значение")

    def __init__(self, value: int) -> None:
        super().__init__(value=value)

    def __add__(self, other: Any) -> "IntegerElement":
        if not isinstance(other, IntegerElement):
            return NotImplemented
        return IntegerElement(self.value + other.value)

    def __sub__(self, other: Any) -> "IntegerElement":
        if not isinstance(other, IntegerElement):
            return NotImplemented
        return IntegerElement(self.value - other.value)

    def __mul__(self, other: Any) -> "IntegerElement":
        if not isinstance(other, IntegerElement):
            return NotImplemented
        return IntegerElement(self.value * other.value)

    def __neg__(self) -> "IntegerElement":
        return IntegerElement(-self.value)

    def zero(self) -> "IntegerElement":
        return IntegerElement(0)

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# RATIONAL
# =============================================================================


class RationalElement(RingElement):
    """
    Элемент поля рациональных чисел Q (используется только как кольцо).

    Сложение/вычитание: (n1*d2 ± n2*d1) / (d1*d2)
    Умножение: (n1*n2) / (d1*d2)
    Результат каждой операции сокращается алгоритмом Евклида.
    """

    numerator: int = Field(..., strict=True, description="Числитель")
    denominator: int = Field(..., strict=True, description="Знаменатель (> 0 после сокращения)")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def reduce_to_lowest_terms(cls, data: Any) -> Any:
        """
        Сокращение дроби до валидации полей.

        Raises:
            DivisionByZero: Если denominator == 0 (проходит сквозь pydantic)
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if _is_plain_int(numerator) and _is_plain_int(denominator):
            numerator, denominator = reduce_fraction(numerator, denominator)
            data = {**data, "numerator": numerator, "denominator": denominator}

        return data

    def __add__(self, other: Any) -> "RationalElement":
        if not isinstance(other, RationalElement):
            return NotImplemented
        return RationalElement(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __sub__(self, other: Any) -> "RationalElement":
        if not isinstance(other, RationalElement):
            return NotImplemented
        return RationalElement(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __mul__(self, other: Any) -> "RationalElement":
        if not isinstance(other, RationalElement):
            return NotImplemented
        return RationalElement(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def __neg__(self) -> "RationalElement":
        return RationalElement(-self.numerator, self.denominator)

    def zero(self) -> "RationalElement":
        return RationalElement(0, 1)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# REAL
# =============================================================================


class RealElement(RingElement):
    """
    Элемент кольца вещественных чисел (float).

    Численная устойчивость не гарантируется: для сравнения результатов
    нескольких операций используйте is_close().
    """

    value: float = Field(..., strict=True, description="Вещественное значение")

    def __init__(self, value: float) -> None:
        super().__init__(value=value)

    @field_validator("value", mode="before")
    @classmethod
    def widen_int(cls, value: Any) -> Any:
        """int расширяется до float; строки и bool отклоняются strict-режимом."""
        if _is_plain_int(value):
            return float(value)
        return value

    def __add__(self, other: Any) -> "RealElement":
        if not isinstance(other, RealElement):
            return NotImplemented
        return RealElement(self.value + other.value)

    def __sub__(self, other: Any) -> "RealElement":
        if not isinstance(other, RealElement):
            return NotImplemented
        return RealElement(self.value - other.value)

    def __mul__(self, other: Any) -> "RealElement":
        if not isinstance(other, RealElement):
            return NotImplemented
        return RealElement(self.value * other.value)

    def __neg__(self) -> "RealElement":
        return RealElement(-self.value)

    def zero(self) -> "RealElement":
        return RealElement(0.0)

    def is_close(self, other: "RealElement", config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        """Приближённое равенство с допусками config."""
        return is_close(self.value, other.value, config)

    def __str__(self) -> str:
        return str(self.value)
