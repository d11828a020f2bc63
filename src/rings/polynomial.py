"""
PolynomialElement — Полином от одной переменной над произвольным кольцом

Коэффициент i — множитель при x^i; степень = число коэффициентов - 1
(старший коэффициент может быть нулевым и не отбрасывается).

Сложение/вычитание: степень max(d1, d2), недостающие коэффициенты
более короткого операнда заменяются его zero().

Умножение: степень d1 + d2, коэффициент i — свёртка
    c[i] = Σ_{j} a[j] * b[i - j],  max(0, i - d2) <= j <= min(i, d1)
Индексы вне диапазона пропускаются, а не подставляются как мусор.
"""

import copy
from typing import Any, Generic, Sequence, TypeVar

from pydantic import Field, field_validator, model_validator

from src.rings.base import RingElement, check_uniform_kind

T = TypeVar("T", bound=RingElement)


class PolynomialElement(RingElement, Generic[T]):
    """
    Элемент кольца полиномов T[x].

    Immutable: коэффициенты хранятся кортежем terms, а coefficients,
    coefficient() и evaluate() отдают копии. Хешируемость наследуется от
    коэффициентов: полином над MatrixElement не хешируется (TypeError).
    """

    terms: tuple[T, ...] = Field(
        ..., min_length=1, description="Коэффициенты от младшего к старшему"
    )

    def __init__(self, coefficients: Sequence[T]) -> None:
        super().__init__(terms=tuple(coefficients))

    @field_validator("terms", mode="before")
    @classmethod
    def copy_storage(cls, value: Any) -> Any:
        """Полином владеет независимой копией коэффициентов."""
        if isinstance(value, (list, tuple)):
            return tuple(copy.deepcopy(coefficient) for coefficient in value)
        return value

    @model_validator(mode="after")
    def validate_coefficients(self) -> "PolynomialElement[T]":
        check_uniform_kind(self.terms, "polynomial coefficients")
        return self

    @classmethod
    def constant(cls, value: T) -> "PolynomialElement[T]":
        """Полином нулевой степени."""
        return cls([value])

    @property
    def coefficients(self) -> tuple[T, ...]:
        """Копия коэффициентов от младшего к старшему."""
        return copy.deepcopy(self.terms)

    @property
    def degree(self) -> int:
        return len(self.terms) - 1

    def coefficient(self, index: int) -> T:
        """Копия коэффициента при x^index; за пределами степени — zero()."""
        if index < 0:
            raise IndexError(f"Coefficient index must be non-negative, got {index}")
        return copy.deepcopy(self._term(index))

    def _term(self, index: int) -> T:
        if index > self.degree:
            return self.terms[0].zero()
        return self.terms[index]

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: Any) -> "PolynomialElement[T]":
        if not isinstance(other, PolynomialElement):
            return NotImplemented
        degree = max(self.degree, other.degree)
        return type(self)(
            [self._term(i) + other._term(i) for i in range(degree + 1)]
        )

    def __sub__(self, other: Any) -> "PolynomialElement[T]":
        if not isinstance(other, PolynomialElement):
            return NotImplemented
        degree = max(self.degree, other.degree)
        return type(self)(
            [self._term(i) - other._term(i) for i in range(degree + 1)]
        )

    def __mul__(self, other: Any) -> "PolynomialElement[T]":
        if not isinstance(other, PolynomialElement):
            return NotImplemented

        d1, d2 = self.degree, other.degree
        zero = self.terms[0].zero()
        result = []
        for i in range(d1 + d2 + 1):
            accumulator = zero
            for j in range(max(0, i - d2), min(i, d1) + 1):
                accumulator = accumulator + self.terms[j] * other.terms[i - j]
            result.append(accumulator)
        return type(self)(result)

    def zero(self) -> "PolynomialElement[T]":
        return type(self).constant(self.terms[0].zero())

    def evaluate(self, x: T) -> T:
        """
        Значение полинома в точке x по схеме Горнера.

        Args:
            x: Точка того же вида, что и коэффициенты

        Returns:
            Σ c[i] * x^i
        """
        result = copy.deepcopy(self.terms[-1])
        for coefficient in reversed(self.terms[:-1]):
            result = result * x + coefficient
        return result

    def __str__(self) -> str:
        parts = []
        for power, coefficient in enumerate(self.terms):
            if power == 0:
                parts.append(str(coefficient))
            elif power == 1:
                parts.append(f"({coefficient})x")
            else:
                parts.append(f"({coefficient})x^{power}")
        return " + ".join(parts)
