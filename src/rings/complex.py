"""
ComplexElement — Комплексное расширение произвольного кольца

Пара (real, imaginary) элементов T:
    (a + bi) ± (c + di) = (a ± c) + (b ± d)i
    (a + bi) * (c + di) = (ac - bd) + (ad + bc)i
Вся арифметика — через +, -, * самого T. Immutable.
"""

import copy
from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator, model_validator

from src.rings.base import RingElement, check_uniform_kind

T = TypeVar("T", bound=RingElement)


class ComplexElement(RingElement, Generic[T]):
    """
    Элемент кольца T[i], i^2 = -1.

    Части хранятся в real_part / imaginary_part; свойства real и imaginary
    отдают копии. Хешируется, только если хешируются части: комплексное
    число над MatrixElement не хешируется (TypeError).
    """

    real_part: T = Field(..., description="Действительная часть")
    imaginary_part: T = Field(..., description="Мнимая часть")

    def __init__(self, real: T, imaginary: T) -> None:
        super().__init__(real_part=real, imaginary_part=imaginary)

    @field_validator("real_part", "imaginary_part", mode="before")
    @classmethod
    def copy_part(cls, value: Any) -> Any:
        return copy.deepcopy(value)

    @model_validator(mode="after")
    def validate_parts(self) -> "ComplexElement[T]":
        check_uniform_kind((self.real_part, self.imaginary_part), "complex parts")
        return self

    @property
    def real(self) -> T:
        return copy.deepcopy(self.real_part)

    @property
    def imaginary(self) -> T:
        return copy.deepcopy(self.imaginary_part)

    def __add__(self, other: Any) -> "ComplexElement[T]":
        if not isinstance(other, ComplexElement):
            return NotImplemented
        return type(self)(
            self.real_part + other.real_part,
            self.imaginary_part + other.imaginary_part,
        )

    def __sub__(self, other: Any) -> "ComplexElement[T]":
        if not isinstance(other, ComplexElement):
            return NotImplemented
        return type(self)(
            self.real_part - other.real_part,
            self.imaginary_part - other.imaginary_part,
        )

    def __mul__(self, other: Any) -> "ComplexElement[T]":
        if not isinstance(other, ComplexElement):
            return NotImplemented
        a, b = self.real_part, self.imaginary_part
        c, d = other.real_part, other.imaginary_part
        return type(self)(a * c - b * d, a * d + b * c)

    def zero(self) -> "ComplexElement[T]":
        return type(self)(self.real_part.zero(), self.imaginary_part.zero())

    def conjugate(self) -> "ComplexElement[T]":
        return type(self)(self.real_part, -self.imaginary_part)

    def __str__(self) -> str:
        return f"({self.real_part}) + ({self.imaginary_part})i"
