"""
RingElement — Абстрактная возможность "элемент кольца"

Элемент кольца поддерживает +, -, * замкнутые на собственном типе.
Аксиомы кольца (ассоциативность + и *, дистрибутивность, аддитивные
единица и обратный) предполагаются, но отдельно не проверяются.

Составные элементы (матрица, полином, комплексное число) параметризованы
другим типом элементов кольца и делегируют ему арифметику, поэтому
вложенность не ограничена: матрица полиномов над рациональными и т.д.

Аддитивная единица T никогда не берётся из числового литерала: каждый
элемент обязан отдавать свою zero() той же "формы" (размер матрицы,
тип коэффициентов и т.п.).
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from pydantic import BaseModel


class RingElement(BaseModel, ABC):
    """
    Базовый класс всех элементов кольца.

    Immutable модель (frozen=True): операции создают новый экземпляр.
    Операнд другого типа → NotImplemented (Python возбуждает TypeError).
    """

    model_config = {"frozen": True}

    @abstractmethod
    def __add__(self, other: Any) -> Any: ...

    @abstractmethod
    def __sub__(self, other: Any) -> Any: ...

    @abstractmethod
    def __mul__(self, other: Any) -> Any: ...

    @abstractmethod
    def zero(self) -> "RingElement":
        """Аддитивная единица той же формы, что и self."""

    def __neg__(self) -> "RingElement":
        return self.zero() - self

    def is_zero(self) -> bool:
        return self == self.zero()


def element_kind(element: RingElement) -> type:
    """
    Тип элемента без учёта параметризации generic-модели.

    PolynomialElement[RationalElement] и PolynomialElement относятся
    к одному виду.
    """
    origin = type(element).__pydantic_generic_metadata__.get("origin")
    return origin or type(element)


def same_kind(a: RingElement, b: Any) -> bool:
    return isinstance(b, RingElement) and element_kind(a) is element_kind(b)


def check_uniform_kind(elements: Iterable[RingElement], what: str) -> None:
    """
    Проверка, что все элементы одного вида.

    Raises:
        ValueError: Если встречены элементы разных видов
            (внутри валидатора pydantic превращается в ValidationError)
    """
    kind = None
    for element in elements:
        current = element_kind(element)
        if kind is None:
            kind = current
        elif current is not kind:
            raise ValueError(
                f"All {what} must be of one ring element kind, "
                f"got {kind.__name__} and {current.__name__}"
            )
