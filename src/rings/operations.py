"""
Ring Operations — Сложение и умножение элементов кольца как Operation

Связывает абстракцию операции с иерархией RingElement:
- RingAddition: аддитивная группа кольца. Единица берётся из zero()
  элемента-прототипа (форма совпадает: размер матрицы и т.п.),
  обратный — унарный минус.
- RingMultiplication: ассоциативная операция без декларированной единицы
  (единица зависит от кольца и в общем виде не выводится).
"""

import copy
from typing import TypeVar

from src.groups.operations import Operation, OperationWithInverse
from src.rings.base import RingElement

T = TypeVar("T", bound=RingElement)


class RingAddition(OperationWithInverse[T]):
    """
    Сложение элементов одного вида.

    Args:
        prototype: Любой элемент нужного вида/формы; identity() == prototype.zero()

    identity() строит новый нуль при каждом вызове: изменение результата
    (например, set_element у матрицы) не затрагивает операцию.
    """

    def __init__(self, prototype: T) -> None:
        self._prototype = copy.deepcopy(prototype)

    def operate(self, a: T, b: T) -> T:
        return a + b

    def identity(self) -> T:
        return self._prototype.zero()

    def inverse(self, a: T) -> T:
        return -a

    def __repr__(self) -> str:
        return f"RingAddition(identity={self._prototype.zero()!r})"


class RingMultiplication(Operation[T]):
    """Умножение элементов одного вида."""

    def operate(self, a: T, b: T) -> T:
        return a * b

    def __repr__(self) -> str:
        return "RingMultiplication()"
