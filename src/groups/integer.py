"""
Integer Groups — Операции над целыми числами

- IntAddition: (Z, +) — группа: единица 0, обратный -a
- IntMultiplication: (Z, *) — моноид: единица 1, обратного нет
  (не у каждого целого есть мультипликативный обратный в Z)
"""

from src.groups.operations import OperationWithIdentity, OperationWithInverse


class IntAddition(OperationWithInverse[int]):
    """Сложение целых чисел."""

    def operate(self, a: int, b: int) -> int:
        return a + b

    def identity(self) -> int:
        return 0

    def inverse(self, a: int) -> int:
        return -a

    def __repr__(self) -> str:
        return "IntAddition()"


class IntMultiplication(OperationWithIdentity[int]):
    """Умножение целых чисел."""

    def operate(self, a: int, b: int) -> int:
        return a * b

    def identity(self) -> int:
        return 1

    def __repr__(self) -> str:
        return "IntMultiplication()"
