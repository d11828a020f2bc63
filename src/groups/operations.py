"""
Operations — Абстракция бинарной операции и алгебраические законы

Иерархия возможностей:
- Operation[T]: ассоциативная бинарная операция operate(a, b) -> T
- OperationWithIdentity[T]: + двусторонняя единица identity()
- OperationWithInverse[T]: + обратный элемент inverse(a) относительно той же единицы

Каждый конкретный тип обязан реализовать все абстрактные методы своей
возможности; базовые классы не содержат реализаций по умолчанию.

Законы (associativity, identity, inverse, commutativity) не проверяются
при каждом вызове — для этого есть предикаты и verify_laws().
"""

import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# CAPABILITIES
# =============================================================================


class Operation(ABC, Generic[T]):
    """Ассоциативная бинарная операция на фиксированном типе T."""

    @abstractmethod
    def operate(self, a: T, b: T) -> T:
        """Применение операции: a ∘ b."""

    def is_associative(self, a: T, b: T, c: T) -> bool:
        """(a ∘ b) ∘ c == a ∘ (b ∘ c)"""
        left = self.operate(self.operate(a, b), c)
        right = self.operate(a, self.operate(b, c))
        if left != right:
            logger.debug("Associativity failed for %r: %r != %r", self, left, right)
            return False
        return True

    def is_commutative(self, a: T, b: T) -> bool:
        """a ∘ b == b ∘ a (не требуется для группы, но полезно для диагностики)."""
        left = self.operate(a, b)
        right = self.operate(b, a)
        if left != right:
            logger.debug("Commutativity failed for %r: %r != %r", self, left, right)
            return False
        return True


class OperationWithIdentity(Operation[T]):
    """Операция с двусторонней единицей: identity ∘ a == a ∘ identity == a."""

    @abstractmethod
    def identity(self) -> T:
        """Единичный элемент операции."""

    def has_identity(self, a: T) -> bool:
        e = self.identity()
        left = self.operate(e, a)
        right = self.operate(a, e)
        if left != a or right != a:
            logger.debug("Identity law failed for %r on %r: %r, %r", self, a, left, right)
            return False
        return True


class OperationWithInverse(OperationWithIdentity[T]):
    """Операция с обратным элементом: a ∘ inverse(a) == inverse(a) ∘ a == identity."""

    @abstractmethod
    def inverse(self, a: T) -> T:
        """Обратный к a элемент."""

    def has_inverse(self, a: T) -> bool:
        e = self.identity()
        inv = self.inverse(a)
        left = self.operate(a, inv)
        right = self.operate(inv, a)
        if left != e or right != e:
            logger.debug("Inverse law failed for %r on %r: %r, %r", self, a, left, right)
            return False
        return True


# =============================================================================
# ПРОВЕРКА ЗАКОНОВ НА ВЫБОРКЕ
# =============================================================================


@dataclass(frozen=True)
class LawReport:
    """Результат проверки законов операции на выборке значений.

    Каждый список содержит контрпримеры (пустой список — закон выполнен).
    Для законов, которые операция не декларирует, проверка не выполняется
    и поле равно None.
    """

    samples_checked: int
    associativity_failures: list[tuple] = field(default_factory=list)
    identity_failures: list | None = None
    inverse_failures: list | None = None

    @property
    def holds(self) -> bool:
        """True если все проверенные законы выполнены."""
        return not (
            self.associativity_failures
            or self.identity_failures
            or self.inverse_failures
        )


def verify_laws(operation: Operation[T], samples: Sequence[T]) -> LawReport:
    """
    Проверка законов операции на всех тройках/элементах выборки.

    Ассоциативность проверяется на всех упорядоченных тройках (O(n^3)),
    единица и обратный — на каждом элементе, если операция их декларирует.

    Args:
        operation: Проверяемая операция
        samples: Значения типа T

    Returns:
        LawReport с контрпримерами
    """
    associativity_failures = [
        (a, b, c)
        for a, b, c in itertools.product(samples, repeat=3)
        if not operation.is_associative(a, b, c)
    ]

    identity_failures = None
    if isinstance(operation, OperationWithIdentity):
        identity_failures = [a for a in samples if not operation.has_identity(a)]

    inverse_failures = None
    if isinstance(operation, OperationWithInverse):
        inverse_failures = [a for a in samples if not operation.has_inverse(a)]

    report = LawReport(
        samples_checked=len(samples),
        associativity_failures=associativity_failures,
        identity_failures=identity_failures,
        inverse_failures=inverse_failures,
    )
    if not report.holds:
        logger.debug("Law verification failed for %r: %r", operation, report)
    return report
