"""
Number Theory — Целочисленные примитивы для рациональных чисел

Модуль предоставляет:
- Итеративный алгоритм Евклида (gcd)
- Наименьшее общее кратное (lcm)
- Приведение дроби к несократимому виду с нормализацией знака

ИНВАРИАНТЫ:
1. gcd(a, b) >= 0 для любых a, b
2. reduce_fraction(n, d) возвращает (n', d') с gcd(n', d') == 1 и d' > 0
3. Нулевой знаменатель → DivisionByZero
"""

import logging

from src.core.errors import DivisionByZero

logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    gcd(a, 0) = a, иначе gcd(a, b) = gcd(b, a mod b).
    Работает на модулях аргументов, результат всегда неотрицательный.

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        НОД |a| и |b| (gcd(0, 0) == 0)

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(7, 0)
        7
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: |a * b| / gcd(a, b).

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        НОК (0, если хотя бы один аргумент равен 0)

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 5)
        0
    """
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение дроби к несократимому виду.

    Делит числитель и знаменатель на их НОД и переносит знак
    в числитель (знаменатель всегда положительный).

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)

    Returns:
        (numerator, denominator) в несократимом виде

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> reduce_fraction(2, 4)
        (1, 2)
        >>> reduce_fraction(3, -6)
        (-1, 2)
        >>> reduce_fraction(0, -5)
        (0, 1)
    """
    if denominator == 0:
        logger.debug("Rejected fraction %d/0", numerator)
        raise DivisionByZero(f"Denominator cannot be zero (numerator={numerator})")

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    return numerator, denominator
