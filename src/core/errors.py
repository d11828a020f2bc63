"""
Errors — Таксономия ошибок алгебраической библиотеки

Все ошибки обнаруживаются синхронно в момент конструирования или операции
и передаются вызывающему коду без повторов и восстановления.

Структурные ошибки конструирования (неквадратная матрица, пустое хранилище,
элементы разных типов) сообщаются через pydantic.ValidationError.
"""


class AlgebraError(Exception):
    """Базовый класс для собственных ошибок библиотеки."""

    pass


class DivisionByZero(AlgebraError, ZeroDivisionError):
    """
    Знаменатель рационального числа равен нулю.

    Наследует ZeroDivisionError (не ValueError), поэтому при возбуждении
    внутри pydantic-валидатора доходит до вызывающего кода без обёртки
    в ValidationError.
    """

    pass


class SizeMismatch(AlgebraError, ValueError):
    """
    Операнды матричной операции имеют разный размер.

    Полиномы разной степени ошибкой не являются: недостающие
    коэффициенты дополняются аддитивной единицей.
    """

    pass
