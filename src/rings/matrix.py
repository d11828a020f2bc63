"""
MatrixElement — Квадратная матрица над произвольным кольцом

Матрица размера n хранит n×n элементов типа T (T — RingElement) и делегирует
арифметику операциям T, поэтому допускает любую вложенность
(матрица полиномов над рациональными, матрица матриц и т.д.).

ВЛАДЕНИЕ ХРАНИЛИЩЕМ:
- Конструктор глубоко копирует переданные строки: изменения списков
  вызывающего кода не влияют на матрицу
- Публичные аксессоры (rows, get_element, __getitem__) отдают копии:
  мутация полученной вложенной матрицы не меняет эту матрицу
- Результаты операций собираются из свежих ячеек и принимаются без копии

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Матрица квадратная, size >= 1, все ячейки одного вида
2. Операнды бинарных операций одного размера, иначе SizeMismatch
3. Аккумулятор умножения стартует с zero() элемента, а не с литерала 0

set_element — единственная мутация во всей иерархии. Одновременный вызов
для одной матрицы из нескольких потоков требует внешней синхронизации.
"""

import copy
import logging
from typing import Any, Generic, Sequence, TypeVar

from pydantic import Field, field_validator, model_validator

from src.core.errors import SizeMismatch
from src.rings.base import RingElement, check_uniform_kind, same_kind

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=RingElement)


class MatrixElement(RingElement, Generic[T]):
    """
    Элемент кольца квадратных матриц M_n(T).

    Сложение/вычитание: поэлементно, (i, j) = a[i][j] ± b[i][j]
    Умножение: (i, j) = Σ_k a[i][k] * b[k][j]  (O(n^3))

    Модель frozen: поле cells переприсвоить нельзя, единственная мутация —
    замена одной ячейки через set_element.
    """

    cells: list[list[T]] = Field(..., min_length=1, description="Строки матрицы (n × n)")

    # Мутабельна через set_element
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        super().__init__(cells=rows)

    @field_validator("cells", mode="before")
    @classmethod
    def copy_storage(cls, value: Any) -> Any:
        """Глубокая копия переданного хранилища (матрица владеет своими ячейками)."""
        if isinstance(value, (list, tuple)) and all(isinstance(row, (list, tuple)) for row in value):
            return [[copy.deepcopy(cell) for cell in row] for row in value]
        return value

    @model_validator(mode="after")
    def validate_square(self) -> "MatrixElement[T]":
        size = len(self.cells)
        for index, row in enumerate(self.cells):
            if len(row) != size:
                raise ValueError(
                    f"Matrix must be square: row {index} has {len(row)} cells, expected {size}"
                )
        check_uniform_kind((cell for row in self.cells for cell in row), "matrix cells")
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def filled(cls, size: int, value: T) -> "MatrixElement[T]":
        """
        Матрица size × size, каждая ячейка — независимая копия value.

        Аналог "пустой" матрицы, которую затем заполняют через set_element.
        Обычно value — аддитивная единица: RingAddition(...).identity().
        """
        if size < 1:
            raise ValueError(f"Matrix size must be >= 1, got {size}")
        return cls([[value] * size for _ in range(size)])

    @classmethod
    def identity(cls, size: int, one: T) -> "MatrixElement[T]":
        """Единичная матрица: one на диагонали, one.zero() вне её."""
        if size < 1:
            raise ValueError(f"Matrix size must be >= 1, got {size}")
        zero = one.zero()
        return cls([[one if i == j else zero for j in range(size)] for i in range(size)])

    @classmethod
    def _adopt(cls, rows: list[list[T]]) -> "MatrixElement[T]":
        # Свежие ячейки результата операции: без копии и повторной валидации
        return cls.model_construct(cells=rows)

    # =========================================================================
    # ДОСТУП К ЯЧЕЙКАМ
    # =========================================================================

    @property
    def rows(self) -> list[list[T]]:
        """Копия строк матрицы."""
        return copy.deepcopy(self.cells)

    @property
    def size(self) -> int:
        return len(self.cells)

    def _check_index(self, row: int, column: int) -> None:
        if not (0 <= row < self.size and 0 <= column < self.size):
            raise IndexError(
                f"Cell ({row}, {column}) out of range for matrix of size {self.size}"
            )

    def get_element(self, row: int, column: int) -> T:
        """Копия ячейки (row, column)."""
        self._check_index(row, column)
        return copy.deepcopy(self.cells[row][column])

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, column = key
        return self.get_element(row, column)

    def set_element(self, row: int, column: int, value: T) -> None:
        """
        Замена одной ячейки на месте (копия value).

        Не потокобезопасно: вызывающий код обязан обеспечить эксклюзивный
        доступ к матрице.

        Raises:
            IndexError: Ячейка вне матрицы
            TypeError: value другого вида, чем ячейки матрицы
        """
        self._check_index(row, column)
        if not same_kind(self.cells[row][column], value):
            raise TypeError(
                f"Cannot store {type(value).__name__} in a matrix of "
                f"{type(self.cells[row][column]).__name__}"
            )
        self.cells[row][column] = copy.deepcopy(value)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _check_size(self, other: "MatrixElement[T]", op: str) -> None:
        if self.size != other.size:
            logger.debug("Matrix %s rejected: size %d vs %d", op, self.size, other.size)
            raise SizeMismatch(
                f"Matrix {op} requires equal sizes, got {self.size} and {other.size}"
            )

    def __add__(self, other: Any) -> "MatrixElement[T]":
        if not isinstance(other, MatrixElement):
            return NotImplemented
        self._check_size(other, "addition")
        return self._adopt(
            [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(self.cells, other.cells)]
        )

    def __sub__(self, other: Any) -> "MatrixElement[T]":
        if not isinstance(other, MatrixElement):
            return NotImplemented
        self._check_size(other, "subtraction")
        return self._adopt(
            [[a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(self.cells, other.cells)]
        )

    def __mul__(self, other: Any) -> "MatrixElement[T]":
        if not isinstance(other, MatrixElement):
            return NotImplemented
        self._check_size(other, "multiplication")

        n = self.size
        result = []
        for i in range(n):
            row = []
            for j in range(n):
                accumulator = self.cells[i][0].zero()
                for k in range(n):
                    accumulator = accumulator + self.cells[i][k] * other.cells[k][j]
                row.append(accumulator)
            result.append(row)
        return self._adopt(result)

    def zero(self) -> "MatrixElement[T]":
        return type(self).filled(self.size, self.cells[0][0].zero())

    def transpose(self) -> "MatrixElement[T]":
        return type(self)([list(column) for column in zip(*self.cells)])

    def __str__(self) -> str:
        return "[" + ", ".join("[" + ", ".join(str(cell) for cell in row) + "]" for row in self.cells) + "]"
