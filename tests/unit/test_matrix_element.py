"""
Тесты для MatrixElement

Проверяет:
1. Поэлементное сложение/вычитание и умножение O(n^3)
2. Умножение на единичную матрицу
3. Ассоциативность сложения (наследуется от скаляров)
4. SizeMismatch при разных размерах операндов
5. Конструирование: квадратность, единый вид ячеек, владение хранилищем
6. set_element: мутация одной ячейки, проверки индекса и вида
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.errors import SizeMismatch
from src.rings import IntegerElement, MatrixElement, RationalElement


def int_matrix(values: list[list[int]]) -> MatrixElement:
    return MatrixElement([[IntegerElement(v) for v in row] for row in values])


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def m() -> MatrixElement:
    return int_matrix([[1, 2], [3, 4]])


@pytest.fixture
def n() -> MatrixElement:
    return int_matrix([[5, 6], [7, 8]])


@pytest.fixture
def identity() -> MatrixElement:
    return MatrixElement.identity(2, IntegerElement(1))


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestMatrixArithmetic:
    """Арифметика матриц над целыми"""

    def test_addition(self, m: MatrixElement, n: MatrixElement) -> None:
        assert m + n == int_matrix([[6, 8], [10, 12]])

    def test_subtraction(self, m: MatrixElement, n: MatrixElement) -> None:
        assert m - n == int_matrix([[-4, -4], [-4, -4]])

    def test_multiplication(self, m: MatrixElement, n: MatrixElement) -> None:
        assert m * n == int_matrix([[19, 22], [43, 50]])
        assert n * m == int_matrix([[23, 34], [31, 46]])

    def test_identity_matrix(self, identity: MatrixElement) -> None:
        assert identity == int_matrix([[1, 0], [0, 1]])

    @pytest.mark.parametrize(
        "values",
        [
            [[1, 2], [3, 4]],
            [[0, 0], [0, 0]],
            [[-5, 7], [11, -13]],
            [[100, -1], [1, 100]],
        ],
    )
    def test_multiply_by_identity(self, identity: MatrixElement, values: list) -> None:
        matrix = int_matrix(values)
        assert matrix * identity == matrix
        assert identity * matrix == matrix

    @pytest.mark.parametrize(
        "a,b,c",
        [
            ([[1, 2], [3, 4]], [[5, 6], [7, 8]], [[9, 10], [11, 12]]),
            ([[-1, 0], [0, -1]], [[2, -3], [4, 5]], [[0, 7], [-7, 0]]),
            ([[1]], [[2]], [[3]]),
        ],
    )
    def test_addition_associative(self, a: list, b: list, c: list) -> None:
        ma, mb, mc = int_matrix(a), int_matrix(b), int_matrix(c)
        assert (ma + mb) + mc == ma + (mb + mc)

    def test_multiplication_associative(self, m: MatrixElement, n: MatrixElement) -> None:
        c = int_matrix([[0, 1], [-1, 2]])
        assert (m * n) * c == m * (n * c)

    def test_zero_and_negation(self, m: MatrixElement) -> None:
        zero = m.zero()
        assert zero == int_matrix([[0, 0], [0, 0]])
        assert m + zero == m
        assert -m == int_matrix([[-1, -2], [-3, -4]])
        assert (m - m).is_zero()

    def test_rational_cells(self) -> None:
        half = RationalElement(1, 2)
        matrix = MatrixElement([[half, half], [half, half]])
        assert matrix * matrix == matrix

    def test_operands_unchanged(self, m: MatrixElement, n: MatrixElement) -> None:
        _ = m * n
        assert m == int_matrix([[1, 2], [3, 4]])
        assert n == int_matrix([[5, 6], [7, 8]])

    def test_transpose(self, m: MatrixElement) -> None:
        assert m.transpose() == int_matrix([[1, 3], [2, 4]])

    def test_foreign_operand(self, m: MatrixElement) -> None:
        with pytest.raises(TypeError):
            m + IntegerElement(1)


# =============================================================================
# SIZE MISMATCH
# =============================================================================


class TestMatrixSizeMismatch:
    """Операнды разного размера отклоняются"""

    @pytest.fixture
    def big(self) -> MatrixElement:
        return int_matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_addition(self, m: MatrixElement, big: MatrixElement) -> None:
        with pytest.raises(SizeMismatch):
            m + big

    def test_subtraction(self, m: MatrixElement, big: MatrixElement) -> None:
        with pytest.raises(SizeMismatch):
            m - big

    def test_multiplication(self, m: MatrixElement, big: MatrixElement) -> None:
        with pytest.raises(SizeMismatch, match="equal sizes"):
            m * big

    def test_is_value_error(self, m: MatrixElement, big: MatrixElement) -> None:
        with pytest.raises(ValueError):
            big + m

    def test_logged(
        self, m: MatrixElement, big: MatrixElement, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="src.rings.matrix")
        with pytest.raises(SizeMismatch):
            m * big
        assert "multiplication rejected" in caplog.text


# =============================================================================
# CONSTRUCTION & OWNERSHIP
# =============================================================================


class TestMatrixConstruction:
    """Конструирование и владение хранилищем"""

    def test_size(self, m: MatrixElement) -> None:
        assert m.size == 2
        assert int_matrix([[1]]).size == 1

    def test_non_square_rejected(self) -> None:
        with pytest.raises(ValidationError, match="square"):
            int_matrix([[1, 2], [3]])
        with pytest.raises(ValidationError):
            int_matrix([[1, 2, 3], [4, 5, 6]])

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatrixElement([])

    def test_mixed_kinds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="one ring element kind"):
            MatrixElement([[IntegerElement(1), RationalElement(1, 2)], [IntegerElement(0), IntegerElement(1)]])

    def test_non_ring_cells_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatrixElement([[1, 2], [3, 4]])  # type: ignore[list-item]

    def test_storage_copied(self) -> None:
        rows = [[IntegerElement(1), IntegerElement(2)], [IntegerElement(3), IntegerElement(4)]]
        matrix = MatrixElement(rows)
        rows[0][0] = IntegerElement(99)
        rows.append([])
        assert matrix[0, 0] == IntegerElement(1)
        assert matrix.size == 2

    def test_storage_cannot_be_reassigned(self, m: MatrixElement) -> None:
        with pytest.raises(ValidationError):
            m.cells = [[IntegerElement(0)]]  # type: ignore
        with pytest.raises((ValidationError, AttributeError)):
            m.rows = [[IntegerElement(0)]]  # type: ignore
        assert m.size == 2

    def test_accessors_return_copies(self, m: MatrixElement) -> None:
        before = m.rows
        m.rows[0][0] = IntegerElement(99)
        m.rows.append([])
        assert m.rows == before
        assert m.get_element(0, 0) is not m.cells[0][0]
        assert m[0, 0] is not m.cells[0][0]

    def test_filled(self) -> None:
        matrix = MatrixElement.filled(3, IntegerElement(0))
        assert matrix.size == 3
        assert matrix.is_zero()

    def test_filled_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            MatrixElement.filled(0, IntegerElement(0))
        with pytest.raises(ValueError):
            MatrixElement.identity(-1, IntegerElement(1))

    def test_parametrized_type(self) -> None:
        matrix = MatrixElement[IntegerElement]([[IntegerElement(1)]])
        assert matrix == int_matrix([[1]])
        with pytest.raises(ValidationError):
            MatrixElement[IntegerElement]([[RationalElement(1, 2)]])

    def test_unhashable(self, m: MatrixElement) -> None:
        with pytest.raises(TypeError):
            hash(m)


# =============================================================================
# SET ELEMENT
# =============================================================================


class TestMatrixSetElement:
    """Мутация одной ячейки"""

    def test_fill_empty_matrix(self) -> None:
        matrix = MatrixElement.filled(2, IntegerElement(0))
        matrix.set_element(0, 0, IntegerElement(1))
        matrix.set_element(0, 1, IntegerElement(2))
        matrix.set_element(1, 0, IntegerElement(3))
        matrix.set_element(1, 1, IntegerElement(4))
        assert matrix == int_matrix([[1, 2], [3, 4]])

    def test_only_one_cell_changes(self) -> None:
        matrix = MatrixElement.filled(2, IntegerElement(0))
        matrix.set_element(1, 0, IntegerElement(7))
        assert matrix.get_element(1, 0) == IntegerElement(7)
        assert matrix.get_element(0, 0) == IntegerElement(0)
        assert matrix.get_element(1, 1) == IntegerElement(0)

    def test_previous_results_unaffected(self, m: MatrixElement, n: MatrixElement) -> None:
        total = m + n
        m.set_element(0, 0, IntegerElement(100))
        assert total == int_matrix([[6, 8], [10, 12]])

    def test_out_of_range(self, m: MatrixElement) -> None:
        with pytest.raises(IndexError):
            m.set_element(2, 0, IntegerElement(1))
        with pytest.raises(IndexError):
            m.get_element(0, -1)

    def test_wrong_kind(self, m: MatrixElement) -> None:
        with pytest.raises(TypeError):
            m.set_element(0, 0, RationalElement(1, 2))
