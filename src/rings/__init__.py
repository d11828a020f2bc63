"""
Ring elements: scalar (integer, rational, real) and composite
(matrix, polynomial, complex) types with +, -, * arithmetic.

Composite types are generic over any RingElement and can be nested
arbitrarily deep.
"""

from src.rings.base import RingElement, element_kind
from src.rings.complex import ComplexElement
from src.rings.matrix import MatrixElement
from src.rings.operations import RingAddition, RingMultiplication
from src.rings.polynomial import PolynomialElement
from src.rings.scalar import IntegerElement, RationalElement, RealElement

__all__ = [
    # Capability
    "RingElement",
    "element_kind",
    # Scalar elements
    "IntegerElement",
    "RationalElement",
    "RealElement",
    # Composite elements
    "MatrixElement",
    "PolynomialElement",
    "ComplexElement",
    # Operations
    "RingAddition",
    "RingMultiplication",
]
