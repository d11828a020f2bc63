"""
Группы и моноиды: абстракция бинарной операции и целочисленные примеры.
"""

from src.groups.integer import IntAddition, IntMultiplication
from src.groups.operations import (
    LawReport,
    Operation,
    OperationWithIdentity,
    OperationWithInverse,
    verify_laws,
)

__all__ = [
    # Capabilities
    "Operation",
    "OperationWithIdentity",
    "OperationWithInverse",
    # Law checks
    "LawReport",
    "verify_laws",
    # Integer exemplars
    "IntAddition",
    "IntMultiplication",
]
