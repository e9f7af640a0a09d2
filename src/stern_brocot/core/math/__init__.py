"""
Core math modules для stern_brocot

Целочисленная матричная алгебра 2x2 и проверки целочисленных аргументов.
"""

# Matrix Algebra
from stern_brocot.core.math.matrix import (
    IDENTITY,
    LEFT,
    RIGHT,
    Matrix2x2,
    Vector2,
    determinant,
    is_unimodular,
    left_ancestor,
    mediant,
    multiply,
    right_ancestor,
)

# Integer Safeguards
from stern_brocot.core.math.integer_safeguards import (
    is_coprime,
    is_strict_int,
    to_normalized_rational,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

__all__ = [
    # Matrix Algebra - Constants
    "IDENTITY",
    "LEFT",
    "RIGHT",
    # Matrix Algebra - Types
    "Matrix2x2",
    "Vector2",
    # Matrix Algebra - Functions
    "determinant",
    "is_unimodular",
    "left_ancestor",
    "mediant",
    "multiply",
    "right_ancestor",
    # Integer Safeguards
    "is_coprime",
    "is_strict_int",
    "to_normalized_rational",
    "validate_int",
    "validate_non_negative_int",
    "validate_positive_int",
]
