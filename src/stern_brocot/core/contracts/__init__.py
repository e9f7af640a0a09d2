"""
Contract Validation Module

Модуль для валидации dict-экспорта Fraction и Tree против JSON Schema.
"""

from .validators import (
    FRACTION_SCHEMA,
    TREE_SCHEMA,
    ContractValidator,
    FractionValidator,
    SchemaLoader,
    TreeValidator,
    validate_fraction,
    validate_tree,
)

__all__ = [
    # Constants
    "FRACTION_SCHEMA",
    "TREE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    "TreeValidator",
    # Functions
    "validate_fraction",
    "validate_tree",
]
