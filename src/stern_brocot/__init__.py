"""
stern_brocot - дроби, сигнатуры и дерево Штерна-Броко

Публичный API:
- Fraction: упорядоченная пара с медиантой в качестве сложения
- map_signature: путь {L, R, I, 0, 1} → унимодулярная матрица предков
- Tree: дерево, развёрнутое до заданной глубины
"""

from stern_brocot.core.domain import (
    Fraction,
    InvalidDepthError,
    MissingProvenanceError,
    NodeState,
    Tree,
    TreeNode,
)
from stern_brocot.core.errors import SternBrocotError
from stern_brocot.core.math import IDENTITY, LEFT, RIGHT, Matrix2x2, Vector2
from stern_brocot.core.signature import (
    SignatureAlphabet,
    SignatureFormatError,
    map_signature,
    signature_of,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Fraction",
    "Tree",
    "TreeNode",
    "NodeState",
    # Matrix Algebra
    "IDENTITY",
    "LEFT",
    "RIGHT",
    "Matrix2x2",
    "Vector2",
    # Signatures
    "SignatureAlphabet",
    "map_signature",
    "signature_of",
    # Exceptions
    "SternBrocotError",
    "SignatureFormatError",
    "MissingProvenanceError",
    "InvalidDepthError",
]
