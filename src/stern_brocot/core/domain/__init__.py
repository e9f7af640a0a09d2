"""
Domain models and value objects.

Contains the Stern-Brocot value types: Fraction, Tree, TreeNode.
"""

from stern_brocot.core.domain.fraction import Fraction, MissingProvenanceError
from stern_brocot.core.domain.tree import (
    InvalidDepthError,
    NodeState,
    Tree,
    TreeNode,
)

__all__ = [
    # Fraction model
    "Fraction",
    "MissingProvenanceError",
    # Tree model
    "Tree",
    "TreeNode",
    "NodeState",
    "InvalidDepthError",
]
