"""
Tree - Дерево Штерна-Броко ограниченной глубины

Построение:
- Узел с бюджетом depth > 0 вычисляет медианту своих границ (left, right)
- Левый потомок получает границы (left, mediant), правый - (mediant, right),
  оба с бюджетом depth - 1
- Узел с бюджетом 0 - лист (медианта не вычисляется)

Состояния узла:
    LEAF      - бюджет исчерпан
    EXPANDED  - есть медианта и два потомка

При границах 0/1 и 1/0 каждый узел дерева - несократимая дробь,
а последовательность листов (in-order) строго возрастает.

Пример:
    tree = Tree(depth=2)
    tree.levels          # ((1/1,), (1/2, 2/1))
    tree.leaves()        # [0/1, 1/2, 1/1, 2/1, 1/0]
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from stern_brocot.core.domain.fraction import Fraction
from stern_brocot.core.errors import SternBrocotError
from stern_brocot.core.math.integer_safeguards import validate_non_negative_int

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDepthError(SternBrocotError, ValueError):
    """Глубина дерева отрицательна или не является int."""

    pass


# =============================================================================
# УЗЛЫ
# =============================================================================


class NodeState(str, Enum):
    """Состояние узла дерева"""

    LEAF = "leaf"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class TreeNode:
    """
    Узел дерева: интервал (left, right) с оставшимся бюджетом глубины.

    У EXPANDED узла заполнены mediant, left_child и right_child.
    """

    left: Fraction
    right: Fraction
    depth: int
    mediant: Optional[Fraction] = None
    left_child: Optional["TreeNode"] = None
    right_child: Optional["TreeNode"] = None

    @property
    def state(self) -> NodeState:
        if self.mediant is None:
            return NodeState.LEAF
        return NodeState.EXPANDED

    @classmethod
    def expand(cls, left: Fraction, right: Fraction, depth: int) -> "TreeNode":
        """Рекурсивное построение поддерева с бюджетом depth."""
        if depth == 0:
            return cls(left=left, right=right, depth=0)

        mediant = left.mediant(right)
        return cls(
            left=left,
            right=right,
            depth=depth,
            mediant=mediant,
            left_child=cls.expand(left, mediant, depth - 1),
            right_child=cls.expand(mediant, right, depth - 1),
        )

    def children(self) -> tuple["TreeNode", ...]:
        if self.left_child is None or self.right_child is None:
            return ()
        return (self.left_child, self.right_child)

    def in_order(self) -> Iterator[Fraction]:
        """Медианты поддерева в порядке возрастания позиции (без границ)."""
        if self.left_child is not None:
            yield from self.left_child.in_order()
        if self.mediant is not None:
            yield self.mediant
        if self.right_child is not None:
            yield from self.right_child.in_order()


# =============================================================================
# TREE
# =============================================================================


@dataclass(frozen=True)
class Tree:
    """
    Дерево Штерна-Броко, развёрнутое до глубины depth.

    levels[k - 1] содержит 2**(k - 1) медиант уровня k слева направо.
    При depth == 0 levels пуст, а листья - только две границы.
    """

    left: Fraction = field(default_factory=lambda: Fraction(0, 1))
    right: Fraction = field(default_factory=lambda: Fraction(1, 0))
    depth: int = 0

    root: TreeNode = field(init=False, repr=False, compare=False)
    levels: tuple[tuple[Fraction, ...], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        try:
            validate_non_negative_int(self.depth, "Tree depth")
        except (TypeError, ValueError) as e:
            raise InvalidDepthError(str(e)) from e

        for name, boundary in (("left", self.left), ("right", self.right)):
            if not isinstance(boundary, Fraction):
                raise TypeError(
                    f"Tree {name} boundary must be a Fraction, got {type(boundary).__name__}"
                )

        root = TreeNode.expand(self.left, self.right, self.depth)
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "levels", self._collect_levels(root))

    @staticmethod
    def _collect_levels(root: TreeNode) -> tuple[tuple[Fraction, ...], ...]:
        # Все узлы одного уровня имеют одинаковый бюджет: либо все EXPANDED, либо все LEAF
        levels = []
        current = [root]
        while current[0].state is NodeState.EXPANDED:
            level = tuple(node.mediant for node in current if node.mediant is not None)
            levels.append(level)
            logger.debug("Tree level %d: %d mediants", len(levels), len(level))
            current = [child for node in current for child in node.children()]
        return tuple(levels)

    def level(self, index: int) -> tuple[Fraction, ...]:
        """
        Медианты уровня index (1-based).

        Raises:
            IndexError: Если index вне [1, depth]
        """
        if not 1 <= index <= self.depth:
            raise IndexError(f"Level {index} out of range [1, {self.depth}]")
        return self.levels[index - 1]

    def iter_levels(self) -> Iterator[tuple[Fraction, ...]]:
        return iter(self.levels)

    def leaves(self) -> list[Fraction]:
        """
        Все дроби нижнего уровня слева направо, включая границы.

        Содержит 2**depth + 1 элементов; при depth == 0 - только [left, right].
        """
        return [self.left, *self.root.in_order(), self.right]

    def expanded_nodes(self) -> list[TreeNode]:
        """EXPANDED узлы в порядке обхода в ширину."""
        nodes = []
        current = [self.root]
        while current:
            nodes.extend(node for node in current if node.state is NodeState.EXPANDED)
            current = [child for node in current for child in node.children()]
        return nodes

    def __len__(self) -> int:
        """Количество вычисленных медиант (2**depth - 1)."""
        return sum(len(level) for level in self.levels)

    def to_dict(self) -> dict[str, Any]:
        """Экспорт в JSON-совместимый dict (контракт stern_brocot_tree)."""
        return {
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
            "depth": self.depth,
            "levels": [[fraction.to_dict() for fraction in level] for level in self.levels],
        }
