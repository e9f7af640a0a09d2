"""
Matrix Algebra - 2x2 целочисленные матрицы и 2-векторы

Минимальная самодостаточная алгебра для дерева Штерна-Броко:
- Vector2: неизменяемый 2-вектор (для дробей: (denominator, numerator))
- Matrix2x2: неизменяемая матрица [[a, b], [c, d]]
- Константы IDENTITY, LEFT, RIGHT
- Столбцы матрицы = левый и правый предки узла

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые, ни один аргумент не изменяется
2. Любое произведение IDENTITY/LEFT/RIGHT имеет determinant == ±1
3. mediant(M) не сокращается (поэлементная сумма столбцов)

Python int имеет произвольную точность, поэтому рост элементов матрицы
(экспоненциальный по длине пути) не приводит к переполнению.
"""

from typing import Final, NamedTuple, Sequence


# =============================================================================
# ТИПЫ
# =============================================================================


class Vector2(NamedTuple):
    """
    Целочисленный 2-вектор (столбец матрицы).

    Для дробей Штерна-Броко порядок компонент: (denominator, numerator).
    """

    top: int
    bottom: int

    def plus(self, other: "Vector2") -> "Vector2":
        """Поэлементная сумма (tuple.__add__ означает конкатенацию, поэтому отдельный метод)."""
        return Vector2(self.top + other.top, self.bottom + other.bottom)


class Matrix2x2(NamedTuple):
    """
    Целочисленная матрица 2x2 с элементами по строкам: [[a, b], [c, d]].

    Умножение доступно как multiply(A, B) и как A @ B.
    """

    a: int
    b: int
    c: int
    d: int

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix2x2":
        """
        Построение из списка строк.

        Raises:
            ValueError: Если форма не 2x2
        """
        if len(rows) != 2 or any(len(row) != 2 for row in rows):
            raise ValueError(f"Expected 2x2 rows, got {rows!r}")
        (a, b), (c, d) = rows
        return cls(a, b, c, d)

    @classmethod
    def from_columns(cls, left: Vector2, right: Vector2) -> "Matrix2x2":
        """Построение из двух столбцов (левый предок, правый предок)."""
        return cls(left.top, right.top, left.bottom, right.bottom)

    def rows(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return ((self.a, self.b), (self.c, self.d))

    def __matmul__(self, other: "Matrix2x2") -> "Matrix2x2":
        if not isinstance(other, Matrix2x2):
            return NotImplemented
        return multiply(self, other)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

IDENTITY: Final[Matrix2x2] = Matrix2x2(1, 0, 0, 1)

# Шаг влево: правый предок заменяется медиантой
LEFT: Final[Matrix2x2] = Matrix2x2(1, 1, 0, 1)

# Шаг вправо: левый предок заменяется медиантой
RIGHT: Final[Matrix2x2] = Matrix2x2(1, 0, 1, 1)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def multiply(m1: Matrix2x2, m2: Matrix2x2) -> Matrix2x2:
    """
    Стандартное матричное произведение m1 * m2.

    Examples:
        >>> multiply(LEFT, RIGHT)
        Matrix2x2(a=2, b=1, c=1, d=1)
        >>> multiply(RIGHT, LEFT)
        Matrix2x2(a=1, b=1, c=1, d=2)
    """
    return Matrix2x2(
        m1.a * m2.a + m1.b * m2.c,
        m1.a * m2.b + m1.b * m2.d,
        m1.c * m2.a + m1.d * m2.c,
        m1.c * m2.b + m1.d * m2.d,
    )


def left_ancestor(m: Matrix2x2) -> Vector2:
    """Первый столбец: (M[0][0], M[1][0])."""
    return Vector2(m.a, m.c)


def right_ancestor(m: Matrix2x2) -> Vector2:
    """Второй столбец: (M[0][1], M[1][1])."""
    return Vector2(m.b, m.d)


def mediant(m: Matrix2x2) -> Vector2:
    """
    Медианта предков: поэлементная сумма двух столбцов (без сокращения).

    Examples:
        >>> mediant(IDENTITY)
        Vector2(top=1, bottom=1)
    """
    return left_ancestor(m).plus(right_ancestor(m))


def determinant(m: Matrix2x2) -> int:
    return m.a * m.d - m.b * m.c


def is_unimodular(m: Matrix2x2) -> bool:
    """True если |det(M)| == 1."""
    return abs(determinant(m)) == 1
