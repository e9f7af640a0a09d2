"""
Signature Mapper - путь в дереве как произведение матриц

Сигнатура: строка над алфавитом {L, R, I, 0, 1}, кодирующая путь от корня
дерева Штерна-Броко до узла:
- 'L' / '0' → LEFT
- 'R' / '1' → RIGHT
- 'I'       → IDENTITY

map_signature(s) = IDENTITY · step(s[0]) · step(s[1]) · ... · step(s[n-1])

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строка разбирается ЦЕЛИКОМ до первого умножения (неизвестный символ → ошибка)
2. Умножение строго слева направо: acc = acc @ step (не в обратном порядке)
3. Результат всегда унимодулярен (det == ±1)
4. Пустая строка → IDENTITY

Пример:
    map_signature("LRRL") == [[3, 4], [2, 3]]
    mediant → (denominator=7, numerator=5) → 5/7
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Optional

from stern_brocot.core.errors import SternBrocotError
from stern_brocot.core.math.integer_safeguards import (
    is_coprime,
    validate_positive_int,
)
from stern_brocot.core.math.matrix import IDENTITY, LEFT, RIGHT, Matrix2x2

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SignatureFormatError(SternBrocotError, ValueError):
    """Сигнатура содержит символ вне алфавита (или не является строкой)."""

    pass


# =============================================================================
# ШАГИ И АЛФАВИТ
# =============================================================================


class Step(str, Enum):
    """Элементарный шаг пути (каноническое обозначение)."""

    LEFT = "L"
    RIGHT = "R"
    IDENTITY = "I"


STEP_MATRICES: Final[dict[Step, Matrix2x2]] = {
    Step.LEFT: LEFT,
    Step.RIGHT: RIGHT,
    Step.IDENTITY: IDENTITY,
}


@dataclass(frozen=True)
class SignatureAlphabet:
    """
    Конфигурация алфавита сигнатур.

    По умолчанию:
    - left: L, 0
    - right: R, 1
    - identity: I

    Наборы символов не должны пересекаться.
    """

    left: frozenset[str] = field(default_factory=lambda: frozenset({"L", "0"}))
    right: frozenset[str] = field(default_factory=lambda: frozenset({"R", "1"}))
    identity: frozenset[str] = field(default_factory=lambda: frozenset({"I"}))

    def __post_init__(self) -> None:
        # Сигнатура разбирается посимвольно
        for symbol in self.left | self.right | self.identity:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(
                    f"Alphabet symbols must be single characters, got {symbol!r}"
                )

        if (
            self.left & self.right
            or self.left & self.identity
            or self.right & self.identity
        ):
            raise ValueError(
                f"Alphabet symbol sets must be disjoint: "
                f"left={sorted(self.left)}, right={sorted(self.right)}, "
                f"identity={sorted(self.identity)}"
            )

    def step_for(self, symbol: str) -> Optional[Step]:
        """Шаг для символа или None, если символ не входит в алфавит."""
        if symbol in self.left:
            return Step.LEFT
        if symbol in self.right:
            return Step.RIGHT
        if symbol in self.identity:
            return Step.IDENTITY
        return None


DEFAULT_ALPHABET: Final[SignatureAlphabet] = SignatureAlphabet()


# =============================================================================
# РАЗБОР И ОТОБРАЖЕНИЕ
# =============================================================================


def parse_signature(
    signature: str, alphabet: SignatureAlphabet = DEFAULT_ALPHABET
) -> tuple[Step, ...]:
    """
    Разбор сигнатуры в последовательность шагов.

    Args:
        signature: Строка пути (например, "LRRL" или "0110")
        alphabet: Алфавит символов (default: DEFAULT_ALPHABET)

    Returns:
        Кортеж Step в порядке чтения

    Raises:
        SignatureFormatError: Если signature не строка или содержит
            неизвестный символ

    Examples:
        >>> parse_signature("L1I")
        (<Step.LEFT: 'L'>, <Step.RIGHT: 'R'>, <Step.IDENTITY: 'I'>)
    """
    if not isinstance(signature, str):
        raise SignatureFormatError(
            f"Signature must be a string, got {type(signature).__name__}"
        )

    steps = []
    for position, symbol in enumerate(signature):
        step = alphabet.step_for(symbol)
        if step is None:
            raise SignatureFormatError(
                f"Unrecognized signature symbol {symbol!r} at position {position} "
                f"in {signature!r}"
            )
        steps.append(step)

    return tuple(steps)


def map_signature(
    signature: str, alphabet: SignatureAlphabet = DEFAULT_ALPHABET
) -> Matrix2x2:
    """
    Отображение сигнатуры в матрицу предков.

    Аккумулятор начинается с IDENTITY и умножается СПРАВА на матрицу
    каждого шага в порядке чтения строки.

    Args:
        signature: Строка пути
        alphabet: Алфавит символов

    Returns:
        Унимодулярная матрица, столбцы которой - левый и правый предки узла

    Raises:
        SignatureFormatError: Если сигнатура содержит неизвестный символ

    Examples:
        >>> map_signature("")
        Matrix2x2(a=1, b=0, c=0, d=1)
        >>> map_signature("LRRL")
        Matrix2x2(a=3, b=4, c=2, d=3)
    """
    steps = parse_signature(signature, alphabet)

    accumulator = IDENTITY
    for step in steps:
        accumulator = accumulator @ STEP_MATRICES[step]

    logger.debug("map_signature(%r) -> %s", signature, accumulator.rows())
    return accumulator


def normalize_signature(
    signature: str, alphabet: SignatureAlphabet = DEFAULT_ALPHABET
) -> str:
    """
    Каноническая форма сигнатуры: только 'L' и 'R'.

    Цифры заменяются буквами, IDENTITY-шаги удаляются (на матрицу не влияют).

    Examples:
        >>> normalize_signature("0I11")
        'LRR'
    """
    return "".join(
        step.value
        for step in parse_signature(signature, alphabet)
        if step is not Step.IDENTITY
    )


def signature_of(numerator: int, denominator: int) -> str:
    """
    Каноническая сигнатура положительной несократимой дроби.

    Обратная операция к map_signature для строк над {L, R}: сигнатура ведёт
    от корня 1/1 к узлу numerator/denominator. Серии одинаковых шагов
    вычисляются через divmod (разложение в цепную дробь), поэтому время
    не зависит от величины частных.

    Args:
        numerator: Числитель (> 0)
        denominator: Знаменатель (> 0)

    Returns:
        Строка над {L, R}; для 1/1 - пустая строка

    Raises:
        TypeError: Если аргументы не int
        ValueError: Если аргументы не положительны или не взаимно просты

    Examples:
        >>> signature_of(5, 7)
        'LRRL'
        >>> signature_of(3, 1)
        'RR'
    """
    validate_positive_int(numerator, "numerator")
    validate_positive_int(denominator, "denominator")

    if not is_coprime(numerator, denominator):
        raise ValueError(
            f"{numerator}/{denominator} is not in lowest terms and has no tree position"
        )

    runs = []
    while numerator != denominator:
        if numerator < denominator:
            count, remainder = divmod(denominator, numerator)
            if remainder == 0:
                count -= 1
            runs.append(Step.LEFT.value * count)
            denominator -= count * numerator
        else:
            count, remainder = divmod(numerator, denominator)
            if remainder == 0:
                count -= 1
            runs.append(Step.RIGHT.value * count)
            numerator -= count * denominator

    return "".join(runs)
