"""
Integer Safeguards - проверки целочисленных аргументов и нормализация

Модуль обеспечивает корректность целочисленной арифметики библиотеки:
- Строгая проверка int (bool и float отвергаются)
- Проверки знака (non-negative / positive)
- Взаимная простота пары
- Преобразование пары в несократимое рациональное число

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаменатель 0 исключителен ТОЛЬКО при нормализации в рациональное число
2. bool не считается int, даже если isinstance(True, int)
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from fractions import Fraction as Rational


# =============================================================================
# ПРОВЕРКИ ТИПА И ЗНАКА
# =============================================================================


def is_strict_int(value: object) -> bool:
    """
    Проверка, что значение является int, но не bool.

    Examples:
        >>> is_strict_int(3)
        True
        >>> is_strict_int(True)
        False
        >>> is_strict_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение строго целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__} {value!r}")


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация, что значение неотрицательное целое.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    validate_int(value, name)

    if value < 0:  # type: ignore[operator]
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: object, name: str) -> None:
    """
    Валидация, что значение положительное целое.

    Raises:
        TypeError: Если value не int
        ValueError: Если value <= 0
    """
    validate_int(value, name)

    if value <= 0:  # type: ignore[operator]
        raise ValueError(f"{name} must be positive, got {value}")


# =============================================================================
# ВЗАИМНАЯ ПРОСТОТА И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_coprime(first: int, second: int) -> bool:
    """
    Проверка взаимной простоты: gcd(first, second) == 1.

    Граничные пары (0, 1) и (1, 0) взаимно просты.

    Examples:
        >>> is_coprime(5, 7)
        True
        >>> is_coprime(2, 4)
        False
        >>> is_coprime(1, 0)
        True
    """
    return math.gcd(first, second) == 1


def to_normalized_rational(numerator: int, denominator: int) -> Rational:
    """
    Преобразование пары в несократимое рациональное число.

    Единственное место, где denominator == 0 является ошибкой:
    пара (1, 0) допустима как дробь Штерна-Броко, но не как рациональное число.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        fractions.Fraction в несократимой форме

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> to_normalized_rational(2, 4)
        Fraction(1, 2)
    """
    if denominator == 0:
        raise ZeroDivisionError(
            f"Cannot normalize {numerator}/{denominator}: denominator is zero"
        )

    return Rational(numerator, denominator)
