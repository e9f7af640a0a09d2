"""
Fraction - Модель дроби Штерна-Броко

Дробь Штерна-Броко - упорядоченная пара (numerator, denominator):
1. Разделитель '/' - символ отображения, а не операция деления
2. 1/0 не является исключительным значением
3. Сложение - медианта: 0/1 + 1/0 => 1/1 (пары складываются покомпонентно)

Immutable Pydantic модель. Пара хранится как задана, без сокращения.
Опционально хранит происхождение: матрицу предков и исходную сигнатуру.

Пример:
    f1 = Fraction(0, 1)
    f2 = Fraction(1, 0)
    f3 = f1 + f2          # Fraction(1, 1)
    f3.to_pair()          # (1, 1)
    Fraction.from_signature("LRRL").to_string()  # '5/7'
"""

from fractions import Fraction as Rational
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from stern_brocot.core.errors import SternBrocotError
from stern_brocot.core.math.integer_safeguards import (
    is_coprime,
    is_strict_int,
    to_normalized_rational,
)
from stern_brocot.core.math.matrix import Matrix2x2, Vector2
from stern_brocot.core.math.matrix import left_ancestor as matrix_left_ancestor
from stern_brocot.core.math.matrix import mediant as matrix_mediant
from stern_brocot.core.math.matrix import right_ancestor as matrix_right_ancestor
from stern_brocot.core.signature.mapper import map_signature, parse_signature, signature_of


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingProvenanceError(SternBrocotError, LookupError):
    """Запрошен предок у дроби, построенной без матрицы предков."""

    pass


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Дробь Штерна-Броко.

    Immutable модель (frozen=True). mediant() и '+' всегда создают новый
    экземпляр. Равенство и хэш определяются только парой
    (numerator, denominator); происхождение (ancestors, signature) -
    метаданные и в сравнении не участвует.

    Внутреннее векторное представление: (denominator, numerator), этот
    порядок важен только для взаимодействия с матрицами.
    """

    numerator: StrictInt = Field(0, description="Числитель (хранится без сокращения)")
    denominator: StrictInt = Field(
        1, description="Знаменатель (0 допустим: 1/0 - граница 'бесконечность')"
    )

    # Происхождение
    ancestors: Optional[Matrix2x2] = Field(
        None, description="Матрица предков: столбцы - левый и правый предок"
    )
    signature: Optional[str] = Field(
        None, description="Сигнатура, из которой построена дробь"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int = 0, denominator: int = 1, **data: Any) -> None:
        super().__init__(numerator=numerator, denominator=denominator, **data)

    # -------------------------------------------------------------------------
    # Валидация происхождения
    # -------------------------------------------------------------------------

    @field_validator("ancestors", mode="before")
    @classmethod
    def validate_ancestor_entries(cls, v: Any) -> Any:
        """Элементы матрицы предков - строго int (без приведения float/bool)."""
        if v is None:
            return v
        if isinstance(v, (tuple, list)) and len(v) == 4:
            for entry in v:
                if not is_strict_int(entry):
                    raise ValueError(
                        f"ancestors entries must be ints, got {type(entry).__name__} {entry!r}"
                    )
        return v

    @field_validator("signature")
    @classmethod
    def validate_signature_symbols(cls, v: Optional[str]) -> Optional[str]:
        """
        Сигнатура должна разбираться в алфавите по умолчанию.

        SignatureFormatError (ValueError) оборачивается pydantic в ValidationError.
        """
        if v is not None:
            parse_signature(v)
        return v

    @model_validator(mode="after")
    def validate_provenance_matches_pair(self) -> "Fraction":
        """
        Согласованность происхождения с парой:
        - mediant(ancestors) == (denominator, numerator)
        - map_signature(signature) == ancestors, если заданы оба
        """
        if self.ancestors is None:
            return self

        if matrix_mediant(self.ancestors) != self.to_vector():
            raise ValueError(
                f"ancestors {self.ancestors.rows()} do not produce "
                f"{self.numerator}/{self.denominator}"
            )

        if self.signature is not None and map_signature(self.signature) != self.ancestors:
            raise ValueError(
                f"signature {self.signature!r} does not map to ancestors "
                f"{self.ancestors.rows()}"
            )
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_matrix(
        cls, matrix: Matrix2x2, signature: Optional[str] = None
    ) -> "Fraction":
        """
        Дробь-медианта столбцов матрицы предков.

        Args:
            matrix: Матрица предков
            signature: Сигнатура, из которой получена матрица (optional)

        Returns:
            Fraction с ancestors=matrix и signature=signature
        """
        vector = matrix_mediant(matrix)
        return cls(
            vector.bottom, vector.top, ancestors=matrix, signature=signature
        )

    @classmethod
    def from_signature(cls, signature: str) -> "Fraction":
        """
        Дробь по сигнатуре пути.

        Raises:
            SignatureFormatError: Если сигнатура содержит неизвестный символ
        """
        return cls.from_matrix(map_signature(signature), signature)

    @classmethod
    def from_vector(cls, vector: Vector2) -> "Fraction":
        """Дробь из вектора (denominator, numerator)."""
        return cls(vector.bottom, vector.top)

    # -------------------------------------------------------------------------
    # Медианта
    # -------------------------------------------------------------------------

    def mediant(self, other: "Fraction") -> "Fraction":
        """
        Медианта двух дробей: покомпонентная сумма пар.

        Это НЕ сложение рациональных чисел: 1/2 + 1/3 => 2/5.

        Raises:
            TypeError: Если other не Fraction
        """
        if not isinstance(other, Fraction):
            raise TypeError(
                f"mediant requires a Fraction, got {type(other).__name__}"
            )
        return Fraction(
            self.numerator + other.numerator,
            self.denominator + other.denominator,
        )

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.mediant(other)

    # -------------------------------------------------------------------------
    # Предки
    # -------------------------------------------------------------------------

    @property
    def has_provenance(self) -> bool:
        return self.ancestors is not None

    def left_ancestor(self) -> Vector2:
        """
        Левый предок как вектор (denominator, numerator).

        Raises:
            MissingProvenanceError: Если дробь построена без матрицы предков
        """
        return matrix_left_ancestor(self._require_ancestors())

    def right_ancestor(self) -> Vector2:
        """
        Правый предок как вектор (denominator, numerator).

        Raises:
            MissingProvenanceError: Если дробь построена без матрицы предков
        """
        return matrix_right_ancestor(self._require_ancestors())

    def _require_ancestors(self) -> Matrix2x2:
        if self.ancestors is None:
            raise MissingProvenanceError(
                f"Fraction {self.to_string()} has no ancestor matrix "
                f"(construct it with from_signature or from_matrix)"
            )
        return self.ancestors

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def to_pair(self) -> tuple[int, int]:
        return (self.numerator, self.denominator)

    def to_vector(self) -> Vector2:
        """Вектор (denominator, numerator) для работы с матрицами."""
        return Vector2(self.denominator, self.numerator)

    def to_normalized_rational(self) -> Rational:
        """
        Несократимое рациональное число.

        Raises:
            ZeroDivisionError: Если denominator == 0 (например, 1/0)
        """
        return to_normalized_rational(self.numerator, self.denominator)

    def to_signature(self) -> str:
        """
        Каноническая сигнатура (над {L, R}) положительной несократимой дроби.

        Вычисляется по паре, а не берётся из поля signature.

        Raises:
            ValueError: Если дробь не положительна или сократима (0/1, 1/0, 2/4)
        """
        return signature_of(self.numerator, self.denominator)

    def is_reduced(self) -> bool:
        """True если gcd(numerator, denominator) == 1."""
        return is_coprime(self.numerator, self.denominator)

    def to_dict(self) -> dict[str, Any]:
        """Экспорт в JSON-совместимый dict (контракт stern_brocot_fraction)."""
        return {
            "numerator": self.numerator,
            "denominator": self.denominator,
            "signature": self.signature,
            "ancestors": (
                [list(row) for row in self.ancestors.rows()]
                if self.ancestors is not None
                else None
            ),
        }

    # -------------------------------------------------------------------------
    # Сравнение и отображение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.to_pair() == other.to_pair()

    def __hash__(self) -> int:
        return hash(self.to_pair())

    def __str__(self) -> str:
        return self.to_string()
