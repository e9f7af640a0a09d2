"""
JSON Schema Contract Validators

Модуль для валидации JSON-совместимых dict, экспортируемых
Fraction.to_dict() и Tree.to_dict().
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (в пакете, contracts/schema/):
- stern_brocot_fraction.json
- stern_brocot_tree.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

FRACTION_SCHEMA: Final[str] = "stern_brocot_fraction"
TREE_SCHEMA: Final[str] = "stern_brocot_tree"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'stern_brocot_tree')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации схемы."""
        return self.validator.iter_errors(data)


class FractionValidator(ContractValidator):
    """Валидатор для stern_brocot_fraction контракта."""

    def __init__(self):
        super().__init__(FRACTION_SCHEMA)


class TreeValidator(ContractValidator):
    """
    Валидатор для stern_brocot_tree контракта.

    Помимо схемы проверяет форму дерева, которую JSON Schema не выражает:
    len(levels) == depth и len(levels[k - 1]) == 2**(k - 1).
    """

    def __init__(self):
        super().__init__(TREE_SCHEMA)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая ошибка схемы или формы дерева
        """
        for error in self.iter_errors(data):
            raise error

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Ошибки схемы, затем ошибки формы дерева.

        Форма проверяется только для данных, прошедших схему.
        """
        schema_errors = list(self.validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return

        levels = data["levels"]
        if len(levels) != data["depth"]:
            yield ValidationError(
                f"Tree has {len(levels)} levels but depth is {data['depth']}"
            )

        for index, level in enumerate(levels, start=1):
            expected = 2 ** (index - 1)
            if len(level) != expected:
                yield ValidationError(
                    f"Level {index} has {len(level)} fractions, expected {expected}"
                )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация экспортированной дроби.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FractionValidator().validate(data)


def validate_tree(data: Dict[str, Any]) -> None:
    """
    Валидация экспортированного дерева.

    Raises:
        ValidationError: Если данные не соответствуют схеме или форме дерева
    """
    TreeValidator().validate(data)
