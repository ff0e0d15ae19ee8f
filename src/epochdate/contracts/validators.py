"""
JSON Schema Contract Validators

Модуль для валидации JSON токенов и записей согласно формальным JSON
Schema контрактам. Использует библиотеку jsonschema.

Схемы (epochdate/contracts/schema/):
- date.json: текстовый токен Date ("2020-01-15")
- year_month.json: текстовый токен YearMonth ("2020-01" или "2020-01-15")
- dated_record.json: JSON-представление DatedRecord

Схема проверяет только синтаксис токена; диапазон проверяется при
декодировании (Date.from_text / YearMonth.from_text).
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'date')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
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

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class DateTokenValidator(ContractValidator):
    """Валидатор текстового токена Date"""

    def __init__(self):
        super().__init__("date")


class YearMonthTokenValidator(ContractValidator):
    """Валидатор текстового токена YearMonth"""

    def __init__(self):
        super().__init__("year_month")


class DatedRecordValidator(ContractValidator):
    """Валидатор JSON-представления DatedRecord"""

    def __init__(self):
        super().__init__("dated_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_date_token(data: Any) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если токен не соответствует date.json
    """
    DateTokenValidator().validate(data)


def validate_year_month_token(data: Any) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если токен не соответствует year_month.json
    """
    YearMonthTokenValidator().validate(data)


def validate_dated_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если запись не соответствует dated_record.json
    """
    DatedRecordValidator().validate(data)
