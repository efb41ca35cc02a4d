"""
Magnitude Record Contract

Строгая проверка плоской записи {"mantissa": number, "unit": integer 0..12}
по JSON Schema (draft 2020-12, библиотека jsonschema).

Схемы поставляются вместе с пакетом (src/core/contracts/schema/*.json) и
читаются при первом обращении, а не при импорте модуля.

Толерантный разбор (NumberWithUnit.from_object) схему не использует.
Строгий разбор (NumberWithUnit.from_object_strict) сначала проверяет запись
здесь и только затем строит значение.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from loguru import logger

# Каталог схем внутри пакета
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

MAGNITUDE_RECORD_SCHEMA: Final[str] = "magnitude_record"


# =============================================================================
# SCHEMA FILES
# =============================================================================


def _read_schema_file(path: Path) -> Dict[str, Any]:
    # Файл читается целиком и сразу проходит meta-validation
    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
    return schema


class SchemaLoader:
    """
    Каталог JSON Schema файлов с кэшем по имени схемы.

    Args:
        schema_dir: Каталог со схемами (default: SCHEMA_DIR пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Повторный вызов возвращает тот же объект из кэша.

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            json.JSONDecodeError: Файл не является JSON
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = _read_schema_file(path)
        logger.debug(f"schema {schema_name!r} loaded from {path}")
        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_schema_loader() -> SchemaLoader:
    """Загрузчик схем пакета; создаётся при первом вызове."""
    return SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка данных против одной именованной схемы.

    Args:
        schema_name: Имя схемы без расширения
        loader: Источник схем (default: default_schema_loader())
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class MagnitudeRecordValidator(ContractValidator):
    """Проверка плоской записи величины."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(MAGNITUDE_RECORD_SCHEMA, loader)


@lru_cache(maxsize=None)
def _magnitude_record_validator() -> MagnitudeRecordValidator:
    return MagnitudeRecordValidator()


def validate_magnitude_record(data: Any) -> None:
    """
    Строгая проверка плоской записи величины.

    Args:
        data: Предполагаемая запись {"mantissa": ..., "unit": ...}

    Raises:
        ValidationError: Запись не соответствует схеме magnitude_record
    """
    _magnitude_record_validator().validate(data)
