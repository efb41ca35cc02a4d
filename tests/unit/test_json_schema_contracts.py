"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора плоской записи:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и диапазонов
- Интеграция с NumberWithUnit (to_object, from_object_strict)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    MagnitudeRecordValidator,
    SchemaLoader,
    default_schema_loader,
    validate_magnitude_record,
)
from src.core.domain import NumberWithUnit


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_record():
    """Валидная плоская запись для тестирования."""
    return {"mantissa": 1.2345, "unit": 2}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_magnitude_record():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()

    schema = loader.load_schema("magnitude_record")

    assert schema["required"] == ["mantissa", "unit"]
    assert schema["properties"]["unit"]["maximum"] == 12


def test_schema_shipped_inside_package():
    """Схема лежит в каталоге пакета src/core/contracts/schema"""
    assert SCHEMA_DIR.parent.name == "contracts"
    assert (SCHEMA_DIR / "magnitude_record.json").is_file()


def test_default_loader_is_shared():
    """Загрузчик по умолчанию создаётся один раз и смотрит в каталог пакета"""
    loader = default_schema_loader()

    assert loader is default_schema_loader()
    assert loader.schema_dir == SCHEMA_DIR


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("magnitude_record")
    schema2 = loader.load_schema("magnitude_record")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path: Path):
    """Проверка ошибки при отсутствующем каталоге схем."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    """Невалидная JSON Schema отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - MAGNITUDE RECORD VALIDATION
# =============================================================================


def test_validator_accepts_valid_data(valid_record):
    """Валидация правильной записи."""
    validator = MagnitudeRecordValidator()
    validator.validate(valid_record)  # Не должно выбросить исключение
    assert validator.is_valid(valid_record)


def test_validate_function(valid_record):
    """Проверка функции validate_magnitude_record."""
    validate_magnitude_record(valid_record)  # Не должно выбросить исключение


def test_rejects_missing_required_field(valid_record):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_record.copy()
    del data["unit"]

    with pytest.raises(ValidationError) as exc_info:
        validate_magnitude_record(data)
    assert "'unit' is a required property" in str(exc_info.value)


def test_rejects_wrong_mantissa_type(valid_record):
    """Нечисловая мантисса отклоняется."""
    data = valid_record.copy()
    data["mantissa"] = "x"

    with pytest.raises(ValidationError) as exc_info:
        validate_magnitude_record(data)
    assert "is not of type 'number'" in str(exc_info.value)


def test_rejects_fractional_unit(valid_record):
    """Дробный индекс единицы отклоняется."""
    data = valid_record.copy()
    data["unit"] = 1.5

    with pytest.raises(ValidationError) as exc_info:
        validate_magnitude_record(data)
    assert "is not of type 'integer'" in str(exc_info.value)


@pytest.mark.parametrize("unit", [-1, 13])
def test_rejects_unit_out_of_table(valid_record, unit):
    """Индекс единицы вне [0, 12] отклоняется."""
    data = valid_record.copy()
    data["unit"] = unit

    assert not MagnitudeRecordValidator().is_valid(data)


def test_rejects_additional_properties(valid_record):
    """Лишние поля отклоняются строгой схемой."""
    data = {**valid_record, "number": 5}

    with pytest.raises(ValidationError):
        validate_magnitude_record(data)


def test_iter_errors_reports_all_violations():
    """iter_errors возвращает все нарушения сразу."""
    errors = list(MagnitudeRecordValidator().iter_errors({"mantissa": "x", "unit": 99}))
    assert len(errors) == 2


# =============================================================================
# TESTS - INTEGRATION WITH NumberWithUnit
# =============================================================================


@pytest.mark.parametrize(
    "value",
    [NumberWithUnit(), NumberWithUnit(123456, 1), NumberWithUnit(-0.5, 12)],
)
def test_to_object_conforms_to_schema(value):
    """to_object для единиц из таблицы соответствует схеме."""
    validate_magnitude_record(value.to_object())


def test_tolerant_parse_accepts_what_schema_rejects():
    """from_object не требует соответствия схеме."""
    data = {"mantissa": "x", "unit": 2}
    assert not MagnitudeRecordValidator().is_valid(data)
    assert NumberWithUnit.from_object(data) == NumberWithUnit(0, 2)

    with pytest.raises(ValidationError):
        NumberWithUnit.from_object_strict(data)
