"""
MagnitudeRecord — Плоская запись величины для сериализации

Формат обмена: {"mantissa": number, "unit": integer}.

Модель толерантна ко входу: каждое поле, которое отсутствует или не является
числом, независимо заменяется на 0. Строгая проверка формата выполняется
JSON Schema валидатором (src.core.contracts), а не этой моделью.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_number


class MagnitudeRecord(BaseModel):
    """
    Плоская запись (мантисса, индекс единицы).

    Immutable модель (frozen=True). Лишние поля игнорируются.
    Числа переносятся как есть: int остаётся точным int любой величины,
    NaN/Inf в мантиссе допускаются.
    """

    mantissa: int | float = Field(default=0.0, description="Мантисса (может быть отрицательной)")
    unit: int | float = Field(default=0, description="Индекс единицы в таблице суффиксов")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("mantissa", mode="before")
    @classmethod
    def default_non_numeric_mantissa(cls, v: Any) -> int | float:
        """Нечисловая мантисса заменяется на 0."""
        if not is_number(v):
            logger.debug(f"record mantissa {v!r} is not numeric, defaulting to 0")
            return 0.0
        return v

    @field_validator("unit", mode="before")
    @classmethod
    def default_non_numeric_unit(cls, v: Any) -> int | float:
        """Нечисловой индекс единицы заменяется на 0."""
        if not is_number(v):
            logger.debug(f"record unit {v!r} is not numeric, defaulting to 0")
            return 0
        return v

    @classmethod
    def parse_tolerant(cls, record: Any) -> "MagnitudeRecord":
        """
        Разбор произвольного входа без исключений.

        Args:
            record: dict-подобный объект, MagnitudeRecord или что угодно

        Returns:
            MagnitudeRecord; для не-словаря — запись (0, 0)
        """
        if isinstance(record, cls):
            return record
        if not isinstance(record, Mapping):
            logger.debug(f"record {type(record).__name__} is not a mapping, defaulting to (0, 0)")
            return cls()
        return cls.model_validate(
            {key: record[key] for key in ("mantissa", "unit") if key in record}
        )
