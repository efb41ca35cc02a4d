"""
NumberWithUnit — Величина с китайской единицей

Значение = mantissa * 10000 ** unit, где unit — индекс в таблице
("", "万", "亿", "兆", ..., "极").

Immutable value object: все операции возвращают новый экземпляр.

ИНВАРИАНТЫ:
1. Конструктор ничего не проверяет и не нормализует; значение может
   временно находиться вне диапазона (мантисса >= 10000 при единице < 12)
2. Нормализованное значение: |mantissa| < 10000 ИЛИ unit == 12;
   обеспечивается только carry()/normalize()
3. Сложение/вычитание/деление двух величин: операнд с БОЛЬШЕЙ единицей
   пересчитывается в МЕНЬШУЮ единицу; единица результата = min(units)
4. Ни одна операция не выбрасывает исключений (NaN/Inf вместо ошибок);
   нечисловая мантисса или единица ведёт себя как NaN. Исключение бросает
   только строгий разбор from_object_strict()
5. int-мантисса любой величины остаётся точным int, пока операция не
   требует float
"""

import operator
from dataclasses import dataclass
from typing import Any

from src.core.contracts import validate_magnitude_record
from src.core.domain.formatting import FormatConfig, format_magnitude
from src.core.domain.record import MagnitudeRecord
from src.core.domain.units import MAX_UNIT_INDEX, UNIT_BASE, unit_scale, unit_suffix
from src.core.math.numerical_safeguards import (
    as_number,
    ieee_apply,
    ieee_divide,
    is_number,
    scale_down,
)


@dataclass(frozen=True)
class NumberWithUnit:
    """
    Мантисса, масштабированная степенью 10 000.

    Attributes:
        mantissa: Мантисса (может быть отрицательной; NaN/Inf допускаются
            как деградировавший вход)
        unit: Индекс единицы (0 = без суффикса, 1 = 万, 2 = 亿, ...)
    """

    mantissa: float = 0.0
    unit: int = 0

    # =========================================================================
    # НОРМАЛИЗАЦИЯ
    # =========================================================================

    def can_carry(self) -> bool:
        """
        Мантисса достигла порога переноса (>= 10000).

        Не учитывает границу таблицы: на последней единице возвращает True,
        хотя carry() значение уже не изменит. Нечисловая мантисса → False.
        """
        return is_number(self.mantissa) and self.mantissa >= UNIT_BASE

    def _below_last_unit(self) -> bool:
        return as_number(self.unit) < MAX_UNIT_INDEX

    def carry(self) -> "NumberWithUnit":
        """
        Один шаг переноса: (m, u) → (m / 10000, u + 1).

        Выполняется только если m >= 10000 и u < 12, иначе возвращается
        равная копия. Это один шаг, не цикл (см. normalize()).
        """
        if self.can_carry() and self._below_last_unit():
            return NumberWithUnit(scale_down(self.mantissa, UNIT_BASE), self.unit + 1)
        return NumberWithUnit(self.mantissa, self.unit)

    def normalize(self) -> "NumberWithUnit":
        """
        Повторяет carry(), пока перенос возможен.

        Returns:
            Значение с mantissa < 10000 либо на последней единице
        """
        current = self
        while current.can_carry() and current._below_last_unit():
            current = current.carry()
        return current

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    @property
    def suffix(self) -> str:
        """Суффикс текущей единицы ("" вне таблицы)."""
        return unit_suffix(self.unit)

    def to_string(self, config: FormatConfig | None = None) -> str:
        """
        Человекочитаемое представление: "1.23亿", "5000万", "-0.5万", "42".

        Нормализация выполняется на локальной копии, сам объект не меняется.
        Правила — см. src.core.domain.formatting.
        """
        return format_magnitude(self.mantissa, self.unit, config)

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _aligned(self, other: "NumberWithUnit") -> tuple[float, float, int]:
        """
        Приведение двух операндов к общей (меньшей) единице.

        Returns:
            (мантисса self, мантисса other, общая единица)
        """
        left, right = as_number(self.mantissa), as_number(other.mantissa)
        self_unit, other_unit = as_number(self.unit), as_number(other.unit)

        if self_unit == other_unit:
            return left, right, self.unit

        if self_unit > other_unit:
            scaled = ieee_apply(operator.mul, left, unit_scale(self_unit - other_unit))
            return scaled, right, other.unit

        scaled = ieee_apply(operator.mul, right, unit_scale(other_unit - self_unit))
        return left, scaled, self.unit

    def add(self, other: "NumberWithUnit") -> "NumberWithUnit":
        """
        Сложение с приведением к меньшей единице.

        Example:
            (5000, 0) + (3000, 1) → (30005000, 0)
        """
        left, right, unit = self._aligned(other)
        return NumberWithUnit(ieee_apply(operator.add, left, right), unit)

    def subtract(self, other: "NumberWithUnit") -> "NumberWithUnit":
        """Вычитание с приведением к меньшей единице."""
        left, right, unit = self._aligned(other)
        return NumberWithUnit(ieee_apply(operator.sub, left, right), unit)

    def multiply(self, factor: float) -> "NumberWithUnit":
        """Умножение на скаляр; единица не меняется. Нечисловой множитель → NaN."""
        product = ieee_apply(operator.mul, as_number(self.mantissa), as_number(factor))
        return NumberWithUnit(product, self.unit)

    def divide(self, divisor: "NumberWithUnit | float") -> "NumberWithUnit":
        """
        Деление на скаляр или на другую величину.

        Скаляр: мантисса / divisor, единица не меняется.
        NumberWithUnit: приведение к меньшей единице, затем деление мантисс;
        единица результата = min(units).

        Деление на ноль даёт ±inf или NaN (IEEE-754), без исключения.
        """
        if isinstance(divisor, NumberWithUnit):
            left, right, unit = self._aligned(divisor)
            return NumberWithUnit(ieee_divide(left, right), unit)
        quotient = ieee_divide(as_number(self.mantissa), as_number(divisor))
        return NumberWithUnit(quotient, self.unit)

    def expanded_value(self) -> float:
        """
        Полное числовое значение mantissa * 10000 ** unit.

        Переполнение даёт ±inf.
        """
        scale = unit_scale(as_number(self.unit))
        return ieee_apply(operator.mul, as_number(self.mantissa), scale)

    def __add__(self, other: Any) -> "NumberWithUnit":
        if not isinstance(other, NumberWithUnit):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "NumberWithUnit":
        if not isinstance(other, NumberWithUnit):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: Any) -> "NumberWithUnit":
        if isinstance(factor, NumberWithUnit):
            # умножение величины на величину не определено
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> "NumberWithUnit":
        return self.divide(divisor)

    def __neg__(self) -> "NumberWithUnit":
        return NumberWithUnit(-as_number(self.mantissa), self.unit)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================
    #
    # При разных единицах мантиссы НЕ сравниваются: больше та величина, у
    # которой больше индекс единицы. Это сравнение индексов, а не значений:
    # (1, 0).ge((0, 1)) == False, хотя 1 > 0. Операторы <, >, >= не
    # определены. Нечисловые поля сравниваются как NaN (результат False).

    def ge(self, other: "NumberWithUnit") -> bool:
        """Больше или равно: при равных единицах — по мантиссе, иначе self.unit > other.unit."""
        self_unit, other_unit = as_number(self.unit), as_number(other.unit)
        if self_unit == other_unit:
            return as_number(self.mantissa) >= as_number(other.mantissa)
        return self_unit > other_unit

    def greater_than(self, other: "NumberWithUnit") -> bool:
        """Строго больше: при равных единицах — по мантиссе, иначе self.unit > other.unit."""
        self_unit, other_unit = as_number(self.unit), as_number(other.unit)
        if self_unit == other_unit:
            return as_number(self.mantissa) > as_number(other.mantissa)
        return self_unit > other_unit

    def less_than(self, other: "NumberWithUnit") -> bool:
        """Строго меньше: при равных единицах — по мантиссе, иначе self.unit < other.unit."""
        self_unit, other_unit = as_number(self.unit), as_number(other.unit)
        if self_unit == other_unit:
            return as_number(self.mantissa) < as_number(other.mantissa)
        return self_unit < other_unit

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_object(self) -> dict[str, Any]:
        """Плоская запись {"mantissa": ..., "unit": ...} без нормализации."""
        return {"mantissa": self.mantissa, "unit": self.unit}

    @classmethod
    def from_object(cls, record: Any) -> "NumberWithUnit":
        """
        Восстановление из плоской записи без исключений.

        Не-словарь → (0, 0); отсутствующее или нечисловое поле → 0,
        независимо для каждого поля.

        Example:
            from_object({"mantissa": "x", "unit": 2}) → (0, 2)
        """
        parsed = MagnitudeRecord.parse_tolerant(record)
        return cls(parsed.mantissa, parsed.unit)

    @classmethod
    def from_object_strict(cls, record: Any) -> "NumberWithUnit":
        """
        Восстановление из записи, проверенной схемой magnitude_record.

        В отличие от from_object(), ничего не подставляет по умолчанию:
        запись обязана содержать числовую мантиссу и целый индекс единицы
        из таблицы, без лишних полей.

        Raises:
            jsonschema.ValidationError: Запись не соответствует схеме
        """
        validate_magnitude_record(record)
        return cls(record["mantissa"], record["unit"])
