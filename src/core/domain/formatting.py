"""
Magnitude Formatting — Строковое представление величины с единицей

Правила отображения (в порядке приоритета):
1. Нечисловая / неконечная мантисса → "0"
2. Отрицательная мантисса → "-" + представление |мантиссы|
3. Локальный перенос: пока мантисса >= 10000 и единица не последняя,
   мантисса /= 10000, единица += 1 (исходное значение не меняется)
4. Мантисса >= 1000 при единице > 0 → целая часть + суффикс ("12345万")
5. Единица > 0 → два знака после запятой без хвостовых нулей + суффикс
   ("1.2万", "1万")
6. Единица 0 → целая часть без суффикса

Представление намеренно с потерями и не предназначено для обратного разбора.
"""

import math
from dataclasses import dataclass

from loguru import logger

from src.core.domain.units import MAX_UNIT_INDEX, UNIT_BASE, unit_suffix
from src.core.math.numerical_safeguards import as_number, format_fixed, is_valid_float, scale_down


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация отображения величины.

    Значения по умолчанию задают стандартное отображение;
    переопределение нужно только для особых экранов.
    """

    # Знаков после запятой для дробного отображения
    fraction_digits: int = 2

    # Начиная с этой мантиссы (при единице > 0) дробная часть не показывается
    integer_display_threshold: float = 1000.0

    # Представление для NaN/Inf и нечисловых мантисс
    degenerate_text: str = "0"


DEFAULT_FORMAT_CONFIG = FormatConfig()


# =============================================================================
# FORMATTING
# =============================================================================


def _trim_fraction(text: str) -> str:
    # "1.20" → "1.2", "1.00" → "1"
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_magnitude(
    mantissa: float,
    unit: int,
    config: FormatConfig | None = None,
) -> str:
    """
    Строковое представление пары (мантисса, единица).

    Args:
        mantissa: Мантисса (любое значение, включая NaN/Inf)
        unit: Индекс единицы
        config: Конфигурация отображения (default: DEFAULT_FORMAT_CONFIG)

    Returns:
        Строка вида "1.23亿", "5000万", "42" или "-0.5万"

    Examples:
        >>> format_magnitude(12345, 1)
        '1.23亿'
        >>> format_magnitude(1.2, 1)
        '1.2万'
        >>> format_magnitude(float('nan'), 3)
        '0'
    """
    config = config or DEFAULT_FORMAT_CONFIG

    if not is_valid_float(mantissa):
        logger.debug(f"degenerate mantissa {mantissa!r} rendered as {config.degenerate_text!r}")
        return config.degenerate_text

    if mantissa < 0:
        return "-" + format_magnitude(-mantissa, unit, config)

    # нечисловая единица ведёт себя как NaN: ни переноса, ни суффикса
    unit = as_number(unit)
    number = mantissa
    while number >= UNIT_BASE and unit < MAX_UNIT_INDEX:
        number = scale_down(number, UNIT_BASE)
        unit += 1

    if number >= config.integer_display_threshold and unit > 0:
        return f"{math.floor(number)}{unit_suffix(unit)}"

    if unit > 0:
        text = _trim_fraction(format_fixed(number, config.fraction_digits))
        return text + unit_suffix(unit)

    return str(math.floor(number))
