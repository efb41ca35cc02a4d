"""
MagnitudeUnits — Таблица китайских единиц величины

Единственный источник истины для:
- упорядоченной таблицы суффиксов ("", "万", "亿", ... "极")
- основания шага (10 000 на один индекс)
- масштабного множителя между двумя индексами единиц

Таблица — неизменяемый кортеж уровня модуля, безопасен для совместного
чтения из любых потоков.
"""

from typing import Final

from loguru import logger

from src.core.math.numerical_safeguards import safe_pow


# =============================================================================
# ТАБЛИЦА ЕДИНИЦ
# =============================================================================

# Основание: каждый следующий индекс единицы = ×10 000
UNIT_BASE: Final[int] = 10_000

# Индекс 0 — без суффикса
NUMBER_UNITS: Final[tuple[str, ...]] = (
    "",
    "万",
    "亿",
    "兆",
    "京",
    "垓",
    "秭",
    "穰",
    "沟",
    "涧",
    "正",
    "载",
    "极",
)

# Последний индекс: дальше перенос невозможен
MAX_UNIT_INDEX: Final[int] = len(NUMBER_UNITS) - 1


# =============================================================================
# ПОИСК И МАСШТАБ
# =============================================================================


def is_valid_unit(unit: int) -> bool:
    """
    Проверка, что индекс единицы лежит в таблице.

    Args:
        unit: Индекс единицы

    Returns:
        True если unit целый (int или целочисленный float)
        и 0 <= unit <= MAX_UNIT_INDEX
    """
    if isinstance(unit, bool) or not isinstance(unit, (int, float)):
        return False
    if isinstance(unit, float) and not unit.is_integer():
        return False
    return 0 <= unit <= MAX_UNIT_INDEX


def unit_suffix(unit: int) -> str:
    """
    Суффикс единицы по индексу.

    Индекс вне таблицы даёт пустой суффикс (без IndexError).

    Args:
        unit: Индекс единицы

    Returns:
        Строка суффикса, например "万" для 1

    Examples:
        >>> unit_suffix(2)
        '亿'
        >>> unit_suffix(99)
        ''
    """
    if not is_valid_unit(unit):
        logger.debug(f"unit index {unit} outside suffix table, rendering without suffix")
        return ""
    return NUMBER_UNITS[int(unit)]


def unit_scale(unit_diff: int) -> float:
    """
    Множитель между двумя индексами единиц: 10000 ** unit_diff.

    Переполнение float даёт inf вместо OverflowError.

    Args:
        unit_diff: Разность индексов (обычно >= 0)

    Returns:
        Масштабный множитель

    Examples:
        >>> unit_scale(0)
        1.0
        >>> unit_scale(2)
        100000000.0
    """
    return safe_pow(UNIT_BASE, unit_diff)
