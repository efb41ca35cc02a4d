"""
Numerical Safeguards — Safe Float Primitives

Модуль обеспечивает тотальность всех операций над мантиссой NumberWithUnit:
- Проверка конечности значения (NaN/Inf и нечисловые типы; int всегда конечен)
- Бинарные операции и деление на основание без OverflowError для больших int
- Деление по правилам IEEE-754 без ZeroDivisionError
- Возведение в степень без OverflowError (переполнение → inf)
- Округление до фиксированного числа знаков (round half up по точному
  двоичному значению float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не выбрасывает исключений для числовых входов
2. Переполнение даёт ±inf, неопределённость даёт NaN (как в IEEE-754)
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Callable, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Точность decimal-контекста для округления: достаточно для любого конечного
# float (до 309 цифр целой части плюс дробная часть)
DECIMAL_FORMAT_PRECISION: Final[int] = 400


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_number(value: Any) -> bool:
    """
    Является ли значение числом мантиссы (int или float, но не bool).

    Examples:
        >>> is_number(10**400)
        True
        >>> is_number(True)
        False
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом.

    bool не считается числом, нечисловые типы (str, None, ...) невалидны.
    Любой int конечен, даже если не помещается во float.

    Args:
        value: Проверяемое значение (любой тип)

    Returns:
        True если значение — int или конечный float, False иначе

    Examples:
        >>> is_valid_float(10.0)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(10**400)
        True
        >>> is_valid_float("10")
        False
    """
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def as_number(value: Any) -> float:
    """
    Нечисловое значение заменяется на NaN, числа возвращаются без изменений.

    Examples:
        >>> as_number(7)
        7
        >>> as_number("x")
        nan
    """
    if is_number(value):
        return value
    return math.nan


def to_float(value: float) -> float:
    """
    Приведение числа к float; int за пределами float → ±inf.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_apply(op: Callable[[Any, Any], Any], left: float, right: float) -> float:
    """
    Бинарная операция (+, -, *) без OverflowError.

    int-операнды сначала комбинируются точно; если смешанная операция
    int/float переполняет float, операнды приводятся через to_float и
    результат получается по правилам IEEE-754 (±inf / NaN).

    Examples:
        >>> ieee_apply(operator.add, 2**53, 1)
        9007199254740993
        >>> ieee_apply(operator.mul, 10**400, 1.5)
        inf
    """
    try:
        return op(left, right)
    except OverflowError:
        return op(to_float(left), to_float(right))


def scale_down(value: float, base: int) -> float:
    """
    Деление на основание единицы: value / base.

    int, для которого частное не помещается во float, делится нацело и
    остаётся точным int; дробная часть при таком порядке величины
    несущественна.

    Examples:
        >>> scale_down(12345, 10000)
        1.2345
        >>> scale_down(10**400, 10000) == 10**396
        True
    """
    try:
        return value / base
    except OverflowError:
        return value // base


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    В отличие от оператора `/`, никогда не выбрасывает ZeroDivisionError:
    - x / ±0 при x != 0 → ±inf (знак = знак x * знак делителя)
    - 0 / 0 и NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        # NaN != NaN; сравнение безопасно и для больших int
        if numerator != numerator or numerator == 0:
            return math.nan
        signed_inf = math.inf if numerator > 0 else -math.inf
        return signed_inf * math.copysign(1.0, denominator)
    except OverflowError:
        if isinstance(numerator, int) and isinstance(denominator, int):
            # частное двух int не помещается во float
            negative = (numerator < 0) != (denominator < 0)
            return -math.inf if negative else math.inf
        # int за пределами float в смешанной операции
        return ieee_divide(to_float(numerator), to_float(denominator))


def safe_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень с переполнением в inf вместо OverflowError.

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent, либо inf при переполнении

    Examples:
        >>> safe_pow(10000.0, 2)
        100000000.0
        >>> safe_pow(10000.0, 400)
        inf
    """
    try:
        return float(base) ** exponent
    except OverflowError:
        return math.inf


# =============================================================================
# ОКРУГЛЕНИЕ И ФОРМАТИРОВАНИЕ
# =============================================================================


def round_half_up(value: float, digits: int) -> Decimal:
    """
    Округление до `digits` знаков после запятой (round half up).

    Округляется точное двоичное значение float: 0.125 → 0.13, а 1.005
    (двоичное 1.00499999...) → 1.00.

    Args:
        value: Конечное значение float
        digits: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение как Decimal с ровно `digits` знаками

    Raises:
        ValueError: Если digits < 0
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_FORMAT_PRECISION
        return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_fixed(value: float, digits: int) -> str:
    """
    Строковое представление с фиксированным числом знаков после запятой.

    Отрицательный ноль печатается как положительный ("0.00", не "-0.00").

    Examples:
        >>> format_fixed(1.2, 2)
        '1.20'
        >>> format_fixed(0.125, 2)
        '0.13'
        >>> format_fixed(-0.0, 2)
        '0.00'
    """
    if value == 0:
        value = 0.0
    return f"{round_half_up(value, digits):f}"
