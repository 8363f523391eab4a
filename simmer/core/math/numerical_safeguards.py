"""
Numerical Safeguards — Float-примитивы для температур

Модуль собирает все низкоуровневые операции над float, от которых зависят
Temperature и CheckedTemperature:
- Константы шкал (смещение Кельвина, точка замерзания по Фаренгейту)
- Проверки NaN/Inf
- IEEE-деление без исключений (x / 0 → ±inf или NaN)
- Пределы конечных значений для выбранной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких epsilon: сравнения точные, как у нативного float
2. Деление никогда не бросает исключение (семантика IEEE 754)
3. Все операции детерминированы и не зависят от состояния
"""

import math
from typing import Final, Optional, Tuple

import numpy as np

from simmer.core.config import PRECISION, Precision


# =============================================================================
# КОНСТАНТЫ ШКАЛ
# =============================================================================

# K = C + KELVIN_OFFSET
KELVIN_OFFSET: Final[float] = 273.15

# F = C * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET
FAHRENHEIT_OFFSET: Final[float] = 32.0

# Цена градуса Celsius в градусах Fahrenheit (9/5).
# F → C делением на 1.8 конечно для любого конечного F
FAHRENHEIT_SCALE: Final[float] = 1.8

# Абсолютный ноль в Кельвинах
ABSOLUTE_ZERO_K: Final[float] = 0.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (float или numpy scalar)

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """Проверка на NaN"""
    return math.isnan(value)


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE 754 без ZeroDivisionError.

    Python float бросает исключение при делении на ноль, numpy — нет.
    Результат приводится к build-wide точности.

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.divide(numerator, denominator)
    return PRECISION.coerce(result)


# =============================================================================
# ПРЕДЕЛЫ ТОЧНОСТИ
# =============================================================================


def precision_limits(precision: Optional[Precision] = None) -> Tuple[float, float]:
    """
    Диапазон конечных значений для точности.

    Args:
        precision: Точность (default: build-wide PRECISION)

    Returns:
        (min, max), например (-3.4028235e38, 3.4028235e38) для F32
    """
    precision = precision or PRECISION
    return precision.min, precision.max


def is_within(value: float, lower: float, upper: float) -> bool:
    """
    Проверка, что value лежит в [lower, upper] (границы включены).

    NaN никогда не лежит в диапазоне.
    """
    return lower <= value <= upper
