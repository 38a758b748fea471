"""
Numerical Safeguards — Машинные константы и границы режимов

Модуль задаёт process-wide immutable константы, разбивающие вещественную
ось на алгоритмические режимы:
- Машинная точность (DBL_EPSILON) и её кубический корень
- Логарифмы наибольшего/наименьшего представимого double
- Порог масштабирования для рекуррентных соотношений
- Порог переключения direct/series вблизи нуля

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Константы неизменяемы (Final) и не зависят от состояния процесса
2. Все пороги вычислены из sys.float_info (IEEE 754 binary64)
3. Проверки валидности аргументов (NaN, Inf)
"""

import math
import sys
from typing import Final

# =============================================================================
# МАШИННЫЕ КОНСТАНТЫ (IEEE 754 binary64)
# =============================================================================

# Машинная точность: 2^-52
DBL_EPSILON: Final[float] = sys.float_info.epsilon

# Кубический корень машинной точности
# Граница Taylor-режима exprel_N: |x| < ROOT3_DBL_EPSILON * N
ROOT3_DBL_EPSILON: Final[float] = DBL_EPSILON ** (1.0 / 3.0)

DBL_MAX: Final[float] = sys.float_info.max
DBL_MIN: Final[float] = sys.float_info.min

# Порог масштабирования аккумуляторов continued fraction
SQRT_DBL_MAX: Final[float] = math.sqrt(DBL_MAX)

# x > LOG_DBL_MAX → exp(x) переполняется
LOG_DBL_MAX: Final[float] = math.log(DBL_MAX)

# x < LOG_DBL_MIN → exp(x) ниже нормализованного диапазона
LOG_DBL_MIN: Final[float] = math.log(DBL_MIN)


# =============================================================================
# ПОРОГИ РЕЖИМОВ
# =============================================================================

# Порог переключения direct/series для expm1, exprel, exprel_2
# |x| < SERIES_CUT → усечённый ряд Тейлора (без cancellation)
SERIES_CUT: Final[float] = 0.002


# =============================================================================
# ЗНАК И ВАЛИДНОСТЬ
# =============================================================================


def sign(value: float) -> float:
    """
    Знак значения в конвенции вычислителей.

    Ноль считается положительным: sign(0.0) == 1.0.

    Args:
        value: Исходное значение

    Returns:
        +1.0 если value >= 0, иначе -1.0

    Examples:
        >>> sign(3.0)
        1.0
        >>> sign(0.0)
        1.0
        >>> sign(-2.5)
        -1.0
    """
    if value >= 0:
        return 1.0
    else:
        return -1.0


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """True для NaN; ±Inf — допустимые аргументы вычислителей."""
    return math.isnan(value)


# =============================================================================
# ОТНОСИТЕЛЬНОЕ РАСХОЖДЕНИЕ
# =============================================================================


def relative_difference(a: float, b: float) -> float:
    """
    Относительное расхождение |a - b| / max(|a|, |b|).

    Используется для проверки непрерывности на границах режимов.

    Examples:
        >>> relative_difference(1.0, 1.0)
        0.0
        >>> relative_difference(0.0, 0.0)
        0.0
        >>> relative_difference(2.0, 1.0)
        0.5
    """
    scale = max(abs(a), abs(b))
    if scale == 0.0:
        return 0.0
    return abs(a - b) / scale
