"""
Exprel — относительные экспоненты низкого порядка

    exprel(x)   = (e^x - 1) / x
    exprel_2(x) = 2 (e^x - 1 - x) / x^2

Оба вычислителя используют то же разбиение, что и expm1:
прямая формула вдали от нуля и усечённый ряд Тейлора при |x| < SERIES_CUT
(0/0 и cancellation). Ниже LOG_DBL_MIN возвращается предельное
замкнутое выражение (SUCCESS), выше LOG_DBL_MAX — OVERFLOW с 0.0.
"""

import math

from specfunc.core.domain.status import SFResult, SFStatus, failure, success
from specfunc.core.math.numerical_safeguards import (
    LOG_DBL_MAX,
    LOG_DBL_MIN,
    SERIES_CUT,
    is_nan,
)


def exprel_e(x: float) -> SFResult:
    """
    (e^x - 1) / x.

    Examples:
        >>> exprel_e(0.0).val
        1.0
        >>> abs(exprel_e(1.0).val - (math.e - 1.0)) < 1e-15
        True
    """
    if is_nan(x):
        return failure(SFStatus.DOMAIN_ERROR)

    if x < LOG_DBL_MIN:
        # e^x пренебрежимо мало
        return success(-1.0 / x)
    elif x < -SERIES_CUT:
        return success((math.exp(x) - 1.0) / x)
    elif x < SERIES_CUT:
        return success(1.0 + 0.5 * x * (1.0 + x / 3.0 * (1.0 + 0.25 * x * (1.0 + 0.2 * x))))
    elif x < LOG_DBL_MAX:
        return success((math.exp(x) - 1.0) / x)
    else:
        return failure(SFStatus.OVERFLOW)


def exprel_2_e(x: float) -> SFResult:
    """
    2 (e^x - 1 - x) / x^2.

    Ряд вблизи нуля: 1 + x/3 (1 + x/4 (1 + x/5 (1 + x/6))).

    Examples:
        >>> exprel_2_e(0.0).val
        1.0
        >>> abs(exprel_2_e(1.0).val - 2.0 * (math.e - 2.0)) < 1e-15
        True
    """
    if is_nan(x):
        return failure(SFStatus.DOMAIN_ERROR)

    if x < LOG_DBL_MIN:
        return success(-2.0 / x * (1.0 + 1.0 / x))
    elif x < -SERIES_CUT:
        return success(2.0 * (math.exp(x) - 1.0 - x) / (x * x))
    elif x < SERIES_CUT:
        return success(
            1.0 + 1.0 / 3.0 * x * (1.0 + 0.25 * x * (1.0 + 0.2 * x * (1.0 + 1.0 / 6.0 * x)))
        )
    elif x < LOG_DBL_MAX:
        return success(2.0 * (math.exp(x) - 1.0 - x) / (x * x))
    else:
        return failure(SFStatus.OVERFLOW)
