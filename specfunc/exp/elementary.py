"""
Elementary — exp, exp_sgn, expm1 с проверкой диапазона

Value-формы: возвращают SFResult, никогда не бросают исключений.

Пороги:
    x > LOG_DBL_MAX → OVERFLOW, sentinel 0.0
    x < LOG_DBL_MIN → UNDERFLOW, sentinel 0.0 (кроме expm1: предел -1.0)

expm1 использует пятиступенчатое разбиение для защиты от cancellation
вблизи нуля:
    x < LOG_DBL_MIN          → -1.0
    x < -SERIES_CUT          → exp(x) - 1
    |x| < SERIES_CUT         → x(1 + x/2(1 + x/3(1 + x/4(1 + x/5))))
    x < LOG_DBL_MAX          → exp(x) - 1
    иначе                    → OVERFLOW (истинное значение не ограничено)
"""

import math

from specfunc.core.domain.status import SFResult, SFStatus, failure, success
from specfunc.core.math.numerical_safeguards import (
    LOG_DBL_MAX,
    LOG_DBL_MIN,
    SERIES_CUT,
    is_nan,
    sign,
)


def exp_e(x: float) -> SFResult:
    """
    exp(x) с контролем overflow/underflow.

    Examples:
        >>> exp_e(0.0).val
        1.0
        >>> exp_e(1000.0).status
        <SFStatus.OVERFLOW: 'OVERFLOW'>
    """
    if is_nan(x):
        return failure(SFStatus.DOMAIN_ERROR)

    if x > LOG_DBL_MAX:
        return failure(SFStatus.OVERFLOW)
    elif x < LOG_DBL_MIN:
        return failure(SFStatus.UNDERFLOW)
    else:
        return success(math.exp(x))


def exp_sgn_e(x: float, sgn: float) -> SFResult:
    """
    sign(sgn) * exp(x) с теми же порогами, что и exp_e.

    Args:
        x: Показатель
        sgn: Носитель знака (+1 при sgn >= 0, иначе -1)
    """
    if is_nan(x):
        return failure(SFStatus.DOMAIN_ERROR)

    if x > LOG_DBL_MAX:
        return failure(SFStatus.OVERFLOW)
    elif x < LOG_DBL_MIN:
        return failure(SFStatus.UNDERFLOW)
    else:
        return success(sign(sgn) * math.exp(x))


def expm1_e(x: float) -> SFResult:
    """
    exp(x) - 1 без потери точности вблизи нуля.

    Examples:
        >>> expm1_e(-1000.0).val
        -1.0
        >>> abs(expm1_e(1e-10).val - 1.00000000005e-10) < 1e-25
        True
    """
    if is_nan(x):
        return failure(SFStatus.DOMAIN_ERROR)

    if x < LOG_DBL_MIN:
        return success(-1.0)
    elif x < -SERIES_CUT:
        return success(math.exp(x) - 1.0)
    elif x < SERIES_CUT:
        # Horner: x(1 + x/2(1 + x/3(1 + x/4(1 + x/5))))
        return success(
            x * (1.0 + 0.5 * x * (1.0 + x / 3.0 * (1.0 + 0.25 * x * (1.0 + 0.2 * x))))
        )
    elif x < LOG_DBL_MAX:
        return success(math.exp(x) - 1.0)
    else:
        return failure(SFStatus.OVERFLOW)
