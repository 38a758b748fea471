"""
Exprel N — dispatcher exprel_N(x) по режимам

    exprel_N(x) = N! / x^N (e^x - Σ_{k=0}^{N-1} x^k / k!)
                = 1 + x/(N+1) + x^2/((N+1)(N+2)) + ...

Режимы проверяются строго в фиксированном порядке; каждая следующая
ветка предполагает, что предыдущие уже исключили свои случаи:

     1. N < 0 (или x = NaN)   → DOMAIN_ERROR, 0.0
     2. x == 0                → 1.0
     3. |x| < ROOT3_EPS * N   → 1 + x/(N+1) (1 + x/(N+2))
     4. N == 0                → exp(x)
     5. N == 1                → exprel(x)
     6. N == 2                → exprel_2(x)
     7. x > 12N               → e^x N! / x^N (в log-пространстве)
     8. N < x <= 12N          → e^x N! / x^N (1 - Γ(N, x) / Γ(N))
     9. -10N < x <= N         → continued fraction
    10. x <= -10N             → -(N/x) (1 + (N-1)/x + (N-1)(N-2)/x^2 + ...)

Для фиксированного N границы режимов смежны и не пересекаются:
для любого (N, x) срабатывает ровно одна ветка (select_regime).
"""

import math
from enum import Enum
from typing import Final

from specfunc.core.domain.status import SFResult, SFStatus, failure, success
from specfunc.core.math.gamma import lnfact_e, lngamma_e
from specfunc.core.math.numerical_safeguards import (
    LOG_DBL_MAX,
    ROOT3_DBL_EPSILON,
    is_nan,
    is_valid_float,
)
from specfunc.exp.continued_fraction import ContinuedFractionConfig, exprel_n_cf
from specfunc.exp.elementary import exp_e
from specfunc.exp.exprel import exprel_2_e, exprel_e

# =============================================================================
# ГРАНИЦЫ РЕЖИМОВ
# =============================================================================

# x > LARGE_X_FACTOR * N → чистая асимптотика без полиномиальной части
LARGE_X_FACTOR: Final[float] = 12.0

# x <= -NEG_X_FACTOR * N → асимптотика x → -inf
NEG_X_FACTOR: Final[float] = 10.0

# Запас по log-префактору в режиме N < x <= 12N
OVERFLOW_MARGIN: Final[float] = 5.0


# =============================================================================
# ENUMS
# =============================================================================


class ExprelRegime(str, Enum):
    """Алгоритмический режим вычисления exprel_N(x)."""

    DOMAIN = "DOMAIN"
    UNITY = "UNITY"
    TAYLOR = "TAYLOR"
    EXP = "EXP"
    EXPREL_1 = "EXPREL_1"
    EXPREL_2 = "EXPREL_2"
    LARGE_POSITIVE = "LARGE_POSITIVE"
    POSITIVE_ASYMPTOTIC = "POSITIVE_ASYMPTOTIC"
    CONTINUED_FRACTION = "CONTINUED_FRACTION"
    LARGE_NEGATIVE = "LARGE_NEGATIVE"


def select_regime(n_order: int, x: float) -> ExprelRegime:
    """
    Выбор режима для (N, x).

    Examples:
        >>> select_regime(-1, 1.0)
        <ExprelRegime.DOMAIN: 'DOMAIN'>
        >>> select_regime(5, 0.0)
        <ExprelRegime.UNITY: 'UNITY'>
        >>> select_regime(5, 61.0)
        <ExprelRegime.LARGE_POSITIVE: 'LARGE_POSITIVE'>
        >>> select_regime(5, -50.0)
        <ExprelRegime.LARGE_NEGATIVE: 'LARGE_NEGATIVE'>
    """
    if isinstance(n_order, bool) or not isinstance(n_order, int):
        raise TypeError(f"n_order must be int, got {type(n_order).__name__}")

    if n_order < 0 or is_nan(x):
        return ExprelRegime.DOMAIN
    elif x == 0.0:
        return ExprelRegime.UNITY
    elif abs(x) < ROOT3_DBL_EPSILON * n_order:
        return ExprelRegime.TAYLOR
    elif n_order == 0:
        return ExprelRegime.EXP
    elif n_order == 1:
        return ExprelRegime.EXPREL_1
    elif n_order == 2:
        return ExprelRegime.EXPREL_2
    elif x > LARGE_X_FACTOR * n_order:
        return ExprelRegime.LARGE_POSITIVE
    elif x > n_order:
        return ExprelRegime.POSITIVE_ASYMPTOTIC
    elif x > -NEG_X_FACTOR * n_order:
        return ExprelRegime.CONTINUED_FRACTION
    else:
        return ExprelRegime.LARGE_NEGATIVE


# =============================================================================
# АСИМПТОТИКИ
# =============================================================================


def _descending_sum(n_order: int, x: float) -> float:
    """1 + (N-1)/x + (N-1)(N-2)/x^2 + ... + (N-1)!/x^(N-1)."""
    total = 1.0
    term = 1.0
    for k in range(1, n_order):
        term *= (n_order - k) / x
        total += term
    return total


def _log_prefactor(n_order: int, x: float) -> float:
    """ln(e^x N! / x^N)."""
    lnf_n = lnfact_e(n_order).val
    return x + lnf_n - n_order * math.log(x)


def _large_positive(n_order: int, x: float) -> SFResult:
    # Полиномиальная часть пренебрежимо мала: exprel_N(x) ~ e^x N! / x^N
    if not is_valid_float(x):
        return failure(SFStatus.OVERFLOW)
    return exp_e(_log_prefactor(n_order, x))


def _positive_asymptotic(n_order: int, x: float) -> SFResult:
    lnpre = _log_prefactor(n_order, x)

    if lnpre >= LOG_DBL_MAX - OVERFLOW_MARGIN:
        return failure(SFStatus.OVERFLOW)

    # Γ(N, x) / Γ(N) = x^(N-1) e^-x / (N-1)! * (1 + (N-1)/x + ...)
    lg_n = lngamma_e(n_order).val
    big_g_pre = math.exp(-x + (n_order - 1) * math.log(x) - lg_n)
    big_g_sum = _descending_sum(n_order, x)

    return success(math.exp(lnpre) * (1.0 - big_g_pre * big_g_sum))


def _large_negative(n_order: int, x: float) -> SFResult:
    # e^x N! / x^N → 0 при x → -inf
    return success(-n_order / x * _descending_sum(n_order, x))


# =============================================================================
# DISPATCHER
# =============================================================================


def exprel_n_e(
    n_order: int,
    x: float,
    cf_config: ContinuedFractionConfig | None = None,
) -> SFResult:
    """
    N-я относительная экспонента exprel_N(x).

    Args:
        n_order: Порядок N (int); N < 0 → DOMAIN_ERROR
        x: Аргумент
        cf_config: Конфигурация continued fraction (опционально)

    Returns:
        SFResult со значением и статусом выбранного режима

    Raises:
        TypeError: если n_order не int

    Examples:
        >>> exprel_n_e(4, 0.0).val
        1.0
        >>> exprel_n_e(-1, 2.0).status
        <SFStatus.DOMAIN_ERROR: 'DOMAIN_ERROR'>
    """
    regime = select_regime(n_order, x)

    if regime == ExprelRegime.DOMAIN:
        return failure(SFStatus.DOMAIN_ERROR)
    elif regime == ExprelRegime.UNITY:
        return success(1.0)
    elif regime == ExprelRegime.TAYLOR:
        return success(1.0 + x / (n_order + 1) * (1.0 + x / (n_order + 2)))
    elif regime == ExprelRegime.EXP:
        return exp_e(x)
    elif regime == ExprelRegime.EXPREL_1:
        return exprel_e(x)
    elif regime == ExprelRegime.EXPREL_2:
        return exprel_2_e(x)
    elif regime == ExprelRegime.LARGE_POSITIVE:
        return _large_positive(n_order, x)
    elif regime == ExprelRegime.POSITIVE_ASYMPTOTIC:
        return _positive_asymptotic(n_order, x)
    elif regime == ExprelRegime.CONTINUED_FRACTION:
        return exprel_n_cf(n_order, x, cf_config)
    else:
        return _large_negative(n_order, x)
